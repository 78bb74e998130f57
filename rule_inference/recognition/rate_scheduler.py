# ==============================================
# RateScheduler
# ==============================================
#
# PURPOSE:
#   One serialized call slot for the metered classifier. Created
#   once per inference run and handed to every recognizer call, so
#   the "time of last call" lives on this object and nowhere else.
#
# BEHAVIOUR:
#   delay = 60 / requests_per_minute seconds (default RPM: 10)
#   Before each call, wait until `delay` has passed since the
#   previous call COMPLETED. The mark is taken when the call returns
#   or raises.
#
# ==============================================

import logging
import time
from typing import Any, Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

DEFAULT_REQUESTS_PER_MINUTE = 10

T = TypeVar("T")


class RateScheduler:
    """Spaces out classifier calls to stay within a requests-per-minute budget."""

    def __init__(
        self,
        requests_per_minute: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Any] = time.sleep,
    ):
        rpm = DEFAULT_REQUESTS_PER_MINUTE if requests_per_minute is None else requests_per_minute
        if rpm <= 0:
            raise ValueError(f"requests_per_minute must be positive, got {rpm}")
        self.requests_per_minute = rpm
        self.delay_seconds = 60.0 / rpm
        self._clock = clock
        self._sleep = sleep
        self._last_call_at: Optional[float] = None
        self.calls_made = 0

    def wait_for_slot(self) -> None:
        if self._last_call_at is None:
            return
        remaining = self._last_call_at + self.delay_seconds - self._clock()
        if remaining > 0:
            logger.debug("Rate limit: waiting %.2fs before next classifier call", remaining)
            self._sleep(remaining)

    def call(self, func: Callable[..., T], *args, **kwargs) -> T:
        """
        Run func in the next free slot.

        Args:
            func: The classifier call
            *args, **kwargs: Forwarded to func

        Returns:
            Whatever func returns; exceptions propagate unchanged
        """
        self.wait_for_slot()
        try:
            return func(*args, **kwargs)
        finally:
            self._last_call_at = self._clock()
            self.calls_made += 1
