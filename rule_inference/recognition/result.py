# ==============================================
# PatternInferenceResult
# ==============================================
#
# PURPOSE:
#   The probabilistic, classifier-derived evidence for one String
#   field, and the closed set of formats the classifier may report.
#
# ENUMS:
# ------
# - PatternFormat(Enum): EMAIL, UUID, CUID, URL, IPV4, IPV6,
#                        DATE, DATETIME, PHONE, HEX
#
# CLASSES:
# --------
# - PatternInferenceResult (dataclass)
#     pattern: str | None, format: PatternFormat | None, description: str
#
#     from_dict(data) validates the classifier's structured output and
#     raises MalformedResultError when it does not match the shape.
#
# ==============================================

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class PatternFormat(Enum):
    EMAIL = "email"
    UUID = "uuid"
    CUID = "cuid"
    URL = "url"
    IPV4 = "ipv4"
    IPV6 = "ipv6"
    DATE = "date"
    DATETIME = "datetime"
    PHONE = "phone"
    HEX = "hex"


class MalformedResultError(ValueError):
    """The classifier answered with something other than the expected object."""


@dataclass(frozen=True)
class PatternInferenceResult:
    description: str
    pattern: Optional[str] = None
    format: Optional[PatternFormat] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"description": self.description}
        if self.pattern is not None:
            data["pattern"] = self.pattern
        if self.format is not None:
            data["format"] = self.format.value
        return data

    @classmethod
    def from_dict(cls, data: Any) -> "PatternInferenceResult":
        """
        Validate and convert the classifier's JSON object.

        Args:
            data: Decoded structured output

        Returns:
            A PatternInferenceResult; an empty pattern string becomes None

        Raises:
            MalformedResultError: if a key is missing or has the wrong type,
                or the format is outside the closed set
        """
        if not isinstance(data, dict):
            raise MalformedResultError(f"Expected an object, got {type(data).__name__}")

        description = data.get("description")
        if not isinstance(description, str):
            raise MalformedResultError("'description' must be a string")

        pattern = data.get("pattern")
        if pattern is not None and not isinstance(pattern, str):
            raise MalformedResultError("'pattern' must be a string or null")

        raw_format = data.get("format")
        fmt = None
        if raw_format is not None:
            try:
                fmt = PatternFormat(raw_format)
            except ValueError:
                raise MalformedResultError(f"Unknown format '{raw_format}'") from None

        return cls(description=description, pattern=pattern or None, format=fmt)
