# ==============================================
# PatternRecognizer
# ==============================================
#
# PURPOSE:
#   Ask the external classifier for a regex / format describing a
#   sample of one String column. This is best-effort evidence:
#   every failure becomes "no pattern found" (None) plus a warning.
#
# CLASS: PatternRecognizer
# ------------------------
#   Constructor:
#   ------------
#   - __init__(classifier)
#       Anything with classify(prompt: str) -> dict
#       (GeminiClassifier in production, fakes in tests).
#
#   Methods:
#   --------
#   - infer_pattern(model_name, field_name, values, scheduler=None)
#         -> PatternInferenceResult | None
#       1. Drop None values, dedupe keeping first-seen order
#       2. Keep at most MAX_SAMPLES values
#       3. Nothing left → None, no classifier call
#       4. Send the prompt (through the scheduler when given)
#       5. Validate the answer; any failure → warning, None
#
#   - prepare_samples(values) -> list   (staticmethod)
#
# ==============================================

import logging
from typing import Any, Iterable, List, Optional

from .prompts import build_user_prompt
from .rate_scheduler import RateScheduler
from .result import PatternInferenceResult

logger = logging.getLogger(__name__)

MAX_SAMPLES = 50


class PatternRecognizer:
    def __init__(self, classifier):
        self.classifier = classifier

    @staticmethod
    def prepare_samples(values: Iterable[Any]) -> List[Any]:
        samples: List[Any] = []
        seen = set()
        for value in values:
            if value is None:
                continue
            try:
                if value in seen:
                    continue
                seen.add(value)
            except TypeError:
                # Unhashable documents / arrays are compared by equality
                if value in samples:
                    continue
            samples.append(value)
            if len(samples) >= MAX_SAMPLES:
                break
        return samples

    def infer_pattern(
        self,
        model_name: str,
        field_name: str,
        values: List[Any],
        scheduler: Optional[RateScheduler] = None,
    ) -> Optional[PatternInferenceResult]:
        """
        Infer a pattern for one field from sampled values.

        Args:
            model_name: Model (table) the values came from
            field_name: Field (column) the values came from
            values: Raw sampled values, may contain None and duplicates
            scheduler: Rate limiter for the run; None calls immediately

        Returns:
            The validated result, or None when nothing could be inferred
        """
        if not values:
            return None

        samples = self.prepare_samples(values)
        if not samples:
            return None

        prompt = build_user_prompt(model_name, field_name, samples)
        try:
            if scheduler is not None:
                raw = scheduler.call(self.classifier.classify, prompt)
            else:
                raw = self.classifier.classify(prompt)
            return PatternInferenceResult.from_dict(raw)
        except Exception as e:
            # Classifier, transport and parse failures are all non-fatal here
            logger.warning(
                "AI inference failed for %s.%s: %s: %s",
                model_name, field_name, type(e).__name__, e
            )
            return None
