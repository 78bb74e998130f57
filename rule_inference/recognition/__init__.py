# ==============================================
# PATTERN RECOGNITION
# ==============================================
#
# Probabilistic evidence for String fields from an external
# generative classifier, throttled by a per-run scheduler.
#
# Modules:
# --------
# - prompts.py             → System instruction and user prompt
# - result.py              → PatternFormat, PatternInferenceResult
# - rate_scheduler.py      → RateScheduler (requests-per-minute throttle)
# - gemini_client.py       → GeminiClassifier (google-generativeai)
# - pattern_recognizer.py  → PatternRecognizer.infer_pattern()
#
# ==============================================

from .pattern_recognizer import MAX_SAMPLES, PatternRecognizer
from .rate_scheduler import DEFAULT_REQUESTS_PER_MINUTE, RateScheduler
from .result import MalformedResultError, PatternFormat, PatternInferenceResult

__all__ = [
    "DEFAULT_REQUESTS_PER_MINUTE",
    "MAX_SAMPLES",
    "MalformedResultError",
    "PatternFormat",
    "PatternInferenceResult",
    "PatternRecognizer",
    "RateScheduler",
]
