# ==============================================
# FieldStats
# ==============================================
#
# PURPOSE:
#   Data class that holds the deterministic, data-store-derived
#   evidence for a single field. This is the "hard constraint"
#   half of the evidence the inference service merges.
#
# CLASS: FieldStats (dataclass)
# -----------------------------
#   Every attribute is optional. None means "not computed for this
#   field's type", never "computed as empty".
#
#   - min / max: Any               → Numeric column range
#   - min_length / max_length: int → String length range (sampled)
#   - distinct_count: int          → Enum cardinality
#   - distinct_values: list        → Enum domain
#   - has_nulls: bool              → Only for optional fields
#
#   Methods:
#   --------
#   - to_dict() -> dict
#       Serialize only the attributes that were computed.
#
# ==============================================

from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional


@dataclass
class FieldStats:
    """Statistics gathered from the data store for one field."""

    min: Optional[Any] = None
    max: Optional[Any] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    distinct_count: Optional[int] = None
    distinct_values: Optional[List[Any]] = None
    has_nulls: Optional[bool] = None

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert stats to a dictionary, leaving out anything not computed.

        Returns:
            A dictionary with only the populated attributes
        """
        result: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                result[f.name] = list(value) if isinstance(value, list) else value
        return result
