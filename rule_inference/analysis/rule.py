# ==============================================
# ValidationRule (Data Classes)
# ==============================================
#
# PURPOSE:
#   The OUTPUT of inference: one rule per field that had evidence,
#   and the builder that merges the two evidence sources into it.
#
# CLASSES:
# --------
# - ValidationRule (dataclass)
#     field, type, nullable, unique, min, max, pattern, examples
#
#     min / max hold either the numeric value range or the string
#     length range. Which one is meant follows from `type`.
#
# - RuleBuilder
#     Disjoint slots for each evidence source:
#       apply_stats(stats)     → min / max     (statistics only)
#       apply_pattern(result)  → pattern       (classifier only)
#       add_examples(values)   → examples
#     has_evidence() is True once min, max or pattern is set;
#     build() returns the ValidationRule.
#
# FUNCTIONS:
# ----------
# - rules_to_dict(rule_map) -> dict[str, list[dict]]
#     JSON-ready form of the rule map for generators and the dashboard.
#
# ==============================================

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from rule_inference.catalog import Field
from .field_stats import FieldStats

MAX_EXAMPLES = 5


@dataclass
class ValidationRule:
    """
    Inferred validation contract for a single field.

    Only materialized when at least one of min, max or pattern is set.
    """

    field: str
    type: str
    nullable: bool
    unique: bool = False
    min: Optional[Any] = None
    max: Optional[Any] = None
    pattern: Optional[str] = None
    examples: List[Any] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the rule, dropping bounds and pattern that were not found.

        Returns:
            A JSON-serializable dictionary representation
        """
        data: Dict[str, Any] = {"field": self.field, "type": self.type}
        if self.min is not None:
            data["min"] = self.min
        if self.max is not None:
            data["max"] = self.max
        if self.pattern is not None:
            data["pattern"] = self.pattern
        data["nullable"] = self.nullable
        data["unique"] = self.unique
        data["examples"] = list(self.examples)
        return data


class RuleBuilder:
    """Accumulates evidence for one field and produces its ValidationRule."""

    def __init__(self, field_def: Field):
        self._field = field_def
        self._min: Optional[Any] = None
        self._max: Optional[Any] = None
        self._pattern: Optional[str] = None
        self._examples: List[Any] = []

    def apply_stats(self, stats: FieldStats) -> "RuleBuilder":
        # Value range and length range share the min/max slots
        if stats.min is not None:
            self._min = stats.min
        if stats.max is not None:
            self._max = stats.max
        if stats.min_length is not None:
            self._min = stats.min_length
        if stats.max_length is not None:
            self._max = stats.max_length
        return self

    def apply_pattern(self, result) -> "RuleBuilder":
        if result is not None and result.pattern:
            self._pattern = result.pattern
        return self

    def add_examples(self, values: Iterable[Any]) -> "RuleBuilder":
        for value in values:
            if len(self._examples) >= MAX_EXAMPLES:
                break
            if value is not None and value not in self._examples:
                self._examples.append(value)
        return self

    def has_evidence(self) -> bool:
        return self._min is not None or self._max is not None or self._pattern is not None

    def build(self) -> ValidationRule:
        return ValidationRule(
            field=self._field.name,
            type=self._field.type,
            nullable=not self._field.is_required,
            unique=self._field.is_unique or self._field.is_id,
            min=self._min,
            max=self._max,
            pattern=self._pattern,
            examples=list(self._examples),
        )


def rules_to_dict(rule_map: Mapping[str, List[ValidationRule]]) -> Dict[str, List[Dict[str, Any]]]:
    return {
        model_name: [rule.to_dict() for rule in rules]
        for model_name, rules in rule_map.items()
    }
