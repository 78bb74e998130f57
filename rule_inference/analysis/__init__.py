# ==============================================
# STATISTICAL ANALYSIS & RULES
# ==============================================
#
# Deterministic evidence from the data store, and the rule objects
# that evidence (plus classifier evidence) is merged into.
#
# Modules:
# --------
# - field_stats.py           → FieldStats data class
# - statistical_analyzer.py  → Query the store per field, build FieldStats
# - rule.py                  → ValidationRule, RuleBuilder, rules_to_dict()
#
# ==============================================

from .field_stats import FieldStats
from .rule import RuleBuilder, ValidationRule, rules_to_dict
from .statistical_analyzer import STRING_SAMPLE_SIZE, StatisticalAnalyzer

__all__ = [
    "FieldStats",
    "RuleBuilder",
    "STRING_SAMPLE_SIZE",
    "StatisticalAnalyzer",
    "ValidationRule",
    "rules_to_dict",
]
