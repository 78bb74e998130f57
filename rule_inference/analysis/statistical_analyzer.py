# ==============================================
# StatisticalAnalyzer
# ==============================================
#
# PURPOSE:
#   Query the live data store for hard, deterministic constraints
#   on one field at a time and return them as FieldStats.
#
# STRATEGY BY FIELD CATEGORY:
# ---------------------------
#   STRING   → bounded sample (STRING_SAMPLE_SIZE rows) of non-null
#              values, min/max length computed in memory over str and
#              bytes values
#   NUMERIC  → one MIN/MAX aggregate over the full column
#   ENUM     → every distinct non-null value and its count
#   BOOLEAN, DATETIME, JSON, BYTES, UNSUPPORTED, RELATION
#            → nothing (stats stay empty)
#
#   Optional fields additionally get a null-count query (has_nulls).
#
# CLASS: StatisticalAnalyzer
# --------------------------
#   Constructor:
#   ------------
#   - __init__(data_store)
#       Any client exposing count_nulls / fetch_values / min_max /
#       distinct_values (MySQLClient, MongoClient).
#
#   Methods:
#   --------
#   - analyze(model: Model, field: Field) -> FieldStats
#       Never raises DataStoreError. A failed query is logged as a
#       warning and the stats collected so far are returned.
#
# ==============================================

import logging
from typing import Callable, Dict, Optional

from rule_inference.catalog import Field, FieldCategory, Model
from rule_inference.storage import DataStoreError
from .field_stats import FieldStats

logger = logging.getLogger(__name__)

# Cap on rows pulled for string length bounds
STRING_SAMPLE_SIZE = 1000


class StatisticalAnalyzer:
    """
    Gathers per-field statistics from the data store.

    Dispatch covers every FieldCategory; categories that carry no
    statistics map to None explicitly.
    """

    def __init__(self, data_store):
        self.data_store = data_store
        self._strategies: Dict[FieldCategory, Optional[Callable[[str, str, FieldStats], None]]] = {
            FieldCategory.STRING: self._analyze_string,
            FieldCategory.NUMERIC: self._analyze_number,
            FieldCategory.ENUM: self._analyze_enum,
            FieldCategory.BOOLEAN: None,
            FieldCategory.DATETIME: None,
            FieldCategory.JSON: None,
            FieldCategory.BYTES: None,
            FieldCategory.UNSUPPORTED: None,
            FieldCategory.RELATION: None,
        }

    def analyze(self, model: Model, field: Field) -> FieldStats:
        """
        Collect statistics for one field.

        Args:
            model: The model owning the field
            field: The field to analyze

        Returns:
            FieldStats, possibly empty or partially filled on failure
        """
        stats = FieldStats()
        table = model.table_name
        column = field.column_name

        try:
            if not field.is_required:
                stats.has_nulls = self.data_store.count_nulls(table, column) > 0

            strategy = self._strategies[field.category]
            if strategy is not None:
                strategy(table, column, stats)
        except DataStoreError as e:
            logger.warning("Failed to analyze field %s.%s: %s", model.name, field.name, e)

        return stats

    def _analyze_string(self, table: str, column: str, stats: FieldStats) -> None:
        values = self.data_store.fetch_values(table, column, STRING_SAMPLE_SIZE)
        # Binary-collation columns come back from PyMySQL as bytes
        lengths = [len(v) for v in values if isinstance(v, (str, bytes))]
        if not lengths:
            return
        stats.min_length = min(lengths)
        stats.max_length = max(lengths)

    def _analyze_number(self, table: str, column: str, stats: FieldStats) -> None:
        # MIN/MAX are NULL on an empty column
        low, high = self.data_store.min_max(table, column)
        stats.min = low
        stats.max = high

    def _analyze_enum(self, table: str, column: str, stats: FieldStats) -> None:
        values = self.data_store.distinct_values(table, column)
        stats.distinct_values = list(values)
        stats.distinct_count = len(values)
