# ==============================================
# ValidationInferenceService - Orchestrator
# ==============================================
#
# PURPOSE:
#   The single public entry point of inference. Walks every model
#   and field of the catalog, gathers evidence from the statistical
#   analyzer and the pattern recognizer, merges it into one
#   ValidationRule per field, and returns the per-model rule map.
#
# HOW ONE RUN FLOWS:
#
#   infer_rules(models)
#     │ data_store.ping()          (outage → DataStoreError to caller)
#     │ scheduler = RateScheduler  (one per run)
#     ▼
#   for model → for field  (strictly sequential)
#     ├─ relation?             → skip
#     ├─ StatisticalAnalyzer   → min / max
#     ├─ non-list String?      → distinct sample → PatternRecognizer
#     │                          (through the scheduler) → pattern
#     └─ any of min/max/pattern → append rule
#   model kept only if it has rules
#
# FAILURE SEMANTICS:
#   A failure in one evidence source only removes that source's
#   contribution for that field. Nothing is retried.
#
# CLASS: ValidationInferenceService
# ---------------------------------
#   - __init__(data_store, config=None, recognizer=None, analyzer=None,
#              scheduler_factory=RateScheduler)
#   - infer_rules(models) -> dict[str, list[ValidationRule]]
#
# ==============================================

import logging
import time
from typing import Any, Callable, Dict, List, Optional

from rule_inference.analysis import RuleBuilder, StatisticalAnalyzer, ValidationRule
from rule_inference.catalog import Field, FieldCategory, Model
from rule_inference.config import InferenceConfig, get_config
from rule_inference.recognition import PatternRecognizer, RateScheduler
from rule_inference.recognition.gemini_client import create_classifier
from rule_inference.recognition.prompts import SYSTEM_PROMPT
from rule_inference.storage import DataStoreError

logger = logging.getLogger(__name__)


class ValidationInferenceService:
    """
    Infers validation rules for every field of every model.

    Holds no state between runs; each infer_rules() call recomputes
    everything from the live data store and classifier.
    """

    def __init__(
        self,
        data_store,
        config: Optional[InferenceConfig] = None,
        recognizer: Optional[PatternRecognizer] = None,
        analyzer: Optional[StatisticalAnalyzer] = None,
        scheduler_factory: Callable[[Optional[int]], RateScheduler] = RateScheduler,
    ):
        """
        Args:
            data_store: Connected MySQLClient / MongoClient (or compatible)
            config: Inference settings. If None, loads from environment.
            recognizer: Pattern recognizer. If None, one backed by the
                configured AI provider is created.
            analyzer: Statistical analyzer. If None, one over data_store.
            scheduler_factory: Builds the per-run scheduler from the
                configured requests-per-minute.
        """
        self._data_store = data_store
        self._config = config or get_config().inference
        self._analyzer = analyzer or StatisticalAnalyzer(data_store)
        self._scheduler_factory = scheduler_factory
        self._recognizer = recognizer or PatternRecognizer(
            create_classifier(self._config, SYSTEM_PROMPT)
        )

    def infer_rules(self, models: List[Model]) -> Dict[str, List[ValidationRule]]:
        """
        Run one full inference pass.

        Args:
            models: Ordered model catalog

        Returns:
            Model name → non-empty list of rules, in catalog order

        Raises:
            DataStoreError: if the data store is unreachable for the run
        """
        self._data_store.ping()

        start_time = time.time()
        scheduler = self._scheduler_factory(self._config.requests_per_minute)
        rules_map: Dict[str, List[ValidationRule]] = {}

        logger.info("Inferring validation rules for %d models", len(models))

        for model in models:
            model_rules: List[ValidationRule] = []

            for field in model.fields:
                rule = self._infer_field(model, field, scheduler)
                if rule is not None:
                    model_rules.append(rule)

            if model_rules:
                rules_map[model.name] = model_rules
                logger.info("%s: %d rules", model.name, len(model_rules))

        logger.info(
            "Inference finished in %.2fs (%d models with rules, %d classifier calls)",
            time.time() - start_time, len(rules_map), scheduler.calls_made
        )
        return rules_map

    def _infer_field(self, model: Model, field: Field, scheduler: RateScheduler) -> Optional[ValidationRule]:
        if field.is_relation:
            return None

        builder = RuleBuilder(field)

        # Hard constraints
        stats = self._analyzer.analyze(model, field)
        builder.apply_stats(stats)

        # Soft constraints, String scalars only
        if field.category is FieldCategory.STRING and not field.is_list:
            values = self._fetch_classifier_sample(model, field)
            if values:
                builder.add_examples(values)
                result = self._recognizer.infer_pattern(
                    model.name, field.name, values, scheduler=scheduler
                )
                builder.apply_pattern(result)

        if not builder.has_evidence():
            return None
        return builder.build()

    def _fetch_classifier_sample(self, model: Model, field: Field) -> List[Any]:
        try:
            return self._data_store.fetch_values(
                model.table_name,
                field.column_name,
                self._config.sample_size,
                distinct=True
            )
        except DataStoreError as e:
            logger.warning(
                "Could not sample %s.%s for pattern inference: %s",
                model.name, field.name, e
            )
            return []
