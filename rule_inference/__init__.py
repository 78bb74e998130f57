# ==============================================
# Validation Rule Inference
# ==============================================
#
# Package Structure:
#
# rule_inference/
# ├── catalog/              # Model / Field catalog and field-type classification
# ├── storage/              # Read-only MySQL / MongoDB query clients
# ├── analysis/             # Statistical evidence, ValidationRule, RuleBuilder
# ├── recognition/          # Classifier-backed pattern evidence + rate scheduler
# ├── config.py             # Configuration management
# ├── inference_service.py  # Orchestrator: infer_rules(models)
# └── cli.py                # Command line entry point
#
# ==============================================

__version__ = "0.1.0"
