# ==============================================
# CLI - Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Run one inference pass from the command line and write the
#   rule map as JSON for the code generators.
#
# COMMANDS:
# ---------
#   python -m rule_inference.cli infer --schema catalog.json
#   python -m rule_inference.cli infer --schema catalog.json \
#       --output rules.json --sample-size 30 --requests-per-minute 15
#
#   The schema file is a DMMF-shaped document: {"models": [...]}.
#   Connection settings come from the environment / .env.
#
# ==============================================

import argparse
import dataclasses
import json
import logging
import sys
from decimal import Decimal
from typing import List, Optional

from rule_inference.analysis import rules_to_dict
from rule_inference.catalog import load_catalog_file
from rule_inference.config import get_config
from rule_inference.inference_service import ValidationInferenceService
from rule_inference.storage import DataStoreError, create_data_store


def _json_default(value):
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    return str(value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rule_inference",
        description="Infer validation rules from live data"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    infer = subparsers.add_parser("infer", help="Infer rules for every model in a schema catalog")
    infer.add_argument("--schema", required=True, help="Path to the DMMF-shaped schema JSON")
    infer.add_argument("--output", help="Write the rule map here instead of stdout")
    infer.add_argument("--sample-size", type=int, help="Values sent to the classifier per field")
    infer.add_argument("--requests-per-minute", type=int, help="Classifier request budget")
    infer.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def run_infer(args: argparse.Namespace) -> int:
    config = get_config()
    overrides = {}
    if args.sample_size is not None:
        overrides["sample_size"] = args.sample_size
    if args.requests_per_minute is not None:
        overrides["requests_per_minute"] = args.requests_per_minute
    inference_config = dataclasses.replace(config.inference, **overrides)

    models = load_catalog_file(args.schema)
    print(f"✓ Loaded {len(models)} models from {args.schema}", file=sys.stderr)

    try:
        with create_data_store(config) as store:
            service = ValidationInferenceService(store, config=inference_config)
            rules_map = service.infer_rules(models)
    except DataStoreError as e:
        print(f"✗ Inference aborted: {e}", file=sys.stderr)
        return 1

    payload = json.dumps(rules_to_dict(rules_map), indent=2, default=_json_default)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(payload + "\n")
        print(f"✓ Wrote rules for {len(rules_map)} models to {args.output}", file=sys.stderr)
    else:
        print(payload)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    if args.command == "infer":
        return run_infer(args)
    return 2


if __name__ == "__main__":
    sys.exit(main())
