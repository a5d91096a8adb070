"""Command-line driver: which enclosures can take a group of animals?"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Sequence

from .config import build_evaluator, load_config_from_yaml
from .evaluator import HabitatEvaluator
from .exceptions import ZooError
from .formatting import occupant_list
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find enclosures that can house a group of animals")
    parser.add_argument("species", nargs="?", help="Species name, exactly as registered (e.g. MACACO)")
    parser.add_argument("quantity", nargs="?", type=int, help="Number of animals in the group")
    parser.add_argument("--config", type=Path, help="YAML file describing species and enclosures")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--list", action="store_true", help="List enclosures and their residents, then exit")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--log-json", action="store_true", help="Emit log records as JSON lines")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    setup_logging(args.log_level, format_json=args.log_json)

    try:
        evaluator = build_evaluator(load_config_from_yaml(args.config) if args.config else None)
    except (OSError, ZooError) as exc:
        print(f"Could not load zoo configuration: {exc}", file=sys.stderr)
        return 2

    if args.config:
        logger.info("Loaded zoo configuration from %s", args.config)

    if args.list:
        _print_enclosures(evaluator)
        return 0

    if args.species is None or args.quantity is None:
        raise SystemExit("species and quantity are required unless --list is used")

    report = evaluator.evaluate(args.species, args.quantity)
    if args.json:
        print(json.dumps(report.to_dict(), ensure_ascii=False))
    elif report.error is not None:
        print(report.error.message, file=sys.stderr)
    else:
        for line in report.viable_enclosures:
            print(line)
    return 0 if report.ok else 1


def _print_enclosures(evaluator: HabitatEvaluator) -> None:
    for identifier, enclosure in evaluator.enclosures:
        print(
            f"Enclosure {identifier}: size {enclosure.total_size}, "
            f"free {enclosure.free_size()}, biomes {', '.join(sorted(enclosure.biomes))}, "
            f"residents {occupant_list(enclosure)}"
        )

