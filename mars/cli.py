"""Command line entry point: ``mars-robots <input-file>``."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .core.errors import MarsError
from .report import RunReport
from .scenario import Scenario
from .simulator import Simulator
from infra.logger import configure_logging, get_logger

log = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mars-robots",
        description="Simulate robots exploring a rectangular grid on Mars.",
    )
    parser.add_argument("input", help="Path to the scenario file")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON report (outcomes and scents) instead of text lines",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", default=None, help="Also append logs to this file")
    parser.add_argument("--log-json", action="store_true", help="Emit log records as JSON lines")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, json=args.log_json, logfile=args.log_file)

    simulator = Simulator()
    try:
        scenario = Scenario.load(args.input)
        outcomes = simulator.run(scenario)
    except MarsError as exc:
        log.debug("Run aborted: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(RunReport.from_run(simulator.world, outcomes).model_dump_json(indent=2))
    else:
        for outcome in outcomes:
            print(outcome)
    return 0
