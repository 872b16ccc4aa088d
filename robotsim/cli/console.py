"""
CLI entry point for the robotsim command.

Feeds commands (one per line) from files or stdin to a single simulator and
prints each outcome.
"""

import argparse
import json
import logging
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from robotsim import config as cfg
from robotsim.protocol.types import CommandOutcome
from robotsim.server.simulator import RobotSimulator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Toy robot table simulator")
    parser.add_argument("files", nargs="*",
                        help="Command files, one command per line (default: stdin)")
    parser.add_argument("--grid-size", type=int, default=None,
                        help=f"Table side length (default: {cfg.GRID_SIZE})")
    parser.add_argument("--json", action="store_true",
                        help="Print one JSON object per outcome")

    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase verbosity; -v=INFO, -vv=DEBUG, -vvv=TRACE")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="Enable quiet logging (WARNING level)")
    parser.add_argument("--log-level", choices=["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Set specific log level")
    return parser


def resolve_log_level(args: argparse.Namespace) -> int:
    if args.log_level:
        if args.log_level == "TRACE":
            return cfg.TRACE
        return getattr(logging, args.log_level)
    if args.verbose >= 3 or cfg.TRACE_ENABLED:
        return cfg.TRACE
    if args.verbose >= 2:
        return logging.DEBUG
    if args.verbose == 1:
        return logging.INFO
    if args.quiet:
        return logging.WARNING
    return getattr(logging, cfg.LOG_LEVEL_DEFAULT)


def iter_commands(lines: Iterable[str]) -> Iterator[str]:
    """Yield command lines, skipping blanks and '#' comments."""
    for line in lines:
        text = line.strip()
        if not text or text.startswith("#"):
            continue
        yield text


def format_outcome(command: str, outcome: CommandOutcome, as_json: bool = False) -> str:
    if as_json:
        return json.dumps({"command": command, **outcome.as_dict()})
    status = "OK" if outcome.success else "FAIL"
    line = f"{status} {command}: {outcome.message}"
    if outcome.report is not None:
        line += f" -> {outcome.report}"
    return line


def run(sim: RobotSimulator, source: TextIO, out: TextIO, as_json: bool = False) -> int:
    """Process every command from ``source``; returns the number of failures."""
    failures = 0
    for command in iter_commands(source):
        outcome = sim.process(command)
        if not outcome.success:
            failures += 1
        print(format_outcome(command, outcome, as_json), file=out)
    return failures


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the console runner."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=resolve_log_level(args),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )

    try:
        sim = RobotSimulator(args.grid_size)
    except ValueError as e:
        logger.error(f"Failed to create simulator: {e}")
        return 2

    logger.info(f"Simulator ready: grid {sim.grid_size}x{sim.grid_size}")

    failures = 0
    if not args.files:
        failures += run(sim, sys.stdin, sys.stdout, args.json)
    for path in args.files:
        try:
            with open(path, encoding="utf-8") as fh:
                failures += run(sim, fh, sys.stdout, args.json)
        except OSError as e:
            logger.error(f"Cannot read command file {path}: {e}")
            return 1

    logger.info(f"Done: {failures} command(s) rejected")
    return 0


def main_entry():
    """Entry point for the robotsim command."""
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
