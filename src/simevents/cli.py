"""Command line front end: generate and print a merged event stream."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from simevents.config import build_processes, load_config
from simevents.errors import ConfigError
from simevents.merge import generate_all
from simevents.summary import summarize

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="simevents",
        description="Generate arrival events from JSON process definitions",
    )
    parser.add_argument("config", help="JSON file with process definitions")
    parser.add_argument("--seed", type=int, default=None, help="base seed for stochastic processes")
    parser.add_argument("--summary", action="store_true", help="print per-process statistics instead of events")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def run(args: argparse.Namespace, out: TextIO) -> None:
    config = load_config(args.config)
    if args.seed is not None:
        config = config.model_copy(update={"seed": args.seed})

    events = generate_all(build_processes(config))
    logger.info("Generated %d events", len(events))

    if args.summary:
        blocks = [str(s) for s in summarize(events).values()]
        out.write("\n\n".join(blocks))
        if blocks:
            out.write("\n")
        return

    for event in events:
        out.write(f"{event.process_name} {event.arrival_time} {event.duration}\n")


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        run(args, sys.stdout)
    except ConfigError as exc:
        print(f"simevents: {exc}", file=sys.stderr)
        return 2
    return 0
