"""Command-line entry point: print the statistics of one module as JSON."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .api import analyze_timed
from .reader import DecodeError
from .run_types import OutputConfig

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wasm-stats",
        description="Collect instruction, proposal and size statistics "
        "from a WebAssembly module",
    )
    parser.add_argument("file", help="WebAssembly binary (.wasm) to analyze")
    parser.add_argument(
        "--indent",
        "-i",
        type=int,
        default=None,
        help="Pretty-print the JSON with this indent (default: compact)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log per-section decoding detail to stderr",
    )
    parser.add_argument(
        "--timing",
        "-t",
        action="store_true",
        help="Print a decode/analysis timing report to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = OutputConfig(indent=args.indent, verbose=args.verbose, timing=args.timing)

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    path = Path(args.file).resolve()
    try:
        wasm = path.read_bytes()
        stats, timings = analyze_timed(wasm)
    except OSError as exc:
        logger.error("Cannot read %s: %s", path, exc.strerror or exc)
        return 1
    except DecodeError as exc:
        logger.error("Failed to decode %s: %s", path, exc)
        return 1

    print(stats.model_dump_json(indent=config.indent))
    if config.timing:
        print(timings.report(), file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
