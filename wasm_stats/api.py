"""Composable API functions for module statistics.

Each function corresponds to a CLI workflow but is callable
programmatically without argparse.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

from . import constants
from .decoder import decode_module
from .instr_stats import get_instruction_stats
from .language import infer_language
from .run_types import AnalysisTimings
from .stats import collect_stats, get_stats
from .stats_types import Stats

logger = logging.getLogger(__name__)

__all__ = [
    "analyze_timed",
    "collect_stats",
    "dump_stats",
    "get_instruction_stats",
    "get_stats",
    "infer_language",
    "stats_from_file",
]


def stats_from_file(path: str | Path) -> Stats:
    """Read a ``.wasm`` file and analyze it."""
    wasm = Path(path).read_bytes()
    logger.info("Read %s (%d bytes)", path, len(wasm))
    return get_stats(wasm)


def dump_stats(wasm: bytes, indent: int | None = constants.DEFAULT_JSON_INDENT) -> str:
    """Analyze *wasm* and return the statistics as JSON text.

    Args:
        wasm: Raw module bytes.
        indent: JSON indentation; ``None`` for compact output.

    Returns:
        The JSON object with the ``Stats`` field names.
    """
    if indent is not None and indent < 0:
        raise ValueError(f"indent must be non-negative, got {indent}")
    return get_stats(wasm).model_dump_json(indent=indent)


def analyze_timed(wasm: bytes) -> tuple[Stats, AnalysisTimings]:
    """Like ``get_stats`` but also times the decode and analysis stages."""
    timings = AnalysisTimings(input_bytes=len(wasm))
    start = time.perf_counter()

    module = decode_module(wasm)
    timings.decode_time = time.perf_counter() - start
    timings.sections = len(module.sections)

    t0 = time.perf_counter()
    stats = collect_stats(module, len(wasm))
    timings.analysis_time = time.perf_counter() - t0
    timings.total_time = time.perf_counter() - start
    return stats, timings
