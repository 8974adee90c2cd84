"""Run configuration and timing data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass

from . import constants


@dataclass(frozen=True)
class OutputConfig:
    """Groups CLI output configuration."""

    indent: int | None = constants.DEFAULT_JSON_INDENT
    verbose: bool = False
    timing: bool = False


@dataclass
class AnalysisTimings:
    """Timing statistics for each stage of one analysis."""

    input_bytes: int = 0
    sections: int = 0

    # Stage timings (seconds)
    decode_time: float = 0.0
    analysis_time: float = 0.0
    total_time: float = 0.0

    def report(self) -> str:
        lines = [
            "═══ Analysis Timings ═══",
            f"  Input: {self.input_bytes} bytes, {self.sections} sections",
            "",
            f"  {'Stage':<20} {'Time':>10}",
            f"  {'─' * 20} {'─' * 10}",
        ]
        for name, t in (
            ("Decode", self.decode_time),
            ("Analyze", self.analysis_time),
        ):
            lines.append(f"  {name:<20} {t * 1000:>8.1f}ms")
        lines.append(f"  {'─' * 20} {'─' * 10}")
        lines.append(f"  {'Total':<20} {self.total_time * 1000:>8.1f}ms")
        return "\n".join(lines)
