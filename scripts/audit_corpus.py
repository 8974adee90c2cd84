"""Audit a directory tree of WebAssembly modules.

Walks every ``*.wasm`` file under the given roots, analyzes each one and
logs two summaries:

  - a language verdict tally (how many modules each rule attributed to
    each toolchain), and
  - proposal usage (how many modules use each proposal at least once).

Modules that fail to decode are counted and listed, not fatal.
"""

from __future__ import annotations

import argparse
import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

from wasm_stats import DecodeError, stats_from_file
from wasm_stats.stats_types import Language, ProposalStats

logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger(__name__)


@dataclass
class CorpusAudit:
    modules: int = 0
    languages: Counter = field(default_factory=Counter)
    proposals: Counter = field(default_factory=Counter)
    failures: list[tuple[Path, str]] = field(default_factory=list)


def audit_file(path: Path, audit: CorpusAudit) -> None:
    try:
        stats = stats_from_file(path)
    except (DecodeError, OSError) as exc:
        audit.failures.append((path, str(exc)))
        return
    audit.modules += 1
    audit.languages[stats.language] += 1
    for name, count in stats.instr.proposals.model_dump().items():
        if count:
            audit.proposals[name] += 1


def audit_roots(roots: list[Path]) -> CorpusAudit:
    audit = CorpusAudit()
    for root in roots:
        logger.info("Scanning %s...", root)
        for path in sorted(root.rglob("*.wasm")):
            audit_file(path, audit)
    return audit


def print_audit(audit: CorpusAudit) -> None:
    logger.info("")
    logger.info("=" * 50)
    logger.info("  LANGUAGE VERDICTS (%d modules)", audit.modules)
    logger.info("=" * 50)
    for language in Language:
        logger.info("  %-20s %6d", language.value, audit.languages[language])

    logger.info("")
    logger.info("  %-20s %6s", "Proposal", "Mods")
    logger.info("  %s", "-" * 27)
    for name in ProposalStats.model_fields:
        logger.info("  %-20s %6d", name, audit.proposals[name])

    if audit.failures:
        logger.info("")
        logger.info("  Failed to decode %d file(s):", len(audit.failures))
        for path, reason in audit.failures:
            logger.info("    %s: %s", path, reason)


def main():
    parser = argparse.ArgumentParser(description="Audit a corpus of .wasm files")
    parser.add_argument("roots", nargs="+", type=Path, help="Directories to scan")
    args = parser.parse_args()
    print_audit(audit_roots(args.roots))


if __name__ == "__main__":
    main()
