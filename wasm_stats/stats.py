"""Section & instruction aggregator — one pass over a decoded module.

Every section adds its re-encoded size to exactly one bucket and feeds
whatever sub-analysis it carries: import/export tallies, the function and
global index spaces, proposal side effects, and the instruction tally for
the code section. Export marking and type resolution wait until all sections
are seen, so section order does not matter.
"""

from __future__ import annotations

import logging
from typing import Callable

from .decoder import Module, Section, decode_module
from .encoder import calc_size
from .index_space import IndexSpaces
from .instr_stats import InstructionTally, Proposal
from .language import infer_language
from .stats_types import ExternalStats, Stats
from .wasm_types import Export, ExternalKind, Import, MemoryType, SectionId

logger = logging.getLogger(__name__)

_EXTERNAL_FIELDS: dict[ExternalKind, str] = {
    ExternalKind.FUNC: "funcs",
    ExternalKind.TABLE: "tables",
    ExternalKind.MEMORY: "memories",
    ExternalKind.GLOBAL: "globals",
}


def _tally_external(counts: ExternalStats, kind: ExternalKind) -> None:
    name = _EXTERNAL_FIELDS[kind]
    setattr(counts, name, getattr(counts, name) + 1)


class StatsCollector:
    """Accumulates ``Stats`` for one module; call ``collect`` once."""

    def __init__(self, total_size: int):
        self.stats = Stats()
        self.stats.size.total = total_size
        self.tally = InstructionTally()
        self.spaces = IndexSpaces()
        self.import_ids: list[tuple[str, str]] = []
        self.export_names: list[str] = []
        self._exports: list[Export] = []

        self._SECTION_DISPATCH: dict[SectionId, Callable[[Section], None]] = {
            SectionId.CUSTOM: self._on_custom,
            SectionId.TYPE: self._on_type,
            SectionId.IMPORT: self._on_import,
            SectionId.FUNCTION: self._on_function,
            SectionId.TABLE: self._on_descriptor,
            SectionId.MEMORY: self._on_memory,
            SectionId.GLOBAL: self._on_global,
            SectionId.EXPORT: self._on_export,
            SectionId.START: self._on_start,
            SectionId.ELEMENT: self._on_init,
            SectionId.CODE: self._on_code,
            SectionId.DATA: self._on_init,
            SectionId.DATA_COUNT: self._on_data_count,
        }

    def collect(self, module: Module) -> Stats:
        for section in module.sections:
            self._SECTION_DISPATCH[section.id](section)
        return self._finish()

    # ── section handlers ─────────────────────────────────────────

    def _on_custom(self, section: Section) -> None:
        self.stats.size.custom += calc_size(section)
        self.stats.custom_sections.append(section.contents().name)

    def _on_type(self, section: Section) -> None:
        self.stats.size.types += calc_size(section)
        types = section.contents()
        self.spaces.add_types(types)
        self.tally.proposals[Proposal.MULTI_VALUE] += sum(
            1 for t in types if len(t.results) > 1
        )

    def _on_import(self, section: Section) -> None:
        self.stats.size.externals += calc_size(section)
        imports: list[Import] = section.contents()
        for imp in imports:
            self.import_ids.append((imp.module, imp.name))
            _tally_external(self.stats.imports, imp.kind)
            if imp.kind == ExternalKind.FUNC:
                self.spaces.import_func(imp.desc)
            elif imp.kind == ExternalKind.GLOBAL:
                self.spaces.import_global(imp.desc)

    def _on_function(self, section: Section) -> None:
        self.stats.size.descriptors += calc_size(section)
        for type_index in section.contents():
            self.spaces.declare_func(type_index)

    def _on_descriptor(self, section: Section) -> None:
        self.stats.size.descriptors += calc_size(section)
        section.contents()

    def _on_memory(self, section: Section) -> None:
        self.stats.size.descriptors += calc_size(section)
        memories: list[MemoryType] = section.contents()
        self.tally.proposals[Proposal.ATOMICS] += sum(
            1 for m in memories if m.is_shared
        )

    def _on_global(self, section: Section) -> None:
        self.stats.size.descriptors += calc_size(section)
        for global_ in section.contents():
            self.spaces.declare_global(global_.type)

    def _on_export(self, section: Section) -> None:
        self.stats.size.externals += calc_size(section)
        exports: list[Export] = section.contents()
        for export in exports:
            self.export_names.append(export.name)
            _tally_external(self.stats.exports, export.kind)
        self._exports.extend(exports)

    def _on_start(self, section: Section) -> None:
        section.contents()
        self.stats.has_start = True

    def _on_init(self, section: Section) -> None:
        self.stats.size.init += calc_size(section)
        section.contents()

    def _on_code(self, section: Section) -> None:
        # The bucket is the section's own size; bodies accumulate like the tally.
        self.stats.size.code = calc_size(section)
        bodies = section.contents()
        self.stats.funcs += len(bodies)
        for body in bodies:
            self.tally.add_instructions(body.contents().expr)

    def _on_data_count(self, section: Section) -> None:
        section.contents()
        self.tally.proposals[Proposal.BULK] += 1

    # ── resolution ───────────────────────────────────────────────

    def _finish(self) -> Stats:
        for export in self._exports:
            self.spaces.mark_exported(export)
        audit = self.spaces.audit()
        self.tally.proposals[Proposal.MUTABLE_EXTERNALS] += audit.mutable_externals
        self.tally.proposals[Proposal.BIGINT_EXTERNALS] += audit.bigint_externals

        self.stats.language = infer_language(self.import_ids, self.export_names)
        self.stats.instr = self.tally.to_model()
        logger.info(
            "Analyzed module: %d funcs, %d instructions, language %s",
            self.stats.funcs,
            self.stats.instr.total,
            self.stats.language.value,
        )
        return self.stats


def collect_stats(module: Module, total_size: int) -> Stats:
    """Analyze an already decoded module; *total_size* is the raw byte length."""
    return StatsCollector(total_size).collect(module)


def get_stats(wasm: bytes) -> Stats:
    """Decode *wasm* and analyze it."""
    return collect_stats(decode_module(wasm), len(wasm))
