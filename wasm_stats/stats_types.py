"""Module statistics — output data types (pure data, no business logic).

Field names and nesting are the JSON contract consumed by downstream tools.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Language(str, Enum):
    RUST = "Rust"
    EMSCRIPTEN = "Emscripten"
    # Some evidence of Emscripten, but from fingerprints that are not
    # terribly reliable (minified import names).
    LIKELY_EMSCRIPTEN = "LikelyEmscripten"
    ASSEMBLY_SCRIPT = "AssemblyScript"
    BLAZOR = "Blazor"
    UNKNOWN = "Unknown"
    GO = "Go"


class ProposalStats(BaseModel):
    atomics: int = 0
    ref_types: int = 0
    simd: int = 0
    tail_calls: int = 0
    bulk: int = 0
    multi_value: int = 0
    non_trapping_conv: int = 0
    sign_extend: int = 0
    mutable_externals: int = 0
    bigint_externals: int = 0


class InstructionCategoryStats(BaseModel):
    load_store: int = 0
    local_var: int = 0
    global_var: int = 0
    table: int = 0
    memory: int = 0
    control_flow: int = 0
    direct_calls: int = 0
    indirect_calls: int = 0
    constants: int = 0
    wait_notify: int = 0
    other: int = 0


class InstructionStats(BaseModel):
    total: int = 0
    proposals: ProposalStats = Field(default_factory=ProposalStats)
    categories: InstructionCategoryStats = Field(
        default_factory=InstructionCategoryStats
    )


class SizeStats(BaseModel):
    code: int = 0
    init: int = 0
    externals: int = 0
    types: int = 0
    custom: int = 0
    descriptors: int = 0
    total: int = 0

    def sections_total(self) -> int:
        """Sum of the per-class buckets (excludes header and section ID bytes)."""
        return (
            self.code
            + self.init
            + self.externals
            + self.types
            + self.custom
            + self.descriptors
        )


class ExternalStats(BaseModel):
    funcs: int = 0
    memories: int = 0
    globals: int = 0
    tables: int = 0


class Stats(BaseModel):
    funcs: int = 0
    language: Language = Language.UNKNOWN
    instr: InstructionStats = Field(default_factory=InstructionStats)
    size: SizeStats = Field(default_factory=SizeStats)
    imports: ExternalStats = Field(default_factory=ExternalStats)
    exports: ExternalStats = Field(default_factory=ExternalStats)
    custom_sections: list[str] = Field(default_factory=list)
    has_start: bool = False
