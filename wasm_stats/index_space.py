"""Function & global index spaces, with export marking and the external audit."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from .reader import DecodeError
from .wasm_types import Export, ExternalKind, FuncType, GlobalType, ValueType

logger = logging.getLogger(__name__)

T = TypeVar("T")


class IndexSpaceError(DecodeError):
    """A reference points outside its index space."""


@dataclass
class MaybeExternal(Generic[T]):
    """One slot of an index space; external if imported or exported."""

    value: T
    is_external: bool = False


@dataclass
class IndexSpace(Generic[T]):
    """Imports occupy the low indices, local declarations follow."""

    kind: str
    entries: list[MaybeExternal[T]] = field(default_factory=list)

    def declare_imported(self, value: T) -> None:
        self.entries.append(MaybeExternal(value, is_external=True))

    def declare_local(self, value: T) -> None:
        self.entries.append(MaybeExternal(value))

    def mark_external(self, index: int) -> None:
        if index >= len(self.entries):
            raise IndexSpaceError(
                f"{self.kind} index {index} out of bounds ({len(self.entries)} entries)"
            )
        self.entries[index].is_external = True

    def externals(self) -> list[T]:
        return [entry.value for entry in self.entries if entry.is_external]

    def __len__(self) -> int:
        return len(self.entries)


@dataclass
class ExternalAudit:
    mutable_externals: int = 0
    bigint_externals: int = 0


class IndexSpaces:
    """Unified function and global index spaces for one module.

    Function slots hold raw type indices; they are resolved against the
    type section only in ``audit``, so section order does not matter.
    """

    def __init__(self, types: list[FuncType] | None = None):
        self.types: list[FuncType] = list(types or [])
        self.funcs: IndexSpace[int] = IndexSpace("function")
        self.globals: IndexSpace[GlobalType] = IndexSpace("global")

    def add_types(self, types: list[FuncType]) -> None:
        self.types.extend(types)

    def resolve_type(self, type_index: int) -> FuncType:
        if type_index >= len(self.types):
            raise IndexSpaceError(
                f"type index {type_index} out of bounds ({len(self.types)} types)"
            )
        return self.types[type_index]

    def import_func(self, type_index: int) -> None:
        self.funcs.declare_imported(type_index)

    def declare_func(self, type_index: int) -> None:
        self.funcs.declare_local(type_index)

    def import_global(self, global_type: GlobalType) -> None:
        self.globals.declare_imported(global_type)

    def declare_global(self, global_type: GlobalType) -> None:
        self.globals.declare_local(global_type)

    def mark_exported(self, export: Export) -> None:
        # Memory and table exports are tallied elsewhere, never audited.
        if export.kind == ExternalKind.FUNC:
            self.funcs.mark_external(export.index)
        elif export.kind == ExternalKind.GLOBAL:
            self.globals.mark_external(export.index)

    def audit(self) -> ExternalAudit:
        audit = ExternalAudit()
        external_globals = self.globals.externals()
        # Every signature must resolve, exported or not.
        signatures = [self.resolve_type(entry.value) for entry in self.funcs.entries]
        external_funcs = [
            sig
            for sig, entry in zip(signatures, self.funcs.entries)
            if entry.is_external
        ]
        for global_type in external_globals:
            if global_type.mutable:
                audit.mutable_externals += 1
            if global_type.value_type == ValueType.I64:
                audit.bigint_externals += 1
        for func_type in external_funcs:
            if ValueType.I64 in func_type.value_types():
                audit.bigint_externals += 1
        logger.debug(
            "External audit: %d funcs, %d globals, %d mutable, %d bigint",
            len(external_funcs),
            len(external_globals),
            audit.mutable_externals,
            audit.bigint_externals,
        )
        return audit
