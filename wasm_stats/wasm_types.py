"""Decoded module entities (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Union

from .ir import Instruction


class SectionId(IntEnum):
    """WebAssembly section IDs."""

    CUSTOM = 0
    TYPE = 1
    IMPORT = 2
    FUNCTION = 3
    TABLE = 4
    MEMORY = 5
    GLOBAL = 6
    EXPORT = 7
    START = 8
    ELEMENT = 9
    CODE = 10
    DATA = 11
    DATA_COUNT = 12


class ValueType(str, Enum):
    I32 = "i32"
    I64 = "i64"
    F32 = "f32"
    F64 = "f64"
    V128 = "v128"
    FUNCREF = "funcref"
    EXTERNREF = "externref"


class ExternalKind(IntEnum):
    FUNC = 0
    TABLE = 1
    MEMORY = 2
    GLOBAL = 3


@dataclass(frozen=True)
class FuncType:
    params: tuple[ValueType, ...] = ()
    results: tuple[ValueType, ...] = ()

    def value_types(self) -> tuple[ValueType, ...]:
        return self.params + self.results


@dataclass(frozen=True)
class Limits:
    min: int
    max: int | None = None


@dataclass(frozen=True)
class MemoryType:
    limits: Limits
    is_shared: bool = False
    is_64: bool = False


@dataclass(frozen=True)
class TableType:
    elem_type: ValueType
    limits: Limits


@dataclass(frozen=True)
class GlobalType:
    value_type: ValueType
    mutable: bool = False


ImportDesc = Union[int, TableType, MemoryType, GlobalType]


@dataclass(frozen=True)
class Import:
    """One import record; ``desc`` is a type index for functions."""

    module: str
    name: str
    kind: ExternalKind
    desc: ImportDesc


@dataclass(frozen=True)
class Export:
    name: str
    kind: ExternalKind
    index: int


@dataclass(frozen=True)
class Global:
    type: GlobalType
    init: list[Instruction] = field(default_factory=list)


@dataclass(frozen=True)
class CustomSection:
    name: str
    data: bytes = b""


class SegmentMode(str, Enum):
    ACTIVE = "active"
    PASSIVE = "passive"
    DECLARATIVE = "declarative"


@dataclass(frozen=True)
class ElementSegment:
    """Element segment; ``items`` holds function indices or init expressions."""

    mode: SegmentMode
    elem_type: ValueType
    items: list[int] | list[list[Instruction]]
    table_index: int = 0
    offset: list[Instruction] | None = None


@dataclass(frozen=True)
class DataSegment:
    mode: SegmentMode
    data: bytes
    memory_index: int = 0
    offset: list[Instruction] | None = None


@dataclass(frozen=True)
class FuncBody:
    locals: list[tuple[int, ValueType]]
    expr: list[Instruction]
