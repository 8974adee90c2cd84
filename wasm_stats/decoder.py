"""Binary decoder — raw bytes to a lazily-materialized module tree.

Sections keep their raw payload; their contents are decoded on first
access to ``Section.contents()`` and cached. Function bodies in the code
section are decoded individually in the same way, so analyses that only
need sizes or names never touch instruction streams.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from . import constants
from .ir import Imm, Instruction, Opcode
from .opcode_tables import PREFIXED_OPCODES, SINGLE_BYTE_OPCODES
from .reader import ByteReader, DecodeError
from .wasm_types import (
    CustomSection,
    DataSegment,
    ElementSegment,
    Export,
    ExternalKind,
    FuncBody,
    FuncType,
    Global,
    GlobalType,
    Import,
    Limits,
    MemoryType,
    SectionId,
    SegmentMode,
    TableType,
    ValueType,
)

logger = logging.getLogger(__name__)

_VALUE_TYPES: dict[int, ValueType] = {
    constants.VALTYPE_I32: ValueType.I32,
    constants.VALTYPE_I64: ValueType.I64,
    constants.VALTYPE_F32: ValueType.F32,
    constants.VALTYPE_F64: ValueType.F64,
    constants.VALTYPE_V128: ValueType.V128,
    constants.VALTYPE_FUNCREF: ValueType.FUNCREF,
    constants.VALTYPE_EXTERNREF: ValueType.EXTERNREF,
}

_REF_TYPES: frozenset[ValueType] = frozenset({ValueType.FUNCREF, ValueType.EXTERNREF})

_UNDECODED = object()


# ── type encodings ───────────────────────────────────────────────


def read_value_type(reader: ByteReader) -> ValueType:
    start = reader.offset
    b = reader.read_byte()
    vt = _VALUE_TYPES.get(b)
    if vt is None:
        raise DecodeError(f"unknown value type 0x{b:02x}", start)
    return vt


def read_ref_type(reader: ByteReader) -> ValueType:
    start = reader.offset
    vt = read_value_type(reader)
    if vt not in _REF_TYPES:
        raise DecodeError(f"expected reference type, got {vt.value}", start)
    return vt


def read_func_type(reader: ByteReader) -> FuncType:
    start = reader.offset
    form = reader.read_byte()
    if form != constants.FUNC_TYPE_FORM:
        raise DecodeError(f"unsupported type form 0x{form:02x}", start)
    params = tuple(reader.read_vec(read_value_type))
    results = tuple(reader.read_vec(read_value_type))
    return FuncType(params, results)


def _read_limits_flags(reader: ByteReader) -> tuple[int, Limits]:
    start = reader.offset
    flags = reader.read_byte()
    if flags & ~(
        constants.LIMITS_HAS_MAX | constants.LIMITS_SHARED | constants.LIMITS_MEMORY64
    ):
        raise DecodeError(f"invalid limits flags 0x{flags:02x}", start)
    read = reader.read_u64 if flags & constants.LIMITS_MEMORY64 else reader.read_u32
    minimum = read()
    maximum = read() if flags & constants.LIMITS_HAS_MAX else None
    return flags, Limits(minimum, maximum)


def read_memory_type(reader: ByteReader) -> MemoryType:
    flags, limits = _read_limits_flags(reader)
    return MemoryType(
        limits=limits,
        is_shared=bool(flags & constants.LIMITS_SHARED),
        is_64=bool(flags & constants.LIMITS_MEMORY64),
    )


def read_table_type(reader: ByteReader) -> TableType:
    elem_type = read_ref_type(reader)
    start = reader.offset
    flags, limits = _read_limits_flags(reader)
    if flags & ~constants.LIMITS_HAS_MAX:
        raise DecodeError(f"invalid table limits flags 0x{flags:02x}", start)
    return TableType(elem_type, limits)


def read_global_type(reader: ByteReader) -> GlobalType:
    value_type = read_value_type(reader)
    start = reader.offset
    mut = reader.read_byte()
    if mut not in (0, 1):
        raise DecodeError(f"invalid mutability flag 0x{mut:02x}", start)
    return GlobalType(value_type, mutable=bool(mut))


# ── instructions ─────────────────────────────────────────────────


def _read_block_type(reader: ByteReader) -> ValueType | int | None:
    b = reader.peek_byte()
    if b == constants.EMPTY_BLOCK_TYPE:
        reader.read_byte()
        return None
    if b in _VALUE_TYPES:
        reader.read_byte()
        return _VALUE_TYPES[b]
    start = reader.offset
    index = reader.read_s33()
    if index < 0:
        raise DecodeError(f"invalid block type {index}", start)
    return index


def _read_memarg(reader: ByteReader) -> tuple[int, int, int]:
    align = reader.read_u32()
    memory = 0
    if align & constants.MEMARG_HAS_MEMIDX:
        align &= ~constants.MEMARG_HAS_MEMIDX
        memory = reader.read_u32()
    offset = reader.read_u64()
    return align, offset, memory


def _read_zero_byte(reader: ByteReader) -> tuple[Any, ...]:
    start = reader.offset
    b = reader.read_byte()
    if b != 0:
        raise DecodeError(f"expected zero byte, got 0x{b:02x}", start)
    return ()


def _read_br_table(reader: ByteReader) -> tuple[Any, ...]:
    labels = tuple(reader.read_vec(ByteReader.read_u32))
    return labels, reader.read_u32()


_IMMEDIATE_READERS: dict[Imm, Callable[[ByteReader], tuple[Any, ...]]] = {
    Imm.NONE: lambda r: (),
    Imm.BLOCK_TYPE: lambda r: (_read_block_type(r),),
    Imm.LABEL: lambda r: (r.read_u32(),),
    Imm.BR_TABLE: _read_br_table,
    Imm.FUNC: lambda r: (r.read_u32(),),
    Imm.CALL_INDIRECT: lambda r: (r.read_u32(), r.read_u32()),
    Imm.LOCAL: lambda r: (r.read_u32(),),
    Imm.GLOBAL: lambda r: (r.read_u32(),),
    Imm.TABLE: lambda r: (r.read_u32(),),
    Imm.TABLE_PAIR: lambda r: (r.read_u32(), r.read_u32()),
    Imm.ELEM: lambda r: (r.read_u32(),),
    Imm.ELEM_TABLE: lambda r: (r.read_u32(), r.read_u32()),
    Imm.DATA: lambda r: (r.read_u32(),),
    Imm.DATA_MEMORY: lambda r: (r.read_u32(), r.read_u32()),
    Imm.MEMORY: lambda r: (r.read_u32(),),
    Imm.MEMORY_PAIR: lambda r: (r.read_u32(), r.read_u32()),
    Imm.MEMARG: _read_memarg,
    Imm.MEMARG_LANE: lambda r: (*_read_memarg(r), r.read_byte()),
    Imm.LANE: lambda r: (r.read_byte(),),
    Imm.SHUFFLE: lambda r: (tuple(r.read_bytes(16)),),
    Imm.I32: lambda r: (r.read_s32(),),
    Imm.I64: lambda r: (r.read_s64(),),
    Imm.F32: lambda r: (r.read_f32(),),
    Imm.F64: lambda r: (r.read_f64(),),
    Imm.V128: lambda r: (r.read_bytes(16),),
    Imm.REF_TYPE: lambda r: (read_ref_type(r),),
    Imm.VALTYPES: lambda r: (tuple(r.read_vec(read_value_type)),),
    Imm.ZERO_BYTE: _read_zero_byte,
}


def read_instruction(reader: ByteReader) -> Instruction:
    start = reader.offset
    code = reader.read_byte()
    table = PREFIXED_OPCODES.get(code)
    if table is None:
        entry = SINGLE_BYTE_OPCODES.get(code)
        if entry is None:
            raise DecodeError(f"unknown opcode 0x{code:02x}", start)
    else:
        sub = reader.read_u32()
        entry = table.get(sub)
        if entry is None:
            raise DecodeError(f"unknown opcode 0x{code:02x} 0x{sub:x}", start)
    op, imm = entry
    return Instruction(op, _IMMEDIATE_READERS[imm](reader))


def read_const_expr(reader: ByteReader) -> list[Instruction]:
    """Read an initializer expression up to and including its ``end``."""
    expr: list[Instruction] = []
    depth = 0
    while True:
        inst = read_instruction(reader)
        expr.append(inst)
        if inst.op in (Opcode.BLOCK, Opcode.LOOP, Opcode.IF):
            depth += 1
        elif inst.op == Opcode.END:
            if depth == 0:
                return expr
            depth -= 1


def decode_func_body(data: bytes, base: int = 0) -> FuncBody:
    """Decode one function body (locals + instruction sequence)."""
    reader = ByteReader(data, base)
    local_groups = reader.read_vec(lambda r: (r.read_u32(), read_value_type(r)))
    expr: list[Instruction] = []
    while not reader.eof():
        expr.append(read_instruction(reader))
    if not expr or expr[-1].op != Opcode.END:
        raise DecodeError("function body does not terminate with end", reader.offset)
    return FuncBody(locals=local_groups, expr=expr)


# ── lazily decoded containers ────────────────────────────────────


@dataclass
class LazyFuncBody:
    """Raw function body bytes, decoded on first ``contents()`` call."""

    raw: bytes
    offset: int = 0
    _decoded: Any = field(default=_UNDECODED, repr=False, compare=False)

    def contents(self) -> FuncBody:
        if self._decoded is _UNDECODED:
            self._decoded = decode_func_body(self.raw, self.offset)
        return self._decoded


@dataclass
class Section:
    """A module section: its ID and raw payload, with lazily-decoded contents."""

    id: SectionId
    payload: bytes
    offset: int = 0
    _decoded: Any = field(default=_UNDECODED, repr=False, compare=False)

    def contents(self) -> Any:
        if self._decoded is _UNDECODED:
            logger.debug(
                "Decoding %s section (%d bytes)", self.id.name, len(self.payload)
            )
            reader = ByteReader(self.payload, self.offset)
            decoded = _SECTION_DECODERS[self.id](reader)
            reader.expect_end(f"{self.id.name} section")
            self._decoded = decoded
        return self._decoded


@dataclass
class Module:
    sections: list[Section] = field(default_factory=list)

    def sections_of(self, section_id: SectionId) -> list[Section]:
        return [s for s in self.sections if s.id == section_id]


# ── section decoders ─────────────────────────────────────────────


def _read_custom(reader: ByteReader) -> CustomSection:
    name = reader.read_name()
    return CustomSection(name, reader.read_rest())


def _read_import(reader: ByteReader) -> Import:
    module = reader.read_name()
    name = reader.read_name()
    start = reader.offset
    kind_byte = reader.read_byte()
    if kind_byte == ExternalKind.FUNC:
        return Import(module, name, ExternalKind.FUNC, reader.read_u32())
    if kind_byte == ExternalKind.TABLE:
        return Import(module, name, ExternalKind.TABLE, read_table_type(reader))
    if kind_byte == ExternalKind.MEMORY:
        return Import(module, name, ExternalKind.MEMORY, read_memory_type(reader))
    if kind_byte == ExternalKind.GLOBAL:
        return Import(module, name, ExternalKind.GLOBAL, read_global_type(reader))
    raise DecodeError(f"unknown import kind 0x{kind_byte:02x}", start)


def _read_export(reader: ByteReader) -> Export:
    name = reader.read_name()
    start = reader.offset
    kind_byte = reader.read_byte()
    try:
        kind = ExternalKind(kind_byte)
    except ValueError as exc:
        raise DecodeError(f"unknown export kind 0x{kind_byte:02x}", start) from exc
    return Export(name, kind, reader.read_u32())


def _read_global(reader: ByteReader) -> Global:
    return Global(read_global_type(reader), read_const_expr(reader))


def _read_element(reader: ByteReader) -> ElementSegment:
    """Element segments: flag bit 0 = passive/declarative, bit 1 = explicit
    table (active) or declarative (passive), bit 2 = expression items."""
    start = reader.offset
    flags = reader.read_u32()
    if flags > 7:
        raise DecodeError(f"invalid element segment flags {flags}", start)
    table_index = 0
    offset = None
    if flags & 0x01:
        mode = SegmentMode.DECLARATIVE if flags & 0x02 else SegmentMode.PASSIVE
    else:
        mode = SegmentMode.ACTIVE
        if flags & 0x02:
            table_index = reader.read_u32()
        offset = read_const_expr(reader)

    uses_exprs = bool(flags & 0x04)
    elem_type = ValueType.FUNCREF
    if flags & 0x03:
        if uses_exprs:
            elem_type = read_ref_type(reader)
        else:
            kind_start = reader.offset
            elemkind = reader.read_byte()
            if elemkind != 0x00:
                raise DecodeError(f"unknown element kind 0x{elemkind:02x}", kind_start)

    if uses_exprs:
        items: list = reader.read_vec(read_const_expr)
    else:
        items = reader.read_vec(ByteReader.read_u32)
    return ElementSegment(
        mode=mode,
        elem_type=elem_type,
        items=items,
        table_index=table_index,
        offset=offset,
    )


def _read_data(reader: ByteReader) -> DataSegment:
    start = reader.offset
    flags = reader.read_u32()
    if flags == 0:
        offset = read_const_expr(reader)
        return DataSegment(SegmentMode.ACTIVE, reader.read_sized()[0], 0, offset)
    if flags == 1:
        return DataSegment(SegmentMode.PASSIVE, reader.read_sized()[0])
    if flags == 2:
        memory_index = reader.read_u32()
        offset = read_const_expr(reader)
        return DataSegment(
            SegmentMode.ACTIVE, reader.read_sized()[0], memory_index, offset
        )
    raise DecodeError(f"invalid data segment flags {flags}", start)


def _read_code_entry(reader: ByteReader) -> LazyFuncBody:
    raw, offset = reader.read_sized()
    return LazyFuncBody(raw, offset)


_SECTION_DECODERS: dict[SectionId, Callable[[ByteReader], Any]] = {
    SectionId.CUSTOM: _read_custom,
    SectionId.TYPE: lambda r: r.read_vec(read_func_type),
    SectionId.IMPORT: lambda r: r.read_vec(_read_import),
    SectionId.FUNCTION: lambda r: r.read_vec(ByteReader.read_u32),
    SectionId.TABLE: lambda r: r.read_vec(read_table_type),
    SectionId.MEMORY: lambda r: r.read_vec(read_memory_type),
    SectionId.GLOBAL: lambda r: r.read_vec(_read_global),
    SectionId.EXPORT: lambda r: r.read_vec(_read_export),
    SectionId.START: ByteReader.read_u32,
    SectionId.ELEMENT: lambda r: r.read_vec(_read_element),
    SectionId.CODE: lambda r: r.read_vec(_read_code_entry),
    SectionId.DATA: lambda r: r.read_vec(_read_data),
    SectionId.DATA_COUNT: ByteReader.read_u32,
}


# ── module ───────────────────────────────────────────────────────


def decode_module(data: bytes) -> Module:
    """Split *data* into sections after checking the header.

    Section payloads are not decoded here; see ``Section.contents()``.
    """
    if data[:4] != constants.WASM_MAGIC:
        raise DecodeError(f"invalid WebAssembly magic: {data[:4]!r}", 0)
    reader = ByteReader(data)
    reader.read_bytes(4)
    version = int.from_bytes(reader.read_bytes(4), "little")
    if version != constants.WASM_VERSION:
        raise DecodeError(f"unsupported WebAssembly version: {version}", 4)

    module = Module()
    while not reader.eof():
        start = reader.offset
        section_byte = reader.read_byte()
        try:
            section_id = SectionId(section_byte)
        except ValueError as exc:
            raise DecodeError(f"unknown section id {section_byte}", start) from exc
        payload, offset = reader.read_sized()
        module.sections.append(Section(section_id, payload, offset))

    logger.info(
        "Decoded module header: %d sections, %d bytes", len(module.sections), len(data)
    )
    return module
