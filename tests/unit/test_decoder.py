"""Tests for the module decoder: header, section splitting, lazy contents."""

import pytest

from wasm_stats.decoder import decode_module, read_instruction
from wasm_stats.ir import Instruction, Opcode
from wasm_stats.reader import ByteReader, DecodeError
from wasm_stats.wasm_types import (
    ExternalKind,
    FuncType,
    GlobalType,
    SectionId,
    SegmentMode,
    ValueType,
)
from tests.unit.conftest import (
    END,
    HEADER,
    I32,
    I64,
    active_data,
    code_section,
    custom_section,
    data_count_section,
    data_section,
    export,
    export_section,
    func_body,
    func_import,
    function_section,
    functype,
    global_entry,
    global_section,
    i32_const,
    i64_const,
    import_section,
    memory,
    memory_section,
    module,
    passive_data,
    section,
    single_func_module,
    start_section,
    type_section,
    uleb,
)


def decode_one(code: bytes) -> Instruction:
    reader = ByteReader(code)
    inst = read_instruction(reader)
    assert reader.eof()
    return inst


class TestHeader:
    def test_empty_module(self):
        assert decode_module(HEADER).sections == []

    def test_bad_magic(self):
        with pytest.raises(DecodeError, match="magic"):
            decode_module(b"\x00wasm\x01\x00\x00\x00")

    def test_bad_version(self):
        with pytest.raises(DecodeError, match="version: 2"):
            decode_module(b"\x00asm\x02\x00\x00\x00")

    def test_truncated_header(self):
        with pytest.raises(DecodeError):
            decode_module(b"\x00asm\x01")

    def test_unknown_section_id(self):
        with pytest.raises(DecodeError, match="unknown section id 13"):
            decode_module(HEADER + b"\x0d\x00")

    def test_section_overruns_input(self):
        with pytest.raises(DecodeError):
            decode_module(HEADER + b"\x01\x05\x00")


class TestSections:
    def test_sections_in_order(self):
        wasm = single_func_module(b"", start_section(0))
        ids = [s.id for s in decode_module(wasm).sections]
        assert ids == [
            SectionId.TYPE,
            SectionId.FUNCTION,
            SectionId.START,
            SectionId.CODE,
        ]

    def test_section_offset_points_at_payload(self):
        wasm = module(type_section(functype()))
        sec = decode_module(wasm).sections[0]
        assert wasm[sec.offset : sec.offset + len(sec.payload)] == sec.payload

    def test_type_section(self):
        wasm = module(type_section(functype([I32, I64], [I32]), functype()))
        types = decode_module(wasm).sections[0].contents()
        assert types == [
            FuncType((ValueType.I32, ValueType.I64), (ValueType.I32,)),
            FuncType(),
        ]

    def test_import_section(self):
        wasm = module(type_section(functype()), import_section(func_import("env", "f")))
        imports = decode_module(wasm).sections_of(SectionId.IMPORT)[0].contents()
        assert len(imports) == 1
        assert (imports[0].module, imports[0].name) == ("env", "f")
        assert imports[0].kind == ExternalKind.FUNC
        assert imports[0].desc == 0

    def test_unknown_import_kind(self):
        bad = import_section(uleb(1) + b"m" + uleb(1) + b"n" + b"\x07\x00")
        with pytest.raises(DecodeError, match="unknown import kind"):
            decode_module(module(bad)).sections[0].contents()

    def test_memory_section_flags(self):
        wasm = module(memory_section(memory(1, 2, shared=True), memory(3)))
        shared, plain = decode_module(wasm).sections[0].contents()
        assert shared.is_shared
        assert shared.limits.max == 2
        assert not plain.is_shared
        assert plain.limits.max is None

    def test_global_section(self):
        wasm = module(global_section(global_entry(I64, True, i64_const(5))))
        (glob,) = decode_module(wasm).sections[0].contents()
        assert glob.type == GlobalType(ValueType.I64, mutable=True)
        assert glob.init == [
            Instruction(Opcode.I64_CONST, (5,)),
            Instruction(Opcode.END),
        ]

    def test_export_section(self):
        wasm = module(export_section(export("main", ExternalKind.FUNC, 3)))
        (exp,) = decode_module(wasm).sections[0].contents()
        assert (exp.name, exp.kind, exp.index) == ("main", ExternalKind.FUNC, 3)

    def test_unknown_export_kind(self):
        bad = export_section(uleb(1) + b"x" + b"\x09\x00")
        with pytest.raises(DecodeError, match="unknown export kind"):
            decode_module(module(bad)).sections[0].contents()

    def test_data_segments(self):
        wasm = module(data_section(active_data(b"hi", 8), passive_data(b"yo")))
        active, passive = decode_module(wasm).sections[0].contents()
        assert active.mode == SegmentMode.ACTIVE
        assert active.data == b"hi"
        assert active.offset[0] == Instruction(Opcode.I32_CONST, (8,))
        assert passive.mode == SegmentMode.PASSIVE
        assert passive.offset is None

    def test_invalid_data_flags(self):
        with pytest.raises(DecodeError, match="invalid data segment flags 3"):
            decode_module(module(data_section(b"\x03"))).sections[0].contents()

    def test_active_element_segment(self):
        payload = uleb(1) + uleb(0) + i32_const(0) + END + uleb(2) + uleb(0) + uleb(1)
        wasm = module(section(SectionId.ELEMENT, payload))
        (seg,) = decode_module(wasm).sections[0].contents()
        assert seg.mode == SegmentMode.ACTIVE
        assert seg.items == [0, 1]
        assert seg.elem_type == ValueType.FUNCREF

    def test_declarative_element_segment(self):
        payload = uleb(1) + uleb(3) + b"\x00" + uleb(1) + uleb(4)
        wasm = module(section(SectionId.ELEMENT, payload))
        (seg,) = decode_module(wasm).sections[0].contents()
        assert seg.mode == SegmentMode.DECLARATIVE
        assert seg.items == [4]

    def test_custom_section(self):
        wasm = module(custom_section("name", b"\x01\x02"))
        custom = decode_module(wasm).sections[0].contents()
        assert custom.name == "name"
        assert custom.data == b"\x01\x02"

    def test_data_count_and_start(self):
        wasm = module(data_count_section(4), start_section(2))
        dc, start = decode_module(wasm).sections
        assert dc.contents() == 4
        assert start.contents() == 2

    def test_trailing_bytes_in_section(self):
        wasm = module(section(SectionId.START, uleb(0) + b"\x00"))
        with pytest.raises(DecodeError, match="trailing bytes after START section"):
            decode_module(wasm).sections[0].contents()

    def test_contents_are_cached(self):
        sec = decode_module(module(type_section(functype()))).sections[0]
        assert sec.contents() is sec.contents()


class TestFunctionBodies:
    def test_body_decoded_lazily(self):
        wasm = single_func_module(i32_const(1) + b"\x1a")
        code = decode_module(wasm).sections_of(SectionId.CODE)[0]
        (body,) = code.contents()
        assert [i.op for i in body.contents().expr] == [
            Opcode.I32_CONST,
            Opcode.DROP,
            Opcode.END,
        ]

    def test_locals(self):
        wasm = module(
            type_section(functype()),
            function_section(0),
            code_section(func_body(b"", [(2, I32), (1, I64)])),
        )
        (body,) = decode_module(wasm).sections[-1].contents()
        assert body.contents().locals == [(2, ValueType.I32), (1, ValueType.I64)]

    def test_missing_end(self):
        body = uleb(2) + b"\x00\x01"
        wasm = module(type_section(functype()), function_section(0), code_section(body))
        (lazy,) = decode_module(wasm).sections[-1].contents()
        with pytest.raises(DecodeError, match="does not terminate with end"):
            lazy.contents()

    def test_unknown_opcode_reports_offset(self):
        wasm = single_func_module(b"\xff")
        (lazy,) = decode_module(wasm).sections[-1].contents()
        with pytest.raises(DecodeError, match="unknown opcode 0xff") as excinfo:
            lazy.contents()
        assert excinfo.value.offset == wasm.index(b"\xff\x0b")


class TestInstructions:
    def test_block_with_empty_type(self):
        assert decode_one(b"\x02\x40") == Instruction(Opcode.BLOCK, (None,))

    def test_block_with_value_type(self):
        assert decode_one(b"\x02\x7f") == Instruction(Opcode.BLOCK, (ValueType.I32,))

    def test_block_with_type_index(self):
        assert decode_one(b"\x03\x02") == Instruction(Opcode.LOOP, (2,))

    def test_br_table(self):
        inst = decode_one(b"\x0e\x02\x00\x01\x02")
        assert inst == Instruction(Opcode.BR_TABLE, ((0, 1), 2))

    def test_call_indirect(self):
        assert decode_one(b"\x11\x01\x00") == Instruction(Opcode.CALL_INDIRECT, (1, 0))

    def test_memarg(self):
        inst = decode_one(b"\x28\x02\x10")
        assert inst == Instruction(Opcode.I32_LOAD, (2, 16, 0))

    def test_memarg_with_memory_index(self):
        inst = decode_one(b"\x28\x42\x01\x10")
        assert inst == Instruction(Opcode.I32_LOAD, (2, 16, 1))

    def test_typed_select(self):
        inst = decode_one(b"\x1c\x01\x7f")
        assert inst == Instruction(Opcode.SELECT_T, ((ValueType.I32,),))

    def test_tail_call(self):
        assert decode_one(b"\x12\x05") == Instruction(Opcode.RETURN_CALL, (5,))

    def test_misc_prefix(self):
        assert decode_one(b"\xfc\x0a\x00\x00").op == Opcode.MEMORY_COPY

    def test_simd_const(self):
        inst = decode_one(b"\xfd\x0c" + bytes(range(16)))
        assert inst == Instruction(Opcode.V128_CONST, (bytes(range(16)),))

    def test_simd_shuffle(self):
        assert decode_one(b"\xfd\x0d" + bytes(16)).op == Opcode.I8X16_SHUFFLE

    def test_atomic_fence(self):
        assert decode_one(b"\xfe\x03\x00") == Instruction(Opcode.ATOMIC_FENCE)

    def test_atomic_fence_nonzero_byte(self):
        with pytest.raises(DecodeError, match="expected zero byte"):
            decode_one(b"\xfe\x03\x01")

    def test_unknown_prefixed_opcode(self):
        with pytest.raises(DecodeError, match="unknown opcode 0xfc 0x7f"):
            decode_one(b"\xfc\x7f")

    def test_ref_null(self):
        inst = decode_one(b"\xd0\x70")
        assert inst == Instruction(Opcode.REF_NULL, (ValueType.FUNCREF,))

    def test_str(self):
        assert str(Instruction(Opcode.LOCAL_GET, (0,))) == "local.get 0"
        assert str(Instruction(Opcode.NOP)) == "nop"
