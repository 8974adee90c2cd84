"""Tests for the single-pass aggregator over whole modules."""

import json

import pytest

from wasm_stats.decoder import decode_module
from wasm_stats.index_space import IndexSpaceError
from wasm_stats.reader import DecodeError
from wasm_stats.stats import collect_stats, get_stats
from wasm_stats.stats_types import Language
from wasm_stats.wasm_types import ExternalKind
from tests.unit.conftest import (
    HEADER,
    I32,
    I64,
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
    global_import,
    global_section,
    i32_const,
    i64_const,
    import_section,
    memory,
    memory_import,
    memory_section,
    module,
    passive_data,
    single_func_module,
    start_section,
    type_section,
)


class TestEmptyModule:
    def test_zero_functions(self):
        stats = get_stats(HEADER)
        assert stats.funcs == 0
        assert stats.instr.total == 0
        assert stats.language == Language.UNKNOWN
        assert stats.size.total == 8
        assert stats.size.sections_total() == 0
        assert stats.custom_sections == []
        assert not stats.has_start

    def test_types_only(self):
        stats = get_stats(module(type_section(functype())))
        assert stats.funcs == 0
        assert stats.size.types == 5


class TestSizeBuckets:
    def wasm(self) -> bytes:
        return module(
            type_section(functype()),
            import_section(func_import("env", "f")),
            function_section(0),
            memory_section(memory(1)),
            global_section(global_entry(I32, False, i32_const(0))),
            export_section(export("run", ExternalKind.FUNC, 1)),
            start_section(1),
            data_count_section(1),
            code_section(func_body(b"\x10\x00")),
            data_section(passive_data(b"abc")),
            custom_section("name", b"\x00\x01"),
        )

    def test_buckets(self):
        stats = get_stats(self.wasm())
        assert stats.size.types == 1 + 4
        assert stats.size.externals == (1 + 9) + (1 + 7)
        assert stats.size.descriptors == (1 + 2) + (1 + 3) + (1 + 6)
        assert stats.size.code == 1 + 6
        assert stats.size.init == 1 + 6
        assert stats.size.custom == 1 + 7

    def test_buckets_never_exceed_total(self):
        wasm = self.wasm()
        stats = get_stats(wasm)
        assert stats.size.total == len(wasm)
        assert stats.size.sections_total() <= stats.size.total

    def test_section_id_bytes_and_header_outside_buckets(self):
        wasm = self.wasm()
        stats = get_stats(wasm)
        # start and data count sections belong to no bucket
        assert stats.size.sections_total() == len(wasm) - 8 - 11 - 2 - 2

    def test_start_and_data_count(self):
        stats = get_stats(self.wasm())
        assert stats.has_start
        assert stats.instr.proposals.bulk == 1

    def test_tallies(self):
        stats = get_stats(self.wasm())
        assert stats.imports.funcs == 1
        assert stats.exports.funcs == 1
        assert stats.funcs == 1
        assert stats.instr.categories.direct_calls == 1


class TestCustomSections:
    def test_names_in_order_with_duplicates(self):
        wasm = module(
            custom_section("producers"),
            type_section(functype()),
            custom_section("name"),
            custom_section("producers"),
        )
        stats = get_stats(wasm)
        assert stats.custom_sections == ["producers", "name", "producers"]


class TestProposalSideEffects:
    def test_multi_value_type(self):
        wasm = module(type_section(functype([], [I32, I32]), functype([I32], [I32])))
        assert get_stats(wasm).instr.proposals.multi_value == 1

    def test_shared_memory_counts_as_atomics(self):
        wasm = module(memory_section(memory(1, 1, shared=True)))
        assert get_stats(wasm).instr.proposals.atomics == 1

    def test_side_effects_add_to_instruction_counts(self):
        # memory.fill in the body plus a data count section
        wasm = module(
            type_section(functype()),
            function_section(0),
            memory_section(memory(1, 1, shared=True)),
            data_count_section(0),
            code_section(
                func_body(
                    i32_const(0)
                    + i32_const(0)
                    + i32_const(0)
                    + b"\xfc\x0b\x00"
                    + i32_const(0)
                    + b"\xfe\x00\x02\x00"
                    + b"\x1a"
                )
            ),
        )
        proposals = get_stats(wasm).instr.proposals
        assert proposals.bulk == 2
        assert proposals.atomics == 2


class TestExternals:
    def test_exported_mutable_i64_global(self):
        wasm = module(
            global_section(global_entry(I64, True, i64_const(0))),
            export_section(export("g", ExternalKind.GLOBAL, 0)),
        )
        proposals = get_stats(wasm).instr.proposals
        assert proposals.mutable_externals == 1
        assert proposals.bigint_externals == 1

    def test_imported_globals_are_external(self):
        wasm = module(
            import_section(
                global_import("env", "g0", I32, True),
                global_import("env", "g1", I64, False),
            ),
        )
        stats = get_stats(wasm)
        assert stats.imports.globals == 2
        assert stats.instr.proposals.mutable_externals == 1
        assert stats.instr.proposals.bigint_externals == 1

    def test_export_index_spans_imports(self):
        wasm = module(
            type_section(functype(), functype([I64], [])),
            import_section(func_import("env", "f", 0)),
            function_section(1),
            export_section(export("g", ExternalKind.FUNC, 1)),
            code_section(func_body(b"")),
        )
        assert get_stats(wasm).instr.proposals.bigint_externals == 1

    def test_unexported_i64_function_not_counted(self):
        wasm = module(
            type_section(functype([I64], [I64])),
            function_section(0),
            code_section(func_body(b"\x20\x00")),
        )
        assert get_stats(wasm).instr.proposals.bigint_externals == 0

    def test_memory_import_and_export_tallied(self):
        wasm = module(
            import_section(memory_import("env", "memory")),
            export_section(export("memory", ExternalKind.MEMORY, 0)),
        )
        stats = get_stats(wasm)
        assert stats.imports.memories == 1
        assert stats.exports.memories == 1
        assert stats.instr.proposals.bigint_externals == 0

    def test_export_out_of_bounds(self):
        wasm = module(export_section(export("f", ExternalKind.FUNC, 0)))
        with pytest.raises(IndexSpaceError):
            get_stats(wasm)

    def test_bad_type_reference(self):
        wasm = module(type_section(functype()), function_section(4))
        with pytest.raises(IndexSpaceError, match="type index 4"):
            get_stats(wasm)

    def test_import_before_type_section(self):
        wasm = module(
            import_section(func_import("go", "debug", 0)),
            type_section(functype([I64], [])),
        )
        stats = get_stats(wasm)
        assert stats.language == Language.GO
        assert stats.instr.proposals.bigint_externals == 1

    def test_function_before_type_section(self):
        wasm = module(
            function_section(0),
            export_section(export("f", ExternalKind.FUNC, 0)),
            type_section(functype([], [I64])),
        )
        assert get_stats(wasm).instr.proposals.bigint_externals == 1


class TestLanguage:
    def test_inferred_from_imports(self):
        wasm = module(
            type_section(functype()),
            import_section(func_import("a", "a"), func_import("a", "b")),
        )
        assert get_stats(wasm).language == Language.LIKELY_EMSCRIPTEN

    def test_inferred_from_exports(self):
        wasm = module(
            type_section(functype()),
            function_section(0),
            export_section(export("__wbindgen_malloc", ExternalKind.FUNC, 0)),
            code_section(func_body(b"")),
        )
        assert get_stats(wasm).language == Language.RUST


class TestInstructions:
    def test_categories_sum_to_total(self):
        code = (
            b"\x02\x40"  # block
            + i32_const(1)
            + b"\x0d\x00"  # br_if 0
            + b"\x10\x00"  # call 0
            + b"\x0b"  # end
            + b"\x41\x00\x28\x02\x00\x1a"  # i32.load, drop
        )
        stats = get_stats(single_func_module(code))
        categories = stats.instr.categories.model_dump()
        assert stats.instr.total == 9
        assert sum(categories.values()) == stats.instr.total

    def test_tail_call_double_counts(self):
        stats = get_stats(single_func_module(b"\x12\x00"))
        assert stats.instr.total == 2
        assert stats.instr.categories.control_flow == 2
        assert stats.instr.categories.direct_calls == 1
        assert stats.instr.proposals.tail_calls == 1

    def test_counts_across_bodies(self):
        wasm = module(
            type_section(functype()),
            function_section(0, 0),
            code_section(func_body(b"\x01"), func_body(b"\x01\x01")),
        )
        stats = get_stats(wasm)
        assert stats.funcs == 2
        assert stats.instr.total == 5

    def test_repeated_code_sections_accumulate_funcs(self):
        wasm = module(
            type_section(functype()),
            function_section(0, 0),
            code_section(func_body(b"\x01")),
            code_section(func_body(b"\x01")),
        )
        stats = get_stats(wasm)
        assert stats.funcs == 2
        assert stats.instr.total == 4
        assert stats.size.code == 1 + 5


class TestFailures:
    def test_malformed_body_aborts(self):
        with pytest.raises(DecodeError):
            get_stats(single_func_module(b"\xff"))

    def test_malformed_section_aborts(self):
        with pytest.raises(DecodeError):
            get_stats(module(data_section(b"\x05")))


class TestCollectStats:
    def test_matches_get_stats(self):
        wasm = single_func_module(i32_const(3) + b"\x1a")
        direct = collect_stats(decode_module(wasm), len(wasm))
        assert direct == get_stats(wasm)

    def test_json_field_names(self):
        stats = get_stats(single_func_module(b""))
        payload = json.loads(stats.model_dump_json())
        assert set(payload) == {
            "funcs",
            "language",
            "instr",
            "size",
            "imports",
            "exports",
            "custom_sections",
            "has_start",
        }
        assert set(payload["instr"]) == {"total", "proposals", "categories"}
        assert payload["language"] == "Unknown"
        assert set(payload["imports"]) == {"funcs", "memories", "globals", "tables"}
