"""Tests for the function/global index spaces and the external audit."""

import pytest

from wasm_stats.index_space import IndexSpace, IndexSpaceError, IndexSpaces
from wasm_stats.reader import DecodeError
from wasm_stats.wasm_types import Export, ExternalKind, FuncType, GlobalType, ValueType

I64_TO_I64 = FuncType((ValueType.I64,), (ValueType.I64,))
I32_TO_I32 = FuncType((ValueType.I32,), (ValueType.I32,))
VOID = FuncType()


class TestIndexSpace:
    def test_imports_are_external(self):
        space = IndexSpace("global")
        space.declare_imported("a")
        space.declare_local("b")
        assert space.externals() == ["a"]
        assert len(space) == 2

    def test_mark_external(self):
        space = IndexSpace("function")
        space.declare_local("a")
        space.declare_local("b")
        space.mark_external(1)
        assert space.externals() == ["b"]

    def test_mark_external_twice_is_idempotent(self):
        space = IndexSpace("function")
        space.declare_local("a")
        space.mark_external(0)
        space.mark_external(0)
        assert space.externals() == ["a"]

    def test_out_of_bounds(self):
        space = IndexSpace("function")
        space.declare_local("a")
        with pytest.raises(IndexSpaceError, match="function index 1 out of bounds"):
            space.mark_external(1)

    def test_error_is_a_decode_error(self):
        assert issubclass(IndexSpaceError, DecodeError)


class TestIndexSpaces:
    def test_imports_come_before_locals(self):
        spaces = IndexSpaces([VOID, I64_TO_I64])
        spaces.import_func(1)
        spaces.declare_func(0)
        assert [e.value for e in spaces.funcs.entries] == [1, 0]

    def test_unknown_type_index_fails_at_audit(self):
        spaces = IndexSpaces([VOID])
        spaces.declare_func(3)
        with pytest.raises(IndexSpaceError, match="type index 3"):
            spaces.audit()

    def test_types_added_after_functions(self):
        spaces = IndexSpaces()
        spaces.import_func(0)
        spaces.add_types([I64_TO_I64])
        assert spaces.audit().bigint_externals == 1

    def test_memory_and_table_exports_ignored(self):
        spaces = IndexSpaces()
        spaces.mark_exported(Export("mem", ExternalKind.MEMORY, 9))
        spaces.mark_exported(Export("tbl", ExternalKind.TABLE, 9))
        assert spaces.audit().bigint_externals == 0

    def test_global_export_out_of_bounds(self):
        spaces = IndexSpaces()
        with pytest.raises(IndexSpaceError):
            spaces.mark_exported(Export("g", ExternalKind.GLOBAL, 0))


class TestAudit:
    def test_mutable_i64_global_export_counts_both(self):
        spaces = IndexSpaces()
        spaces.declare_global(GlobalType(ValueType.I64, mutable=True))
        spaces.mark_exported(Export("g", ExternalKind.GLOBAL, 0))
        audit = spaces.audit()
        assert audit.mutable_externals == 1
        assert audit.bigint_externals == 1

    def test_internal_globals_not_counted(self):
        spaces = IndexSpaces()
        spaces.declare_global(GlobalType(ValueType.I64, mutable=True))
        audit = spaces.audit()
        assert audit.mutable_externals == 0
        assert audit.bigint_externals == 0

    def test_imported_immutable_i32_global(self):
        spaces = IndexSpaces()
        spaces.import_global(GlobalType(ValueType.I32))
        audit = spaces.audit()
        assert audit.mutable_externals == 0
        assert audit.bigint_externals == 0

    def test_function_with_i64_counts_once(self):
        spaces = IndexSpaces([I64_TO_I64])
        spaces.declare_func(0)
        spaces.mark_exported(Export("f", ExternalKind.FUNC, 0))
        assert spaces.audit().bigint_externals == 1

    def test_imported_i64_function(self):
        spaces = IndexSpaces([I32_TO_I32, FuncType((), (ValueType.I64,))])
        spaces.import_func(1)
        spaces.import_func(0)
        assert spaces.audit().bigint_externals == 1

    def test_i32_function_not_bigint(self):
        spaces = IndexSpaces([I32_TO_I32])
        spaces.declare_func(0)
        spaces.mark_exported(Export("f", ExternalKind.FUNC, 0))
        assert spaces.audit().bigint_externals == 0
