"""Tests for the composable API functions in wasm_stats.api."""

import json

import pytest

from wasm_stats import (
    DecodeError,
    Language,
    Stats,
    dump_stats,
    get_stats,
    stats_from_file,
)
from wasm_stats.api import analyze_timed
from tests.unit.conftest import (
    func_import,
    import_section,
    module,
    single_func_module,
    functype,
    type_section,
)

GO_MODULE = module(type_section(functype()), import_section(func_import("go", "debug")))


class TestStatsFromFile:
    def test_reads_and_analyzes(self, tmp_path):
        path = tmp_path / "go.wasm"
        path.write_bytes(GO_MODULE)
        stats = stats_from_file(path)
        assert isinstance(stats, Stats)
        assert stats.language == Language.GO
        assert stats.size.total == len(GO_MODULE)

    def test_accepts_str_path(self, tmp_path):
        path = tmp_path / "go.wasm"
        path.write_bytes(GO_MODULE)
        assert stats_from_file(str(path)).imports.funcs == 1

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            stats_from_file(tmp_path / "absent.wasm")


class TestDumpStats:
    def test_returns_json_object(self):
        payload = json.loads(dump_stats(GO_MODULE))
        assert payload["language"] == "Go"
        assert payload["imports"]["funcs"] == 1

    def test_compact_by_default(self):
        assert "\n" not in dump_stats(GO_MODULE)

    def test_indent(self):
        text = dump_stats(GO_MODULE, indent=2)
        assert text.startswith("{\n  ")

    def test_negative_indent(self):
        with pytest.raises(ValueError, match="indent"):
            dump_stats(GO_MODULE, indent=-1)

    def test_decode_error_propagates(self):
        with pytest.raises(DecodeError):
            dump_stats(b"not wasm")


class TestAnalyzeTimed:
    def test_same_stats_as_get_stats(self):
        wasm = single_func_module(b"\x01")
        stats, timings = analyze_timed(wasm)
        assert stats == get_stats(wasm)
        assert timings.input_bytes == len(wasm)
        assert timings.sections == 3
        assert timings.total_time >= timings.decode_time

    def test_report(self):
        _, timings = analyze_timed(single_func_module(b""))
        report = timings.report()
        assert "Decode" in report
        assert "Analyze" in report
        assert "Total" in report
