"""Tests for the wasm-stats command-line entry point."""

import json

from wasm_stats.cli import build_parser, main
from tests.unit.conftest import custom_section, module, single_func_module


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args(["m.wasm"])
        assert args.file == "m.wasm"
        assert args.indent is None
        assert not args.verbose
        assert not args.timing

    def test_flags(self):
        args = build_parser().parse_args(["m.wasm", "--indent", "4", "-v", "-t"])
        assert args.indent == 4
        assert args.verbose
        assert args.timing


class TestMain:
    def test_prints_json(self, tmp_path, capsys):
        path = tmp_path / "m.wasm"
        path.write_bytes(module(custom_section("name")))
        assert main([str(path)]) == 0
        out = capsys.readouterr().out
        assert out.endswith("\n")
        assert json.loads(out)["custom_sections"] == ["name"]

    def test_indent(self, tmp_path, capsys):
        path = tmp_path / "m.wasm"
        path.write_bytes(single_func_module(b""))
        assert main([str(path), "--indent", "2"]) == 0
        assert capsys.readouterr().out.startswith("{\n  ")

    def test_timing_goes_to_stderr(self, tmp_path, capsys):
        path = tmp_path / "m.wasm"
        path.write_bytes(single_func_module(b""))
        assert main([str(path), "--timing"]) == 0
        captured = capsys.readouterr()
        assert "Analysis Timings" in captured.err
        assert "Analysis Timings" not in captured.out
        json.loads(captured.out)

    def test_decode_error_exits_1(self, tmp_path, capsys):
        path = tmp_path / "bad.wasm"
        path.write_bytes(b"\x00asm\x02\x00\x00\x00")
        assert main([str(path)]) == 1
        assert capsys.readouterr().out == ""

    def test_missing_file_exits_1(self, tmp_path, capsys):
        assert main([str(tmp_path / "absent.wasm")]) == 1
        assert capsys.readouterr().out == ""
