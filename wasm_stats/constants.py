"""Named WebAssembly constants: encodings, flag bits and toolchain fingerprints."""

from __future__ import annotations

WASM_MAGIC = b"\x00asm"
WASM_VERSION = 1

# Binary encodings of value types
VALTYPE_I32 = 0x7F
VALTYPE_I64 = 0x7E
VALTYPE_F32 = 0x7D
VALTYPE_F64 = 0x7C
VALTYPE_V128 = 0x7B
VALTYPE_FUNCREF = 0x70
VALTYPE_EXTERNREF = 0x6F

FUNC_TYPE_FORM = 0x60
EMPTY_BLOCK_TYPE = 0x40

# Instruction prefixes
PREFIX_MISC = 0xFC
PREFIX_SIMD = 0xFD
PREFIX_ATOMIC = 0xFE

# Limits flag bits (threads + memory64)
LIMITS_HAS_MAX = 0x01
LIMITS_SHARED = 0x02
LIMITS_MEMORY64 = 0x04

# memarg alignment bit signalling an explicit memory index (multi-memory)
MEMARG_HAS_MEMIDX = 0x40

# Provenance fingerprints
BLAZOR_MARKER = "blazor"
EMSCRIPTEN_MARKER = "emscripten"
GO_IMPORT_MODULE = "go"
WASM_BINDGEN_MARKERS: tuple[str, ...] = ("wbindgen", "wbg")
WASM_BINDGEN_MODULES: frozenset[str] = frozenset({"wbg", "wbindgen"})
WASM_BINDGEN_EXPORT_MARKER = "wbindgen"
MINIFIED_EMSCRIPTEN_MODULES: tuple[str, ...] = ("a", "env")
MINIFIED_EMSCRIPTEN_NAMES: tuple[str, ...] = ("a", "b")

DEFAULT_JSON_INDENT: int | None = None
