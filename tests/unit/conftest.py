"""Byte builders for assembling small WebAssembly modules inside tests."""

from wasm_stats import constants
from wasm_stats.wasm_types import ExternalKind, SectionId

I32 = bytes([constants.VALTYPE_I32])
I64 = bytes([constants.VALTYPE_I64])
F32 = bytes([constants.VALTYPE_F32])
F64 = bytes([constants.VALTYPE_F64])

HEADER = constants.WASM_MAGIC + constants.WASM_VERSION.to_bytes(4, "little")

END = b"\x0b"


def uleb(value: int) -> bytes:
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def sleb(value: int) -> bytes:
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        done = (value == 0 and not byte & 0x40) or (value == -1 and byte & 0x40)
        out.append(byte if done else byte | 0x80)
        if done:
            return bytes(out)


def vec(items: list[bytes]) -> bytes:
    return uleb(len(items)) + b"".join(items)


def name(text: str) -> bytes:
    raw = text.encode("utf-8")
    return uleb(len(raw)) + raw


def section(section_id: SectionId, payload: bytes) -> bytes:
    return bytes([section_id]) + uleb(len(payload)) + payload


def module(*sections: bytes) -> bytes:
    return HEADER + b"".join(sections)


def functype(params: list[bytes] = (), results: list[bytes] = ()) -> bytes:
    return bytes([constants.FUNC_TYPE_FORM]) + vec(list(params)) + vec(list(results))


def type_section(*types: bytes) -> bytes:
    return section(SectionId.TYPE, vec(list(types)))


def func_import(module_name: str, field: str, type_index: int = 0) -> bytes:
    return (
        name(module_name) + name(field) + bytes([ExternalKind.FUNC]) + uleb(type_index)
    )


def global_import(module_name: str, field: str, valtype: bytes, mutable: bool) -> bytes:
    return (
        name(module_name)
        + name(field)
        + bytes([ExternalKind.GLOBAL])
        + valtype
        + bytes([int(mutable)])
    )


def memory_import(module_name: str, field: str, minimum: int = 1) -> bytes:
    kind_and_flags = bytes([ExternalKind.MEMORY, 0])
    return name(module_name) + name(field) + kind_and_flags + uleb(minimum)


def import_section(*imports: bytes) -> bytes:
    return section(SectionId.IMPORT, vec(list(imports)))


def function_section(*type_indices: int) -> bytes:
    return section(SectionId.FUNCTION, vec([uleb(i) for i in type_indices]))


def memory_section(*memories: bytes) -> bytes:
    return section(SectionId.MEMORY, vec(list(memories)))


def memory(minimum: int = 1, maximum: int | None = None, shared: bool = False) -> bytes:
    flags = 0
    if maximum is not None:
        flags |= constants.LIMITS_HAS_MAX
    if shared:
        flags |= constants.LIMITS_SHARED
    out = bytes([flags]) + uleb(minimum)
    if maximum is not None:
        out += uleb(maximum)
    return out


def global_entry(valtype: bytes, mutable: bool, init: bytes) -> bytes:
    return valtype + bytes([int(mutable)]) + init + END


def global_section(*globals_: bytes) -> bytes:
    return section(SectionId.GLOBAL, vec(list(globals_)))


def export(field: str, kind: ExternalKind, index: int) -> bytes:
    return name(field) + bytes([kind]) + uleb(index)


def export_section(*exports: bytes) -> bytes:
    return section(SectionId.EXPORT, vec(list(exports)))


def start_section(func_index: int) -> bytes:
    return section(SectionId.START, uleb(func_index))


def func_body(code: bytes, locals_: list[tuple[int, bytes]] = ()) -> bytes:
    """Length-prefixed code entry; *code* must not include the final ``end``."""
    local_groups = vec([uleb(n) + t for n, t in locals_])
    body = local_groups + code + END
    return uleb(len(body)) + body


def code_section(*bodies: bytes) -> bytes:
    return section(SectionId.CODE, vec(list(bodies)))


def data_section(*segments: bytes) -> bytes:
    return section(SectionId.DATA, vec(list(segments)))


def active_data(data: bytes, offset: int = 0) -> bytes:
    return uleb(0) + b"\x41" + sleb(offset) + END + uleb(len(data)) + data


def passive_data(data: bytes) -> bytes:
    return uleb(1) + uleb(len(data)) + data


def data_count_section(count: int) -> bytes:
    return section(SectionId.DATA_COUNT, uleb(count))


def custom_section(section_name: str, data: bytes = b"") -> bytes:
    return section(SectionId.CUSTOM, name(section_name) + data)


def i32_const(value: int) -> bytes:
    return b"\x41" + sleb(value)


def i64_const(value: int) -> bytes:
    return b"\x42" + sleb(value)


def single_func_module(code: bytes, *extra_sections: bytes) -> bytes:
    """A module with one ``() -> ()`` function whose body is *code*."""
    return module(
        type_section(functype()),
        function_section(0),
        *extra_sections,
        code_section(func_body(code)),
    )
