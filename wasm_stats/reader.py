"""Cursor-based reader for the WebAssembly binary encoding."""

from __future__ import annotations

import struct
from typing import Callable, TypeVar

T = TypeVar("T")


class DecodeError(Exception):
    """Raised when a buffer is not a well-formed WebAssembly encoding."""

    def __init__(self, message: str, offset: int | None = None):
        self.offset = offset
        if offset is not None:
            message = f"{message} (at offset 0x{offset:x})"
        super().__init__(message)


class ByteReader:
    """Reads LEB128 integers, floats, names and vectors from a byte buffer.

    ``base`` is the absolute file offset of ``data[0]`` so that error
    messages point into the original module even when reading a section
    payload or a function body slice.
    """

    def __init__(self, data: bytes, base: int = 0):
        self._data = data
        self._pos = 0
        self._base = base

    @property
    def offset(self) -> int:
        return self._base + self._pos

    def eof(self) -> bool:
        return self._pos >= len(self._data)

    def expect_end(self, what: str) -> None:
        if not self.eof():
            raise DecodeError(
                f"{len(self._data) - self._pos} trailing bytes after {what}",
                self.offset,
            )

    def read_byte(self) -> int:
        if self._pos >= len(self._data):
            raise DecodeError("unexpected end of input", self.offset)
        b = self._data[self._pos]
        self._pos += 1
        return b

    def peek_byte(self) -> int:
        if self._pos >= len(self._data):
            raise DecodeError("unexpected end of input", self.offset)
        return self._data[self._pos]

    def read_bytes(self, n: int) -> bytes:
        end = self._pos + n
        if end > len(self._data):
            raise DecodeError(
                f"need {n} bytes, only {len(self._data) - self._pos} left", self.offset
            )
        chunk = self._data[self._pos : end]
        self._pos = end
        return chunk

    def read_rest(self) -> bytes:
        return self.read_bytes(len(self._data) - self._pos)

    def _read_leb(self, max_bits: int, signed: bool) -> int:
        start = self.offset
        result = 0
        shift = 0
        max_bytes = (max_bits + 6) // 7
        for _ in range(max_bytes):
            byte = self.read_byte()
            result |= (byte & 0x7F) << shift
            shift += 7
            if not byte & 0x80:
                if signed and byte & 0x40:
                    result |= ~0 << shift
                return result
        raise DecodeError(f"LEB128 integer exceeds {max_bits} bits", start)

    def read_u32(self) -> int:
        start = self.offset
        value = self._read_leb(32, signed=False)
        if value >= 1 << 32:
            raise DecodeError("u32 out of range", start)
        return value

    def read_u64(self) -> int:
        start = self.offset
        value = self._read_leb(64, signed=False)
        if value >= 1 << 64:
            raise DecodeError("u64 out of range", start)
        return value

    def read_s32(self) -> int:
        return self._read_leb(32, signed=True)

    def read_s33(self) -> int:
        return self._read_leb(33, signed=True)

    def read_s64(self) -> int:
        return self._read_leb(64, signed=True)

    def read_f32(self) -> float:
        return struct.unpack("<f", self.read_bytes(4))[0]

    def read_f64(self) -> float:
        return struct.unpack("<d", self.read_bytes(8))[0]

    def read_name(self) -> str:
        start = self.offset
        raw = self.read_bytes(self.read_u32())
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError(f"invalid UTF-8 name: {exc.reason}", start) from exc

    def read_vec(self, read_item: Callable[[ByteReader], T]) -> list[T]:
        return [read_item(self) for _ in range(self.read_u32())]

    def read_sized(self) -> tuple[bytes, int]:
        """Read a u32 length and that many bytes; return them with their offset."""
        size = self.read_u32()
        start = self.offset
        return self.read_bytes(size), start
