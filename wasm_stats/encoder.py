"""Re-encoded section sizes, measured with a counting sink."""

from __future__ import annotations

from .decoder import Section


class WrittenSize:
    """Write-only sink that tallies bytes and discards them."""

    def __init__(self):
        self._size = 0

    def write(self, data: bytes) -> int:
        self._size += len(data)
        return len(data)

    @property
    def size(self) -> int:
        return self._size


def encode_u32(value: int) -> bytes:
    """Minimal unsigned LEB128 encoding of *value*."""
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def encode_section_body(section: Section, sink) -> None:
    """Write *section* as a length-prefixed blob, without its section ID byte."""
    sink.write(encode_u32(len(section.payload)))
    sink.write(section.payload)


def calc_size(section: Section) -> int:
    """Return the number of bytes *section* occupies when re-encoded."""
    written = WrittenSize()
    encode_section_body(section, written)
    return written.size
