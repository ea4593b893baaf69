"""Binary wire format for persisted Bloom filters.

Layout (little-endian):
    [version (1B)] [packed_len (8B)] [packed bits] [size (8B)] [num_hash (8B)] [crc32 (4B)]

Bits are packed LSB first, one bit per slot, zero padded to a byte boundary.
The CRC32 covers every byte before it. Hash-function state is never stored:
the family is rebuilt from num_hash on load.
"""

from __future__ import annotations

import io
import logging
import struct
import zlib
from typing import BinaryIO

from ..core.errors import FilterDecodeError
from ..core.types import FilterState

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1

_VERSION = struct.Struct("<B")
_LENGTH = struct.Struct("<Q")
_TRAILER = struct.Struct("<QQ")
_CRC = struct.Struct("<I")
_READ_CHUNK = 1 << 20


def packed_length(size: int) -> int:
    """Number of bytes needed to hold `size` bits."""
    return (size + 7) // 8


def padding_is_clear(bits: bytes, size: int) -> bool:
    """True if no bit at or beyond `size` is set in the last byte."""
    spare = len(bits) * 8 - size
    return not (spare and bits[-1] >> (8 - spare))


def encode_state(state: FilterState) -> bytes:
    """Encode a filter state into the persisted byte layout."""
    bits = bytes(state.bits)
    if len(bits) != packed_length(state.size):
        raise ValueError(
            f"Packed bits hold {len(bits)} bytes, expected {packed_length(state.size)} for size {state.size}"
        )
    payload = _VERSION.pack(FORMAT_VERSION)
    payload += _LENGTH.pack(len(bits))
    payload += bits
    payload += _TRAILER.pack(state.size, state.num_hash_funcs)
    return payload + _CRC.pack(zlib.crc32(payload))


def _read_exact(stream: BinaryIO, n: int, what: str) -> bytes:
    # Bounded chunks: a corrupted length must not allocate up front
    chunks = []
    remaining = n
    while remaining > 0:
        chunk = stream.read(min(remaining, _READ_CHUNK))
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    if remaining > 0:
        raise FilterDecodeError(
            f"Truncated filter data: expected {n} bytes of {what}, got {n - remaining}"
        )
    return b"".join(chunks)


def read_state(stream: BinaryIO) -> FilterState:
    """Read exactly one encoded filter from a binary stream.

    Raises:
        FilterDecodeError: If the record is truncated, corrupted or inconsistent
    """
    version_bytes = _read_exact(stream, _VERSION.size, "version")
    (version,) = _VERSION.unpack(version_bytes)
    if version != FORMAT_VERSION:
        raise FilterDecodeError(f"Unsupported bloom filter version: {version}")

    length_bytes = _read_exact(stream, _LENGTH.size, "bit array length")
    (bits_len,) = _LENGTH.unpack(length_bytes)
    bits = _read_exact(stream, bits_len, "bit array")

    trailer = _read_exact(stream, _TRAILER.size, "size and hash count")
    size, num_hash = _TRAILER.unpack(trailer)

    (stored_crc,) = _CRC.unpack(_read_exact(stream, _CRC.size, "checksum"))
    computed_crc = zlib.crc32(version_bytes + length_bytes + bits + trailer)
    if stored_crc != computed_crc:
        raise FilterDecodeError(f"CRC mismatch: expected {computed_crc:x}, got {stored_crc:x}")

    if size == 0:
        raise FilterDecodeError("Filter size must be positive")
    if num_hash == 0:
        raise FilterDecodeError("Hash function count must be positive")
    if bits_len != packed_length(size):
        raise FilterDecodeError(
            f"Bit array length {bits_len} does not match size {size} (expected {packed_length(size)})"
        )
    if not padding_is_clear(bits, size):
        raise FilterDecodeError("Padding bits beyond filter size are set")

    logger.debug(f"Decoded filter record: size={size}, num_hash={num_hash}")
    return FilterState(bits, size, num_hash)


def decode_state(data: bytes) -> FilterState:
    """Decode a complete encoded filter; trailing bytes are an error."""
    stream = io.BytesIO(data)
    state = read_state(stream)
    extra = len(data) - stream.tell()
    if extra:
        raise FilterDecodeError(f"Unexpected {extra} trailing bytes after filter data")
    return state
