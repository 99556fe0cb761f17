"""Reading and writing of the primitive wire types used by the game protocol.

Readers take an iterator of byte values (for example ``iter(b"...")``) and
consume exactly the bytes that make up one value. Writers return ``bytes``.
"""

from __future__ import annotations

import struct
import uuid
from collections.abc import Callable, Iterator
from itertools import islice
from typing import TypeVar

T = TypeVar("T")

_SEGMENT_BITS = 0x7F
_CONTINUE_BIT = 0x80


class ProtocolError(Exception):
    """Base class for malformed protocol data."""


class IterEndError(ProtocolError):
    """The input ended before a complete value was read."""

    def __init__(self, message: str = "unexpected end of input") -> None:
        super().__init__(message)


class VarIntError(ProtocolError):
    """A VarInt ran past its five-byte limit."""

    def __init__(self, message: str = "VarInt is too big") -> None:
        super().__init__(message)


class VarLongError(ProtocolError):
    """A VarLong ran past its ten-byte limit."""

    def __init__(self, message: str = "VarLong is too big") -> None:
        super().__init__(message)


class NotBooleanError(ProtocolError):
    """A boolean byte was neither 0 nor 1."""

    def __init__(self, message: str = "byte is not a boolean") -> None:
        super().__init__(message)


def _take(it: Iterator[int], count: int) -> bytes:
    if count < 0:
        raise IterEndError(f"invalid length {count}")
    raw = bytes(islice(it, count))
    if len(raw) < count:
        raise IterEndError()
    return raw


def _next(it: Iterator[int]) -> int:
    try:
        return next(it)
    except StopIteration:
        raise IterEndError() from None


def _to_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _read_var(it: Iterator[int], max_bytes: int, bits: int, error: type[ProtocolError]) -> int:
    result = 0
    for shift in range(0, 7 * (max_bytes - 1), 7):
        byte = _next(it)
        result |= (byte & _SEGMENT_BITS) << shift
        if not byte & _CONTINUE_BIT:
            return _to_signed(result, bits)
    byte = _next(it)
    if byte & _CONTINUE_BIT:
        raise error()
    result |= (byte & _SEGMENT_BITS) << (7 * (max_bytes - 1))
    return _to_signed(result, bits)


def _write_var(value: int) -> bytes:
    out = bytearray()
    while value & ~_SEGMENT_BITS:
        out.append((value & _SEGMENT_BITS) | _CONTINUE_BIT)
        value >>= 7
    out.append(value)
    return bytes(out)


def _check_range(value: int, low: int, high: int, name: str) -> None:
    if not low <= value <= high:
        raise ValueError(f"{value} does not fit in a {name}")


def read_varint(it: Iterator[int]) -> int:
    """Read a signed 32-bit VarInt."""
    return _read_var(it, 5, 32, VarIntError)


def write_varint(value: int) -> bytes:
    """Encode a signed 32-bit integer as a VarInt."""
    _check_range(value, -(2**31), 2**31 - 1, "VarInt")
    return _write_var(value & 0xFFFFFFFF)


def read_varlong(it: Iterator[int]) -> int:
    """Read a signed 64-bit VarLong."""
    return _read_var(it, 10, 64, VarLongError)


def write_varlong(value: int) -> bytes:
    """Encode a signed 64-bit integer as a VarLong."""
    _check_range(value, -(2**63), 2**63 - 1, "VarLong")
    return _write_var(value & 0xFFFFFFFFFFFFFFFF)


def write_varushort(value: int) -> bytes:
    """Encode an unsigned 16-bit integer with VarInt-style continuation bits."""
    _check_range(value, 0, 0xFFFF, "VarUShort")
    return _write_var(value)


def read_string(it: Iterator[int]) -> str:
    """Read a VarInt-length-prefixed UTF-8 string."""
    raw = _take(it, read_varint(it))
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ProtocolError(f"invalid UTF-8 string: {exc}") from exc


def write_string(value: str) -> bytes:
    """Encode a string as UTF-8 prefixed by its byte length."""
    raw = value.encode("utf-8")
    return write_varint(len(raw)) + raw


def read_float(it: Iterator[int]) -> float:
    """Read a big-endian 32-bit float."""
    return struct.unpack(">f", _take(it, 4))[0]


def write_float(value: float) -> bytes:
    """Encode a big-endian 32-bit float."""
    return struct.pack(">f", value)


def read_double(it: Iterator[int]) -> float:
    """Read a big-endian 64-bit float."""
    return struct.unpack(">d", _take(it, 8))[0]


def write_double(value: float) -> bytes:
    """Encode a big-endian 64-bit float."""
    return struct.pack(">d", value)


def read_bool(it: Iterator[int]) -> bool:
    """Read a boolean byte, which must be 0 or 1."""
    byte = _next(it)
    if byte == 0:
        return False
    if byte == 1:
        return True
    raise NotBooleanError()


def write_bool(value: bool) -> bytes:
    """Encode a boolean as a single byte."""
    return b"\x01" if value else b"\x00"


def read_ubyte(it: Iterator[int]) -> int:
    """Read an unsigned byte."""
    return _next(it)


def write_ubyte(value: int) -> bytes:
    """Encode an unsigned byte."""
    return value.to_bytes(1, "big", signed=False)


def read_byte(it: Iterator[int]) -> int:
    """Read a signed byte."""
    return _to_signed(_next(it), 8)


def write_byte(value: int) -> bytes:
    """Encode a signed byte."""
    return value.to_bytes(1, "big", signed=True)


def read_ushort(it: Iterator[int]) -> int:
    """Read a big-endian unsigned 16-bit integer."""
    return int.from_bytes(_take(it, 2), "big", signed=False)


def write_ushort(value: int) -> bytes:
    """Encode a big-endian unsigned 16-bit integer."""
    return value.to_bytes(2, "big", signed=False)


def read_short(it: Iterator[int]) -> int:
    """Read a big-endian signed 16-bit integer."""
    return int.from_bytes(_take(it, 2), "big", signed=True)


def write_short(value: int) -> bytes:
    """Encode a big-endian signed 16-bit integer."""
    return value.to_bytes(2, "big", signed=True)


def write_int(value: int) -> bytes:
    """Encode a big-endian signed 32-bit integer."""
    return value.to_bytes(4, "big", signed=True)


def read_long(it: Iterator[int]) -> int:
    """Read a big-endian signed 64-bit integer."""
    return int.from_bytes(_take(it, 8), "big", signed=True)


def write_long(value: int) -> bytes:
    """Encode a big-endian signed 64-bit integer."""
    return value.to_bytes(8, "big", signed=True)


def read_uuid(it: Iterator[int]) -> uuid.UUID:
    """Read a UUID sent as a big-endian 128-bit integer."""
    return uuid.UUID(bytes=_take(it, 16))


def write_uuid(value: uuid.UUID) -> bytes:
    """Encode a UUID as a big-endian 128-bit integer."""
    return value.bytes


def read_prefixed_bytes(it: Iterator[int]) -> bytes:
    """Read a byte array prefixed by its length as a VarInt."""
    return _take(it, read_varint(it))


def write_prefixed_bytes(data: bytes) -> bytes:
    """Encode a byte array prefixed by its length as a VarInt."""
    return write_varint(len(data)) + bytes(data)


def read_inferred_bytes(it: Iterator[int]) -> bytes:
    """Read every remaining byte; such an array always ends the packet."""
    return bytes(it)


def read_nbt(it: Iterator[int]) -> bytes:
    """Read network NBT, restoring the empty root name that the network form omits.

    The data is not validated here; that happens when it is decoded.
    """
    next(it, None)
    return b"\x0a\x00\x00" + bytes(it)


def write_nbt(data: bytes) -> bytes:
    """Strip the root name from NBT so that it can be sent over the network."""
    return b"\x0a" + bytes(data[3:])


def read_option(it: Iterator[int], reader: Callable[[Iterator[int]], T]) -> T | None:
    """Read a presence byte followed, when it is non-zero, by a value."""
    present = _next(it)
    return reader(it) if present else None


def write_option(value: T | None, writer: Callable[[T], bytes]) -> bytes:
    """Encode an optional value as a presence byte and, if present, the value."""
    if value is None:
        return b"\x00"
    return b"\x01" + writer(value)