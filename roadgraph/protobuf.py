"""Low-level decoding of protobuf wire-format messages."""

from __future__ import annotations

import struct
from collections.abc import Callable, Iterator
from typing import Any, Union

_UINT64_MASK = (1 << 64) - 1
_HIGH_BIT = 0x80

Buffer = Union[bytes, bytearray, memoryview]


class ProtobufError(ValueError):
    """Raised when a message is corrupt or uses an unsupported wire type."""


def decode_varint(data: Buffer, pos: int = 0) -> tuple[int, int]:
    """Decode an unsigned varint at pos; return (value, position after it)."""
    end = len(data)
    if pos >= end:
        raise ProtobufError(
            "Protobuf message is corrupt because varint was expected at the end of the message."
        )
    n = 0
    shift = 0
    while data[pos] & _HIGH_BIT:
        if shift == 63 and data[pos] != (1 | _HIGH_BIT):
            raise ProtobufError("Cannot decode varint because the value does not fit into 64 bit.")
        n |= (data[pos] & 0x7F) << shift
        shift += 7
        pos += 1
        if pos == end:
            raise ProtobufError(
                "Protobuf message is corrupt because varint was not terminated "
                "before the end of the message."
            )
    n |= (data[pos] & 0x7F) << shift
    return n & _UINT64_MASK, pos + 1


def zigzag_decode(x: int) -> int:
    """Map a zigzag-encoded unsigned value back to a signed one."""
    if x & 1:
        return -(x >> 1) - 1
    return x >> 1


def iter_protobuf_fields(data: Buffer) -> Iterator[tuple[int, int, Any]]:
    """Yield (field_id, wire_type, value) for every field of a message.

    Varints give ints, 64- and 32-bit fields give floats, and
    length-delimited fields give bytes.
    """
    end = len(data)
    pos = 0
    while pos != end:
        header, pos = decode_varint(data, pos)
        field_id = header >> 3
        wire_type = header & 0x7
        if wire_type == 0:
            value, pos = decode_varint(data, pos)
        elif wire_type == 1:
            if end - pos < 8:
                raise ProtobufError(
                    "Protobuf message is corrupt, the end of message was reached "
                    "while parsing a 64-bit floating point."
                )
            (value,) = struct.unpack_from("<d", data, pos)
            pos += 8
        elif wire_type == 5:
            if end - pos < 4:
                raise ProtobufError(
                    "Protobuf message is corrupt, the end of message was reached "
                    "while parsing a 32-bit floating point."
                )
            (value,) = struct.unpack_from("<f", data, pos)
            pos += 4
        elif wire_type == 2:
            length, pos = decode_varint(data, pos)
            if end - pos < length:
                raise ProtobufError(
                    "Protobuf message is corrupt, the end of message was reached "
                    "while parsing a string or embedded message."
                )
            value = bytes(data[pos:pos + length])
            pos += length
        else:
            raise ProtobufError(f"Protobuf message contains unknown wire type {wire_type}.")
        yield field_id, wire_type, value


def decode_protobuf_message(
    data: Buffer,
    on_varint: Callable[[int, int], Any],
    on_double: Callable[[int, float], Any],
    on_string: Callable[[int, bytes], Any],
) -> None:
    """Walk a message and hand each field to the callback for its kind."""
    for field_id, wire_type, value in iter_protobuf_fields(data):
        if wire_type == 0:
            on_varint(field_id, value)
        elif wire_type == 2:
            on_string(field_id, value)
        else:
            on_double(field_id, value)