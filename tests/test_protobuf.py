import struct

import pytest

from roadgraph.protobuf import (
    ProtobufError,
    decode_protobuf_message,
    decode_varint,
    iter_protobuf_fields,
    zigzag_decode,
)


def test_decode_varint_single_byte():
    assert decode_varint(b"\x05", 0) == (5, 1)


def test_decode_varint_multi_byte_documented_example():
    assert decode_varint(b"\x96\x01", 0) == (150, 2)


def test_decode_varint_from_offset():
    value, pos = decode_varint(b"\xff\x96\x01\x07", 1)
    assert (value, pos) == (150, 3)
    assert decode_varint(b"\xff\x96\x01\x07", pos) == (7, 4)


def test_decode_varint_max_uint64():
    data = b"\xff" * 9 + b"\x01"
    assert decode_varint(data, 0) == (2**64 - 1, 10)


def test_decode_varint_overflow():
    with pytest.raises(ProtobufError):
        decode_varint(b"\xff" * 10 + b"\x01", 0)


def test_decode_varint_empty_and_unterminated():
    with pytest.raises(ProtobufError):
        decode_varint(b"", 0)
    with pytest.raises(ProtobufError):
        decode_varint(b"\x80\x80", 0)


def test_zigzag_decode_invariants():
    assert zigzag_decode(0) == 0
    for n in range(50):
        assert zigzag_decode(2 * n) == n
        assert zigzag_decode(2 * n + 1) == -n - 1


def test_iter_fields_all_wire_types():
    data = (
        b"\x08\x96\x01"
        + b"\x12\x03abc"
        + bytes([(3 << 3) | 1]) + struct.pack("<d", 1.5)
        + bytes([(4 << 3) | 5]) + struct.pack("<f", -2.0)
    )
    assert list(iter_protobuf_fields(data)) == [
        (1, 0, 150),
        (2, 2, b"abc"),
        (3, 1, 1.5),
        (4, 5, -2.0),
    ]


def test_decode_message_dispatches_callbacks():
    data = (
        b"\x08\x2a"
        + b"\x12\x02hi"
        + bytes([(3 << 3) | 1]) + struct.pack("<d", 0.25)
    )
    varints, doubles, strings = [], [], []
    decode_protobuf_message(
        data,
        lambda f, v: varints.append((f, v)),
        lambda f, v: doubles.append((f, v)),
        lambda f, v: strings.append((f, v)),
    )
    assert varints == [(1, 0x2A)]
    assert doubles == [(3, 0.25)]
    assert strings == [(2, b"hi")]


def test_empty_message_has_no_fields():
    assert list(iter_protobuf_fields(b"")) == []


@pytest.mark.parametrize(
    "data",
    [
        bytes([(1 << 3) | 1]) + b"\x00" * 7,
        bytes([(1 << 3) | 5]) + b"\x00" * 3,
        b"\x12\x05abc",
        bytes([(1 << 3) | 3]),
        b"\x08",
    ],
)
def test_corrupt_messages_raise(data):
    with pytest.raises(ProtobufError):
        list(iter_protobuf_fields(data))


def test_unknown_wire_type_message():
    with pytest.raises(ProtobufError, match="unknown wire type 4"):
        list(iter_protobuf_fields(bytes([(1 << 3) | 4])))