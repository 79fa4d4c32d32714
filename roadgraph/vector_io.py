"""Binary file formats for string lists and bit vectors."""

from __future__ import annotations

import os
import struct
from collections.abc import Iterable
from pathlib import Path

from roadgraph.bit_vector import BitVector

PathLike = str | os.PathLike


def save_string_vector(file_name: PathLike, values: Iterable[str]) -> None:
    """Write strings as UTF-8, each terminated by a zero byte."""
    chunks = []
    for s in values:
        if "\0" in s:
            raise ValueError("strings must not contain a zero character")
        chunks.append(s.encode("utf-8") + b"\0")
    with open(file_name, "wb") as out:
        out.write(b"".join(chunks))


def load_string_vector(file_name: PathLike) -> list[str]:
    """Read zero-terminated strings; trailing unterminated bytes are ignored."""
    data = Path(file_name).read_bytes()
    return [part.decode("utf-8") for part in data.split(b"\0")[:-1]]


def save_bit_vector(file_name: PathLike, vec: BitVector) -> None:
    """Write an 8-byte size header followed by the bits in 512-bit blocks."""
    words = vec.to_words()
    payload = struct.pack("<Q", len(vec)) + struct.pack(f"<{len(words)}Q", *words)
    try:
        out = open(file_name, "wb")
    except OSError as err:
        raise OSError(f'Can not open "{file_name}" for writing.') from err
    with out:
        out.write(payload)


def load_bit_vector(file_name: PathLike) -> BitVector:
    """Read a bit vector written by save_bit_vector."""
    try:
        data = Path(file_name).read_bytes()
    except OSError as err:
        raise OSError(f'Can not open "{file_name}" for reading.') from err
    if len(data) < 8:
        raise ValueError(f'File "{file_name}" is too short to hold a bit vector header.')
    (size,) = struct.unpack_from("<Q", data, 0)
    block_bytes = ((size + 511) // 512) * 64
    if block_bytes + 8 != len(data):
        raise ValueError(
            f'File "{file_name}" can not be a bit vector of the requested size because '
            "the size in the header and the file size do not correspond."
        )
    words = struct.unpack_from(f"<{block_bytes // 8}Q", data, 8)
    return BitVector.from_words(size, words)