"""GELF chunked framing.

Every chunk is sent as its own datagram:

    magic (2 bytes: 0x1e 0x0f), group id (8 bytes),
    sequence index (1 byte), sequence count (1 byte), data

A receiver collects chunks by group id and reassembles them once all
``count`` pieces have arrived.
"""

from __future__ import annotations

import hashlib
import random
import struct
import time
from dataclasses import dataclass
from typing import List

from ..errors import FramingError


MAGIC = b"\x1e\x0f"
GROUP_ID_SIZE = 8
MAXIMUM_COUNT = 255

_HEADER = struct.Struct("!2s8sBB")
HEADER_SIZE = _HEADER.size


def group_id() -> bytes:
    """Return a fresh 8-byte chunk group identifier.

    The identifier is the truncated MD5 digest of the current time in
    nanoseconds concatenated with a 64-bit random integer.
    """

    token = "%d%d" % (time.time_ns(), random.getrandbits(64))
    return hashlib.md5(token.encode()).digest()[:GROUP_ID_SIZE]


@dataclass(frozen=True)
class Chunk:
    """One framed fragment of a compressed GELF payload."""

    group_id: bytes
    index: int
    count: int
    data: bytes

    def __post_init__(self) -> None:
        if len(self.group_id) != GROUP_ID_SIZE:
            raise FramingError(f"group id must be {GROUP_ID_SIZE} bytes, got {len(self.group_id)}")
        if not 1 <= self.count <= MAXIMUM_COUNT:
            raise FramingError(f"sequence count out of range: {self.count}")
        if not 0 <= self.index < self.count:
            raise FramingError(f"sequence index {self.index} invalid for count {self.count}")
        if not self.data:
            raise FramingError("chunk data must not be empty")

    def encode(self) -> bytes:
        header = _HEADER.pack(MAGIC, self.group_id, self.index, self.count)
        return header + self.data

    @classmethod
    def decode(cls, datagram: bytes) -> "Chunk":
        if len(datagram) <= HEADER_SIZE:
            raise FramingError(f"datagram too short for a chunk: {len(datagram)} bytes")

        magic, gid, index, count = _HEADER.unpack_from(datagram)
        if magic != MAGIC:
            raise FramingError(f"bad chunk magic: {magic!r}")

        return cls(gid, index, count, bytes(datagram[HEADER_SIZE:]))


def split(payload: bytes, chunk_size: int, halve: bool = True) -> List[bytes]:
    """Split *payload* into the pieces that will become chunk data.

    A payload larger than *chunk_size* is cut into *chunk_size* pieces,
    the last one possibly shorter. A payload that fits is split in two
    halves when *halve* is set, otherwise it is kept whole.

    Halving exists because a failed datagram write is only reported on
    every second write attempt on some platforms; sending at least two
    chunks makes sure a failure is noticed. Transports with a reliable
    failure signal can turn it off.
    """

    if chunk_size <= 0:
        raise FramingError(f"chunk size must be positive: {chunk_size}")

    size = len(payload)

    if size > chunk_size:
        pieces = [payload[i:i + chunk_size] for i in range(0, size, chunk_size)]
    elif halve:
        middle = size // 2
        pieces = [payload[:middle], payload[middle:]]
    else:
        pieces = [payload]

    if len(pieces) > MAXIMUM_COUNT:
        raise FramingError(
            f"payload of {size} bytes needs {len(pieces)} chunks of {chunk_size} bytes, "
            f"limit is {MAXIMUM_COUNT}"
        )

    for piece in pieces:
        if not piece:
            raise FramingError(f"payload of {size} bytes would produce an empty chunk")

    return pieces


def frame(payload: bytes, chunk_size: int, group_id: bytes, halve: bool = True) -> List[Chunk]:
    """Return the ordered chunks carrying *payload* under *group_id*."""

    pieces = split(payload, chunk_size, halve)
    count = len(pieces)
    return [Chunk(group_id, index, count, piece) for index, piece in enumerate(pieces)]
