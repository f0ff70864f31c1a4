"""Payload codec: GELF message <-> compressed JSON bytes."""

from __future__ import annotations

import zlib

from .. import json


def prepare(message) -> bytes:
    """Return the zlib-compressed JSON encoding of *message*.

    *message* is anything with a ``to_dict()`` method; the dictionary
    key order is preserved in the encoded output.
    """

    encoded = json.dumps(message.to_dict())
    return zlib.compress(encoded)


def unprepare(payload: bytes) -> dict:
    """Inverse of :func:`prepare`. Returns the decoded field dictionary."""

    return json.loads(zlib.decompress(payload))
