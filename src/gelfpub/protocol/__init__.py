"""
gelfpub protocol layer
======================

Transport-agnostic GELF encoding:

codec.py
    GELF message <-> zlib-compressed JSON payload.

chunk.py
    Compressed payload -> ordered, framed chunks sharing a group id.

Nothing in this package touches a socket; :mod:`gelfpub.transport`
moves the encoded chunks.
"""

from . import codec
from . import chunk


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
