''' Wrapper module providing the equivalent of :func:`json.loads` and
    :func:`json.dumps` via msgspec. Both directions operate on bytes.
'''

import msgspec


# The msgspec encoder preserves dictionary insertion order and emits compact
# UTF-8; the GELF field order established by the message model survives
# the trip onto the wire.

encoder = msgspec.json.Encoder()
decoder = msgspec.json.Decoder()

dumps = encoder.encode
loads = decoder.decode


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
