""" The :class:`Publisher` sends GELF messages to a Graylog server, or any
    other GELF collector, via UDP. Messages are compressed and always sent
    using the chunked GELF framing.
"""

import logging
import time

from . import config
from . import message as message_module
from .errors import TransmissionError, ValidationError
from .protocol import chunk
from .protocol import codec
from .transport import UDP


logger = logging.getLogger(__name__)


class Publisher:
    """ Publish GELF messages to *hostname* on the UDP *port*. The
        *chunk_size* is the maximum number of payload bytes in a single
        datagram; :data:`gelfpub.config.CHUNK_SIZE_WAN` is appropriate for
        most networks, :data:`gelfpub.config.CHUNK_SIZE_LAN` can be used
        where jumbo frames are available. The strings 'wan' and 'lan' are
        accepted as shorthand for either size.

        A message small enough to fit in one chunk is still split in two
        when *halve* is True. On some platforms a failed datagram write
        only reports the failure on every second write attempt; sending
        at least two chunks ensures the failure is caught. Set *halve* to
        False for transports that reliably report every failed write.

        The *transport*, if specified, replaces the default
        :class:`gelfpub.transport.UDP` instance. No connection is made
        until the first message is published; the socket is released by
        :func:`close`, at the end of a 'with' block, or when the
        transport is garbage collected.

        A :class:`Publisher` is not safe for concurrent use: chunks from two
        messages published simultaneously can interleave on the wire. Use
        one instance per thread, or serialize calls to :func:`publish`.

        :ivar hostname: The destination host name or address.
        :ivar port: The destination UDP port.
        :ivar chunk_size: Maximum payload bytes per chunk.
        :ivar transport: The :class:`gelfpub.transport.Transport` in use.
    """

    # Pause after each successfully published message. This helps a great
    # deal with stability if messages are sent in a tight loop.

    delay = 0.00002

    def __init__(self, hostname, port=config.DEFAULT_PORT,
                       chunk_size=config.CHUNK_SIZE_WAN, halve=True,
                       transport=None):

        self.hostname = config.hostname(hostname)
        self.port = config.port(port)
        self.chunk_size = config.chunk_size(chunk_size)
        self.halve = bool(halve)

        if transport is None:
            transport = UDP(self.hostname, self.port)

        self.transport = transport


    def __enter__(self):
        return self


    def __exit__(self, *exc):
        self.close()


    def close(self):
        """ Release the underlying transport. A subsequent :func:`publish`
            will establish a new one.
        """

        self.transport.close()


    def publish(self, message):
        """ Send the *message*, typically a :class:`gelfpub.message.Message`
            instance. The protocol version field is set on the *message* as
            a side effect.

            Every chunk of the message is written in order. If a write fails
            a :class:`gelfpub.errors.TransmissionError` is raised and no
            further chunks are sent; any chunks already sent are lost, the
            collector will discard the incomplete message. Nothing is
            retried; publishing the same message again is safe, it will be
            sent with a new group id.
        """

        if message.has_required_fields():
            pass
        else:
            required = ', '.join(repr(name) for name in message_module.required_fields)
            raise ValidationError('missing required field(s): ' + required)

        message.set_version(config.PROTOCOL_VERSION)
        payload = codec.prepare(message)

        group_id = chunk.group_id()
        chunks = chunk.frame(payload, self.chunk_size, group_id, self.halve)

        self.transport.connect()

        logger.debug("publishing %s: %d bytes in %d chunks",
                     group_id.hex(), len(payload), len(chunks))

        for fragment in chunks:
            self._write(fragment)

        time.sleep(self.delay)


    def _write(self, fragment):
        """ Write a single chunk. Failures of the underlying send are not
            reported directly; they become a
            :class:`gelfpub.errors.TransmissionError`, with the original
            error attached as its cause.
        """

        datagram = fragment.encode()

        try:
            written = self.transport.write(datagram)
        except OSError as e:
            logger.debug("write of chunk %d of %s failed: %s",
                         fragment.index, fragment.group_id.hex(), e)
            raise TransmissionError(fragment.group_id, fragment.index, e.errno, e.strerror) from e

        if not written:
            raise TransmissionError(fragment.group_id, fragment.index)


# end of class Publisher


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
