"""UDP transport: one connected datagram socket, opened on first use."""

from __future__ import annotations

import logging
import socket
from typing import Optional

from .base import Transport, TransportError


logger = logging.getLogger(__name__)


class UDP(Transport):
    """Datagram transport to *hostname*:*port*.

    The socket is created lazily by :meth:`connect` and cached until
    :meth:`close`. Not safe for concurrent use.
    """

    def __init__(self, hostname: str, port: int):
        self.hostname = hostname
        self.port = port
        self.address: Optional[tuple] = None
        self._socket: Optional[socket.socket] = None

    @property
    def is_open(self) -> bool:
        return self._socket is not None

    def __del__(self) -> None:
        self.close()

    def connect(self) -> socket.socket:
        if self._socket is not None:
            return self._socket

        try:
            infos = socket.getaddrinfo(self.hostname, self.port, type=socket.SOCK_DGRAM)
        except OSError as e:
            raise TransportError(
                f"cannot resolve {self.hostname}: {e.strerror}", e.errno, e.strerror
            ) from e

        family, kind, proto, _, address = infos[0]

        try:
            sock = socket.socket(family, kind, proto)
        except OSError as e:
            raise TransportError(
                f"cannot create UDP socket: {e.strerror}", e.errno, e.strerror
            ) from e

        try:
            sock.connect(address)
        except OSError as e:
            sock.close()
            raise TransportError(
                f"cannot connect UDP socket to {address[0]}:{address[1]}: {e.strerror}",
                e.errno,
                e.strerror,
            ) from e

        self.address = address
        self._socket = sock
        logger.debug("opened UDP socket to %s:%d", address[0], address[1])
        return sock

    def write(self, data: bytes) -> int:
        """One ``send()`` on the connected socket. No retry; OSError propagates."""
        return self.connect().send(data)

    def close(self) -> None:
        sock = self._socket
        if sock is None:
            return

        self._socket = None
        sock.close()
        logger.debug("closed UDP socket to %s:%d", self.address[0], self.address[1])
