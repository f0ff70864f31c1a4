"""Transport interface.

This is the (small) contract that transport implementations follow. It
lives outside :mod:`gelfpub.protocol` so the protocol remains
transport-agnostic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..errors import TransportError, TransmissionError


class Transport(ABC):
    """Minimal contract for a datagram transport."""

    @abstractmethod
    def connect(self) -> object:
        """Establish the endpoint, or return the one already established."""

    @abstractmethod
    def write(self, data: bytes) -> int:
        """Send *data* as one datagram; return the number of bytes written."""

    @abstractmethod
    def close(self) -> None:
        """Release the endpoint."""

    @property
    def is_open(self) -> bool:
        """Whether the endpoint is currently established."""
        return False

    def __enter__(self):
        return self

    def __exit__(self, *exc) -> None:
        self.close()
