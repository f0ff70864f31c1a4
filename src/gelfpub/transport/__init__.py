"""Transport layer implementations."""

from .base import (
    Transport,
    TransportError,
    TransmissionError,
)
from .udp import UDP
