""" Python implementation of a GELF (Graylog Extended Log Format) UDP
    publisher. Messages are serialized as JSON, compressed, and sent as a
    group of chunked datagrams to a Graylog server or any other collector
    speaking GELF over UDP.
"""

# Utility components.

from . import errors
from . import json
from . import config

# Submodules used by multiple other components.

from . import message
from . import protocol
from . import transport

# Primary public-facing interfaces.

from .message import Message
from .publisher import Publisher
from .handler import GELFHandler
from .errors import (
    GELFError,
    ConfigurationError,
    ValidationError,
    FramingError,
    TransportError,
    TransmissionError,
)

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
