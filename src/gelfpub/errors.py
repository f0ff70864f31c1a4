""" Exception classes raised by :mod:`gelfpub`. Every exception raised
    deliberately by this package derives from :class:`GELFError`, so that
    callers can catch everything from a single publish call in one clause.
"""


class GELFError(Exception):
    """ Base class for all gelfpub errors.
    """


class ConfigurationError(GELFError, ValueError):
    """ A :class:`gelfpub.Publisher` was constructed with invalid arguments.
    """


class ValidationError(GELFError, ValueError):
    """ A message is missing one or more of the fields the GELF protocol
        requires.
    """


class FramingError(GELFError):
    """ A payload cannot be represented as a group of chunks: the chunking
        parameters are invalid, a chunk would be empty, or more chunks are
        required than the one-byte sequence count can express.
    """


class TransportError(GELFError):
    """ The UDP endpoint could not be established. The *errno* and
        *strerror* attributes carry the details of the underlying
        :class:`OSError`, if any.
    """

    def __init__(self, message, errno=None, strerror=None):
        GELFError.__init__(self, message)
        self.errno = errno
        self.strerror = strerror


class TransmissionError(TransportError):
    """ A chunk could not be written. The *group_id* and *index* attributes
        identify the message and the chunk that failed; chunks with a lower
        index were already sent, chunks with a higher index were not.
    """

    def __init__(self, group_id, index, errno=None, strerror=None):

        message = 'unable to write chunk %d of message %s' % (index, group_id.hex())
        if strerror:
            message = message + ': ' + strerror

        TransportError.__init__(self, message, errno, strerror)
        self.group_id = group_id
        self.index = index


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
