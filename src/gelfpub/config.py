""" Default values and validation for :class:`gelfpub.Publisher` settings.
    The validators return the normalized value, or raise
    :class:`gelfpub.errors.ConfigurationError` if the value is unusable.
"""

from .errors import ConfigurationError


# Graylog listens for GELF over UDP on this port unless told otherwise.

DEFAULT_PORT = 12201

# Maximum payload bytes per chunk. The WAN size keeps a full chunk, with
# its twelve byte header, inside a typical 1500 byte Ethernet MTU once IP
# and UDP headers are accounted for; the LAN size assumes jumbo frames.

CHUNK_SIZE_WAN = 1420
CHUNK_SIZE_LAN = 8154

PROTOCOL_VERSION = '1.0'

presets = dict()
presets['wan'] = CHUNK_SIZE_WAN
presets['lan'] = CHUNK_SIZE_LAN


def hostname(value):
    """ Return the *value* as a stripped string. Blank or missing host names
        are rejected.
    """

    if value is None:
        raise ConfigurationError('hostname must be set')

    value = str(value).strip()

    if value == '':
        raise ConfigurationError('hostname must be set')

    return value



def port(value):
    """ Return the *value* as an integer UDP port number. Numeric strings
        are accepted, anything else that does not convert cleanly to an
        integer is rejected, as are values outside the valid port range.
    """

    value = _integer(value, 'port')

    if value < 1 or value > 65535:
        raise ConfigurationError('port must be between 1 and 65535: ' + str(value))

    return value



def chunk_size(value):
    """ Return the *value* as an integer chunk size. The strings 'wan' and
        'lan' (case-insensitive) select the corresponding preset. Positive
        sizes are not enforced here; :func:`gelfpub.protocol.chunk.frame`
        rejects unusable sizes when a message is framed.
    """

    try:
        value.lower
    except AttributeError:
        pass
    else:
        try:
            return presets[value.strip().lower()]
        except KeyError:
            pass

    return _integer(value, 'chunk_size')



def _integer(value, name):

    # bool is an int subclass; True is not a port number.

    if isinstance(value, bool):
        raise ConfigurationError('%s must be an integer: %r' % (name, value))

    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise ConfigurationError('%s must be an integer: %r' % (name, value))

    try:
        return int(value)
    except (TypeError, ValueError):
        pass

    # Numeric strings such as '12201.0' or '1e3' are accepted if they
    # represent a whole number.

    try:
        converted = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError('%s must be an integer: %r' % (name, value)) from None

    if converted.is_integer():
        return int(converted)

    raise ConfigurationError('%s must be an integer: %r' % (name, value))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
