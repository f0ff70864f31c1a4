""" A :class:`logging.Handler` that publishes log records as GELF messages.
    Typical use::

        import logging
        import gelfpub

        handler = gelfpub.GELFHandler('graylog.example.com')
        logging.getLogger().addHandler(handler)
"""

import logging
import socket

from . import config
from . import message
from .publisher import Publisher


# Attributes present on every LogRecord; anything else on a record arrived
# via the 'extra' argument and is published as an additional field.

_reserved = set(logging.LogRecord('', 0, '', 0, '', None, None).__dict__)
_reserved.update(('message', 'asctime'))


def level(levelno):
    """ Map a :mod:`logging` level number to a syslog severity.
    """

    if levelno >= logging.CRITICAL:
        return message.CRITICAL
    if levelno >= logging.ERROR:
        return message.ERROR
    if levelno >= logging.WARNING:
        return message.WARNING
    if levelno >= logging.INFO:
        return message.INFO
    return message.DEBUG



class GELFHandler(logging.Handler):
    """ Publish every handled record to *hostname*. The *port* and
        *chunk_size* arguments are passed to the :class:`Publisher`; an
        existing *publisher* can be supplied instead. The *facility*, if
        not specified, defaults to the name of the logger that created the
        record.
    """

    def __init__(self, hostname=None, port=config.DEFAULT_PORT,
                       chunk_size=config.CHUNK_SIZE_WAN, facility=None,
                       publisher=None):

        logging.Handler.__init__(self)

        if publisher is None:
            publisher = Publisher(hostname, port, chunk_size)

        self.publisher = publisher
        self.facility = facility
        self.host = socket.gethostname()


    def close(self):

        self.acquire()
        try:
            self.publisher.close()
        finally:
            self.release()

        logging.Handler.close(self)


    def emit(self, record):

        # Records from this package are logged while a message is being
        # published; handling them here would publish recursively.

        if record.name == 'gelfpub' or record.name.startswith('gelfpub.'):
            return

        try:
            gelf = self.to_message(record)
            self.publisher.publish(gelf)
        except Exception:
            self.handleError(record)


    def to_message(self, record):
        """ Return a :class:`gelfpub.message.Message` representing the
            *record*. The short message is the first line of the formatted
            record; the full message is only set if there is more to say.
        """

        text = self.format(record)
        short = text.split('\n', 1)[0]

        if short == text:
            full = None
        else:
            full = text

        facility = self.facility
        if facility is None:
            facility = record.name

        gelf = message.Message(short_message=short,
                               host=self.host,
                               full_message=full,
                               timestamp=record.created,
                               level=level(record.levelno),
                               facility=facility,
                               file=record.pathname,
                               line=record.lineno)

        gelf.add('logger', record.name)
        gelf.add('function', record.funcName)
        gelf.add('thread_name', record.threadName)
        gelf.add('process', record.process)

        for name,value in record.__dict__.items():
            if name in _reserved or name in ('id', '_id'):
                continue

            if isinstance(value, (str, int, float, bool)) or value is None:
                pass
            else:
                value = repr(value)

            gelf.add(name, value)

        return gelf


# end of class GELFHandler


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
