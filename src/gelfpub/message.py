""" A class representation of a GELF message. The :class:`Message` is the
    payload handed to :func:`gelfpub.Publisher.publish`; the publisher only
    relies on :func:`Message.has_required_fields`, :func:`Message.to_dict`,
    and :func:`Message.set_version`, any object providing those three
    methods can be published.
"""

import time as timemodule


# Syslog severity levels, as used by the GELF 'level' field.

EMERGENCY = 0
ALERT = 1
CRITICAL = 2
ERROR = 3
WARNING = 4
NOTICE = 5
INFO = 6
DEBUG = 7

# Standard GELF fields, in the order they are emitted by to_dict().

standard_fields = ('version', 'host', 'short_message', 'full_message',
                   'timestamp', 'level', 'facility', 'file', 'line')

required_fields = ('short_message', 'host')


class Message:
    """ A single GELF message. The standard fields are plain attributes;
        any additional keyword arguments are stored as additional fields,
        see :func:`add` for the naming rules that apply to them.

        :ivar timestamp: UNIX epoch timestamp, defaults to the time of
            construction.
        :ivar additional: Ordered dictionary of additional fields.
    """

    def __init__(self, short_message=None, host=None, full_message=None,
                       timestamp=None, level=None, facility=None,
                       file=None, line=None, **additional):

        if timestamp is None:
            timestamp = timemodule.time()

        self.version = None
        self.host = host
        self.short_message = short_message
        self.full_message = full_message
        self.timestamp = timestamp
        self.level = level
        self.facility = facility
        self.file = file
        self.line = line

        self.additional = dict()

        for name,value in additional.items():
            self.add(name, value)


    def __getitem__(self, name):

        if name in standard_fields:
            return getattr(self, name)

        try:
            return self.additional[name]
        except KeyError:
            pass

        return self.additional['_' + name]


    def __repr__(self):
        return 'message.Message: ' + repr(self.to_dict())


    def add(self, name, value):
        """ Add an additional field. GELF requires additional field names to
            start with an underscore; one will be prepended if the *name*
            lacks it. The '_id' field is reserved by Graylog and cannot be
            set.
        """

        name = str(name)

        if name.startswith('_'):
            pass
        else:
            name = '_' + name

        if name == '_id':
            raise ValueError("the additional field '_id' is reserved")

        self.additional[name] = value


    def has_required_fields(self):
        """ Return True if every field required by the GELF protocol has a
            non-blank value.
        """

        for name in required_fields:
            value = getattr(self, name)

            if value is None:
                return False

            if str(value).strip() == '':
                return False

        return True


    def set_version(self, version):
        self.version = version


    def to_dict(self):
        """ Return a dictionary of every field with a value. Standard fields
            come first, in protocol order, followed by the additional fields
            in the order they were added.
        """

        fields = dict()

        for name in standard_fields:
            value = getattr(self, name)
            if value is not None:
                fields[name] = value

        for name,value in self.additional.items():
            if value is not None:
                fields[name] = value

        return fields


# end of class Message


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
