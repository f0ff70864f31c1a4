import pytest
import socket

import gelfpub


class Recorder(gelfpub.transport.Transport):
    """ In-memory transport. Every datagram handed to write() is kept, in
        order. Setting *fail_at* to a write index makes that write fail,
        either by returning zero (*failure* = 'zero') or by raising an
        OSError (*failure* = 'error').
    """

    def __init__(self):
        self.connects = 0
        self.closes = 0
        self.attempts = list()
        self.written = list()
        self.fail_at = None
        self.failure = 'zero'
        self.connected = False


    @property
    def is_open(self):
        return self.connected


    def connect(self):
        self.connects += 1
        self.connected = True
        return self


    def write(self, data):
        index = len(self.attempts)
        self.attempts.append(data)

        if index == self.fail_at:
            if self.failure == 'error':
                raise OSError(111, 'Connection refused')
            return 0

        self.written.append(data)
        return len(data)


    def close(self):
        self.closes += 1
        self.connected = False


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def receiver():
    """ A UDP socket bound to an ephemeral port on the loopback interface.
    """

    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(('127.0.0.1', 0))
    sock.settimeout(2)

    yield sock

    sock.close()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
