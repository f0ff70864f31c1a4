import errno
import gc
import gelfpub
import pytest
import socket


def test_lazy_connect(receiver):

    host, port = receiver.getsockname()
    transport = gelfpub.transport.UDP(host, port)
    assert transport.is_open == False

    first = transport.connect()
    assert transport.is_open == True

    second = transport.connect()
    assert first is second

    transport.close()
    assert transport.is_open == False

    # Closing twice is harmless.
    transport.close()


def test_write(receiver):

    host, port = receiver.getsockname()

    with gelfpub.transport.UDP(host, port) as transport:
        written = transport.write(b'datagram')
        assert written == len(b'datagram')

        data = receiver.recv(65535)
        assert data == b'datagram'

    assert transport.is_open == False


def test_reconnect(receiver):

    host, port = receiver.getsockname()
    transport = gelfpub.transport.UDP(host, port)

    first = transport.connect()
    transport.close()

    second = transport.connect()
    assert first is not second
    transport.close()


def test_resolution_failure():

    # The .invalid top level domain is guaranteed never to resolve.

    transport = gelfpub.transport.UDP('gelf.invalid', 12201)

    with pytest.raises(gelfpub.TransportError) as error:
        transport.connect()

    assert error.value.errno is not None
    assert transport.is_open == False


def test_socket_creation_failure(monkeypatch):

    def refuse(*args, **kwargs):
        raise OSError(errno.EACCES, 'Permission denied')

    monkeypatch.setattr(socket, 'socket', refuse)

    transport = gelfpub.transport.UDP('127.0.0.1', 12201)

    with pytest.raises(gelfpub.TransportError) as error:
        transport.connect()

    assert error.value.errno == errno.EACCES
    assert error.value.strerror == 'Permission denied'
    assert transport.is_open == False


class Unconnectable:
    """ Stand-in for socket.socket whose connect() always fails.
    """

    created = list()

    def __init__(self, *args):
        self.closed = False
        self.created.append(self)

    def connect(self, address):
        raise OSError(errno.ENETUNREACH, 'Network is unreachable')

    def close(self):
        self.closed = True


def test_connect_failure(monkeypatch):

    Unconnectable.created.clear()
    monkeypatch.setattr(socket, 'socket', Unconnectable)

    transport = gelfpub.transport.UDP('127.0.0.1', 12201)

    with pytest.raises(gelfpub.TransportError) as error:
        transport.connect()

    assert error.value.errno == errno.ENETUNREACH
    assert error.value.strerror == 'Network is unreachable'
    assert transport.is_open == False

    assert len(Unconnectable.created) == 1
    assert Unconnectable.created[0].closed == True


def test_released_on_destruction(receiver):

    host, port = receiver.getsockname()

    transport = gelfpub.transport.UDP(host, port)
    sock = transport.connect()
    assert sock.fileno() != -1

    del transport
    gc.collect()

    assert sock.fileno() == -1

    publisher = gelfpub.Publisher(host, port)
    publisher.publish(gelfpub.Message('text', 'web01'))
    sock = publisher.transport.connect()

    del publisher
    gc.collect()

    assert sock.fileno() == -1


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
