import socket

import pytest

from trantor.sockio import readv


@pytest.fixture
def pair():
    a, b = socket.socketpair()
    yield a, b
    a.close()
    b.close()


def test_fills_all_buffers(pair):
    writer, reader = pair
    data = b"abcdef"
    writer.sendall(data)
    first, second = bytearray(3), bytearray(3)
    assert readv(reader, [first, second]) == len(data)
    assert bytes(first) + bytes(second) == data


def test_stops_on_short_read(pair):
    writer, reader = pair
    data = b"abcd"
    writer.sendall(data)
    first, second, third = bytearray(3), bytearray(3), bytearray(3)
    assert readv(reader, [first, second, third]) == len(data)
    assert bytes(first) == data[:3]
    assert bytes(second[:1]) == data[3:]
    assert third == bytearray(3)


def test_error_before_any_data_is_raised(pair):
    _, reader = pair
    reader.setblocking(False)
    with pytest.raises(BlockingIOError):
        readv(reader, [bytearray(4)])


def test_error_after_partial_read_returns_count(pair):
    writer, reader = pair
    data = b"xyz"
    writer.sendall(data)
    reader.setblocking(False)
    first, second = bytearray(len(data)), bytearray(5)
    assert readv(reader, [first, second]) == len(data)
    assert bytes(first) == data


def test_closed_peer_returns_zero(pair):
    writer, reader = pair
    writer.close()
    buf = bytearray(4)
    assert readv(reader, [buf]) == 0
    assert buf == bytearray(4)


def test_no_buffers_reads_nothing(pair):
    writer, reader = pair
    writer.sendall(b"q")
    assert readv(reader, []) == 0
    assert reader.recv(1) == b"q"


def test_accepts_memoryview(pair):
    writer, reader = pair
    data = b"hello"
    writer.sendall(data)
    backing = bytearray(len(data))
    assert readv(reader, [memoryview(backing)]) == len(data)
    assert bytes(backing) == data