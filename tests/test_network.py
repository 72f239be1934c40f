import logging
import time

import pytest

from fieldsim.network import VisionReceiver, VisionServer

LOCALHOST = "127.0.0.1"


def _collect(receiver, expected, timeout=2.0):
    got = []
    deadline = time.monotonic() + timeout
    while len(got) < expected and time.monotonic() < deadline:
        got.extend(receiver.handle_datagrams())
        if len(got) < expected:
            time.sleep(0.01)
    return got


@pytest.fixture
def receiver():
    states = []
    rec = VisionReceiver(LOCALHOST, 0, states.append)
    rec.states = states
    yield rec
    rec.close()


def test_round_trip(receiver):
    with VisionServer(receiver.bound_port, LOCALHOST) as server:
        assert server.send(b"hello") is True
        assert _collect(receiver, 1) == [b"hello"]
    assert receiver.states == [b"hello"]


def test_multiple_datagrams_in_order(receiver):
    with VisionServer(receiver.bound_port, LOCALHOST) as server:
        for payload in (b"a", b"bb", b"ccc"):
            assert server.send(payload)
        assert _collect(receiver, 3) == [b"a", b"bb", b"ccc"]


def test_change_port(receiver):
    with VisionServer(1, LOCALHOST) as server:
        server.change_port(receiver.bound_port)
        assert server.port == receiver.bound_port
        assert server.send(b"moved")
        assert _collect(receiver, 1) == [b"moved"]


def test_change_address(receiver):
    with VisionServer(receiver.bound_port, "224.5.23.2") as server:
        server.change_address(LOCALHOST)
        assert server.address == LOCALHOST
        assert server.send(b"x")
        assert _collect(receiver, 1) == [b"x"]


def test_oversized_datagram_fails(caplog, receiver):
    with VisionServer(receiver.bound_port, LOCALHOST) as server:
        with caplog.at_level(logging.WARNING):
            assert server.send(b"x" * 70000) is False
    assert "Size was: 70000 byte(s)." in caplog.text


def test_send_after_close_raises():
    server = VisionServer(10002, LOCALHOST)
    server.close()
    with pytest.raises(ValueError):
        server.send(b"late")


def test_nothing_pending(receiver):
    assert receiver.handle_datagrams() == []
    assert receiver.states == []


def test_set_port_and_address(receiver):
    receiver.set_port_and_address(10010, "224.5.23.2")
    assert (receiver.port, receiver.address) == (10010, "224.5.23.2")


def test_handle_after_close_raises():
    rec = VisionReceiver(LOCALHOST, 0)
    rec.close()
    with pytest.raises(ValueError):
        rec.handle_datagrams()