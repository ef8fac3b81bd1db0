import io
import os
import signal
from unittest import mock

import pytest

from sigtalk.protocol import byte_to_bits, signal_for_bit
from sigtalk.server import MessageServer, main


@pytest.fixture
def saved_handlers():
    saved = {s: signal.getsignal(s) for s in (signal.SIGUSR1, signal.SIGUSR2)}
    yield
    for signum, handler in saved.items():
        signal.signal(signum, handler)


def feed_message(server, data):
    for value in data:
        for bit in byte_to_bits(value):
            server.handle(signal_for_bit(bit), None)


def test_handle_writes_completed_bytes():
    out = io.BytesIO()
    server = MessageServer(output=out)
    feed_message(server, b"hola\n")
    assert out.getvalue() == b"hola\n"


def test_handle_holds_partial_byte():
    out = io.BytesIO()
    server = MessageServer(output=out)
    for bit in byte_to_bits(ord("Z"))[:5]:
        server.handle(signal_for_bit(bit), None)
    assert out.getvalue() == b""
    assert server.decoder.count == 5


def test_handle_rejects_unrelated_signal():
    server = MessageServer(output=io.BytesIO())
    with pytest.raises(ValueError):
        server.handle(signal.SIGINT, None)


def test_install_registers_handler(saved_handlers):
    server = MessageServer(output=io.BytesIO())
    server.install()
    assert signal.getsignal(signal.SIGUSR1) == server.handle
    assert signal.getsignal(signal.SIGUSR2) == server.handle


def test_real_signal_delivery(saved_handlers):
    out = io.BytesIO()
    server = MessageServer(output=out)
    server.install()
    for bit in byte_to_bits(ord("k")):
        os.kill(os.getpid(), signal_for_bit(bit))
    assert out.getvalue() == b"k"


def test_main_prints_pid_and_stops_on_interrupt(saved_handlers, capsys):
    with mock.patch("signal.pause", side_effect=KeyboardInterrupt):
        assert main([]) == 0
    assert f"Server PID: {os.getpid()}" in capsys.readouterr().out