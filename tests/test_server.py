import io
import os
import signal
from unittest.mock import call, patch

import pytest

from sigtalk.protocol import char_to_bits, message_to_bits
from sigtalk.server import Server, main


def _signals(bits):
    return [signal.SIGUSR1 if bit else signal.SIGUSR2 for bit in bits]


def _receive(message):
    out = io.StringIO()
    server = Server(out)
    for signum in _signals(message_to_bits(message)):
        server.handle(signum, None)
    return out.getvalue()


def test_receives_ascii_message():
    assert _receive("hello") == "hello\n"


def test_receives_utf8_message():
    assert _receive("héllo wörld") == "héllo wörld\n"


def test_nothing_written_before_byte_complete():
    out = io.StringIO()
    server = Server(out)
    for signum in _signals(char_to_bits("a"))[:7]:
        server.handle(signum, None)
    assert out.getvalue() == ""


def test_other_signals_count_as_zero():
    out = io.StringIO()
    server = Server(out)
    bits = char_to_bits("b")
    for bit in bits:
        server.handle(signal.SIGUSR1 if bit else signal.SIGINT, None)
    assert out.getvalue() == "b"


@patch("signal.pause", side_effect=KeyboardInterrupt)
@patch("signal.signal")
def test_run_announces_pid_and_installs_handlers(install, pause):
    out = io.StringIO()
    server = Server(out)
    with pytest.raises(KeyboardInterrupt):
        server.run()
    assert out.getvalue() == f"PID: {os.getpid()}\n"
    install.assert_has_calls(
        [call(signal.SIGUSR1, server.handle), call(signal.SIGUSR2, server.handle)]
    )


def test_main_rejects_arguments(capsys):
    assert main(["extra"]) == 1
    assert "Usage" in capsys.readouterr().out


@patch("signal.pause", side_effect=KeyboardInterrupt)
@patch("signal.signal")
def test_main_runs_until_interrupted(install, pause, capsys):
    assert main([]) == 130
    assert capsys.readouterr().out.startswith("PID: ")