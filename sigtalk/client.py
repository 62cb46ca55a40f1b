"""Send a message to a listening server process, one signal per bit."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import Sequence

from sigtalk.fmt import format_string
from sigtalk.numconv import atoi
from sigtalk.protocol import message_to_bits

DEFAULT_DELAY = 100e-6


def send_message(pid: int, message: str | bytes, delay: float = DEFAULT_DELAY) -> None:
    """Signal ``message`` and a trailing newline to ``pid``.

    A one bit is sent as SIGUSR1, a zero bit as SIGUSR2.  Raises ``OSError``
    if a signal cannot be delivered.
    """
    for bit in message_to_bits(message):
        os.kill(pid, signal.SIGUSR1 if bit else signal.SIGUSR2)
        time.sleep(delay)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``client PID MESSAGE``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        sys.stdout.write(format_string("Usage: ./client [PID] [message]\n"))
        return 1
    pid = atoi(args[0])
    try:
        send_message(pid, os.fsencode(args[1]))
    except OSError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())