"""Receive messages sent one signal per bit and print them."""

from __future__ import annotations

import codecs
import os
import signal
import sys
from types import FrameType
from typing import Sequence, TextIO

from sigtalk.fmt import format_string
from sigtalk.protocol import BitDecoder


class Server:
    """Turns SIGUSR1 (one) and SIGUSR2 (zero) into text on ``stream``."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = sys.stdout if stream is None else stream
        self._bits = BitDecoder()
        self._text = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def handle(self, signum: int, frame: FrameType | None = None) -> None:
        """Signal handler: take one bit and write any completed character."""
        byte = self._bits.feed(signum == signal.SIGUSR1)
        if byte is None:
            return
        text = self._text.decode(bytes([byte]))
        if text:
            self.stream.write(text)
            self.stream.flush()

    def run(self) -> None:
        """Announce the process id and handle signals forever."""
        self.stream.write(format_string("PID: %d\n", os.getpid()))
        self.stream.flush()
        signal.signal(signal.SIGUSR1, self.handle)
        signal.signal(signal.SIGUSR2, self.handle)
        while True:
            signal.pause()


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``server`` with no arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        sys.stdout.write(format_string("Usage: ./server\n"))
        return 1
    try:
        Server().run()
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())