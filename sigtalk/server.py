"""Receive bytes one bit per signal and write them to an output stream."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Sequence
from types import FrameType
from typing import BinaryIO

from sigtalk.printf import printf
from sigtalk.protocol import SIGNAL_ONE, SIGNAL_ZERO, BitDecoder, bit_for_signal


class MessageServer:
    """Decodes SIGUSR1/SIGUSR2 into bytes and writes each completed byte out."""

    def __init__(self, output: BinaryIO | None = None) -> None:
        self.output = output
        self.decoder = BitDecoder()

    def _stream(self) -> BinaryIO:
        return self.output if self.output is not None else sys.stdout.buffer

    def handle(self, signum: int, frame: FrameType | None = None) -> None:
        """Signal handler: record one bit and emit a byte once eight have arrived."""
        byte = self.decoder.feed(bit_for_signal(signum))
        if byte is not None:
            stream = self._stream()
            stream.write(bytes([byte]))
            stream.flush()

    def install(self) -> None:
        """Register this server as the handler for both user signals."""
        for signum in (SIGNAL_ZERO, SIGNAL_ONE):
            signal.signal(signum, self.handle)

    def serve_forever(self) -> None:
        """Wait for signals until interrupted."""
        while True:
            signal.pause()


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: print the PID and receive messages until interrupted."""
    printf("Server PID: %d\n", os.getpid())
    server = MessageServer()
    server.install()
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        return 0
    return 0