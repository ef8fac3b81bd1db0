"""Single-signal probe client and server for checking signal delivery."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Callable, Sequence
from types import FrameType
from typing import TextIO

from sigtalk.printf import printf

_PROBE_SIGNALS = {1: signal.SIGUSR1, 2: signal.SIGUSR2}


def send_probe(pid: int, kind: int = 1, kill: Callable[[int, int], None] | None = None) -> None:
    """Send SIGUSR1 (kind 1) or SIGUSR2 (kind 2) to ``pid``."""
    try:
        signum = _PROBE_SIGNALS[kind]
    except KeyError:
        raise ValueError("signal must be 1 or 2") from None
    (kill if kill is not None else os.kill)(pid, signum)


class ProbeServer:
    """Reports each user signal it receives."""

    def __init__(self, output: TextIO | None = None) -> None:
        self.output = output

    def handle(self, signum: int, frame: FrameType | None = None) -> None:
        """Signal handler: announce which user signal arrived."""
        name = signal.Signals(signum).name
        stream = self.output if self.output is not None else sys.stdout
        printf("Signal %s received\n", name, stream=stream)

    def install(self) -> None:
        """Register this server as the handler for both user signals."""
        for signum in _PROBE_SIGNALS.values():
            signal.signal(signum, self.handle)

    def serve_forever(self) -> None:
        """Wait for signals until interrupted."""
        while True:
            signal.pause()


def _parse_int(text: str) -> int | None:
    try:
        return int(text)
    except ValueError:
        return None


def client_main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``<PID> [1|2]``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) not in (1, 2):
        printf("Usage: sigtalk-probe <PID> [1|2]\n")
        return 1
    pid = _parse_int(args[0])
    if pid is None or pid <= 0:
        printf("Invalid PID: %s\n", args[0])
        return 1
    kind = _parse_int(args[1]) if len(args) == 2 else 1
    try:
        send_probe(pid, kind)
    except ValueError:
        printf("Error: signal must be 1 or 2\n")
        return 1
    return 0


def server_main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: print the PID and report signals until interrupted."""
    printf("Server PID: %d\n", os.getpid())
    server = ProbeServer()
    server.install()
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        return 0
    return 0