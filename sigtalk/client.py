"""Send a message to a server process one bit per signal."""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Callable, Sequence

from sigtalk.printf import printf
from sigtalk.protocol import byte_to_bits, signal_for_bit

DEFAULT_DELAY = 0.0001
KillFunc = Callable[[int, int], None]


def send_byte(
    pid: int,
    value: int,
    delay: float = DEFAULT_DELAY,
    kill: KillFunc | None = None,
) -> None:
    """Send the eight bits of ``value`` to ``pid``, pausing ``delay`` seconds after each."""
    send = kill if kill is not None else os.kill
    for bit in byte_to_bits(value):
        send(pid, signal_for_bit(bit))
        if delay > 0:
            time.sleep(delay)


def send_message(
    pid: int,
    message: str | bytes,
    delay: float = DEFAULT_DELAY,
    kill: KillFunc | None = None,
) -> int:
    """Send ``message`` followed by a newline; return the number of bytes sent."""
    payload = message.encode() if isinstance(message, str) else bytes(message)
    payload += b"\n"
    for value in payload:
        send_byte(pid, value, delay, kill)
    return len(payload)


def _parse_pid(text: str) -> int | None:
    try:
        pid = int(text)
    except ValueError:
        return None
    return pid if pid > 0 else None


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``<PID> [message]``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) not in (1, 2):
        printf("Usage: sigtalk-client <PID> [message]\n")
        return 1
    pid = _parse_pid(args[0])
    if pid is None:
        printf("Invalid PID: %s\n", args[0])
        return 1
    if len(args) == 1:
        send_byte(pid, ord("A"))
    else:
        send_message(pid, args[1])
    return 0