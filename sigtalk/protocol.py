"""Bit-level encoding of bytes as SIGUSR1 (0) and SIGUSR2 (1) signals."""

from __future__ import annotations

import signal
from dataclasses import dataclass

SIGNAL_ZERO = signal.SIGUSR1
SIGNAL_ONE = signal.SIGUSR2
BITS_PER_BYTE = 8


def byte_to_bits(value: int) -> tuple[int, ...]:
    """Return the eight bits of a byte, most significant first."""
    value &= 0xFF
    return tuple((value >> shift) & 1 for shift in reversed(range(BITS_PER_BYTE)))


def signal_for_bit(bit: int) -> signal.Signals:
    """Map a bit to the signal that carries it."""
    if bit not in (0, 1):
        raise ValueError(f"bit must be 0 or 1, got {bit!r}")
    return SIGNAL_ONE if bit else SIGNAL_ZERO


def bit_for_signal(signum: int) -> int:
    """Map a received signal back to the bit it carries."""
    if signum == SIGNAL_ONE:
        return 1
    if signum == SIGNAL_ZERO:
        return 0
    raise ValueError(f"signal {signum!r} carries no bit")


@dataclass
class BitDecoder:
    """Accumulates bits, most significant first, into whole bytes."""

    value: int = 0
    count: int = 0

    def feed(self, bit: int) -> int | None:
        """Add one bit; return the completed byte after the eighth, else None."""
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        self.value = ((self.value << 1) | bit) & 0xFF
        self.count += 1
        if self.count < BITS_PER_BYTE:
            return None
        completed = self.value
        self.reset()
        return completed

    def reset(self) -> None:
        """Discard any partially received byte."""
        self.value = 0
        self.count = 0