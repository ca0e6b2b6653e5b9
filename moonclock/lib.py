"""Simple binary string helpers for the moon-emoji clock."""

from __future__ import annotations

import sys

__all__ = ["to_binary", "display_binary", "signal_handler"]

DARK_MOON = "\U0001F31A"
FULL_MOON = "\U0001F31D"


def to_binary(value: int, bits: int) -> str:
    """Return the lowest ``bits`` bits of ``value`` as a string of 0s and 1s."""
    if bits < 0:
        raise ValueError(f"bit count must not be negative: {bits}")
    return "".join("1" if value & (1 << shift) else "0" for shift in reversed(range(bits)))


def display_binary(bits: str) -> None:
    """Print a binary string as moons: dark for '0', full for anything else."""
    print("".join(DARK_MOON if ch == "0" else FULL_MOON for ch in bits))


def signal_handler(sig, frame) -> None:
    """Announce that the clock stopped and exit successfully."""
    print("\n\nBinary clock stopped.")
    sys.exit(0)