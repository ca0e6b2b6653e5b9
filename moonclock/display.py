"""Rendering of binary clock states and an optional display callback registry."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Callable, TextIO

from moonclock.api import BinaryClockState, BinaryValue, get_current_state

__all__ = [
    "DisplayRegistry",
    "register",
    "unregister",
    "update_all",
    "update_all_with_state",
    "render_emoji",
    "render_ascii",
    "render_json",
    "render_compact",
    "console_emoji",
    "console_ascii",
    "display_json",
    "compact",
    "get_time_string",
    "binary_to_string",
]

MAX_REGISTERED_DISPLAYS = 16
DARK_MOON = "\U0001F31A"
FULL_MOON = "\U0001F31D"

DisplayFn = Callable[[BinaryClockState, Any], None]


@dataclass
class _Entry:
    display_fn: DisplayFn
    context: Any
    id: int


class DisplayRegistry:
    """A fixed number of display slots, each holding a callback and its context."""

    def __init__(self, capacity: int = MAX_REGISTERED_DISPLAYS) -> None:
        self._slots: list[_Entry | None] = [None] * capacity
        self._next_id = 0

    def register(self, display_fn: DisplayFn, context: Any = None) -> int:
        """Put ``display_fn`` in the first free slot and return its registration id."""
        if display_fn is None or not callable(display_fn):
            raise TypeError("display function must be callable")
        for index, entry in enumerate(self._slots):
            if entry is None:
                registration_id = self._next_id
                self._slots[index] = _Entry(display_fn, context, registration_id)
                self._next_id += 1
                return registration_id
        raise RuntimeError("no display slots available")

    def unregister(self, registration_id: int) -> None:
        """Remove the display registered under ``registration_id``."""
        if registration_id >= 0:
            for index, entry in enumerate(self._slots):
                if entry is not None and entry.id == registration_id:
                    self._slots[index] = None
                    return
        raise KeyError(registration_id)

    def update_all(self) -> None:
        """Call every registered display with the current clock state."""
        self.update_all_with_state(get_current_state())

    def update_all_with_state(self, state: BinaryClockState | None) -> None:
        """Call every registered display, in slot order, with ``state``."""
        if state is None:
            return
        for entry in list(self._slots):
            if entry is not None:
                entry.display_fn(state, entry.context)


_default_registry = DisplayRegistry()


def register(display_fn: DisplayFn, context: Any = None) -> int:
    """Register a display with the shared registry."""
    return _default_registry.register(display_fn, context)


def unregister(registration_id: int) -> None:
    """Remove a display from the shared registry."""
    _default_registry.unregister(registration_id)


def update_all() -> None:
    """Update every display in the shared registry with the current time."""
    _default_registry.update_all()


def update_all_with_state(state: BinaryClockState | None) -> None:
    """Update every display in the shared registry with ``state``."""
    _default_registry.update_all_with_state(state)


def _bit_string(value: BinaryValue, on: str = "1", off: str = "0") -> str:
    return "".join(on if bit else off for bit in value.bits[: value.bit_count])


def _time_string(state: BinaryClockState) -> str:
    hours = state.hours_tens.decimal_value * 10 + state.hours_units.decimal_value
    minutes = state.minutes_tens.decimal_value * 10 + state.minutes_units.decimal_value
    seconds = state.seconds_tens.decimal_value * 10 + state.seconds_units.decimal_value
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def _pairs(state: BinaryClockState) -> list[tuple[str, BinaryValue, BinaryValue]]:
    return [
        ("Hours   ", state.hours_tens, state.hours_units),
        ("Minutes ", state.minutes_tens, state.minutes_units),
        ("Seconds ", state.seconds_tens, state.seconds_units),
    ]


def _render_rows(state: BinaryClockState, header: str, on: str, off: str) -> str:
    lines = [header, f"Time: {_time_string(state)}", ""]
    lines.extend(
        f"{label}: {_bit_string(tens, on, off)} {_bit_string(units, on, off)}"
        for label, tens, units in _pairs(state)
    )
    return "\n".join(lines) + "\n"


def render_emoji(state: BinaryClockState) -> str:
    """Render the state with dark moons for 0 bits and full moons for 1 bits."""
    return _render_rows(state, f"{FULL_MOON} Binary Clock {DARK_MOON}", FULL_MOON, DARK_MOON)


def render_ascii(state: BinaryClockState) -> str:
    """Render the state with 0 and 1 characters."""
    return _render_rows(state, "Binary Clock (ASCII)", "1", "0")


def _json_bits(value: BinaryValue) -> str:
    return "[" + ",".join("1" if bit else "0" for bit in value.bits[: value.bit_count]) + "]"


def render_json(state: BinaryClockState) -> str:
    """Render the state as a JSON document with timestamp, time and bit arrays."""
    lines = [
        "{",
        f'  "timestamp": {state.timestamp},',
        f'  "time": "{_time_string(state)}",',
        '  "binary": {',
    ]
    groups = [
        ("hours", state.hours_tens, state.hours_units),
        ("minutes", state.minutes_tens, state.minutes_units),
        ("seconds", state.seconds_tens, state.seconds_units),
    ]
    for position, (name, tens, units) in enumerate(groups):
        closing = "    }" if position == len(groups) - 1 else "    },"
        lines.extend(
            [
                f'    "{name}": {{',
                f'      "tens": {_json_bits(tens)},',
                f'      "units": {_json_bits(units)}',
                closing,
            ]
        )
    lines.extend(["  }", "}"])
    return "\n".join(lines) + "\n"


def render_compact(state: BinaryClockState) -> str:
    """Render the state on one line: ``HH:MM:SS [hh hhhh : mm mmmm : ss ssss]``."""
    groups = " : ".join(
        f"{_bit_string(tens)} {_bit_string(units)}" for _, tens, units in _pairs(state)
    )
    return f"{_time_string(state)} [{groups}]"


def console_emoji(state: BinaryClockState | None, context: Any = None) -> None:
    """Print the emoji rendering to stdout; a missing state prints nothing."""
    if state is None:
        return
    print(render_emoji(state), end="")


def console_ascii(state: BinaryClockState | None, context: Any = None) -> None:
    """Print the 0/1 rendering to stdout; a missing state prints nothing."""
    if state is None:
        return
    print(render_ascii(state), end="")


def display_json(state: BinaryClockState | None, context: TextIO | None = None) -> None:
    """Write the JSON rendering to ``context``, or to stdout when it is None."""
    output = context if context is not None else sys.stdout
    if state is None:
        return
    output.write(render_json(state))


def compact(state: BinaryClockState | None, context: Any = None) -> None:
    """Print the one-line rendering to stdout; a missing state prints nothing."""
    if state is None:
        return
    print(render_compact(state))


def get_time_string(state: BinaryClockState) -> str:
    """Return ``HH:MM:SS`` read back from the state's digit values."""
    if state is None:
        raise TypeError("state must not be None")
    return _time_string(state)


def binary_to_string(binary_val: BinaryValue, format: str) -> str:
    """Format a binary value: '0' or '1' for bits, 'e' for moons, 'd' for decimal."""
    if binary_val is None:
        raise TypeError("binary value must not be None")
    if binary_val.bit_count == 0:
        raise ValueError("binary value has no bits")
    if format in ("0", "1"):
        return _bit_string(binary_val)
    if format == "e":
        return _bit_string(binary_val, FULL_MOON, DARK_MOON)
    if format == "d":
        return str(binary_val.decimal_value)
    raise ValueError(f"unknown format: {format!r}")