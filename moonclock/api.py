"""Core binary clock data: time components split into digits and bits."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable

__all__ = [
    "ErrorCode",
    "BinaryClockError",
    "InvalidTimeError",
    "InvalidBitCountError",
    "SystemTimeError",
    "BinaryValue",
    "TimeComponents",
    "BinaryClockState",
    "to_binary",
    "to_decimal",
    "get_current_time",
    "state_from_time",
    "get_current_state",
    "get_error_string",
    "get_version",
]

API_VERSION = "1.0.0"
MAX_BITS = 6


class ErrorCode(IntEnum):
    """Error codes describing why an operation failed."""

    SUCCESS = 0
    INVALID_TIME = 1
    INVALID_BIT_COUNT = 2
    NULL_POINTER = 3
    SYSTEM_TIME = 4


_ERROR_MESSAGES = {
    ErrorCode.SUCCESS: "Operation completed successfully",
    ErrorCode.INVALID_TIME: "Invalid time components provided",
    ErrorCode.INVALID_BIT_COUNT: "Bit count out of valid range (1-6)",
    ErrorCode.NULL_POINTER: "Null pointer passed to function requiring valid pointer",
    ErrorCode.SYSTEM_TIME: "System time retrieval failed",
}


def get_error_string(error: int) -> str:
    """Return a human-readable description of an error code."""
    try:
        return _ERROR_MESSAGES[ErrorCode(error)]
    except ValueError:
        return "Unknown error"


def get_version() -> str:
    """Return the API version in semver form."""
    return API_VERSION


class BinaryClockError(Exception):
    """Base class of all binary clock errors."""

    code: ErrorCode = ErrorCode.SUCCESS

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or get_error_string(self.code))


class InvalidTimeError(BinaryClockError, ValueError):
    """Time components outside 0-23 / 0-59 / 0-59."""

    code = ErrorCode.INVALID_TIME


class InvalidBitCountError(BinaryClockError, ValueError):
    """Bit count outside the supported range."""

    code = ErrorCode.INVALID_BIT_COUNT


class SystemTimeError(BinaryClockError, OSError):
    """The system clock could not be read."""

    code = ErrorCode.SYSTEM_TIME


@dataclass(frozen=True)
class BinaryValue:
    """A small decimal value with its most-significant-bit-first representation."""

    bit_count: int
    bits: tuple[bool, ...]
    decimal_value: int

    def __post_init__(self) -> None:
        bits = tuple(bool(bit) for bit in self.bits)
        if not 0 <= self.bit_count <= MAX_BITS or len(bits) < self.bit_count:
            raise InvalidBitCountError()
        object.__setattr__(self, "bits", bits[: self.bit_count])


@dataclass(frozen=True)
class TimeComponents:
    """Hours (24-hour), minutes and seconds."""

    hours: int
    minutes: int
    seconds: int


@dataclass(frozen=True)
class BinaryClockState:
    """Full binary clock state: each time component split into tens and units."""

    hours_tens: BinaryValue
    hours_units: BinaryValue
    minutes_tens: BinaryValue
    minutes_units: BinaryValue
    seconds_tens: BinaryValue
    seconds_units: BinaryValue
    timestamp: int = field(default=0)

    def digits(self) -> tuple[BinaryValue, ...]:
        """Return the six digit values, hours tens first and seconds units last."""
        return (
            self.hours_tens,
            self.hours_units,
            self.minutes_tens,
            self.minutes_units,
            self.seconds_tens,
            self.seconds_units,
        )


def to_binary(value: int, bit_count: int) -> BinaryValue:
    """Convert ``value`` to ``bit_count`` bits; values too large are truncated."""
    if not 1 <= bit_count <= MAX_BITS:
        raise InvalidBitCountError()
    value &= (1 << bit_count) - 1
    bits = tuple(bool((value >> shift) & 1) for shift in reversed(range(bit_count)))
    return BinaryValue(bit_count=bit_count, bits=bits, decimal_value=value)


def _bits_to_int(bits: Iterable[bool]) -> int:
    result = 0
    for bit in bits:
        result = (result << 1) | int(bit)
    return result


def to_decimal(binary: BinaryValue) -> int:
    """Recover the decimal value from the significant bits of ``binary``."""
    if binary is None:
        raise TypeError(get_error_string(ErrorCode.NULL_POINTER))
    return _bits_to_int(binary.bits[: binary.bit_count])


def get_current_time() -> TimeComponents:
    """Return the current local time as components."""
    try:
        now = time.localtime(time.time())
    except (OSError, OverflowError, ValueError) as exc:
        raise SystemTimeError() from exc
    return TimeComponents(hours=now.tm_hour, minutes=now.tm_min, seconds=now.tm_sec)


def state_from_time(time_comp: TimeComponents) -> BinaryClockState:
    """Build the binary clock state for the given time components."""
    if time_comp is None:
        raise TypeError(get_error_string(ErrorCode.NULL_POINTER))
    if not (
        0 <= time_comp.hours <= 23
        and 0 <= time_comp.minutes <= 59
        and 0 <= time_comp.seconds <= 59
    ):
        raise InvalidTimeError()

    hours_tens, hours_units = divmod(time_comp.hours, 10)
    minutes_tens, minutes_units = divmod(time_comp.minutes, 10)
    seconds_tens, seconds_units = divmod(time_comp.seconds, 10)

    return BinaryClockState(
        hours_tens=to_binary(hours_tens, 3),
        hours_units=to_binary(hours_units, 4),
        minutes_tens=to_binary(minutes_tens, 3),
        minutes_units=to_binary(minutes_units, 4),
        seconds_tens=to_binary(seconds_tens, 3),
        seconds_units=to_binary(seconds_units, 4),
        timestamp=int(time.time()),
    )


def get_current_state() -> BinaryClockState:
    """Return the binary clock state for the current local time."""
    return state_from_time(get_current_time())