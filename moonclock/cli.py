"""Command-line binary clock with emoji, binary, JSON and raw display modes."""

from __future__ import annotations

import signal
import subprocess
import sys
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Sequence

from moonclock import display
from moonclock.api import (
    BinaryClockError,
    BinaryClockState,
    BinaryValue,
    get_current_state,
    get_version,
)

__all__ = [
    "DisplayMode",
    "OperationMode",
    "Config",
    "UsageError",
    "signal_handler",
    "render_raw",
    "display_raw_api",
    "print_usage",
    "parse_arguments",
    "get_display_function",
    "main",
]

DisplayFn = Callable[[BinaryClockState, Any], None]

_RAW_LABELS = (
    "Hours Tens:   ",
    "Hours Units:  ",
    "Minutes Tens: ",
    "Minutes Units:",
    "Seconds Tens: ",
    "Seconds Units:",
)


class DisplayMode(Enum):
    """How the clock state is shown."""

    EMOJI = "emoji"
    BINARY = "binary"
    JSON = "json"
    RAW = "raw"


class OperationMode(Enum):
    """Whether to show the clock once or keep refreshing it."""

    SINGLE = "single"
    LOOP = "loop"


@dataclass(frozen=True)
class Config:
    """Settings chosen on the command line."""

    display_mode: DisplayMode = DisplayMode.EMOJI
    operation_mode: OperationMode = OperationMode.SINGLE
    show_help: bool = False


class UsageError(ValueError):
    """The command line holds an unknown option or display mode."""

    def __init__(self, message: str, hint: str) -> None:
        super().__init__(message)
        self.hint = hint


def signal_handler(sig, frame) -> None:
    """Announce that the clock stopped and exit successfully."""
    print("\n\nBinary clock stopped.")
    sys.exit(0)


def _raw_bits(value: BinaryValue) -> str:
    return ",".join("1" if bit else "0" for bit in value.bits[: value.bit_count])


def render_raw(state: BinaryClockState) -> str:
    """Render every field of the state as plain data."""
    lines = [
        "Binary Clock API Raw Data",
        "=========================",
        f"Timestamp: {state.timestamp}",
        "",
    ]
    lines.extend(
        f"{label}bit_count={value.bit_count}, decimal_value={value.decimal_value}, "
        f"bits=[{_raw_bits(value)}]"
        for label, value in zip(_RAW_LABELS, state.digits())
    )
    return "\n".join(lines) + "\n"


def display_raw_api(state: BinaryClockState | None, context: Any = None) -> None:
    """Print the raw rendering to stdout; a missing state prints nothing."""
    if state is None:
        return
    print(render_raw(state), end="")


def print_usage(program_name: str) -> None:
    """Print the help text for the command."""
    print(
        f"Usage: {program_name} [OPTIONS]\n"
        "\n"
        "Options:\n"
        "  --display MODE    Set display mode (emoji, binary, json, raw)\n"
        f"                    emoji:  Moon emojis {display.DARK_MOON}{display.FULL_MOON} (default)\n"
        "                    binary: 0s and 1s\n"
        "                    json:   JSON format\n"
        "                    raw:    Raw API data structures\n"
        "  --loop            Run continuously (default: single output)\n"
        "  --help, -h        Show this help message\n"
        "\n"
        "Examples:\n"
        f"  {program_name}                          # Single emoji output\n"
        f"  {program_name} --loop                   # Continuous emoji display\n"
        f"  {program_name} --display=binary         # Single binary output\n"
        f"  {program_name} --display=json --loop    # Continuous JSON output"
    )


def parse_arguments(argv: Sequence[str]) -> Config:
    """Parse command-line arguments (without the program name) into a Config.

    Parsing stops at the first ``--help`` or ``-h``.
    """
    display_mode = DisplayMode.EMOJI
    operation_mode = OperationMode.SINGLE
    for arg in argv:
        if arg in ("--help", "-h"):
            return Config(display_mode, operation_mode, show_help=True)
        if arg == "--loop":
            operation_mode = OperationMode.LOOP
        elif arg.startswith("--display="):
            mode = arg[len("--display="):]
            try:
                display_mode = DisplayMode(mode)
            except ValueError:
                raise UsageError(
                    f"Unknown display mode '{mode}'",
                    "Valid modes: emoji, binary, json, raw",
                ) from None
        else:
            raise UsageError(
                f"Unknown option '{arg}'", "Use --help for usage information"
            )
    return Config(display_mode, operation_mode)


_DISPLAY_FUNCTIONS: dict[DisplayMode, DisplayFn] = {
    DisplayMode.EMOJI: display.console_emoji,
    DisplayMode.BINARY: display.console_ascii,
    DisplayMode.JSON: display.display_json,
    DisplayMode.RAW: display_raw_api,
}


def get_display_function(mode: DisplayMode) -> DisplayFn:
    """Return the display callback for ``mode``, emoji when unknown."""
    return _DISPLAY_FUNCTIONS.get(mode, display.console_emoji)


def _clear_screen() -> None:
    try:
        if sys.platform.startswith("win"):
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        pass


def _run_loop(config: Config, display_fn: DisplayFn) -> int:
    print(f"{display.DARK_MOON}{display.FULL_MOON} Binary Clock v{get_version()} "
          f"{display.FULL_MOON}{display.DARK_MOON}")
    print("Press Ctrl+C to exit\n")

    registry = display.DisplayRegistry()
    try:
        registry.register(display_fn, None)
    except (RuntimeError, TypeError):
        print("Error: Failed to register display function")
        return 1

    while True:
        if config.display_mode is not DisplayMode.JSON:
            _clear_screen()
        registry.update_all()
        time.sleep(1)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the clock; return the process exit status."""
    program_name = sys.argv[0] if sys.argv and sys.argv[0] else "moonclock"
    if argv is None:
        argv = sys.argv[1:]

    try:
        config = parse_arguments(argv)
    except UsageError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(exc.hint, file=sys.stderr)
        return 1

    if config.show_help:
        print_usage(program_name)
        return 0

    display_fn = get_display_function(config.display_mode)

    if config.operation_mode is OperationMode.SINGLE:
        try:
            state = get_current_state()
        except BinaryClockError:
            print("Error: Failed to get current time", file=sys.stderr)
            return 1
        display_fn(state, None)
        return 0

    signal.signal(signal.SIGINT, signal_handler)
    return _run_loop(config, display_fn)


if __name__ == "__main__":
    sys.exit(main())