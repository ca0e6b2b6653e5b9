"""Binary clock: time as bits, rendered with moon emojis, ASCII, JSON or raw data."""

__version__ = "1.0.0"
__all__ = ["api", "lib", "display", "cli"]