"""Terminal messages printed outside the TUI."""

import sys

RED = "\033[31m"
RESET = "\033[0m"
CROSS = "\u2717"  # ✗


def _supports_color(stream) -> bool:
    """Colour only when writing to a terminal."""
    return hasattr(stream, "isatty") and stream.isatty()


def error(message: str) -> None:
    """Print an error to stderr with a red cross."""
    stream = sys.stderr
    cross = f"{RED}{CROSS}{RESET}" if _supports_color(stream) else CROSS
    print(f"{cross} {message}", file=stream)
