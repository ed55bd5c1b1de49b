"""Base class for raw input sources.

A source reports the most recent raw input kind it has seen and calls
its connected callback once per raw input change.
"""

from typing import Any, Callable


class InputSource:
    """Base class for all raw input sources."""

    name: str = "base"

    def __init__(self):
        self._callback: Callable[[Any], None] | None = None
        self._last = None

    def connect(self, callback: Callable[[Any], None]) -> None:
        """Register the callback invoked with every raw input kind."""
        self._callback = callback

    def last_input_type(self):
        """Most recent raw kind seen, or None if nothing was observed yet."""
        return self._last

    def start(self) -> None:
        """Begin delivering input."""

    def stop(self) -> None:
        """Stop delivering input."""

    def is_finished(self) -> bool:
        """True once the source can deliver no more input."""
        return False

    def emit(self, raw) -> None:
        self._last = raw
        if self._callback is not None:
            self._callback(raw)
