"""Semantic input modes."""

from enum import Enum


class InputMode(str, Enum):
    """How the user is currently interacting with the application.

    ``UNKNOWN`` is a transient classification result only; it is never
    held as the current mode nor delivered to subscribers.
    """

    MOUSE_KEYBOARD = "MouseKeyboard"
    TOUCH = "Touch"
    GAMEPAD = "Gamepad"
    UNKNOWN = "Unknown"

    @property
    def is_real(self) -> bool:
        return self is not InputMode.UNKNOWN

    @classmethod
    def parse(cls, value) -> "InputMode":
        """Accept a member, its value, or its name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for mode in cls:
            if text.lower() in (mode.value.lower(), mode.name.lower()):
                return mode
        raise ValueError(f"Unknown input mode: {value!r}")

    def __str__(self) -> str:
        return self.value
