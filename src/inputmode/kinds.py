"""Host input-device vocabulary.

Raw input kinds are opaque to the classifier: it only looks at a kind's
name. ``UserInputType`` gives sources a concrete vocabulary to report,
but plain strings and any object with a ``name`` attribute work too.
"""

from enum import Enum


class UserInputType(str, Enum):
    """Device categories reported by the host input layer."""

    MOUSE_BUTTON_1 = "MouseButton1"
    MOUSE_BUTTON_2 = "MouseButton2"
    MOUSE_BUTTON_3 = "MouseButton3"
    MOUSE_WHEEL = "MouseWheel"
    MOUSE_MOVEMENT = "MouseMovement"
    TOUCH = "Touch"
    KEYBOARD = "Keyboard"
    FOCUS = "Focus"
    ACCELEROMETER = "Accelerometer"
    GYRO = "Gyro"
    GAMEPAD_1 = "Gamepad1"
    GAMEPAD_2 = "Gamepad2"
    GAMEPAD_3 = "Gamepad3"
    GAMEPAD_4 = "Gamepad4"
    GAMEPAD_5 = "Gamepad5"
    GAMEPAD_6 = "Gamepad6"
    GAMEPAD_7 = "Gamepad7"
    GAMEPAD_8 = "Gamepad8"
    TEXT_INPUT = "TextInput"
    INPUT_METHOD = "InputMethod"
    NONE = "None"

    def __str__(self) -> str:
        return self.value


# Case-insensitive lookup used by text-based sources
KIND_NAME_LOOKUP = {kind.value.lower(): kind for kind in UserInputType}


def kind_name(raw) -> str | None:
    """Return the name a raw input kind is classified by, or None."""
    if isinstance(raw, UserInputType):
        return raw.value
    if isinstance(raw, str):
        return raw
    name = getattr(raw, "name", None)
    return name if isinstance(name, str) else None


def lookup_kind(text: str):
    """Map a kind name to its ``UserInputType``; unknown names pass through."""
    name = text.strip()
    return KIND_NAME_LOOKUP.get(name.lower(), name)
