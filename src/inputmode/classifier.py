"""Raw input kind -> InputMode classification."""

from inputmode.kinds import UserInputType, kind_name
from inputmode.modes import InputMode

_TOUCH = UserInputType.TOUCH.value
_KEYBOARD = UserInputType.KEYBOARD.value


def classify(raw) -> InputMode:
    """Classify a raw input kind. Never raises.

    Touch wins over everything, then keyboard and the ``Mouse*`` family,
    then the ``Gamepad*`` family. Anything else is ``UNKNOWN``.
    """
    name = kind_name(raw)
    if name is None:
        return InputMode.UNKNOWN

    if name == _TOUCH:
        return InputMode.TOUCH
    if name == _KEYBOARD or name.startswith("Mouse"):
        return InputMode.MOUSE_KEYBOARD
    if name.startswith("Gamepad"):
        return InputMode.GAMEPAD
    return InputMode.UNKNOWN
