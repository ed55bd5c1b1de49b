from types import SimpleNamespace

import pytest

from inputmode import InputMode, PreferredInput, UserInputType, classify


@pytest.mark.parametrize("kind", [
    UserInputType.MOUSE_BUTTON_1,
    UserInputType.MOUSE_BUTTON_2,
    UserInputType.MOUSE_BUTTON_3,
    UserInputType.MOUSE_WHEEL,
    UserInputType.MOUSE_MOVEMENT,
    UserInputType.KEYBOARD,
])
def test_mouse_and_keyboard(kind):
    assert classify(kind) is InputMode.MOUSE_KEYBOARD


def test_touch():
    assert classify(UserInputType.TOUCH) is InputMode.TOUCH


@pytest.mark.parametrize("n", range(1, 9))
def test_every_gamepad(n):
    assert classify(UserInputType(f"Gamepad{n}")) is InputMode.GAMEPAD


@pytest.mark.parametrize("kind", [
    UserInputType.FOCUS,
    UserInputType.ACCELEROMETER,
    UserInputType.GYRO,
    UserInputType.TEXT_INPUT,
    UserInputType.INPUT_METHOD,
    UserInputType.NONE,
])
def test_other_kinds_are_unknown(kind):
    assert classify(kind) is InputMode.UNKNOWN


def test_prefix_matching_on_unlisted_names():
    assert classify("MouseButton9") is InputMode.MOUSE_KEYBOARD
    assert classify("Gamepad12") is InputMode.GAMEPAD
    assert classify("Joystick") is InputMode.UNKNOWN


def test_prefix_is_case_sensitive():
    assert classify("mousebutton1") is InputMode.UNKNOWN
    assert classify("gamepad1") is InputMode.UNKNOWN


def test_objects_with_name_attribute():
    assert classify(SimpleNamespace(name="Touch")) is InputMode.TOUCH
    assert classify(SimpleNamespace(name="Gamepad3")) is InputMode.GAMEPAD


def test_unusable_values_are_unknown():
    assert classify(None) is InputMode.UNKNOWN
    assert classify(42) is InputMode.UNKNOWN
    assert classify(SimpleNamespace(name=None)) is InputMode.UNKNOWN


def test_registry_exposes_classifier():
    assert PreferredInput.determine_preferred(UserInputType.TOUCH) is InputMode.TOUCH


def test_input_mode_parse():
    assert InputMode.parse("gamepad") is InputMode.GAMEPAD
    assert InputMode.parse("MOUSE_KEYBOARD") is InputMode.MOUSE_KEYBOARD
    assert InputMode.parse(InputMode.TOUCH) is InputMode.TOUCH
    with pytest.raises(ValueError):
        InputMode.parse("Stylus")
