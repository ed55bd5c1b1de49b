"""Preferred input detection: classify raw device kinds and observe the current mode."""

from inputmode.classifier import classify
from inputmode.kinds import UserInputType, kind_name, lookup_kind
from inputmode.modes import InputMode
from inputmode.registry import DuplicateSubscriberError, PreferredInput

__all__ = [
    "DuplicateSubscriberError",
    "InputMode",
    "PreferredInput",
    "UserInputType",
    "classify",
    "kind_name",
    "lookup_kind",
]
