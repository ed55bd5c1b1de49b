"""Preferred input mode registry.

Holds the single current InputMode and the handlers observing it. A
handler fires once right after it subscribes (with the mode current at
that moment) and again every time the mode actually changes.

Handler invocations are never direct calls: each one is submitted to a
dispatcher, so a slow or failing handler cannot stall the thread that
feeds input events or the other handlers.
"""

import logging
import threading
from typing import Callable

from core.dispatch import TaskDispatcher
from inputmode.classifier import classify
from inputmode.modes import InputMode

log = logging.getLogger("preferred_input.registry")

Handler = Callable[[InputMode], None]


class DuplicateSubscriberError(ValueError):
    """Raised when a handler subscribes while already subscribed."""

    def __init__(self, handler: Handler):
        super().__init__(f"Handler already subscribed: {handler!r}")
        self.handler = handler


class _Subscription:
    """One active observation. Hashed by identity, so it keys a dispatcher
    lane even when the handler itself is unhashable."""

    __slots__ = ("handler",)

    def __init__(self, handler: Handler):
        self.handler = handler


class PreferredInput:
    """Owns the current input mode and fans changes out to handlers."""

    determine_preferred = staticmethod(classify)

    def __init__(self, default: InputMode = InputMode.MOUSE_KEYBOARD,
                 dispatcher: TaskDispatcher | None = None):
        default = InputMode.parse(default)
        if not default.is_real:
            raise ValueError("Default input mode must not be Unknown")
        self._current = default
        self._subscribers: list[_Subscription] = []
        self._lock = threading.Lock()
        self.dispatcher = dispatcher or TaskDispatcher("preferred-input")

    @property
    def current(self) -> InputMode:
        return self._current

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def subscribe(self, handler: Handler) -> Callable[[], None]:
        """Observe the preferred input.

        ``handler`` fires immediately with the current mode and again on
        every change. Returns a function that stops the observation;
        calling it more than once is harmless.
        """
        with self._lock:
            if any(sub.handler == handler for sub in self._subscribers):
                raise DuplicateSubscriberError(handler)
            subscription = _Subscription(handler)
            current = self._current
            self.dispatcher.submit(subscription, handler, current)
            self._subscribers.append(subscription)
        log.debug("Subscribed %s (replaying %s)", _handler_name(handler), current)

        def unsubscribe() -> None:
            with self._lock:
                try:
                    self._subscribers.remove(subscription)
                except ValueError:
                    return
            log.debug("Unsubscribed %s", _handler_name(handler))

        return unsubscribe

    def set_mode(self, mode: InputMode) -> None:
        mode = InputMode.parse(mode)
        if not mode.is_real:
            raise ValueError("Cannot set input mode to Unknown")

        with self._lock:
            if mode is self._current:
                return
            previous, self._current = self._current, mode
            subscribers = tuple(self._subscribers)
            for sub in subscribers:
                self.dispatcher.submit(sub, sub.handler, mode)

        log.info("Input mode %s → %s (%d subscribers)",
                 previous, mode, len(subscribers))

    def resolve_and_set(self, raw) -> None:
        """Classify a raw input kind and adopt it unless it is Unknown."""
        mode = classify(raw)
        if not mode.is_real:
            log.debug("Ignoring unrecognized input kind: %r", raw)
            return
        self.set_mode(mode)


def _handler_name(handler: Handler) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)
