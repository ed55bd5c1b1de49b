import logging
import threading
from collections import deque
from typing import Any, Callable, Hashable

log = logging.getLogger("preferred_input.dispatch")


class TaskDispatcher:
    """Fire-and-forget execution of callbacks on background threads.

    Every key owns a serial lane: tasks submitted under the same key run
    in submission order, tasks under different keys run on separate
    daemon threads so a slow callback only holds up its own lane.
    """

    def __init__(self, name: str = "dispatch"):
        self.name = name
        self._lanes: dict[Hashable, deque] = {}
        self._lock = threading.Lock()
        self._idle = threading.Condition(self._lock)

    def submit(self, key: Hashable, callback: Callable, *args: Any) -> None:
        with self._lock:
            lane = self._lanes.get(key)
            if lane is not None:
                lane.append((callback, args))
                return
            self._lanes[key] = deque([(callback, args)])

        thread = threading.Thread(
            target=self._drain,
            args=(key,),
            name=f"{self.name}-{_callback_name(callback)}",
            daemon=True,
        )
        thread.start()

    def join(self, timeout: float | None = None) -> bool:
        """Wait until every lane is drained. Returns False on timeout."""
        with self._idle:
            return self._idle.wait_for(lambda: not self._lanes, timeout)

    @property
    def pending_lanes(self) -> int:
        with self._lock:
            return len(self._lanes)

    def _drain(self, key: Hashable) -> None:
        while True:
            with self._lock:
                lane = self._lanes[key]
                if not lane:
                    del self._lanes[key]
                    self._idle.notify_all()
                    return
                callback, args = lane.popleft()

            try:
                callback(*args)
            except Exception:
                log.exception(
                    "Error in dispatched handler %s", _callback_name(callback)
                )


def _callback_name(callback: Callable) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)
