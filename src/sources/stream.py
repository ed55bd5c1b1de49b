"""Line-oriented raw input source.

Reads one raw input kind name per line from a text stream (stdin by
default) on a background thread. Blank lines and ``#`` comments are
skipped. Known names are delivered as ``UserInputType`` members, other
names as plain strings.
"""

import logging
import sys
import threading
from typing import TextIO

from inputmode.kinds import lookup_kind
from sources.base import InputSource

log = logging.getLogger("preferred_input.sources.stream")


class StreamInputSource(InputSource):
    """Delivers raw input kinds read line by line from a text stream."""

    name = "stream"

    def __init__(self, stream: TextIO = None, initial=None, echo: bool = False):
        super().__init__()
        self.stream = stream if stream is not None else sys.stdin
        self.echo = echo
        self._last = lookup_kind(initial) if isinstance(initial, str) else initial
        self._thread: threading.Thread | None = None
        self._stopped = threading.Event()
        self.finished = threading.Event()
        self._line_count = 0

    def start(self) -> None:
        """Start reading in a background thread."""
        self._stopped.clear()
        self.finished.clear()
        self._thread = threading.Thread(
            target=self._read_loop,
            name=f"{self.name}-source",
            daemon=True,
        )
        self._thread.start()
        log.info("Source %s reading raw input kinds from %s",
                 self.name, getattr(self.stream, "name", "stream"))

    def stop(self) -> None:
        self._stopped.set()
        log.info("Stream source stopped after %d lines", self._line_count)

    def join(self, timeout: float | None = None) -> bool:
        return self.finished.wait(timeout)

    def is_finished(self) -> bool:
        return self.finished.is_set()

    def feed_line(self, line: str) -> None:
        """Deliver one line of input. Comments and blank lines are ignored."""
        text = line.split("#", 1)[0].strip()
        if not text:
            return
        self._line_count += 1
        raw = lookup_kind(text)
        if self.echo:
            log.info("Input: %s", raw)
        self.emit(raw)

    def _read_loop(self) -> None:
        try:
            for line in self.stream:
                if self._stopped.is_set():
                    break
                try:
                    self.feed_line(line)
                except Exception:
                    log.exception("Error handling input line %r", line)
        finally:
            self.finished.set()
            log.debug("Stream source reached end of input")
