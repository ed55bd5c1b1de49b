#!/usr/bin/env python3
"""Preferred input daemon — main entry point.

Runs an asyncio event loop that:
  1. Builds the PreferredInput registry from config
  2. Seeds the current mode from the source's last reported input kind
  3. Feeds every raw input kind from the source into the registry
  4. Logs each preferred-mode change until input ends or a signal arrives
"""

import asyncio
import signal
import sys
import os
import logging

# Add src/ to path so imports work when running directly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config import load_config
from core.dispatch import TaskDispatcher
from core.logging_config import setup_logging
from inputmode.modes import InputMode
from inputmode.registry import PreferredInput
from sources.base import InputSource
from sources.stream import StreamInputSource

log = logging.getLogger("preferred_input.main")


class PreferredInputDaemon:
    """Main application daemon."""

    def __init__(self, config: dict, source: InputSource = None):
        self.config = config
        pref_cfg = config.get("preferred_input", {})
        src_cfg = config.get("source", {})

        self.dispatcher = TaskDispatcher("preferred-input")
        self.preferred = PreferredInput(
            default=pref_cfg.get("default_mode", InputMode.MOUSE_KEYBOARD),
            dispatcher=self.dispatcher,
        )
        self.source = source or StreamInputSource(echo=src_cfg.get("echo", False))
        self._seed = pref_cfg.get("seed_from_last_input", True)
        self._running = False
        self._stop_event: asyncio.Event | None = None
        self._unsubscribe = None

        if self._seed:
            self._seed_from_source()
        self.source.connect(self.preferred.resolve_and_set)

    def _seed_from_source(self) -> None:
        """Adopt whatever device the host saw last, before anyone observes."""
        last = self.source.last_input_type()
        if last is None:
            log.debug("No initial input kind reported; keeping %s",
                      self.preferred.current)
            return
        self.preferred.resolve_and_set(last)
        log.info("Seeded preferred input from %s → %s", last, self.preferred.current)

    def _on_preferred_changed(self, mode: InputMode) -> None:
        log.info("Preferred input: %s", mode)

    # --- Main loop ---

    async def run(self) -> None:
        """Main event loop."""
        self._stop_event = asyncio.Event()
        self._running = True
        self._unsubscribe = self.preferred.subscribe(self._on_preferred_changed)

        self.source.start()
        log.info("Ready! Preferred input: %s", self.preferred.current)

        try:
            while self._running:
                if self.source.is_finished():
                    log.info("Input source finished")
                    break
                try:
                    await asyncio.wait_for(self._stop_event.wait(), timeout=0.1)
                except asyncio.TimeoutError:
                    continue
        except asyncio.CancelledError:
            log.info("Main loop cancelled")
        finally:
            self.shutdown()

    def stop(self) -> None:
        self._running = False
        if self._stop_event is not None:
            self._stop_event.set()

    def shutdown(self) -> None:
        """Clean shutdown."""
        self._running = False
        log.info("Shutting down...")
        self.source.stop()
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        if not self.dispatcher.join(timeout=2.0):
            log.warning("Some handlers were still running at shutdown")
        log.info("Shutdown complete (final preferred input: %s)", self.preferred.current)


def main() -> None:
    setup_logging()
    log.info("=== Preferred Input ===")

    config = load_config()
    daemon = PreferredInputDaemon(config)

    loop = asyncio.new_event_loop()

    def signal_handler():
        log.info("Signal received, stopping...")
        daemon.stop()

    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, signal_handler)

    try:
        loop.run_until_complete(daemon.run())
    finally:
        loop.close()


if __name__ == "__main__":
    main()
