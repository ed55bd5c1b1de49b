import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.dispatch import TaskDispatcher  # noqa: E402
from inputmode.registry import PreferredInput  # noqa: E402


class ManualDispatcher:
    """Queues submitted tasks until the test runs them."""

    def __init__(self):
        self.queue = []

    def submit(self, key, callback, *args):
        self.queue.append((key, callback, args))

    def run_all(self):
        while self.queue:
            _, callback, args = self.queue.pop(0)
            callback(*args)


@pytest.fixture
def manual_dispatcher():
    return ManualDispatcher()


@pytest.fixture
def dispatcher():
    d = TaskDispatcher("test")
    yield d
    d.join(timeout=2.0)


@pytest.fixture
def preferred(dispatcher):
    return PreferredInput(dispatcher=dispatcher)
