from sources.base import InputSource
from sources.stream import StreamInputSource

__all__ = ["InputSource", "StreamInputSource"]
