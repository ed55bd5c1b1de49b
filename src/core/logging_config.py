import logging
import sys
import os


def setup_logging(level: str = None) -> logging.Logger:
    """Configure logging for the preferred-input daemon."""
    log_level = level or os.environ.get("LOG_LEVEL", "INFO")
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)-8s] %(threadName)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger("preferred_input")
    root.setLevel(numeric_level)
    # setup_logging may run more than once (tests, re-entry from main)
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.propagate = False  # prevent duplicate output via root logger

    logging.basicConfig(level=logging.WARNING)

    return root
