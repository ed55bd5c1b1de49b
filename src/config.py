import os
import logging
from pathlib import Path

import yaml
from dotenv import load_dotenv

from inputmode.modes import InputMode

log = logging.getLogger("preferred_input.config")

# Project root is one level up from src/
PROJECT_ROOT = Path(__file__).resolve().parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"

_TRUE = {"1", "true", "yes", "on"}


def _as_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE


def load_config(config_path: str = None) -> dict:
    """Load configuration from YAML file with .env overrides."""
    load_dotenv(PROJECT_ROOT / ".env")

    yaml_path = Path(config_path) if config_path else CONFIG_DIR / "preferred_input.yaml"
    if not yaml_path.exists():
        log.warning("Config file not found: %s — using defaults", yaml_path)
        config = {}
    else:
        with open(yaml_path) as f:
            config = yaml.safe_load(f) or {}

    # Environment variable overrides
    pref = config.setdefault("preferred_input", {})
    default_mode = InputMode.parse(
        os.environ.get("PREFERRED_INPUT_DEFAULT", pref.get("default_mode", "MouseKeyboard"))
    )
    if not default_mode.is_real:
        raise ValueError("preferred_input.default_mode must not be Unknown")
    pref["default_mode"] = default_mode
    pref["seed_from_last_input"] = _as_bool(
        os.environ.get("PREFERRED_INPUT_SEED", pref.get("seed_from_last_input", True))
    )

    src = config.setdefault("source", {})
    src["echo"] = _as_bool(os.environ.get("SOURCE_ECHO", src.get("echo", False)))

    log.info(
        "Config loaded — default mode %s, seed from last input: %s",
        pref["default_mode"],
        pref["seed_from_last_input"],
    )
    return config
