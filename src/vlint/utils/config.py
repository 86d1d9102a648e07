import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "compiler": "v",
    "flags": [],
    "output_dir": None,
    "log_file": "/tmp/vlint.log",
    "log_level": "INFO",
    "debounce_seconds": 0.5,
}


class ConfigManager:
    """
    User settings stored as JSON in ~/.vlint/config.json, layered over DEFAULT_CONFIG.
    """
    def __init__(self):
        self.config_dir = Path.home() / ".vlint"
        self.config_file = self.config_dir / "config.json"
        self.config = self.load_config()

    def load_config(self) -> dict:
        self.config_dir.mkdir(parents=True, exist_ok=True)
        config = DEFAULT_CONFIG.copy()
        if not self.config_file.exists():
            return config
        try:
            with open(self.config_file, "r") as f:
                user_config = json.load(f)
            if isinstance(user_config, dict):
                config.update(user_config)
            else:
                logger.warning("Ignoring %s: expected a JSON object", self.config_file)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read %s, using defaults: %s", self.config_file, e)
        return config

    def save_config(self):
        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w") as f:
            json.dump(self.config, f, indent=2)

    def get(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default)

    def set(self, key: str, value: Any):
        self.config[key] = value
        self.save_config()
