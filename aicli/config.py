import json
import logging
import os
import tempfile
from dataclasses import dataclass
from typing import Any, Optional

from rich.console import Console

logger = logging.getLogger(__name__)

console = Console()

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_CONFIG_PATH = os.path.join(os.path.expanduser("~"), ".aicli-config.json")
DEFAULT_LOG_DIR = os.path.join(os.path.expanduser("~/.config/aicli"), "logs")


@dataclass
class Config:
    """Persisted settings for the CLI tool."""

    api_key: str = ""
    model: str = DEFAULT_MODEL

    @classmethod
    def from_dict(cls, data: Any) -> "Config":
        """
        Build a Config from a decoded JSON record.

        Each field falls back to its default on its own when the record does
        not carry a usable value for it. The older ``openaiApiKey`` key is
        still honoured when ``apiKey`` is missing or not a string.
        """
        config = cls()
        if not isinstance(data, dict):
            return config

        api_key = data.get("apiKey")
        if not isinstance(api_key, str):
            api_key = data.get("openaiApiKey")
        if isinstance(api_key, str):
            config.api_key = api_key

        model = data.get("model")
        if isinstance(model, str) and model.strip():
            config.model = model

        return config

    def to_dict(self) -> dict:
        return {"apiKey": self.api_key, "model": self.model}

    def redacted_api_key(self) -> str:
        """Return the API key masked down to its last four characters."""
        if not self.api_key:
            return "Not set"
        return "********" + self.api_key[-4:]

    def __str__(self) -> str:
        """Return string representation of the configuration."""
        return str({"api_key": self.redacted_api_key(), "model": self.model})


class ConfigStore:
    """Loads and saves the Config record at a fixed path."""

    def __init__(self, path: str = DEFAULT_CONFIG_PATH):
        self.path = path

    def load(self) -> Config:
        """Return the defaults merged with whatever the config file holds."""
        if not os.path.exists(self.path):
            return Config()
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (ValueError, OSError) as e:
            # ValueError covers both bad JSON and bad UTF-8
            logger.warning(f"Could not read config file at {self.path}. Using defaults. Error: {e}")
            return Config()
        return Config.from_dict(data)

    def save(self, config: Config) -> bool:
        """
        Write the configuration to disk.

        The record is written to a temporary file next to the target and then
        moved over it, so a failed write leaves the previous file untouched.

        Returns:
            True if the file was written, False otherwise.
        """
        directory = os.path.dirname(os.path.abspath(self.path))
        tmp_path: Optional[str] = None
        try:
            fd, tmp_path = tempfile.mkstemp(prefix=".aicli-config-", suffix=".tmp", dir=directory)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(config.to_dict(), f, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error(f"Error saving config to {self.path}: {e}")
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            return False

        logger.info(f"Configuration saved to {self.path}")
        console.print("[green]Configuration saved successfully![/green]")
        return True


def get_config_store(path: Optional[str] = None) -> ConfigStore:
    """Returns a ConfigStore for the given path, or the per-user default."""
    return ConfigStore(path or DEFAULT_CONFIG_PATH)
