"""Configuration management."""

import json
import os
from pathlib import Path
from typing import Callable, Optional

from rich.text import Text

from linemenu.utils.constants import DEFAULT_ITEM_SUFFIX, LabelStyle
from linemenu.utils.exceptions import ConfigurationError


def get_linemenu_dir() -> Path:
    """Get the linemenu data directory (XDG-compliant)."""
    if env_dir := os.environ.get("LINEMENU_DIR"):
        return Path(env_dir)
    return Path.home() / ".config" / "linemenu"


class Config:
    """Application configuration."""

    # Settings loaded from config.json and overridable via LINEMENU_* vars
    SETTINGS = ("debug", "color", "labels", "suffix")

    # Toggleable settings with descriptions (attr_name -> description)
    TOGGLES: dict[str, str] = {
        "debug": "Log to ~/.config/linemenu/debug.log",
        "color": "Style menu output with colors",
    }

    def __init__(self, linemenu_dir: Optional[Path] = None):
        """Load config from directory."""
        self.linemenu_dir = linemenu_dir or get_linemenu_dir()
        self._config_file = self.linemenu_dir / "config.json"
        self._load()

    def _load(self):
        """Load config from file."""
        # Set defaults
        self.debug = False
        self.color = True
        self.labels = LabelStyle.NUMBERS
        self.suffix = DEFAULT_ITEM_SUFFIX
        # Env var overrides
        self.env: dict[str, str] = {}

        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
                if not isinstance(data, dict):
                    data = {}
                self.debug = data.get("debug", False)
                self.color = data.get("color", True)
                self.labels = data.get("labels", LabelStyle.NUMBERS)
                self.suffix = data.get("suffix", DEFAULT_ITEM_SUFFIX)
                env = data.get("env", {})
                self.env = env if isinstance(env, dict) else {}
            except (json.JSONDecodeError, IOError):
                pass

        # Apply env section from config, then shell env vars override
        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """Apply env overrides: first from config.env, then from shell LINEMENU_* vars."""
        prefix = "LINEMENU_"

        def apply_env_dict(env_dict: dict[str, str]):
            for key, value in env_dict.items():
                # Support both LINEMENU_FOO and FOO formats in config.env
                if key.startswith(prefix):
                    attr_name = key[len(prefix) :].lower()
                else:
                    attr_name = key.lower()
                if attr_name not in self.SETTINGS:
                    continue
                value = str(value)
                if isinstance(getattr(self, attr_name), bool):
                    setattr(self, attr_name, value.lower() in ("true", "1", "yes"))
                else:
                    setattr(self, attr_name, value)

        apply_env_dict(self.env)

        shell_env = {k: v for k, v in os.environ.items() if k.startswith(prefix)}
        apply_env_dict(shell_env)

    def save(self):
        """Save config to file."""
        self.linemenu_dir.mkdir(parents=True, exist_ok=True)
        data = {
            "debug": self.debug,
            "color": self.color,
            "labels": self.labels,
            "suffix": self.suffix,
            "env": self.env,
        }
        self._config_file.write_text(json.dumps(data, indent=2))

    def set_debug(self, enabled: bool):
        """Enable or disable debug mode."""
        self.debug = enabled
        self.save()

    def get_toggles(self) -> list[tuple[str, str, bool]]:
        """Get all toggleable settings with current values.

        Returns list of (attr_name, description, is_enabled).
        """
        result = []
        for attr, desc in self.TOGGLES.items():
            value = getattr(self, attr, False)
            result.append((attr, desc, bool(value)))
        return result

    def label_func(self) -> Callable[[int], Text]:
        """Label function for the configured label style.

        Raises:
            ConfigurationError: If the label style is unknown
        """
        from linemenu.core.labels import lettered, numbered, roman

        funcs = {
            LabelStyle.NUMBERS: numbered,
            LabelStyle.LETTERS: lettered,
            LabelStyle.ROMAN: roman,
        }
        try:
            return funcs[self.labels]
        except KeyError:
            raise ConfigurationError(
                f"unknown label style {self.labels!r}, expected one of "
                + ", ".join(LabelStyle.ALL)
            ) from None

    @property
    def log_path(self) -> Path:
        """Path to debug log file."""
        return self.linemenu_dir / "debug.log"
