"""
Configuration Loader for NoteStack
Handles loading and managing application configuration
"""

import copy
import json
from pathlib import Path
from typing import Dict, Any, Optional

DEFAULT_CONFIG: Dict[str, Any] = {
    "app": {
        "name": "NoteStack",
        "version": "1.0.0",
        "debug": False
    },
    "logging": {
        "level": "INFO"
    },
    "ui": {
        "window_width": 420,
        "window_height": 720
    }
}


def load_env_file(env_path: Path) -> Dict[str, str]:
    """
    Load environment variables from a .env file into a dictionary.

    Parses lines of the form KEY=VALUE, ignoring empty lines and lines
    starting with `#`. Surrounding single or double quotes around values
    are stripped. A missing or unreadable file yields an empty dict.

    Parameters:
        env_path (Path): Path to the .env file to read.

    Returns:
        Dict[str, str]: A mapping of variable names to their string values.
    """
    env_vars = {}
    if env_path.exists():
        try:
            with open(env_path, 'r', encoding='utf-8') as f:
                for line in f:
                    line = line.strip()
                    if line and not line.startswith('#') and '=' in line:
                        key, value = line.split('=', 1)
                        # Remove quotes if present
                        value = value.strip().strip('"').strip("'")
                        env_vars[key.strip()] = value
        except OSError as e:
            from .logger import Logger
            Logger().error(f"Error loading .env file: {e}")
    return env_vars


class ConfigLoader:
    """Loads and manages application configuration"""

    def __init__(self, config_path: Optional[Path] = None,
                 env_path: Optional[Path] = None):
        """
        Initialize the ConfigLoader.

        Parameters:
            config_path (Optional[Path]): Path to the JSON config file. Defaults to
                "<project_root>/config/app_config.json".
            env_path (Optional[Path]): Path to the dotenv file. Defaults to
                "<project_root>/.env".
        """
        project_root = Path(__file__).parent.parent.parent
        self.config_path = config_path or project_root / "config" / "app_config.json"
        self.env_path = env_path or project_root / ".env"
        self.config_data: Dict[str, Any] = {}
        self.env_vars: Dict[str, str] = {}
        self.load_config()

    def load_config(self) -> None:
        """
        Load configuration from the configured file and apply environment overrides.

        Missing keys fall back to the built-in defaults. The defaults are kept
        in memory only; nothing is written to disk unless save_config() is
        called. On a read or parse error the defaults are used.
        """
        # Load .env file first
        self.env_vars = load_env_file(self.env_path)
        self.create_default_config()

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    self._merge(self.config_data, json.load(f))
            except (OSError, json.JSONDecodeError) as e:
                from .logger import Logger
                Logger().error(f"Error loading config: {e}")
                self.create_default_config()

        # Override with environment variables
        self._apply_env_overrides()

    def _merge(self, base: Dict[str, Any], overrides: Dict[str, Any]) -> None:
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                self._merge(base[key], value)
            else:
                base[key] = value

    def _apply_env_overrides(self) -> None:
        """
        Apply known environment-variable overrides to the in-memory configuration.

        Values are coerced before assignment:

        - "true"/"false" (case-insensitive) → bool
        - integer-like strings → int
        - otherwise left as str
        """
        env_mappings = {
            'DEBUG': 'app.debug',
            'LOG_LEVEL': 'logging.level',
            'WINDOW_WIDTH': 'ui.window_width',
            'WINDOW_HEIGHT': 'ui.window_height'
        }

        for env_key, config_key in env_mappings.items():
            if env_key in self.env_vars:
                value = self.env_vars[env_key]
                # Convert string values to appropriate types
                if value.lower() in ('true', 'false'):
                    value = value.lower() == 'true'
                elif value.isdigit():
                    value = int(value)

                self.set(config_key, value, save=False)

    def create_default_config(self) -> None:
        """Reset the in-memory configuration to the built-in defaults."""
        self.config_data = copy.deepcopy(DEFAULT_CONFIG)

    def save_config(self) -> None:
        """
        Persist the current in-memory configuration to the configured JSON file.

        Creates parent directories as needed. On failure the error is logged
        and not propagated.
        """
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, 'w', encoding='utf-8') as f:
                json.dump(self.config_data, f, indent=4)
        except OSError as e:
            from .logger import Logger
            Logger().error(f"Error saving config: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Return a configuration value by dot-notated path (e.g., "app.name").

        If any segment is missing or an intermediate value is not a dict,
        `default` is returned.
        """
        keys = key.split('.')
        value = self.config_data

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_env(self, key: str, default: str = "") -> str:
        """Return a variable loaded from the .env file, or `default`."""
        return self.env_vars.get(key, default)

    def set(self, key: str, value: Any, save: bool = True) -> None:
        """
        Set a configuration value identified by a dot-notated key path.

        Intermediate dictionaries are created as needed. If `save` is True the
        configuration is persisted with save_config().
        """
        keys = key.split('.')
        config = self.config_data

        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value
        if save:
            self.save_config()
