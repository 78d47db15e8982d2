"""
Inscribe User Configuration

Hierarchical config system with global defaults + local overrides:
- Global: ~/.inscribe/config.json (cross-project settings)
- Local: .inscribe/config.json (project-specific overrides)

Config structure:
{
  "backup": {
    "suffix": ".bak"              // Appended to the original path
  },
  "write": {
    "encoding": "utf-8",
    "line_ending": "preserve",    // preserve | lf | crlf
    "atomic": true,               // temp file + rename
    "create_missing": true        // missing targets start empty
  },
  "batch": {
    "stop_on_error": false        // halt at first failing file
  },
  "preview": {
    "format": "content"           // content | diff
  }
}
"""

import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional

from inscribe.logging_config import logger
from inscribe.paths import InscribePaths


# Default configuration
DEFAULT_CONFIG = {
    "backup": {
        "suffix": ".bak"
    },
    "write": {
        "encoding": "utf-8",
        "line_ending": "preserve",
        "atomic": True,
        "create_missing": True
    },
    "batch": {
        "stop_on_error": False
    },
    "preview": {
        "format": "content"
    }
}


class UserConfig:
    """
    Manages hierarchical user configuration.

    Load order (with override):
    1. Default config (hardcoded)
    2. Global config (~/.inscribe/config.json)
    3. Local config (.inscribe/config.json)
    """

    def __init__(self, project_root: Optional[Path] = None, home: Optional[Path] = None):
        """
        Initialize config manager.

        Args:
            project_root: Project root directory (defaults to CWD)
            home: Home directory for the global config (defaults to ~)
        """
        paths = InscribePaths(project_root or Path.cwd(), home)
        self.project_root = paths.project_root
        self.global_config_path = paths.global_config
        self.local_config_path = paths.local_config

        self._config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """
        Load configuration with hierarchical override.

        Unreadable or malformed files are skipped with a warning.
        """
        config = copy.deepcopy(DEFAULT_CONFIG)

        for label, path in (("global", self.global_config_path), ("local", self.local_config_path)):
            if not path.exists():
                continue
            try:
                with open(path, 'r', encoding='utf-8') as f:
                    loaded = json.load(f)
            except (OSError, ValueError) as e:
                logger.warning(f"Failed to load {label} config {path}: {e}")
                continue
            if not isinstance(loaded, dict):
                logger.warning(f"Ignoring {label} config {path}: top level must be an object")
                continue
            config = self._deep_merge(config, loaded)
            logger.debug(f"Loaded {label} config from {path}")

        return config

    def _deep_merge(self, base: Dict, override: Dict) -> Dict:
        """
        Deep merge two dictionaries, with override taking precedence.
        """
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a config value by dot-separated key.

        Examples:
            config.get("write.line_ending")  # "preserve"
            config.get("batch.stop_on_error")  # False
        """
        value = self._config

        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def reload(self) -> None:
        """Reload configuration from disk."""
        self._config = self._load_config()


def get_user_config(project_root: Optional[Path] = None) -> UserConfig:
    """
    Load the user configuration for project_root (defaults to CWD).

    Not cached: each CLI invocation reads the files once.
    """
    return UserConfig(project_root)
