"""
Configuration for line mutation.

Flattens the hierarchical user config into the settings the editor and
batch driver read.
"""

from typing import Any, Dict, Optional

from inscribe.exceptions import ConfigurationError
from inscribe.user_config import DEFAULT_CONFIG, UserConfig, get_user_config


LINE_ENDINGS = {
    "lf": "\n",
    "crlf": "\r\n",
}

LINE_ENDING_POLICIES = ("preserve", "lf", "crlf")

PREVIEW_FORMATS = ("content", "diff")

# Built-in settings, used when no config files are consulted
MUTATION_DEFAULTS = {
    "backup_suffix": DEFAULT_CONFIG["backup"]["suffix"],
    "encoding": DEFAULT_CONFIG["write"]["encoding"],
    "line_ending": DEFAULT_CONFIG["write"]["line_ending"],
    "atomic_write": DEFAULT_CONFIG["write"]["atomic"],
    "create_missing": DEFAULT_CONFIG["write"]["create_missing"],
    "stop_on_error": DEFAULT_CONFIG["batch"]["stop_on_error"],
    "preview_format": DEFAULT_CONFIG["preview"]["format"],
}


def get_mutation_config(user_config: Optional[UserConfig] = None) -> Dict[str, Any]:
    """
    Get mutation configuration from the layered user config.

    Raises:
        ConfigurationError: If a config file names an unknown policy.
    """
    user_config = user_config or get_user_config()
    config = {
        "backup_suffix": user_config.get("backup.suffix", MUTATION_DEFAULTS["backup_suffix"]),
        "encoding": user_config.get("write.encoding", MUTATION_DEFAULTS["encoding"]),
        "line_ending": user_config.get("write.line_ending", MUTATION_DEFAULTS["line_ending"]),
        "atomic_write": user_config.get("write.atomic", MUTATION_DEFAULTS["atomic_write"]),
        "create_missing": user_config.get("write.create_missing", MUTATION_DEFAULTS["create_missing"]),
        "stop_on_error": user_config.get("batch.stop_on_error", MUTATION_DEFAULTS["stop_on_error"]),
        "preview_format": user_config.get("preview.format", MUTATION_DEFAULTS["preview_format"]),
    }
    validate_mutation_config(config)
    return config


def validate_mutation_config(config: Dict[str, Any]) -> None:
    if config["line_ending"] not in LINE_ENDING_POLICIES:
        raise ConfigurationError(
            f"Unknown line ending policy '{config['line_ending']}' "
            f"(expected one of: {', '.join(LINE_ENDING_POLICIES)})"
        )
    if config["preview_format"] not in PREVIEW_FORMATS:
        raise ConfigurationError(
            f"Unknown preview format '{config['preview_format']}' "
            f"(expected one of: {', '.join(PREVIEW_FORMATS)})"
        )
    if not config["backup_suffix"]:
        raise ConfigurationError("Backup suffix must not be empty")
