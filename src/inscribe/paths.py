"""
Inscribe Path Configuration

Centralized path management for Inscribe's own files. Target files are
never resolved here; they are taken as given on the command line.

Directory Structure:
~/.inscribe/
├── config.json          # Global config
└── logs/                # Log files (opt-in)

<project>/.inscribe/
└── config.json          # Local config overrides
"""

from pathlib import Path
from typing import Optional


class InscribePaths:
    """
    Centralized path configuration for Inscribe.

    Local paths are lazily resolved relative to project_root.
    Default project_root is current working directory.
    """

    INSCRIBE_DIR = ".inscribe"
    CONFIG_NAME = "config.json"
    LOGS_DIR = "logs"

    def __init__(self, project_root: Optional[Path] = None, home: Optional[Path] = None):
        """
        Initialize paths configuration.

        Args:
            project_root: Root directory for the project. Defaults to CWD.
            home: Home directory holding the global config. Defaults to ~.
        """
        self._project_root = project_root
        self._home = home

    @property
    def project_root(self) -> Path:
        """Get the project root directory."""
        if self._project_root is None:
            return Path.cwd()
        return self._project_root

    @property
    def global_dir(self) -> Path:
        """Get the ~/.inscribe directory path."""
        home = self._home if self._home is not None else Path.home()
        return home / self.INSCRIBE_DIR

    @property
    def local_dir(self) -> Path:
        """Get the project-local .inscribe directory path."""
        return self.project_root / self.INSCRIBE_DIR

    @property
    def global_config(self) -> Path:
        return self.global_dir / self.CONFIG_NAME

    @property
    def local_config(self) -> Path:
        return self.local_dir / self.CONFIG_NAME

    @property
    def logs_dir(self) -> Path:
        """Get the logs directory path."""
        return self.global_dir / self.LOGS_DIR

    def ensure_dirs(self) -> None:
        """Create the global directories if they don't exist."""
        self.global_dir.mkdir(parents=True, exist_ok=True)
        self.logs_dir.mkdir(exist_ok=True)


# Global instance for convenience
_default_paths: Optional[InscribePaths] = None


def get_paths() -> InscribePaths:
    """Get the shared paths configuration for the current directory and home."""
    global _default_paths
    if _default_paths is None:
        _default_paths = InscribePaths()
    return _default_paths
