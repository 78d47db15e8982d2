"""
CLI Configuration

Output mode state for the `it` command.
"""

import os
from typing import Optional


class CLIConfig:
    """Configuration for CLI output"""

    # Exit code for rejected requests (per-file failures exit 1)
    EXIT_CONFIGURATION = 2

    # Machine mode (plain output, no tables or colours)
    _machine_mode: Optional[bool] = None

    @classmethod
    def set_machine_mode(cls, enabled: bool) -> None:
        """Set machine mode (plain output, no presentation)"""
        cls._machine_mode = enabled

    @classmethod
    def is_machine_mode(cls) -> bool:
        """
        Check if machine mode is active.

        Machine mode is the default. Returns False only if human mode is
        requested with --human or INSCRIBE_HUMAN_MODE.
        """
        if cls._machine_mode is not None:
            return cls._machine_mode
        if os.getenv("INSCRIBE_HUMAN_MODE", "").lower() in ("1", "true", "yes"):
            return False
        return True

    @classmethod
    def reset(cls) -> None:
        """Forget explicit settings (used between CLI invocations in tests)."""
        cls._machine_mode = None
