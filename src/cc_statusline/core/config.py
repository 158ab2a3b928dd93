"""Configuration for cc-statusline.

Settings are layered: built-in defaults, then the optional YAML config file,
then environment variables, then command-line flags.
"""

import math
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .paths import get_config_file

DEFAULT_STDIN_TIMEOUT = 3.0


def _is_valid_timeout(value: Any) -> bool:
    """True for a positive, finite number of seconds."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        value = float(value)
    except OverflowError:
        return False
    return math.isfinite(value) and value > 0


@dataclass(frozen=True)
class StatuslineConfig:
    """Status line configuration.

    Example config.yaml:

        show_model: false
        debug: true
        stdin_timeout: 5
    """

    # Whether the model segment is shown
    show_model: bool = True

    # Write the debug log to ~/.claude/status_line_debug.log
    debug: bool = False

    # Seconds to wait for the status JSON on stdin
    stdin_timeout: float = DEFAULT_STDIN_TIMEOUT

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "StatuslineConfig":
        """Load configuration from file and environment.

        Args:
            path: Path to config file. Defaults to standard location.

        Returns:
            StatuslineConfig instance.
        """
        return cls.from_file(path).apply_env()

    @classmethod
    def from_file(cls, path: Optional[Path] = None) -> "StatuslineConfig":
        """Load configuration from a YAML file.

        A missing, unreadable or malformed file gives the defaults.

        Args:
            path: Path to config file. Defaults to standard location.

        Returns:
            StatuslineConfig instance.
        """
        if path is None:
            path = get_config_file()

        if not path.exists():
            return cls()

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (yaml.YAMLError, OSError, UnicodeDecodeError):
            return cls()

        if not isinstance(data, dict):
            return cls()
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StatuslineConfig":
        """Create config from dictionary.

        Values of the wrong type are ignored, as are non-positive or
        non-finite timeouts.

        Args:
            data: Dictionary with config values.

        Returns:
            StatuslineConfig instance.
        """
        show_model = data.get("show_model", cls.show_model)
        debug = data.get("debug", cls.debug)
        stdin_timeout = data.get("stdin_timeout", cls.stdin_timeout)

        if not isinstance(show_model, bool):
            show_model = cls.show_model
        if not isinstance(debug, bool):
            debug = cls.debug
        if not _is_valid_timeout(stdin_timeout):
            stdin_timeout = cls.stdin_timeout

        return cls(
            show_model=show_model,
            debug=debug,
            stdin_timeout=float(stdin_timeout),
        )

    def apply_env(self) -> "StatuslineConfig":
        """Apply environment variable overrides.

        CC_STATUSLINE_NO_MODEL=1 hides the model segment; STATUSLINE_DEBUG
        (any value) enables the debug log.
        """
        config = self
        if os.environ.get("CC_STATUSLINE_NO_MODEL") == "1":
            config = replace(config, show_model=False)
        if "STATUSLINE_DEBUG" in os.environ:
            config = replace(config, debug=True)
        return config

    def with_overrides(
        self,
        show_model: Optional[bool] = None,
        debug: Optional[bool] = None,
        stdin_timeout: Optional[float] = None,
    ) -> "StatuslineConfig":
        """Apply command-line overrides; None leaves a setting unchanged."""
        return StatuslineConfig(
            show_model=self.show_model if show_model is None else show_model,
            debug=self.debug if debug is None else debug,
            stdin_timeout=self.stdin_timeout if stdin_timeout is None else stdin_timeout,
        )
