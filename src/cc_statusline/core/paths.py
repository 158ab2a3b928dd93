"""Path resolution for cc-statusline.

Config lives in the platform config directory via platformdirs:
    ~/.config/cc-statusline/config.yaml      # Linux
    ~/Library/Application Support/cc-statusline/config.yaml   # macOS

The debug log sits next to Claude Code's own state:
    ~/.claude/status_line_debug.log
    ~/.claude/status_line_debug.log.1 ... .5
"""

import os
from pathlib import Path
from typing import Optional

import platformdirs

APP_NAME = "cc-statusline"
DEBUG_LOG_NAME = "status_line_debug.log"


def get_config_dir() -> Path:
    """Get the cc-statusline config directory.

    Returns:
        Path to the platform config directory for cc-statusline.
    """
    return Path(platformdirs.user_config_dir(APP_NAME, appauthor=False))


def get_config_file() -> Path:
    """Get the path to the config file.

    Can be overridden with the CC_STATUSLINE_CONFIG environment variable.

    Returns:
        Path to config.yaml.
    """
    env_path = os.environ.get("CC_STATUSLINE_CONFIG")
    if env_path:
        return Path(env_path).expanduser()
    return get_config_dir() / "config.yaml"


def get_claude_dir() -> Optional[Path]:
    """Get Claude Code's ~/.claude directory.

    Returns:
        Path under $HOME, or None if HOME is not set.
    """
    home = os.environ.get("HOME")
    if not home:
        return None
    return Path(home) / ".claude"


def get_debug_log_path() -> Optional[Path]:
    """Get the path of the debug log file.

    Returns:
        Path to status_line_debug.log, or None if HOME is not set.
    """
    claude_dir = get_claude_dir()
    if claude_dir is None:
        return None
    return claude_dir / DEBUG_LOG_NAME
