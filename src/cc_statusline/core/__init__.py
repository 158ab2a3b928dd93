"""Core functionality for cc-statusline.

This package contains the I/O boundaries and ambient modules:
- stdin: Bounded stdin reader
- git: Git branch lookup
- config: Layered configuration
- paths: Config and debug log locations
- debug_log: Optional rotating debug log
"""

from . import config
from . import debug_log
from . import git
from . import paths
from . import stdin

__all__ = [
    "config",
    "debug_log",
    "git",
    "paths",
    "stdin",
]
