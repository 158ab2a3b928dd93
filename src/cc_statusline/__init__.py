"""cc-statusline - Status line renderer for the Claude Code terminal prompt.

Reads the session status JSON from stdin and prints a single colored line
with the model, directory, git branch and context-window usage.

Main modules:
    - cli: Command-line interface (cc-statusline command)
    - core: Stdin reader, git branch lookup, config, paths, debug log
    - context: Payload parsing and context window usage
    - statusline: Status line composition
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
