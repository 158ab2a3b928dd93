#!/usr/bin/env python3
"""cc-statusline CLI - Status line command for Claude Code.

Usage (in ~/.claude/settings.json):
    "statusLine": {"type": "command", "command": "cc-statusline"}

    echo '{"model": {"display_name": "Opus"}, "cwd": "/tmp"}' | cc-statusline
    cc-statusline --hide-model < status.json
"""

import logging
import math
import sys
from pathlib import Path
from typing import Optional

import click
from click.core import ParameterSource

from . import __version__
from .core.config import StatuslineConfig
from .core.debug_log import configure_debug_logging
from .core.stdin import StdinError, read_stdin_with_timeout
from .statusline import render_status_line

logger = logging.getLogger(__name__)


def _flag_override(ctx: click.Context, name: str, value: bool) -> Optional[bool]:
    """Return a flag value only if it was given on the command line."""
    if ctx.get_parameter_source(name) is ParameterSource.COMMANDLINE:
        return value
    return None


def _validate_timeout(
    ctx: click.Context, param: click.Parameter, value: Optional[float]
) -> Optional[float]:
    """Reject nan and inf, which FloatRange lets through."""
    if value is not None and not math.isfinite(value):
        raise click.BadParameter("must be a finite number of seconds.")
    return value


@click.command()
@click.version_option(version=__version__, prog_name="cc-statusline")
@click.option(
    "--hide-model/--show-model",
    "hide_model",
    default=False,
    help="Omit or include the model segment. Overrides CC_STATUSLINE_NO_MODEL.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Write a debug log to ~/.claude/status_line_debug.log. Overrides STATUSLINE_DEBUG.",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    callback=_validate_timeout,
    help="Seconds to wait for input on stdin (default: 3).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file to use instead of the default config.yaml.",
)
@click.pass_context
def main(
    ctx: click.Context,
    hide_model: bool,
    debug: bool,
    timeout: Optional[float],
    config_path: Optional[Path],
):
    """Render the Claude Code status line from the JSON on stdin.

    Prints the model, directory, git branch, token count and context usage
    as a single line. Exits with status 1 if stdin cannot be read in time.
    """
    hide = _flag_override(ctx, "hide_model", hide_model)
    config = StatuslineConfig.load(config_path).with_overrides(
        show_model=None if hide is None else not hide,
        debug=_flag_override(ctx, "debug", debug),
        stdin_timeout=timeout,
    )
    configure_debug_logging(config)

    logger.debug("=== START ===")
    logger.debug("waiting for stdin...")
    try:
        stdin = click.get_binary_stream("stdin")
        # Read the raw stream so an abandoned reader thread holds no buffer
        # lock when the interpreter shuts down
        text = read_stdin_with_timeout(getattr(stdin, "raw", stdin), timeout=config.stdin_timeout)
    except StdinError as e:
        logger.debug(f"stdin error: {e}")
        click.echo(str(e), err=True)
        sys.exit(1)
    logger.debug(f"stdin received: {len(text.encode('utf-8'))} bytes")

    logger.debug("building status line...")
    line = render_status_line(text, show_model=config.show_model)
    logger.debug("status line built")

    # Claude Code reads the colours from a pipe, so never strip them
    click.echo(line, color=True)
    logger.debug("=== END ===")


if __name__ == "__main__":
    main()
