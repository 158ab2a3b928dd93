"""Status line composition.

Turns a parsed StatusPayload into the line Claude Code shows under the prompt:

    🤖 Claude Opus | 📁 project | 🌿 main | 🪙 65.0K | 40%
"""

import logging
from typing import Callable, Optional

from .context import ContextService, StatusPayload, parse_payload, resolve_status
from .context.constants import RESET
from .core.git import get_git_branch

logger = logging.getLogger(__name__)

MODEL_ICON = "\U0001F916"  # 🤖
FOLDER_ICON = "\U0001F4C1"  # 📁
BRANCH_ICON = "\U0001F33F"  # 🌿
TOKEN_ICON = "\U0001FA99"  # 🪙

SEPARATOR = " | "


def build_status_line(
    payload: StatusPayload,
    show_model: bool = True,
    branch: Optional[str] = None,
) -> str:
    """Compose the status line.

    Args:
        payload: Parsed status payload.
        show_model: Whether to include the model segment.
        branch: Current git branch, or None to omit the branch segment.

    Returns:
        The formatted line, with the percentage wrapped in ANSI colour codes.
    """
    status = resolve_status(payload)
    service = ContextService.from_payload(payload)

    location = f"{FOLDER_ICON} {status.directory_label}"
    if branch:
        location += f"{SEPARATOR}{BRANCH_ICON} {branch}"

    segments = [
        location,
        f"{TOKEN_ICON} {service.format_tokens()}",
        f"{service.get_color()}{service.get_percentage()}%{RESET}",
    ]
    if show_model:
        segments.insert(0, f"{MODEL_ICON} {status.model}")

    return SEPARATOR.join(segments)


def render_status_line(
    text: str,
    show_model: bool = True,
    branch_resolver: Optional[Callable[[str], Optional[str]]] = None,
) -> str:
    """Parse stdin text and render the status line.

    The branch is looked up in the payload's directory (or "." if none).
    Never raises for bad input; missing data falls back to defaults.

    Args:
        text: Raw status JSON.
        show_model: Whether to include the model segment.
        branch_resolver: Function returning the branch for a directory.
                         Defaults to get_git_branch.

    Returns:
        The formatted status line.
    """
    payload = parse_payload(text)
    status = resolve_status(payload)
    resolver = branch_resolver or get_git_branch
    branch = resolver(status.directory_path)
    logger.debug(f"branch={branch!r} dir={status.directory_path}")
    return build_status_line(payload, show_model=show_model, branch=branch)
