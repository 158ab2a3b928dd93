"""Context usage service."""

from pathlib import PurePath
from typing import Optional

from .constants import (
    AUTO_COMPACT_PERCENT,
    DEFAULT_DIRECTORY,
    DEFAULT_MODEL_NAME,
    GREEN,
    RED,
    RED_THRESHOLD,
    YELLOW,
    YELLOW_THRESHOLD,
)
from .models import ResolvedStatus, StatusPayload, TokenUsage


def format_token_count(tokens: int) -> str:
    """Format a token count for display.

    Returns:
        "1.5M" for millions, "65.0K" for thousands, plain digits below 1000.
    """
    if tokens >= 1_000_000:
        return _format_tenths(tokens, 1_000_000, "M")
    if tokens >= 1_000:
        return _format_tenths(tokens, 1_000, "K")
    return str(tokens)


def _format_tenths(tokens: int, unit: int, suffix: str) -> str:
    """tokens / unit with one decimal, rounded half up, in integer arithmetic."""
    tenths = (tokens * 10 + unit // 2) // unit
    return f"{tenths // 10}.{tenths % 10}{suffix}"


def directory_label(path: str) -> str:
    """Last segment of a path, or "." when there is none (e.g. "/")."""
    name = PurePath(path).name
    if not name or name == "..":
        return DEFAULT_DIRECTORY
    return name


def resolve_status(payload: StatusPayload) -> ResolvedStatus:
    """Apply display defaults to the model and directory fields."""
    directory_path = payload.workspace_current_dir or payload.cwd or DEFAULT_DIRECTORY
    return ResolvedStatus(
        model=payload.model_display_name or DEFAULT_MODEL_NAME,
        directory_path=directory_path,
        directory_label=directory_label(directory_path),
    )


class ContextService:
    """Calculates context window usage against the auto-compact limit.

    Example:
        service = ContextService.from_payload(payload)

        pct = service.get_percentage()  # Returns 0-100
        color = service.get_color()     # ANSI colour for the band
        label = service.format_tokens() # e.g. "65.0K"
    """

    def __init__(self, context_window_size: int = 0, usage: Optional[TokenUsage] = None):
        """Initialize context service.

        Args:
            context_window_size: Declared context window of the session.
                                 0 means unknown and always reports 0%.
            usage: Current token usage. Defaults to no tokens.
        """
        self._context_window = context_window_size
        self._usage = usage or TokenUsage()

    @classmethod
    def from_payload(cls, payload: StatusPayload) -> "ContextService":
        """Create a service from a parsed payload, defaulting absent counts to 0."""
        return cls(
            context_window_size=payload.context_window_size or 0,
            usage=TokenUsage(
                input_tokens=payload.input_tokens or 0,
                cache_creation_tokens=payload.cache_creation_tokens or 0,
                cache_read_tokens=payload.cache_read_tokens or 0,
            ),
        )

    @property
    def auto_compact_limit(self) -> int:
        """Token count at which Claude Code compacts the context."""
        return self._context_window * AUTO_COMPACT_PERCENT // 100

    def get_percentage(self) -> int:
        """Get usage as a whole percentage of the auto-compact limit.

        Returns:
            Percentage bounded to 0-100, or 0 when the limit is 0.
        """
        limit = self.auto_compact_limit
        if limit <= 0:
            return 0
        return min(100, self._usage.total * 100 // limit)

    def get_color(self) -> str:
        """ANSI colour for the current percentage band."""
        return percentage_color(self.get_percentage())

    def format_tokens(self) -> str:
        return format_token_count(self._usage.total)


def percentage_color(percentage: int) -> str:
    """Map a percentage to green (<70), yellow (70-89) or red (>=90)."""
    if percentage >= RED_THRESHOLD:
        return RED
    if percentage >= YELLOW_THRESHOLD:
        return YELLOW
    return GREEN
