"""Data models for context tracking."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class StatusPayload:
    """Status JSON sent by Claude Code, with every field optional.

    Nested JSON members are flattened:
        model.display_name -> model_display_name
        workspace.current_dir -> workspace_current_dir
        context_window.context_window_size -> context_window_size
        context_window.current_usage.* -> input_tokens, cache_*_tokens
    """

    model_display_name: Optional[str] = None
    workspace_current_dir: Optional[str] = None
    cwd: Optional[str] = None
    context_window_size: Optional[int] = None
    input_tokens: Optional[int] = None
    cache_creation_tokens: Optional[int] = None
    cache_read_tokens: Optional[int] = None


@dataclass(frozen=True)
class TokenUsage:
    """Token usage of the current context."""

    input_tokens: int = 0
    cache_creation_tokens: int = 0
    cache_read_tokens: int = 0

    @property
    def total(self) -> int:
        """Total tokens occupying the context, including cache."""
        return self.input_tokens + self.cache_creation_tokens + self.cache_read_tokens


@dataclass(frozen=True)
class ResolvedStatus:
    """Display values with all defaults applied."""

    model: str
    directory_path: str
    directory_label: str

