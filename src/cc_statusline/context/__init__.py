"""Context tracking module for cc-statusline.

This module provides context window usage derived from the status payload:
- Tolerant payload parsing with all fields optional
- Auto-compact aware percentage calculations (0-100%)
- Abbreviated token counts and color bands for display
"""

from .constants import AUTO_COMPACT_PERCENT, RED_THRESHOLD, YELLOW_THRESHOLD
from .models import ResolvedStatus, StatusPayload, TokenUsage
from .parser import parse_payload
from .service import (
    ContextService,
    format_token_count,
    percentage_color,
    resolve_status,
)

__all__ = [
    "ContextService",
    "ResolvedStatus",
    "StatusPayload",
    "TokenUsage",
    "format_token_count",
    "parse_payload",
    "percentage_color",
    "resolve_status",
    "AUTO_COMPACT_PERCENT",
    "YELLOW_THRESHOLD",
    "RED_THRESHOLD",
]
