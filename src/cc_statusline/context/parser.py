"""Tolerant parser for the Claude Code status payload.

Any problem with the input (empty text, invalid JSON, a member of the wrong
type) produces an empty StatusPayload instead of an error, so the status
line can always be rendered.
"""

import json
import logging
from typing import Any, Dict, Optional

from .constants import MAX_TOKEN_COUNT
from .models import StatusPayload

logger = logging.getLogger(__name__)


class PayloadShapeError(ValueError):
    """JSON document does not have the expected structure."""

    pass


def _get_object(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    """Get a nested object, treating a missing member or null as empty."""
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise PayloadShapeError(f"'{key}' must be an object, got {type(value).__name__}")
    return value


def _get_string(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    raise PayloadShapeError(f"'{key}' must be a string, got {type(value).__name__}")


def _get_count(data: Dict[str, Any], key: str) -> Optional[int]:
    """Get an unsigned 64-bit integer counter."""
    value = data.get(key)
    if value is None:
        return None
    # bool is a subclass of int
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= MAX_TOKEN_COUNT:
        raise PayloadShapeError(f"'{key}' must be an unsigned 64-bit integer, got {value!r}")
    return value


def payload_from_dict(data: Any) -> StatusPayload:
    """Build a StatusPayload from decoded JSON.

    Args:
        data: Result of json.loads on the status text.

    Returns:
        StatusPayload with the fields present in data.

    Raises:
        PayloadShapeError: If data or one of its known members has the wrong type.
    """
    if not isinstance(data, dict):
        raise PayloadShapeError(f"Payload must be an object, got {type(data).__name__}")

    model = _get_object(data, "model")
    workspace = _get_object(data, "workspace")
    context_window = _get_object(data, "context_window")
    current_usage = _get_object(context_window, "current_usage")

    return StatusPayload(
        model_display_name=_get_string(model, "display_name"),
        workspace_current_dir=_get_string(workspace, "current_dir"),
        cwd=_get_string(data, "cwd"),
        context_window_size=_get_count(context_window, "context_window_size"),
        input_tokens=_get_count(current_usage, "input_tokens"),
        cache_creation_tokens=_get_count(current_usage, "cache_creation_input_tokens"),
        cache_read_tokens=_get_count(current_usage, "cache_read_input_tokens"),
    )


def parse_payload(text: str) -> StatusPayload:
    """Parse the status text read from stdin.

    Empty or whitespace-only text, malformed JSON (including nesting too
    deep to decode and integer literals too long to convert) and documents
    with an unexpected shape all yield a StatusPayload with every field absent.

    Args:
        text: Raw stdin contents.

    Returns:
        Parsed StatusPayload (never raises).
    """
    if not text.strip():
        return StatusPayload()

    try:
        return payload_from_dict(json.loads(text))
    except (ValueError, RecursionError) as e:
        # ValueError covers JSONDecodeError, PayloadShapeError and the int digit limit
        logger.debug(f"payload ignored: {e}")
        return StatusPayload()
