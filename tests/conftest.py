"""Pytest configuration for cc-statusline tests.

This file ensures src/ is in the Python path for imports during testing,
and keeps the debug log handler and environment toggles from leaking
between tests.
"""
import sys
from pathlib import Path

import pytest


def pytest_configure(config):
    """Hook called after command line options have been parsed.

    This runs BEFORE test collection, so src/ is importable even when the
    package is not installed.
    """
    src_path = str(Path(__file__).parent.parent.absolute() / "src")
    if src_path in sys.path:
        sys.path.remove(src_path)
    sys.path.insert(0, src_path)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run every test without the user's toggles or config file."""
    monkeypatch.delenv("CC_STATUSLINE_NO_MODEL", raising=False)
    monkeypatch.delenv("STATUSLINE_DEBUG", raising=False)
    monkeypatch.setenv("CC_STATUSLINE_CONFIG", str(tmp_path / "no-such-config.yaml"))
    yield
    from cc_statusline.core.debug_log import reset_debug_logging

    reset_debug_logging()


@pytest.fixture
def opus_payload() -> str:
    """Status JSON with 65,000 tokens used of a 200,000 token window."""
    return """{
        "model": {"display_name": "Claude Opus"},
        "cwd": "/tmp",
        "context_window": {
            "context_window_size": 200000,
            "current_usage": {
                "input_tokens": 50000,
                "cache_creation_input_tokens": 10000,
                "cache_read_input_tokens": 5000
            }
        }
    }"""
