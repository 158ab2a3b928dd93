"""Tests for the cc-statusline command."""

from unittest import mock

import pytest
from click.testing import CliRunner

from cc_statusline.cli import main
from cc_statusline.context.constants import GREEN, RESET
from cc_statusline.core.stdin import (
    StdinDisconnectedError,
    StdinReadError,
    StdinTimeoutError,
)


@pytest.fixture
def runner():
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def no_git():
    """Keep the tests independent of the directory's git state."""
    with mock.patch("cc_statusline.statusline.get_git_branch", return_value=None) as mock_git:
        yield mock_git


class TestStatuslineCommand:
    """Tests for rendering through the command."""

    def test_renders_payload(self, runner, opus_payload):
        result = runner.invoke(main, [], input=opus_payload)
        assert result.exit_code == 0
        assert result.stdout == f"🤖 Claude Opus | 📁 tmp | 🪙 65.0K | {GREEN}40%{RESET}\n"

    def test_keeps_colors_when_piped(self, runner, opus_payload):
        """ANSI codes are written even though stdout is not a terminal."""
        result = runner.invoke(main, [], input=opus_payload)
        assert "\x1b[32m" in result.stdout
        assert result.stdout.rstrip("\n").endswith("\x1b[0m")

    def test_includes_branch(self, runner, opus_payload, no_git):
        no_git.return_value = "main"
        result = runner.invoke(main, [], input=opus_payload)
        assert "📁 tmp | 🌿 main | 🪙 65.0K" in result.stdout
        no_git.assert_called_once_with("/tmp")

    def test_empty_input(self, runner):
        result = runner.invoke(main, [], input="")
        assert result.exit_code == 0
        assert result.stdout == f"🤖 Unknown | 📁 . | 🪙 0 | {GREEN}0%{RESET}\n"

    def test_malformed_input_succeeds(self, runner):
        """Invalid JSON renders the default line with exit code 0."""
        result = runner.invoke(main, [], input="not valid json")
        assert result.exit_code == 0
        assert result.stdout == f"🤖 Unknown | 📁 . | 🪙 0 | {GREEN}0%{RESET}\n"

    def test_deeply_nested_input_succeeds(self, runner):
        """Input nested too deep to decode still renders the default line."""
        result = runner.invoke(main, [], input="[" * 100_000 + "]" * 100_000)
        assert result.exit_code == 0
        assert result.stdout == f"🤖 Unknown | 📁 . | 🪙 0 | {GREEN}0%{RESET}\n"

    def test_oversized_counter_renders_defaults(self, runner):
        text = '{"context_window": {"context_window_size": ' + "9" * 400 + "}}"
        result = runner.invoke(main, [], input=text)
        assert result.exit_code == 0
        assert result.stdout == f"🤖 Unknown | 📁 . | 🪙 0 | {GREEN}0%{RESET}\n"

    def test_hide_model_flag(self, runner, opus_payload):
        result = runner.invoke(main, ["--hide-model"], input=opus_payload)
        assert result.exit_code == 0
        assert result.stdout.startswith("📁 tmp")
        assert "🤖" not in result.stdout
        assert "Claude Opus" not in result.stdout

    def test_hide_model_env(self, runner, opus_payload, monkeypatch):
        monkeypatch.setenv("CC_STATUSLINE_NO_MODEL", "1")
        result = runner.invoke(main, [], input=opus_payload)
        assert result.stdout.startswith("📁 tmp")

    def test_show_model_flag_overrides_env(self, runner, opus_payload, monkeypatch):
        monkeypatch.setenv("CC_STATUSLINE_NO_MODEL", "1")
        result = runner.invoke(main, ["--show-model"], input=opus_payload)
        assert result.stdout.startswith("🤖 Claude Opus")

    def test_config_file_option(self, runner, opus_payload, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text("show_model: false\n")
        result = runner.invoke(main, ["--config", str(config)], input=opus_payload)
        assert result.stdout.startswith("📁 tmp")

    def test_timeout_passed_to_reader(self, runner):
        with mock.patch("cc_statusline.cli.read_stdin_with_timeout", return_value="") as mock_read:
            runner.invoke(main, ["--timeout", "0.5"])
        assert mock_read.call_args.kwargs["timeout"] == 0.5

    def test_rejects_non_positive_timeout(self, runner):
        result = runner.invoke(main, ["--timeout", "0"])
        assert result.exit_code == 2

    @pytest.mark.parametrize("value", ["nan", "inf"])
    def test_rejects_non_finite_timeout(self, runner, value):
        result = runner.invoke(main, ["--timeout", value], input="")
        assert result.exit_code == 2
        assert "finite" in result.stderr

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "cc-statusline" in result.stdout


class TestStdinFailures:
    """Stdin failures exit 1 with the message on stderr."""

    @pytest.mark.parametrize(
        "error",
        [
            StdinTimeoutError("Error: No input received within 3 seconds"),
            StdinReadError("Error reading stdin: bad file descriptor"),
            StdinDisconnectedError("Error: stdin reader unexpectedly disconnected"),
        ],
    )
    def test_exits_one(self, runner, error):
        with mock.patch("cc_statusline.cli.read_stdin_with_timeout", side_effect=error):
            result = runner.invoke(main, [])

        assert result.exit_code == 1
        assert result.stdout == ""
        assert str(error) in result.stderr


class TestDebugLog:
    """Tests for the debug log from the command."""

    @pytest.fixture
    def claude_home(self, tmp_path, monkeypatch):
        (tmp_path / ".claude").mkdir()
        monkeypatch.setenv("HOME", str(tmp_path))
        return tmp_path / ".claude"

    def test_debug_env_writes_log(self, runner, claude_home, monkeypatch, opus_payload):
        monkeypatch.setenv("STATUSLINE_DEBUG", "1")
        result = runner.invoke(main, [], input=opus_payload)
        assert result.exit_code == 0

        log = (claude_home / "status_line_debug.log").read_text()
        assert "=== START ===" in log
        assert "stdin received:" in log
        assert "=== END ===" in log

    def test_no_log_by_default(self, runner, claude_home, opus_payload):
        result = runner.invoke(main, [], input=opus_payload)
        assert result.exit_code == 0
        assert not (claude_home / "status_line_debug.log").exists()

    def test_debug_does_not_change_output(self, runner, claude_home, opus_payload):
        plain = runner.invoke(main, [], input=opus_payload)
        debug = runner.invoke(main, ["--debug"], input=opus_payload)
        assert debug.stdout == plain.stdout

    def test_stdin_error_is_logged(self, runner, claude_home):
        error = StdinTimeoutError("Error: No input received within 3 seconds")
        with mock.patch("cc_statusline.cli.read_stdin_with_timeout", side_effect=error):
            runner.invoke(main, ["--debug"])

        log = (claude_home / "status_line_debug.log").read_text()
        assert "stdin error: Error: No input received within 3 seconds" in log
