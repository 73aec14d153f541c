"""Unit tests for fe_cli.output module."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from fe_cli import output


class TestCreateConsole:
    """Tests for create_console function."""

    def test_create_console_no_color(self) -> None:
        """no_color=True disables colors."""
        console = output.create_console(no_color=True)
        assert console.no_color is True

    def test_create_console_stderr(self) -> None:
        """stderr=True targets the error stream."""
        assert output.create_console(stderr=True).stderr is True
        assert output.create_console().stderr is False

    def test_create_console_respects_env_var(self) -> None:
        """NO_COLOR is honoured at import time."""
        with patch.object(output, "_force_no_color", True):
            console = output.create_console()
        assert console.no_color is True


class TestMessages:
    """Tests for the message helpers."""

    @pytest.mark.parametrize(
        ("func", "symbol"),
        [(output.success, "✓"), (output.error, "✗")],
    )
    def test_symbol_prefix(
        self, capsys: pytest.CaptureFixture[str], func: object, symbol: str
    ) -> None:
        """Each stdout helper prefixes its symbol."""
        func("Compiled erc20.fe")  # type: ignore[operator]
        captured = capsys.readouterr()
        assert f"{symbol} Compiled erc20.fe" in captured.out

    def test_brackets_are_not_markup(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Compiler messages with brackets print literally."""
        output.error("Unable to read x.fe: [Errno 2] No such file or directory")
        assert "[Errno 2]" in capsys.readouterr().out

    def test_warning_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Warnings stay off stdout so they do not mix with the result line."""
        output.warning("bytecode output requires the 'solc-backend' extra.")
        captured = capsys.readouterr()
        assert "⚠ bytecode output requires the 'solc-backend' extra." in captured.err
        assert captured.out == ""


class TestSetNoColor:
    """Tests for set_no_color."""

    def test_replaces_console(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The module-level console is swapped."""
        monkeypatch.setattr(output, "console", output.create_console())
        monkeypatch.setattr(output, "err_console", output.create_console(stderr=True))
        output.set_no_color(True)
        assert output.console.no_color is True
        assert output.err_console.no_color is True
        assert output.err_console.stderr is True
