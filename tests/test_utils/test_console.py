from __future__ import annotations

import sys
from typing import Generator
from unittest.mock import patch

import pytest

from semverkit.core.comparator import Ordering
from semverkit.utils.console import (
    SEMVERKIT_THEME,
    _get_console,
    _should_use_color,
    format_ordering,
    get_raw_console,
    print_error,
    print_plain,
    print_success,
    print_table,
    print_warning,
    reconfigure_console,
)


@pytest.fixture(autouse=True)
def reset_console() -> Generator[None, None, None]:
    reconfigure_console()
    yield
    reconfigure_console()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("CI", raising=False)


@pytest.mark.unit
class TestColorDetection:
    """Tests for _should_use_color()."""

    def test_no_color(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")
        assert _should_use_color() is False

    def test_ci(self, clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CI", "1")
        assert _should_use_color() is False

    def test_tty(self, clean_env: None) -> None:
        with patch.object(sys.stdout, "isatty", return_value=True):
            assert _should_use_color() is True

    def test_non_tty(self, clean_env: None) -> None:
        with patch.object(sys.stdout, "isatty", return_value=False):
            assert _should_use_color() is False


@pytest.mark.unit
class TestConsoleLifecycle:
    def test_singleton(self) -> None:
        assert _get_console() is _get_console()
        assert get_raw_console() is _get_console()

    def test_reconfigure_drops_instance(self) -> None:
        first = _get_console()
        reconfigure_console()
        assert _get_console() is not first

    def test_theme_styles(self) -> None:
        for name in ("success", "error", "warning", "info", "version"):
            assert name in SEMVERKIT_THEME.styles


@pytest.mark.unit
class TestPrintHelpers:
    """Output helpers, captured through stdout."""

    def test_status_prefixes(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_success("stored")
        print_error("broken")
        print_warning("careful")

        out = capsys.readouterr().out
        assert "[OK] stored" in out
        assert "[ERROR] broken" in out
        assert "[WARNING] careful" in out

    def test_custom_prefix(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_success("done", prefix="[v]")
        assert "[v] done" in capsys.readouterr().out

    def test_print_plain_ignores_markup(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_plain("[bold]1.0.0[/bold]")
        assert capsys.readouterr().out == "[bold]1.0.0[/bold]\n"

    def test_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_table(
            [{"Field": "major", "Value": "1"}, {"Field": "build", "Value": "[x]"}],
            title="1.0.0",
        )

        out = capsys.readouterr().out
        assert "1.0.0" in out
        assert "major" in out
        assert "[x]" in out

    def test_empty_table_prints_nothing(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_table([])
        assert capsys.readouterr().out == ""


@pytest.mark.unit
class TestFormatOrdering:
    @pytest.mark.parametrize(
        "ordering, expected",
        [
            (Ordering.LESS, "[cyan]<[/cyan]"),
            (Ordering.EQUAL, "[green]==[/green]"),
            (Ordering.GREATER, "[yellow]>[/yellow]"),
        ],
    )
    def test_symbols(self, ordering: Ordering, expected: str) -> None:
        assert format_ordering(ordering) == expected
