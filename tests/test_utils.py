"""Unit tests for the rich console helpers (acul_cli.utils)."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from acul_cli import utils


@pytest.fixture
def captured(monkeypatch):
    """Swap both module consoles for in-memory ones."""
    out = Console(file=io.StringIO(), width=120, color_system=None)
    err = Console(file=io.StringIO(), width=120, color_system=None)
    monkeypatch.setattr(utils, "console", out)
    monkeypatch.setattr(utils, "err_console", err)
    return out, err


class TestPrintHelpers:
    @pytest.mark.unit
    def test_print_success(self, captured):
        out, err = captured
        utils.print_success("Done")
        assert "Done" in out.file.getvalue()
        assert err.file.getvalue() == ""

    @pytest.mark.unit
    def test_print_error_goes_to_stderr(self, captured):
        out, err = captured
        utils.print_error("Error creating project: boom")
        assert "Error creating project: boom" in err.file.getvalue()
        assert out.file.getvalue() == ""

    @pytest.mark.unit
    def test_markup_is_escaped(self, captured):
        out, _ = captured
        utils.print_warning("[red]not markup[/red]")
        assert "[red]not markup[/red]" in out.file.getvalue()

    @pytest.mark.unit
    def test_print_header(self, captured):
        out, _ = captured
        utils.print_header("Creating ACUL project: demo")
        assert "Creating ACUL project: demo" in out.file.getvalue()

    @pytest.mark.unit
    def test_print_summary_table(self, captured):
        out, _ = captured
        utils.print_summary_table({"Screens": "login, passkey", "Files": 3}, title="Project")
        text = out.file.getvalue()
        assert "Project" in text
        assert "login, passkey" in text
        assert "3" in text


class TestCreateProgress:
    @pytest.mark.unit
    def test_transient_spinner(self):
        progress = utils.create_progress()
        assert progress.live.transient is True
        assert progress.console is utils.console
