"""Module entry stories ensuring `python -m` mirrors the CLI."""

from __future__ import annotations

import runpy
import subprocess
import sys
from collections.abc import Callable

import lib_cli_exit_tools
import pytest

from ajax_onload import __init__conf__, entry
from ajax_onload.adapters import cli as cli_mod


@pytest.mark.os_agnostic
def test_module_entry_executes_cli_and_shows_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """python -m invocation with no args shows help and exits 0."""
    monkeypatch.setattr(sys, "argv", ["ajax-onload"], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("ajax_onload.__main__", run_name="__main__")

    captured = capsys.readouterr()
    assert exc.value.code == 0
    assert "Usage:" in captured.out
    assert __init__conf__.shell_command in captured.out


@pytest.mark.os_agnostic
def test_module_entry_renders_block_in_test_mode(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    clear_config_cache: None,
) -> None:
    """python -m ajax_onload render --test-mode prints the block."""
    monkeypatch.setattr(sys, "argv", ["ajax-onload", "render", "--test-mode", "initPage"], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("ajax_onload.__main__", run_name="__main__")

    assert exc.value.code == 0
    assert "typeof initPage === 'function'" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_module_entry_reports_invalid_name_with_exit_code(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
    clear_config_cache: None,
) -> None:
    """An invalid name exits 22 and explains the identifier rule."""
    monkeypatch.setattr(sys, "argv", ["ajax-onload", "render", "my-function"], raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("ajax_onload.__main__", run_name="__main__")

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exc.value.code == cli_mod.ExitCode.INVALID_ARGUMENT
    assert "must be a valid JavaScript function name" in plain_err


@pytest.mark.os_agnostic
def test_module_entry_cli_exports_all_registered_commands() -> None:
    """CLI facade exports every registered command."""
    expected_commands = {"cli_info", "cli_render"}
    exported = {name for name in dir(cli_mod) if name.startswith("cli_")}
    assert expected_commands.issubset(exported)


@pytest.mark.os_agnostic
def test_module_entry_subprocess_help() -> None:
    """`python -m ajax_onload --help` works through a real interpreter."""
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "ajax_onload", "--help"],
        capture_output=True,
        timeout=30,
        check=False,
        # rich-click emits Unicode that cp1252 cannot decode
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert "Usage:" in result.stdout
    assert __init__conf__.shell_command in result.stdout


@pytest.mark.os_agnostic
def test_module_entry_subprocess_version() -> None:
    """`python -m ajax_onload --version` outputs the version."""
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "ajax_onload", "--version"],
        capture_output=True,
        timeout=30,
        check=False,
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert __init__conf__.version in result.stdout


@pytest.mark.os_agnostic
def test_module_entry_subprocess_render_writes_page_output() -> None:
    """Outside test mode the block reaches stdout through the page-output adapter."""
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "ajax_onload", "render", "initPage"],
        capture_output=True,
        timeout=30,
        check=False,
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert '<script type="text/javascript">' in result.stdout
    assert "initPage();" in result.stdout


@pytest.mark.os_agnostic
def test_entry_main_invokes_cli_with_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """entry.main() wires production services and invokes the CLI."""
    monkeypatch.setattr(sys, "argv", ["ajax-onload", "--help"])

    exit_code = entry.main()

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Usage:" in captured.out
    assert __init__conf__.shell_command in captured.out


@pytest.mark.os_agnostic
def test_entry_main_returns_nonzero_on_error(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    clear_config_cache: None,
) -> None:
    """entry.main() returns a non-zero exit code on a rejected name."""
    monkeypatch.setattr(sys, "argv", ["ajax-onload", "render", "123func"])
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False)

    exit_code = entry.main()

    assert exit_code != 0
    assert "123func" in capsys.readouterr().err
