"""Shared pytest fixtures for CLI, onload, and module-entry tests.

Tests pick these up through pytest's conftest discovery.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner

from ajax_onload.adapters.cli.context import TracebackSettings

if TYPE_CHECKING:
    from ajax_onload.adapters.memory.output import OutputSpy
    from ajax_onload.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Assert on ``result.stdout`` for generated script text so log records
    and error messages on stderr never leak into the comparison.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory."""
    from ajax_onload.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Start with both traceback flags off and restore the previous flags afterwards."""
    previous = TracebackSettings.current()
    TracebackSettings.from_flag(False).apply()
    try:
        yield
    finally:
        previous.apply()


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Force the next get_config() call to re-read the configuration layers."""
    from ajax_onload.adapters.config.loader import get_config

    get_config.cache_clear()
    yield


@dataclass
class OutputCliContext:
    """Services factory and output spy for render CLI tests.

    Attributes:
        factory: Callable returning in-memory AppServices for CLI invocation.
        spy: OutputSpy collecting every block written to the page output.
    """

    factory: Callable[[], Any]
    spy: OutputSpy


@pytest.fixture
def output_cli_context() -> Callable[..., OutputCliContext]:
    """Create in-memory render wiring with a captured page output.

    Takes the ``[ajax_onload]`` section contents (default: none).

    Example:
        def test_render(cli_runner, output_cli_context) -> None:
            ctx = output_cli_context({"script_tag": False})
            result = cli_runner.invoke(cli, ["render", "initPage"], obj=ctx.factory)
            assert "initPage()" in ctx.spy.text
    """
    from ajax_onload.adapters.memory import OutputSpy as OutputSpyImpl
    from ajax_onload.composition import build_testing

    def _create(onload_data: dict[str, Any] | None = None) -> OutputCliContext:
        spy = OutputSpyImpl()
        return OutputCliContext(factory=lambda: build_testing(spy=spy, onload=onload_data), spy=spy)

    return _create
