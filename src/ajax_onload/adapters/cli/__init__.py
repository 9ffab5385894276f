"""Command-line interface for ``ajax-onload``.

Contents:
    * :data:`.root.cli` - Root group with ``render`` and ``info``
    * :func:`.main.main` - Entry wrapper returning exit codes
    * :mod:`.context` - Per-invocation state and traceback flags
    * :class:`.exit_codes.ExitCode` - Exit codes of the error paths
"""

from __future__ import annotations

from .commands import cli_info, cli_render
from .context import CLIContext, TracebackSettings, get_cli_context, job_scope
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    "CLIContext",
    "ExitCode",
    "TracebackSettings",
    "cli",
    "cli_info",
    "cli_render",
    "get_cli_context",
    "job_scope",
    "main",
]
