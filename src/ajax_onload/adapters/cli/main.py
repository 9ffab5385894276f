"""Process entry for the console script and ``python -m ajax_onload``.

Runs the root group without Click's standalone handling so every outcome,
including ``SystemExit`` raised by commands, becomes a returned exit code.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from ajax_onload import __init__conf__

from .constants import traceback_limit
from .context import TracebackSettings
from .root import cli

if TYPE_CHECKING:
    from ajax_onload.composition import AppServices


def _report_failure(exc: BaseException) -> int:
    """Print *exc* the way lib_cli_exit_tools does and pick its exit code.

    Must be called while *exc* is being handled.
    """
    if isinstance(exc, click.exceptions.Exit):
        return exc.exit_code
    if isinstance(exc, click.ClickException):
        exc.show()
        return exc.exit_code
    verbose = TracebackSettings.current().enabled
    lib_cli_exit_tools.print_exception_message(trace_back=verbose, length_limit=traceback_limit(verbose))
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _shutdown_logging() -> None:
    # Only the main thread owns the runtime; worker threads share it.
    if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run ``ajax-onload`` with *argv* and return the exit code.

    Args:
        argv: Arguments after the program name; None reads ``sys.argv``.
        restore_traceback: Put the traceback flags back as they were afterwards.
        services_factory: ``build_production`` or ``build_testing``.

    Raises:
        ValueError: If services_factory is not provided.

    Example:
        >>> from ajax_onload.composition import build_testing
        >>> main(["render", "--test-mode", "initPage"], services_factory=build_testing)  # doctest: +ELLIPSIS
        <script type="text/javascript">
        ...
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    saved = TracebackSettings.current()
    try:
        result = cli.main(
            args=list(sys.argv[1:] if argv is None else argv),
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except BaseException as exc:  # noqa: BLE001  # SystemExit and KeyboardInterrupt are reported too
        return _report_failure(exc)
    finally:
        if restore_traceback:
            saved.apply()
        _shutdown_logging()
    return result if isinstance(result, int) else 0


__all__ = ["main"]
