"""Per-invocation CLI state: wired services, loaded config, traceback flags."""

from __future__ import annotations

from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from ajax_onload.composition import AppServices


@dataclass(frozen=True, slots=True)
class CLIContext:
    """What the root group hands down to ``render`` and ``info``."""

    services: AppServices
    config: Config
    traceback: bool = False


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Find the CLIContext stored by the root group.

    Raises:
        RuntimeError: If the command runs outside the root group.
    """
    found = ctx.find_object(CLIContext)
    if found is None:
        raise RuntimeError("CLI context not initialized; invoke commands through the root group.")
    return found


@dataclass(frozen=True, slots=True)
class TracebackSettings:
    """Snapshot of the two lib_cli_exit_tools traceback flags.

    Example:
        >>> TracebackSettings(enabled=True, force_color=True).apply()
        >>> TracebackSettings.current()
        TracebackSettings(enabled=True, force_color=True)
        >>> TracebackSettings(enabled=False, force_color=False).apply()
    """

    enabled: bool
    force_color: bool

    @classmethod
    def current(cls) -> TracebackSettings:
        config = lib_cli_exit_tools.config
        return cls(
            enabled=bool(getattr(config, "traceback", False)),
            force_color=bool(getattr(config, "traceback_force_color", False)),
        )

    @classmethod
    def from_flag(cls, traceback: bool) -> TracebackSettings:
        """Verbose tracebacks are always coloured; summaries never are."""
        return cls(enabled=traceback, force_color=traceback)

    def apply(self) -> None:
        lib_cli_exit_tools.config.traceback = self.enabled
        lib_cli_exit_tools.config.traceback_force_color = self.force_color


def job_scope(job_id: str, **extra: Any) -> AbstractContextManager[Any]:
    """Bind *job_id* and *extra* to log records emitted inside the block.

    Without an initialised lib_log_rich runtime (in-memory wiring) records
    go to stdlib logging unbound.
    """
    if not lib_log_rich.runtime.is_initialised():
        return nullcontext()
    return lib_log_rich.runtime.bind(job_id=job_id, extra=extra)


__all__ = [
    "CLIContext",
    "TracebackSettings",
    "get_cli_context",
    "job_scope",
]
