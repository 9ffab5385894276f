"""Standard-output sink standing in for the host page buffer."""

from __future__ import annotations

import click
import lib_log_rich.runtime


def write_output(text: str) -> None:
    """Write *text* to stdout exactly as generated.

    Pending log records are flushed first so they never interleave with
    the script text.

    Example:
        >>> write_output("<script></script>\\n")  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()
    click.echo(text, nl=False)


__all__ = ["write_output"]
