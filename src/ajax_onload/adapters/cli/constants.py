"""Click settings and traceback budgets shared by the CLI modules."""

from __future__ import annotations

from typing import Any, Final

#: Applied to the root group; subcommands inherit it through their context.
CLICK_CONTEXT_SETTINGS: Final[dict[str, Any]] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}

_SUMMARY_TRACEBACK_CHARS: Final[int] = 500
_VERBOSE_TRACEBACK_CHARS: Final[int] = 10_000


def traceback_limit(verbose: bool) -> int:
    """Character budget for printed exceptions.

    Example:
        >>> traceback_limit(False) < traceback_limit(True)
        True
    """
    return _VERBOSE_TRACEBACK_CHARS if verbose else _SUMMARY_TRACEBACK_CHARS


__all__ = ["CLICK_CONTEXT_SETTINGS", "traceback_limit"]
