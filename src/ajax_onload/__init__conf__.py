"""Static package metadata surfaced to CLI commands and documentation.

Keep ``version`` in sync with ``pyproject.toml``; the LAYEREDCONF_*
identifiers decide where lib_layered_config looks for configuration files.
"""

from __future__ import annotations

name = "ajax_onload"
title = "Generate DOM-ready onload script blocks for named JavaScript functions"
version = "1.0.0"
homepage = "https://pypi.org/project/ajax-onload/"
shell_command = "ajax-onload"

#: Vendor folder on macOS/Windows config paths.
LAYEREDCONF_VENDOR: str = "ajax-onload"
#: Application folder on macOS/Windows config paths.
LAYEREDCONF_APP: str = "Ajax OnLoad"
#: Linux config slug (``~/.config/<slug>/``).
LAYEREDCONF_SLUG: str = "ajax-onload"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for ajax_onload:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
