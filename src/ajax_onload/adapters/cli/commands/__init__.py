"""Subcommands registered on the root group.

Contents:
    * :func:`.render_cmd.cli_render` - Generate onload blocks
    * :func:`.info.cli_info` - Package metadata
"""

from __future__ import annotations

from .info import cli_info
from .render_cmd import cli_render

__all__ = ["cli_info", "cli_render"]
