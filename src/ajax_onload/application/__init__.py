"""Application layer - use cases and port definitions.

Contents:
    * :mod:`.onload` - ``ajax_on_load`` use case and multi-block rendering
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .onload import ajax_on_load, render_onload_blocks
from .ports import GetConfig, InitLogging, LoadOnLoadSettings, WriteOutput

__all__ = [
    "GetConfig",
    "InitLogging",
    "LoadOnLoadSettings",
    "WriteOutput",
    "ajax_on_load",
    "render_onload_blocks",
]
