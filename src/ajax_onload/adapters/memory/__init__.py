"""In-memory adapters standing in for files, stdout and the logging runtime.

Contents:
    * :mod:`.config` - Fixed configuration source
    * :mod:`.logging` - Logging initialiser that leaves lib_log_rich alone
    * :mod:`.output` - Page output capture (:class:`OutputSpy`)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import config_in_memory
from .logging import init_logging_in_memory
from .output import OutputSpy

if TYPE_CHECKING:
    from ajax_onload.application.ports import GetConfig, InitLogging, WriteOutput

    _assert_get_config: GetConfig = config_in_memory()
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_write_output: WriteOutput = OutputSpy().write_output

__all__ = [
    "OutputSpy",
    "config_in_memory",
    "init_logging_in_memory",
]
