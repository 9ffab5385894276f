"""Adapters layer - infrastructure and framework integrations.

Connects the application to the outside world: the command line,
layered configuration files, the logging runtime and the page output.

Contents:
    * :mod:`.cli` - rich-click CLI framework integration
    * :mod:`.config` - Layered configuration and onload settings
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.output` - Page output sink for generated blocks
    * :mod:`.memory` - In-memory adapters for tests
"""

from __future__ import annotations

__all__: list[str] = []
