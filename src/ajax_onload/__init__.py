"""Public package surface exposing onload generation, metadata, and configuration.

Imports are routed through the architectural layers:
- Domain exports: pure block generation and name validation
- Application exports: the ``ajax_on_load`` call surface
- Composition exports: wired adapter services (configuration)
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.onload import ajax_on_load, render_onload_blocks

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.behaviors import (
    build_onload_script,
    validate_function_name,
    wrap_script_tag,
)
from .domain.errors import (
    InvalidArgumentError,
    InvalidIdentifierError,
    MissingArgumentError,
)

__all__ = [
    "InvalidArgumentError",
    "InvalidIdentifierError",
    "MissingArgumentError",
    "ajax_on_load",
    "build_onload_script",
    "get_config",
    "print_info",
    "render_onload_blocks",
    "validate_function_name",
    "wrap_script_tag",
]
