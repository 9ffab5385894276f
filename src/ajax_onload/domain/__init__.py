"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Onload script generation and function-name validation
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    FUNCTION_NAME_PATTERN,
    build_onload_script,
    validate_function_name,
    wrap_script_tag,
)
from .errors import (
    ConfigurationError,
    InvalidArgumentError,
    InvalidIdentifierError,
    MissingArgumentError,
)

__all__ = [
    # Behaviors
    "FUNCTION_NAME_PATTERN",
    "build_onload_script",
    "validate_function_name",
    "wrap_script_tag",
    # Errors
    "ConfigurationError",
    "InvalidArgumentError",
    "InvalidIdentifierError",
    "MissingArgumentError",
]
