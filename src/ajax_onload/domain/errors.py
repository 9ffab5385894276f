"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """A caller-supplied argument failed validation.

    Base class for the validation failures raised while building an onload
    block. Inherits from ValueError so generic ``except ValueError`` handlers
    still see it. CLI boundaries map it to ``ExitCode.INVALID_ARGUMENT``.

    Example:
        >>> from ajax_onload.domain.errors import InvalidArgumentError
        >>> isinstance(InvalidArgumentError("bad"), ValueError)
        True
    """


class MissingArgumentError(InvalidArgumentError):
    """The function name is absent, empty, or whitespace-only.

    Example:
        >>> from ajax_onload.domain.errors import MissingArgumentError
        >>> err = MissingArgumentError("functionName parameter is required for AjaxOnLoad")
        >>> str(err)
        'functionName parameter is required for AjaxOnLoad'
    """


class InvalidIdentifierError(InvalidArgumentError):
    """The function name does not match the JavaScript identifier grammar.

    Example:
        >>> from ajax_onload.domain.errors import InvalidIdentifierError
        >>> err = InvalidIdentifierError("must be a valid JavaScript function name")
        >>> isinstance(err, ValueError)
        True
    """


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[ajax_onload]`` section holds malformed values.
    Typically caught at CLI boundaries to provide user-friendly error messages.

    Example:
        >>> from ajax_onload.domain.errors import ConfigurationError
        >>> err = ConfigurationError("ajax_onload.script_tag must be a boolean")
        >>> str(err)
        'ajax_onload.script_tag must be a boolean'
    """


__all__ = [
    "ConfigurationError",
    "InvalidArgumentError",
    "InvalidIdentifierError",
    "MissingArgumentError",
]
