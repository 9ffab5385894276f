"""Pure domain functions with no I/O or framework dependencies.

Builds the inline script block that runs a named JavaScript function once
the document has finished loading.
"""

from __future__ import annotations

import re
from typing import Final

from .errors import InvalidIdentifierError, MissingArgumentError

#: Leading letter, underscore or dollar sign, then letters, digits, underscores or dollar signs.
FUNCTION_NAME_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")

SCRIPT_OPEN_TAG: Final[str] = '<script type="text/javascript">'
SCRIPT_CLOSE_TAG: Final[str] = "</script>"

_GUARDED_CALL = """\
if (typeof {name} === 'function') {{
{indent}    {name}();
{indent}}} else {{
{indent}    console.error('Function {name} is not defined');
{indent}}}"""

_ONLOAD_WRAPPER = """\
(function() {{
    if (document.readyState === 'loading') {{
        document.addEventListener('DOMContentLoaded', function() {{
            {listener_call}
        }}, {{ once: true }});
    }} else {{
        {immediate_call}
    }}
}})();"""


def validate_function_name(function_name: object) -> str:
    """Check that *function_name* is present and a legal JavaScript identifier.

    Presence is checked first, then the identifier grammar. The name is
    returned unchanged; surrounding whitespace is not stripped, so ``" init"``
    fails the grammar check. Values that are not strings are invalid identifiers.

    Args:
        function_name: Name of the page function to run on load.

    Returns:
        The validated function name.

    Raises:
        MissingArgumentError: If the name is None, empty, or whitespace-only.
        InvalidIdentifierError: If the name is not a string or does not match the identifier grammar.

    Examples:
        >>> validate_function_name("$jquery")
        '$jquery'
        >>> validate_function_name("   ")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        MissingArgumentError: functionName parameter is required for AjaxOnLoad
        >>> validate_function_name("my-function")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidIdentifierError: ...must be a valid JavaScript function name...
    """
    if function_name is None or (isinstance(function_name, str) and not function_name.strip()):
        raise MissingArgumentError("functionName parameter is required for AjaxOnLoad")
    if not isinstance(function_name, str):
        raise InvalidIdentifierError(
            f"Function name of type {type(function_name).__name__} must be a valid JavaScript function name (a string)"
        )
    if FUNCTION_NAME_PATTERN.fullmatch(function_name) is None:
        raise InvalidIdentifierError(
            f"Function name {function_name!r} must be a valid JavaScript function name "
            "(letters, digits, underscores or dollar signs, not starting with a digit)"
        )
    return function_name


def _guarded_call(name: str, indent: str) -> str:
    return _GUARDED_CALL.format(name=name, indent=indent)


def wrap_script_tag(body: str) -> str:
    """Enclose a script body in a ``text/javascript`` script element.

    Example:
        >>> wrap_script_tag("init();")
        '<script type="text/javascript">\\ninit();\\n</script>\\n'
    """
    return f"{SCRIPT_OPEN_TAG}\n{body}\n{SCRIPT_CLOSE_TAG}\n"


def build_onload_script(function_name: str | None, test_mode: bool = False, *, script_tag: bool = True) -> str:
    r"""Return a self-executing block that calls *function_name* after DOM load.

    The block checks ``document.readyState``: while the document is still
    loading it registers a one-shot ``DOMContentLoaded`` listener, otherwise
    it runs immediately. Either way the call is guarded by a ``typeof`` check
    and logs ``console.error`` when the function is not defined.

    Every call produces one independent block, so outputs can be
    concatenated. No state is kept between calls.

    Args:
        function_name: Name of the page function to run on load.
        test_mode: Accepted for call-surface parity with the host runtime.
            It does not alter the generated text.
        script_tag: Wrap the block in a ``<script>`` element.

    Returns:
        The generated script text.

    Raises:
        MissingArgumentError: If the name is None, empty, or whitespace-only.
        InvalidIdentifierError: If the name is not a legal JavaScript identifier.

    Example:
        >>> block = build_onload_script("initPage", True)
        >>> "typeof initPage === 'function'" in block
        True
        >>> block == build_onload_script("initPage", True)
        True
        >>> build_onload_script("initPage", script_tag=False).startswith("(function() {")
        True
    """
    name = validate_function_name(function_name)
    body = _ONLOAD_WRAPPER.format(
        listener_call=_guarded_call(name, " " * 12),
        immediate_call=_guarded_call(name, " " * 8),
    )
    return wrap_script_tag(body) if script_tag else body + "\n"


__all__ = [
    "FUNCTION_NAME_PATTERN",
    "SCRIPT_CLOSE_TAG",
    "SCRIPT_OPEN_TAG",
    "build_onload_script",
    "validate_function_name",
    "wrap_script_tag",
]
