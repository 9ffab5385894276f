"""Onload use cases: the host-facing ``ajaxOnLoad`` call surface.

Wraps the pure generator from :mod:`ajax_onload.domain.behaviors` with the
page-output side channel of the host runtime. Outside test mode the block
is written to the supplied sink; it is returned in every mode.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..domain.behaviors import build_onload_script, validate_function_name
from .ports import WriteOutput

logger = logging.getLogger(__name__)


def ajax_on_load(
    function_name: str | None,
    test_mode: bool = False,
    *,
    write_output: WriteOutput | None = None,
    script_tag: bool = True,
) -> str:
    """Generate one onload block and hand it to the page output.

    Accepts both the positional form ``ajax_on_load("initPage", True)`` and
    the keyword form ``ajax_on_load(function_name="initPage", test_mode=True)``.

    Args:
        function_name: Name of the page function to run on load.
        test_mode: When True the sink is never written; the block is only returned.
        write_output: Optional sink receiving the block outside test mode.
        script_tag: Wrap the block in a ``<script>`` element.

    Returns:
        The generated script text.

    Raises:
        MissingArgumentError: If the name is None, empty, or whitespace-only.
        InvalidIdentifierError: If the name is not a legal JavaScript identifier.

    Example:
        >>> written: list[str] = []
        >>> block = ajax_on_load("startApp", write_output=written.append)
        >>> written == [block]
        True
        >>> _ = ajax_on_load(function_name="startApp", test_mode=True, write_output=written.append)
        >>> len(written)
        1
    """
    block = build_onload_script(function_name, test_mode, script_tag=script_tag)
    logger.debug("Generated onload block", extra={"function_name": function_name, "test_mode": test_mode})
    if not test_mode and write_output is not None:
        write_output(block)
    return block


def render_onload_blocks(
    function_names: Iterable[str],
    test_mode: bool = False,
    *,
    write_output: WriteOutput | None = None,
    script_tag: bool = True,
) -> str:
    """Generate one independent block per name and return them concatenated.

    All names are validated before anything is generated, so an invalid
    name never leaves partial output in the sink.

    Raises:
        MissingArgumentError: If no names are given or one is blank.
        InvalidIdentifierError: If any name is not a legal JavaScript identifier.
    """
    names = [validate_function_name(name) for name in function_names]
    if not names:
        validate_function_name(None)
    return "".join(
        ajax_on_load(name, test_mode, write_output=write_output, script_tag=script_tag) for name in names
    )


__all__ = ["ajax_on_load", "render_onload_blocks"]
