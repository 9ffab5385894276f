"""``info``: show installed package metadata."""

from __future__ import annotations

import logging

import rich_click as click

from ajax_onload import __init__conf__

from ..context import job_scope

logger = logging.getLogger(__name__)


@click.command("info")
def cli_info() -> None:
    """Print name, version and homepage of the installed package."""
    with job_scope("cli-info", command="info"):
        logger.info("Displaying package information")
        __init__conf__.print_info()


__all__ = ["cli_info"]
