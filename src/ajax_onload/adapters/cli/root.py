"""Root ``ajax-onload`` command group.

Loads configuration and starts logging once, then hands a
:class:`~ajax_onload.adapters.cli.context.CLIContext` to the subcommands.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click

from ajax_onload import __init__conf__

from .commands import cli_info, cli_render
from .constants import CLICK_CONTEXT_SETTINGS
from .context import CLIContext, TracebackSettings

if TYPE_CHECKING:
    from ajax_onload.composition import AppServices


def _build_services(ctx: click.Context) -> AppServices:
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. Pass build_production or build_testing as obj.")
    services: AppServices = ctx.obj()
    return services


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Show full Python traceback on errors")
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Receive the services factory as ``ctx.obj`` and replace it with a CLIContext.

    Example:
        >>> from click.testing import CliRunner
        >>> from ajax_onload.composition import build_testing
        >>> result = CliRunner().invoke(cli, ["render", "--test-mode", "initPage"], obj=build_testing)
        >>> "initPage()" in result.output
        True
    """
    services = _build_services(ctx)
    config = services.get_config()
    services.init_logging(config)
    TracebackSettings.from_flag(traceback).apply()
    ctx.obj = CLIContext(services=services, config=config, traceback=traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(cli_render)
cli.add_command(cli_info)


__all__ = ["cli"]
