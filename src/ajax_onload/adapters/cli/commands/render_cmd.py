"""``render``: print onload blocks for one or more function names."""

from __future__ import annotations

import logging

import rich_click as click

from ajax_onload.adapters.config.settings import OnLoadSettings
from ajax_onload.application.onload import render_onload_blocks
from ajax_onload.domain.errors import ConfigurationError, InvalidArgumentError

from ..context import CLIContext, get_cli_context, job_scope
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _fail(exc: Exception, code: ExitCode) -> SystemExit:
    click.echo(f"\nError: {exc}", err=True)
    return SystemExit(code)


def _resolve_settings(cli_ctx: CLIContext, test_mode: bool | None, script_tag: bool | None) -> OnLoadSettings:
    """Merge ``[ajax_onload]`` defaults with the flags given on the command line."""
    try:
        configured = cli_ctx.services.load_onload_settings(cli_ctx.config.as_dict())
    except ConfigurationError as exc:
        logger.error("Invalid onload configuration", extra={"error": str(exc)})
        raise _fail(exc, ExitCode.CONFIG_ERROR) from exc
    flags = {"test_mode": test_mode, "script_tag": script_tag}
    return configured.model_copy(update={key: value for key, value in flags.items() if value is not None})


@click.command("render")
@click.argument("function_names", nargs=-1, metavar="FUNCTION_NAME...")
@click.option(
    "--test-mode/--no-test-mode",
    default=None,
    help="Return the blocks instead of writing them to the page output. Default: [ajax_onload].test_mode",
)
@click.option(
    "--script-tag/--no-script-tag",
    default=None,
    help="Wrap each block in a <script> element. Default: [ajax_onload].script_tag",
)
@click.pass_context
def cli_render(
    ctx: click.Context,
    function_names: tuple[str, ...],
    test_mode: bool | None,
    script_tag: bool | None,
) -> None:
    """Print a DOM-ready onload block for each FUNCTION_NAME.

    Each block runs its function once the document has loaded, guarded by a
    ``typeof`` check. Names must be JavaScript identifiers; any invalid name
    aborts before output is produced (exit code 22).
    """
    cli_ctx = get_cli_context(ctx)
    settings = _resolve_settings(cli_ctx, test_mode, script_tag)

    with job_scope("cli-render", command="render", count=len(function_names), test_mode=settings.test_mode):
        logger.info("Rendering onload blocks", extra={"function_names": function_names})
        try:
            text = render_onload_blocks(
                function_names,
                settings.test_mode,
                write_output=cli_ctx.services.write_output,
                script_tag=settings.script_tag,
            )
        except InvalidArgumentError as exc:
            logger.error("Rejected function name", extra={"error": str(exc)})
            raise _fail(exc, ExitCode.INVALID_ARGUMENT) from exc

    # Test mode returns the text instead of writing the page output; the CLI shows it.
    if settings.test_mode:
        click.echo(text, nl=False)


__all__ = ["cli_render"]
