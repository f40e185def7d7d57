"""Root CLI group for formguard with global flags and command registration."""

from __future__ import annotations

import click

from formguard import __version__
from formguard.commands import register_commands
from formguard.commands._context import AppContext
from formguard.config.settings import FormguardSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="formguard")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--locale", default=None, help="Locale used to render messages (e.g. ja_JP).")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    locale: str | None,
) -> None:
    """formguard: validate form field values from the command line."""
    ctx.ensure_object(dict)
    settings = FormguardSettings.from_cli(
        config_path=config_path,
        json_output=json_output or None,
        verbose=verbose or None,
        log_json=log_json or None,
        locale=locale,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
