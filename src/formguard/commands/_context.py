"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to subcommands via
``@click.pass_obj``. Builds the field-check service lazily and owns result
emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from formguard.config.logging import configure_logging
from formguard.output.formatters import format_result

if TYPE_CHECKING:
    from formguard.config.models import FormguardConfig
    from formguard.config.settings import FormguardSettings
    from formguard.services.field_check import FieldCheckService
    from formguard.services.result import ServiceResult

EXIT_ERROR = 1
EXIT_INVALID = 2


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The service is built on first use so ``--help`` and ``--version`` never
    load plugins.
    """

    def __init__(self, settings: FormguardSettings) -> None:
        self.settings = settings
        self._service: FieldCheckService | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> FieldCheckService:
        """The field-check service for the current settings."""
        if self._service is None:
            self._service = self.build_service(self.settings)
        return self._service

    def build_service(self, config: FormguardConfig | FormguardSettings) -> FieldCheckService:
        """Build a service from *config*, loading entry-point plugins."""
        from formguard.services.field_check import FieldCheckService

        return FieldCheckService.from_config(config, discover=True, locale=self.settings.locale)

    def emit(self, result: ServiceResult, *, strict: bool = False) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr in human mode.
          With *strict*, an invalid field exits with code 2.
        * Failure: writes to stderr, exits with code 1.
        """
        json_output = self.settings.json_output
        output = format_result(result, json_output=json_output)
        if not result.ok:
            click.echo(output, err=True)
            raise SystemExit(EXIT_ERROR)

        click.echo(output)
        if not json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
        if strict and not result.data.get("valid", True):
            raise SystemExit(EXIT_INVALID)
