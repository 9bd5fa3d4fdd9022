"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns result emission (stdout/stderr routing and exit
codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from commonkit.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from commonkit.config.settings import CommonKitSettings
    from commonkit.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: CommonKitSettings) -> None:
        self.settings = settings

        from commonkit.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout, returns normally.  Warnings go to
          stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            no_color=self.settings.output.no_color,
            width=self.settings.output.width,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
