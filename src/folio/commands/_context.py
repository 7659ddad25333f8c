"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Owns the lazily built :class:`Site` and the single
place where results are printed and exit codes decided.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from folio.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from folio.config.settings import FolioSettings
    from folio.infrastructure.site import Site
    from folio.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The site is created on first use so ``--help`` and ``--version``
    never touch the content directory.
    """

    def __init__(self, settings: FolioSettings) -> None:
        self.settings = settings
        self._site: Site | None = None

        from folio.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def site(self) -> Site:
        """The site instance (created lazily on first access)."""
        if self._site is None:
            from folio.infrastructure.site import Site

            self._site = Site(self.settings)
        return self._site

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr so they don't
          pollute piped output.
        * Failure: writes to stderr and exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # JSON output already carries the warnings.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
