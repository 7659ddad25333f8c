"""Command: render the site to static files."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from folio.commands._base import FolioCommand

if TYPE_CHECKING:
    from folio.commands._context import AppContext


@click.command(
    cls=FolioCommand,
    examples="""\
  folio build
  folio build --clean
  folio build --out /tmp/site
  folio --json build""",
)
@click.option(
    "--out",
    "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Output directory (default: [build] output_dir).",
)
@click.option("--clean", is_flag=True, help="Remove the output directory first.")
@click.pass_obj
def build(app: AppContext, output_dir: Path | None, clean: bool) -> None:
    """Build every page, the sitemap, and robots.txt."""
    from folio.services.build import BuildService

    app.emit(BuildService(app.site).build(output_dir, clean=clean))
