"""Command: validate every content file."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from folio.commands._base import FolioCommand

if TYPE_CHECKING:
    from folio.commands._context import AppContext


@click.command(
    cls=FolioCommand,
    examples="""\
  folio check
  folio --json check""",
)
@click.pass_obj
def check(app: AppContext) -> None:
    """Parse every content file and report all frontmatter problems."""
    from folio.services.query import ContentService

    app.emit(ContentService(app.site).check())
