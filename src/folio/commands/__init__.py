"""Subcommand modules for folio.

:func:`register_commands` imports command modules only when the CLI is
assembled, keeping ``folio --version`` cheap.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every standalone command on the root CLI group."""
    from folio.commands.build import build
    from folio.commands.check import check
    from folio.commands.content import list_cmd, show, slugs, tags

    cli.add_command(build)
    cli.add_command(list_cmd)
    cli.add_command(show)
    cli.add_command(slugs)
    cli.add_command(tags)
    cli.add_command(check)
