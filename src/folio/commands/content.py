"""Commands: list, show, slugs, and tags over site content."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from folio.commands._base import FolioCommand, category_argument
from folio.services.query import ContentService

if TYPE_CHECKING:
    from folio.commands._context import AppContext


@click.command(
    name="list",
    cls=FolioCommand,
    examples="""\
  folio list blog
  folio list projects --featured --limit 3
  folio list experiments --status in-progress
  folio list findings --tag python
  folio -q list thoughts""",
)
@category_argument()
@click.option("--tag", default=None, help="Filter by tag (case-insensitive).")
@click.option("--status", default=None, help="Filter by status (projects, experiments).")
@click.option("--featured/--not-featured", default=None, help="Filter by featured flag.")
@click.option("--limit", default=None, type=click.IntRange(min=0), help="Max results.")
@click.pass_obj
def list_cmd(
    app: AppContext,
    category: str,
    tag: str | None,
    status: str | None,
    featured: bool | None,
    limit: int | None,
) -> None:
    """List published items of CATEGORY, newest first."""
    svc = ContentService(app.site)
    app.emit(svc.list_items(category, tag=tag, status=status, featured=featured, limit=limit))


@click.command(
    cls=FolioCommand,
    examples="""\
  folio show blog hello-world
  folio show projects folio --html
  folio --json show findings til-uv""",
)
@category_argument()
@click.argument("slug")
@click.option("--html", "as_html", is_flag=True, help="Include the rendered HTML body.")
@click.pass_obj
def show(app: AppContext, category: str, slug: str, as_html: bool) -> None:
    """Show one item by CATEGORY and SLUG."""
    app.emit(ContentService(app.site).get(category, slug, html=as_html))


@click.command(
    cls=FolioCommand,
    examples="""\
  folio slugs blog
  folio -q slugs projects""",
)
@category_argument()
@click.pass_obj
def slugs(app: AppContext, category: str) -> None:
    """List every slug the build pre-renders for CATEGORY."""
    app.emit(ContentService(app.site).slugs(category))


@click.command(
    cls=FolioCommand,
    examples="""\
  folio tags
  folio tags blog""",
)
@category_argument(required=False)
@click.pass_obj
def tags(app: AppContext, category: str | None) -> None:
    """List unique tags of listed items, in one or all categories."""
    app.emit(ContentService(app.site).tags(category))
