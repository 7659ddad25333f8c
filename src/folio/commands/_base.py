"""Click building blocks shared by folio commands.

Every content command takes a CATEGORY; :func:`category_argument` declares
it once so the choices, case handling, and help text stay in step with
:class:`Category`. :class:`FolioCommand` adds ``--examples``, which prints
ready-to-paste invocations and exits, and lists the categories under
``--help`` for commands that take one.
"""

from __future__ import annotations

import textwrap
from collections.abc import Callable
from typing import Any

import click

from folio.domain.types import Category

CATEGORIES = [c.value for c in Category]


def category_argument(*, required: bool = True) -> Callable[[Any], Any]:
    """The positional CATEGORY argument, normalized to lower case."""
    return click.argument(
        "category",
        type=click.Choice(CATEGORIES, case_sensitive=False),
        required=required,
    )


def _examples_option(examples: str) -> click.Option:
    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        for line in examples.splitlines():
            click.echo(f"  {line}")
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show_examples,
        help="Show usage examples.",
    )


class FolioCommand(click.Command):
    """Click Command with ``--examples`` and a category list in its help."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = textwrap.dedent(examples).strip() if examples else None
        if self.examples:
            self.params.append(_examples_option(self.examples))

    def takes_category(self) -> bool:
        return any(p.name == "category" for p in self.params)

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        super().format_epilog(ctx, formatter)
        if self.takes_category():
            with formatter.section("Categories"):
                formatter.write_text(", ".join(CATEGORIES))
