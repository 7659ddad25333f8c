"""Shared Jinja2 template loading with per-site override support."""

from __future__ import annotations

import datetime
from pathlib import Path

from jinja2 import (
    BaseLoader,
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    select_autoescape,
)

from folio.domain.types import STATUS_LABELS


def _format_date(value: datetime.date, style: str = "long") -> str:
    """``date(2024, 3, 1)`` -> ``"March 1, 2024"`` (long) or ``"Mar 1, 2024"`` (short)."""
    fmt = "%B" if style == "long" else "%b"
    month = value.strftime(fmt)
    return f"{month} {value.day}, {value.year}"


def build_template_environment(group: str, *, site_root: Path | None = None) -> Environment:
    """Build a Jinja2 environment with user overrides before packaged defaults.

    User overrides are loaded from ``.folio/templates/`` inside the site.
    Both a namespaced directory (for example ``.folio/templates/site/``)
    and the shared root are supported so templates can be organized without
    breaking the simpler flat override layout.
    """

    loaders: list[BaseLoader] = []
    if site_root is not None:
        template_root = site_root / ".folio" / "templates"
        loaders.append(FileSystemLoader([str(template_root / group), str(template_root)]))

    loaders.append(PackageLoader("folio", f"templates/{group}"))
    env = Environment(
        loader=ChoiceLoader(loaders),
        autoescape=select_autoescape(enabled_extensions=("html", "xml", "j2")),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["format_date"] = _format_date
    env.filters["status_label"] = lambda status: STATUS_LABELS.get(str(status), str(status))
    return env
