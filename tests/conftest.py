"""Shared pytest fixtures and test helpers for folio tests."""

from __future__ import annotations

import datetime
from collections.abc import Callable
from io import StringIO
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from ruamel.yaml import YAML

from folio.config.settings import FolioSettings
from folio.infrastructure.repository import ContentRepository
from folio.infrastructure.site import Site

WriteItem = Callable[..., Path]

SITE_TOML = """\
[site]
name = "Jane Doe"
title = "Jane Doe | Engineer"
description = "Projects and writing by Jane."
url = "https://jane.example.com/"
author = "Jane Doe"
job_title = "Platform Engineer"

[site.links]
github = "https://github.com/jane"
"""


def frontmatter_text(fields: dict[str, Any], body: str = "") -> str:
    """Render *fields* as a ``---`` delimited YAML block followed by *body*."""
    buf = StringIO()
    YAML().dump(fields, buf)
    return f"---\n{buf.getvalue()}---\n{body}"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    """Empty content directory (category folders are created on demand)."""
    root = tmp_path / "content"
    root.mkdir()
    return root


@pytest.fixture
def write_item(content_root: Path) -> WriteItem:
    """Factory writing ``{category}/{slug}.md`` under the content root.

    Usage::

        write_item("blog", "hello", title="Hello", date="2024-03-01", body="Hi")

    Pass ``raw=`` to write the file text verbatim.
    """

    def _write(
        category: str,
        slug: str,
        *,
        body: str = "Body text.\n",
        raw: str | None = None,
        **fields: Any,
    ) -> Path:
        directory = content_root / category
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{slug}.md"
        if raw is None:
            fields.setdefault("title", slug.replace("-", " ").title())
            fields.setdefault("date", datetime.date(2024, 1, 1))
            raw = frontmatter_text(fields, body)
        path.write_text(raw, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def repository(content_root: Path) -> ContentRepository:
    """Repository over the temp content root with default policy."""
    return ContentRepository(content_root)


@pytest.fixture
def site_root(tmp_path: Path, content_root: Path) -> Path:
    """Temporary site: ``folio.toml`` plus the shared content directory."""
    (tmp_path / "folio.toml").write_text(SITE_TOML, encoding="utf-8")
    return tmp_path


@pytest.fixture
def settings(site_root: Path) -> FolioSettings:
    return FolioSettings.from_cli(site_root=site_root)


@pytest.fixture
def site(settings: FolioSettings) -> Site:
    return Site(settings)


@pytest.fixture
def _isolated_site(site_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp site so the CLI discovers its ``folio.toml``.

    Use via ``@pytest.mark.usefixtures("_isolated_site")`` on command test
    classes.
    """
    monkeypatch.delenv("FOLIO_CONFIG", raising=False)
    monkeypatch.chdir(site_root)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def seed_blog(write_item: WriteItem) -> None:
    """Three posts: ``a`` (Jan), ``b`` (Mar, unpublished), ``c`` (Feb)."""
    write_item("blog", "a", title="A", date=datetime.date(2024, 1, 1), tags=["python"])
    write_item(
        "blog",
        "b",
        title="B",
        date=datetime.date(2024, 3, 1),
        published=False,
        tags=["draft"],
    )
    write_item("blog", "c", title="C", date=datetime.date(2024, 2, 1), tags=["ai", "python"])
