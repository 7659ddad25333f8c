"""Sitemap and robots.txt generation.

Detail-page URLs come from :meth:`ContentRepository.list_slugs`, the same
enumeration the build uses to decide which pages to pre-render.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from pydantic import BaseModel

from folio.domain.types import Category

if TYPE_CHECKING:
    from jinja2 import Environment

    from folio.config.models import SiteConfig, SitemapConfig
    from folio.infrastructure.repository import ContentRepository

# Section roots that get the weekly/0.8 treatment.
_SECTION_PATHS = frozenset({"/projects", "/experiments", "/blog", "/about", "/now"})
# Detail pages under these prefixes get monthly/0.6.
_DETAIL_PREFIXES = ("/projects/", "/experiments/", "/blog/")


class SitemapEntry(BaseModel):
    model_config = {"frozen": True}

    loc: str
    changefreq: str
    priority: float
    lastmod: str


def classify(path: str) -> tuple[str, float]:
    """``(changefreq, priority)`` for a site-relative *path*.

    Examples:
        >>> classify("/")
        ('daily', 1.0)
        >>> classify("/blog")
        ('weekly', 0.8)
        >>> classify("/projects/folio")
        ('monthly', 0.6)
        >>> classify("/thoughts/on-tools")
        ('monthly', 0.5)
    """
    normalized = path.rstrip("/") or "/"
    if normalized == "/":
        return "daily", 1.0
    if normalized in _SECTION_PATHS:
        return "weekly", 0.8
    if normalized.startswith(_DETAIL_PREFIXES):
        return "monthly", 0.6
    return "monthly", 0.5


def page_path(*parts: str, trailing_slash: bool = True) -> str:
    """Join path segments into a site-relative URL path.

    Examples:
        >>> page_path("blog", "hello")
        '/blog/hello/'
        >>> page_path(trailing_slash=True)
        '/'
    """
    joined = "/" + "/".join(p.strip("/") for p in parts if p)
    if trailing_slash and not joined.endswith("/"):
        joined += "/"
    return joined


def sitemap_paths(
    repository: ContentRepository,
    sitemap: SitemapConfig,
    *,
    trailing_slash: bool = True,
) -> list[str]:
    """Every buildable page path: home, section roots, static pages, details."""
    paths = [page_path(trailing_slash=trailing_slash)]
    paths.extend(page_path(cat.value, trailing_slash=trailing_slash) for cat in Category)
    paths.extend(page_path(page, trailing_slash=trailing_slash) for page in sitemap.static_pages)
    for cat in Category:
        paths.extend(
            page_path(cat.value, slug, trailing_slash=trailing_slash)
            for slug in repository.list_slugs(cat)
        )
    return paths


def sitemap_entries(
    repository: ContentRepository,
    site: SiteConfig,
    sitemap: SitemapConfig,
    *,
    trailing_slash: bool = True,
    now: datetime | None = None,
) -> list[SitemapEntry]:
    """Sitemap entries with absolute ``loc`` and build-time ``lastmod``."""
    lastmod = (now or datetime.now(UTC)).isoformat()
    entries: list[SitemapEntry] = []
    for path in sitemap_paths(repository, sitemap, trailing_slash=trailing_slash):
        changefreq, priority = classify(path)
        entries.append(
            SitemapEntry(
                loc=f"{site.base_url}{path}",
                changefreq=changefreq,
                priority=priority,
                lastmod=lastmod,
            )
        )
    return entries


def render_sitemap(env: Environment, entries: list[SitemapEntry]) -> str:
    """Render ``sitemap.xml``."""
    return env.get_template("sitemap.xml.j2").render(entries=entries)


def render_robots(env: Environment, site: SiteConfig) -> str:
    """Render ``robots.txt`` allowing every agent and pointing at the sitemap."""
    return env.get_template("robots.txt.j2").render(sitemap_url=f"{site.base_url}/sitemap.xml")
