"""BuildService — render the whole site to a static output directory.

Output layout (``trailing_slash = true``)::

    index.html                      home: featured projects, active experiments
    404.html
    {category}/index.html           listing (published only, newest first)
    {category}/{slug}/index.html    one per slug from list_slugs
    assets/highlight.css            Pygments stylesheet
    sitemap.xml, robots.txt
    ...                             copy of the site's static/ directory

With ``trailing_slash = false`` detail pages become ``{category}/{slug}.html``.

INVARIANT: a malformed content file halts the build (PARSE_ERROR); nothing
half-rendered is reported as success. An output directory that overlaps the
site's own source files is refused (UNSAFE_OUTPUT).
"""

from __future__ import annotations

import logging
import time
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from jinja2 import TemplateError
from pygments.util import ClassNotFound

from folio.config.logging import content_context
from folio.domain.content import ContentItem, ContentParseError
from folio.domain.types import Category, ExperimentStatus
from folio.infrastructure.filesystem import (
    clean_directory,
    copy_static_tree,
    output_overlap,
    write_output_file,
)
from folio.infrastructure.rendering import highlight_css
from folio.services.base import BaseService
from folio.services.result import BuildMeta, ErrorCode, ServiceResult
from folio.services.seo import (
    blog_posting_json_ld,
    json_ld_script,
    page_metadata,
    person_json_ld,
    website_json_ld,
)
from folio.services.sitemap import page_path, render_robots, render_sitemap, sitemap_entries

if TYPE_CHECKING:
    from folio.domain.content import Frontmatter

logger = logging.getLogger(__name__)

HOME_FEATURED_PROJECTS = 3
HOME_ACTIVE_EXPERIMENTS = 2
HIGHLIGHT_CSS_PATH = "assets/highlight.css"

SECTIONS: dict[Category, dict[str, str]] = {
    Category.PROJECTS: {
        "title": "Projects",
        "description": "Selected projects across infrastructure, cloud-native, and AI work.",
        "empty": "No projects yet. Check back soon!",
    },
    Category.EXPERIMENTS: {
        "title": "Experiments",
        "description": "Active explorations and experiments with emerging technologies.",
        "empty": "No experiments yet. Check back soon!",
    },
    Category.FINDINGS: {
        "title": "Findings",
        "description": "Quick insights, learnings, and today-I-learned moments.",
        "empty": "No findings yet. Check back soon!",
    },
    Category.THOUGHTS: {
        "title": "Thoughts",
        "description": "Longer-form reflections and opinions.",
        "empty": "No thoughts yet. Check back soon!",
    },
    Category.BLOG: {
        "title": "Blog",
        "description": "Insights, reflections, and learnings on technology.",
        "empty": "No posts yet. Check back soon!",
    },
}

# Listing groups for experiments, in display order.
_EXPERIMENT_GROUPS: list[tuple[ExperimentStatus, str]] = [
    (ExperimentStatus.IN_PROGRESS, "In Progress"),
    (ExperimentStatus.COMPLETED, "Completed"),
    (ExperimentStatus.PAUSED, "Paused"),
]


class BuildService(BaseService):
    """Renders listings, detail pages, and SEO artifacts through Jinja2."""

    def build(
        self,
        output_dir: Path | None = None,
        *,
        clean: bool = False,
        now: datetime | None = None,
    ) -> ServiceResult:
        """Build the full static site.

        Args:
            output_dir: Destination; defaults to ``[build] output_dir``.
            clean: Remove the destination first.
            now: Timestamp for sitemap ``lastmod`` (defaults to now, UTC).
        """
        op = "build"
        settings = self._site.settings
        out = output_dir or settings.output_dir
        built_at = now or datetime.now(UTC)
        started = time.perf_counter()
        warnings = self._layout_warnings()

        overlap = output_overlap(
            out,
            site_root=settings.site_root,
            sources={"content": settings.content_root, "static": settings.static_dir},
        )
        if overlap is not None:
            return ServiceResult.failure(
                op,
                ErrorCode.UNSAFE_OUTPUT,
                f"Refusing to build: {overlap}",
                detail={"output_dir": str(out)},
            )

        try:
            listings = {cat: self._repo.list_by_category(cat) for cat in Category}
            slugs = {cat: self._repo.list_slugs(cat) for cat in Category}
        except ContentParseError as exc:
            return self._parse_failure(op, exc)

        if clean:
            clean_directory(out)

        self._pages = 0
        detail_counts: dict[str, int] = {}
        try:
            self._write_home(out, listings)
            for cat in Category:
                self._write_listing(out, cat, listings[cat])
                detail_counts[cat.value] = self._write_details(out, cat, slugs[cat], warnings)
            self._write_not_found(out)
            entries = sitemap_entries(
                self._repo,
                settings.site,
                settings.sitemap,
                trailing_slash=settings.build.trailing_slash,
                now=built_at,
            )
            write_output_file(out / "sitemap.xml", render_sitemap(self._site.templates, entries))
            if settings.sitemap.robots:
                write_output_file(
                    out / "robots.txt", render_robots(self._site.templates, settings.site)
                )
        except TemplateError as exc:
            logger.warning("Template error during build: %s", exc)
            return ServiceResult.failure(op, ErrorCode.TEMPLATE_ERROR, str(exc))

        write_output_file(out / HIGHLIGHT_CSS_PATH, self._highlight_css(warnings))
        static_files = copy_static_tree(settings.static_dir, out)

        logger.info("Built %d pages into %s", self._pages, out)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "output_dir": str(out),
                "pages": self._pages,
                "listed": {cat.value: len(items) for cat, items in listings.items()},
                "details": detail_counts,
                "sitemap_urls": len(entries),
                "static_files": static_files,
            },
            warnings=warnings,
            meta=BuildMeta(
                content_root=str(settings.content_root),
                elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
                built_at=built_at.isoformat(),
            ),
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _url(self, *parts: str) -> str:
        return page_path(*parts, trailing_slash=self._site.settings.build.trailing_slash)

    def _page_file(self, out: Path, *parts: str) -> Path:
        if not parts:
            return out / "index.html"
        if self._site.settings.build.trailing_slash:
            return out.joinpath(*parts) / "index.html"
        *parents, leaf = parts
        return out.joinpath(*parents) / f"{leaf}.html"

    def _highlight_css(self, warnings: list[str]) -> str:
        style = self._site.settings.markdown.pygments_style
        try:
            return highlight_css(style)
        except ClassNotFound:
            warnings.append(f"Unknown Pygments style {style!r}; using 'default'")
            return highlight_css("default")

    def _base_context(self) -> dict[str, Any]:
        site = self._site.settings.site
        return {
            "site": site,
            "url": self._url,
            "nav": [(SECTIONS[cat]["title"], self._url(cat.value)) for cat in Category],
            "highlight_css": "/" + HIGHLIGHT_CSS_PATH,
            "site_json_ld": [
                json_ld_script(person_json_ld(site)),
                json_ld_script(website_json_ld(site)),
            ],
        }

    def _render(self, template: str, target: Path, **context: Any) -> None:
        html = self._site.templates.get_template(template).render(
            **self._base_context(), **context
        )
        write_output_file(target, html)
        self._pages += 1
        logger.debug("Wrote %s", target)

    # ------------------------------------------------------------------
    # Pages
    # ------------------------------------------------------------------

    def _write_home(self, out: Path, listings: dict[Category, list[ContentItem]]) -> None:
        site = self._site.settings.site
        projects = [
            p for p in listings[Category.PROJECTS] if getattr(p.frontmatter, "featured", False)
        ][:HOME_FEATURED_PROJECTS]
        experiments = [
            e
            for e in listings[Category.EXPERIMENTS]
            if getattr(e.frontmatter, "status", None) == ExperimentStatus.IN_PROGRESS
        ][:HOME_ACTIVE_EXPERIMENTS]
        self._render(
            "home.html.j2",
            self._page_file(out),
            meta=page_metadata(site, path="/"),
            featured_projects=projects,
            active_experiments=experiments,
        )

    def _write_listing(self, out: Path, cat: Category, items: list[ContentItem]) -> None:
        section = SECTIONS[cat]
        groups: list[tuple[str, list[ContentItem]]]
        if cat is Category.EXPERIMENTS:
            groups = [
                (label, [i for i in items if getattr(i.frontmatter, "status", None) == status])
                for status, label in _EXPERIMENT_GROUPS
            ]
            groups = [(label, grouped) for label, grouped in groups if grouped]
        else:
            groups = [("", items)] if items else []

        self._render(
            "listing.html.j2",
            self._page_file(out, cat.value),
            meta=page_metadata(
                self._site.settings.site,
                title=section["title"],
                description=section["description"],
                path=self._url(cat.value),
            ),
            category=cat.value,
            section=section,
            groups=groups,
        )

    def _write_details(
        self, out: Path, cat: Category, slugs: list[str], warnings: list[str]
    ) -> int:
        written = 0
        for slug in slugs:
            item = self._repo.get_by_category_and_slug(cat, slug)
            if item is None:
                warnings.append(f"Skipped {cat.value}/{slug}: could not be loaded")
                continue
            with content_context(cat, slug):
                self._write_detail(out, cat, item)
            written += 1
        return written

    def _write_detail(self, out: Path, cat: Category, item: ContentItem) -> None:
        site = self._site.settings.site
        fm: Frontmatter = item.frontmatter
        self._render(
            "detail.html.j2",
            self._page_file(out, cat.value, item.slug),
            meta=page_metadata(
                site,
                title=fm.title,
                description=fm.excerpt or "",
                path=self._url(cat.value, item.slug),
            ),
            category=cat.value,
            section=SECTIONS[cat],
            item=item,
            html=self._repo.render_to_markup(item.body),
            reading_time=self._repo.estimate_reading_time(item.body),
            page_json_ld=json_ld_script(
                blog_posting_json_ld(
                    site,
                    title=fm.title,
                    description=fm.excerpt or "",
                    date_published=fm.date.isoformat(),
                    path=f"{cat.value}/{item.slug}",
                )
            ),
        )

    def _write_not_found(self, out: Path) -> None:
        self._render(
            "not_found.html.j2",
            out / "404.html",
            meta=page_metadata(self._site.settings.site, title="Page not found", path="/404"),
        )
