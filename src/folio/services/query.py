"""ContentService — read-only queries over site content.

Five surfaces, all returning :class:`ServiceResult`:

- list_items: published items of a category, newest first, with filters
- get: one item by slug (soft failure -> NOT_FOUND)
- slugs: every pre-renderable slug of a category
- tags: unique tags across one or all categories
- check: validate every content file, isolating errors per file
"""

from __future__ import annotations

from typing import Any

from folio.domain.content import ContentItem, ContentParseError
from folio.domain.tags import has_tag
from folio.domain.types import Category
from folio.infrastructure.filesystem import (
    category_dir,
    find_content_files,
    slug_for,
)
from folio.services.base import BaseService
from folio.services.result import ErrorCode, ServiceResult


def _matches(
    item: ContentItem,
    *,
    tag: str | None,
    status: str | None,
    featured: bool | None,
) -> bool:
    fm = item.frontmatter
    if tag is not None and not has_tag(item, tag):
        return False
    if status is not None and str(getattr(fm, "status", "")) != status:
        return False
    if featured is not None and bool(getattr(fm, "featured", False)) != featured:
        return False
    return True


class ContentService(BaseService):
    """Handles listing, lookup, slug enumeration, tags, and validation."""

    def list_items(
        self,
        category: str,
        *,
        tag: str | None = None,
        status: str | None = None,
        featured: bool | None = None,
        limit: int | None = None,
    ) -> ServiceResult:
        """Published items of *category*, newest first.

        Args:
            category: One of :class:`Category`.
            tag: Keep only items carrying this tag (case-insensitive).
            status: Keep only items with this status (projects/experiments).
            featured: Keep only (un)featured items (projects).
            limit: Maximum number of items after filtering.
        """
        op = "list_items"
        cat = self._parse_category(op, category)
        if isinstance(cat, ServiceResult):
            return cat

        try:
            items = self._repo.list_by_category(cat)
        except ContentParseError as exc:
            return self._parse_failure(op, exc)

        selected = [i for i in items if _matches(i, tag=tag, status=status, featured=featured)]
        if limit is not None:
            selected = selected[: max(limit, 0)]

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "category": cat.value,
                "count": len(selected),
                "items": [item.summary() for item in selected],
            },
        )

    def get(self, category: str, slug: str, *, html: bool = False) -> ServiceResult:
        """One item by slug, with reading time and optionally rendered HTML."""
        op = "get"
        cat = self._parse_category(op, category)
        if isinstance(cat, ServiceResult):
            return cat

        item = self._repo.get_by_category_and_slug(cat, slug)
        if item is None:
            return ServiceResult.failure(
                op,
                ErrorCode.NOT_FOUND,
                f"No {cat.value} item with slug {slug!r}",
                detail={"category": cat.value, "slug": slug},
            )

        data: dict[str, Any] = {
            **item.summary(),
            "category": cat.value,
            "reading_time": self._repo.estimate_reading_time(item.body),
            "body": item.body,
        }
        if html:
            data["html"] = self._repo.render_to_markup(item.body)

        warnings: list[str] = []
        if item.frontmatter.published is False:
            warnings.append(f"{cat.value}/{slug} is unpublished (unlisted but reachable)")
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def slugs(self, category: str) -> ServiceResult:
        """Slugs the build pre-renders for *category*, in filename order."""
        op = "slugs"
        cat = self._parse_category(op, category)
        if isinstance(cat, ServiceResult):
            return cat

        try:
            slugs = self._repo.list_slugs(cat)
        except ContentParseError as exc:
            return self._parse_failure(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "category": cat.value,
                "count": len(slugs),
                "items": [{"slug": s} for s in slugs],
            },
        )

    def tags(self, category: str | None = None) -> ServiceResult:
        """Unique tags used by listed items of one or all categories."""
        op = "tags"
        cat: Category | None = None
        if category is not None:
            parsed = self._parse_category(op, category)
            if isinstance(parsed, ServiceResult):
                return parsed
            cat = parsed

        try:
            tags = self._repo.all_tags(cat)
        except ContentParseError as exc:
            return self._parse_failure(op, exc)

        return ServiceResult(ok=True, op=op, data={"count": len(tags), "tags": tags})

    def check(self) -> ServiceResult:
        """Parse and validate every content file, reporting all failures.

        Unlike listings, a bad file does not stop the scan: each file is
        checked on its own so authors see every problem at once.
        """
        op = "check"
        root = self._repo.content_root
        issues: list[dict[str, Any]] = []
        warnings = self._layout_warnings()
        checked = 0

        for cat in Category:
            for path in find_content_files(category_dir(root, cat)):
                checked += 1
                try:
                    self._repo.load_file(cat, path)
                except ContentParseError as exc:
                    issues.append(
                        {
                            "category": cat.value,
                            "slug": slug_for(path),
                            "path": str(path.relative_to(root)),
                            "errors": exc.errors or [str(exc)],
                        }
                    )

        data = {"checked": checked, "count": len(issues), "issues": issues}
        if issues:
            return ServiceResult.failure(
                op,
                ErrorCode.CONTENT_INVALID,
                f"{len(issues)} of {checked} content files failed validation",
                detail=data,
                data=data,
                warnings=warnings,
            )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
