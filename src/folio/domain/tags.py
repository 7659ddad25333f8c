"""Tag domain logic — aggregation across content items."""

from __future__ import annotations

from collections.abc import Iterable

from folio.domain.content import ContentItem


def collect_tags(items: Iterable[ContentItem]) -> list[str]:
    """Return the sorted set of tags used by *items*.

    Examples:
        Two items tagged ``["python", "ai"]`` and ``["ai"]`` give
        ``["ai", "python"]``.
    """
    seen: set[str] = set()
    for item in items:
        seen.update(item.frontmatter.tags)
    return sorted(seen)


def has_tag(item: ContentItem, tag: str) -> bool:
    """Case-insensitive tag membership."""
    wanted = tag.casefold()
    return any(t.casefold() == wanted for t in item.frontmatter.tags)
