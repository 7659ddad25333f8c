"""ContentRepository — read-only access to categorized markdown content.

Layout on disk::

    {content_root}/
        projects/<slug>.md
        experiments/<slug>.md
        findings/<slug>.md
        thoughts/<slug>.md
        blog/<slug>.md

Error policy is two-tier:

- Listing (:meth:`ContentRepository.list_by_category`) fails loudly. A
  malformed file raises :class:`ContentParseError` and the whole listing
  fails, so a build halts instead of publishing garbage.
- Single-item lookup (:meth:`ContentRepository.get_by_category_and_slug`)
  fails softly. Any error collapses to ``None``, which callers turn into
  "not found".

Nothing is cached; every call re-reads the files.
"""

from __future__ import annotations

import logging
from pathlib import Path

from folio.config.logging import content_context
from folio.domain.content import ContentItem, ContentParseError, Frontmatter, parse_content
from folio.domain.reading import DEFAULT_WORDS_PER_MINUTE, estimate_reading_time
from folio.domain.tags import collect_tags
from folio.domain.types import Category, UnpublishedPolicy
from folio.infrastructure.filesystem import (
    category_dir,
    find_content_files,
    read_content_file,
    resolve_content_path,
    slug_for,
)
from folio.infrastructure.rendering import render_markdown

logger = logging.getLogger(__name__)


class ContentRepository:
    """Loads, filters, and sorts content items for each category.

    Args:
        content_root: Directory holding one sub-directory per category.
        unpublished: What ``published: false`` means outside listings.
            The default, :attr:`UnpublishedPolicy.UNLISTED`, keeps such
            items reachable by slug.
        words_per_minute: Reading speed used by :meth:`estimate_reading_time`.
    """

    def __init__(
        self,
        content_root: Path,
        *,
        unpublished: UnpublishedPolicy = UnpublishedPolicy.UNLISTED,
        words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
    ) -> None:
        self.content_root = content_root
        self.unpublished = UnpublishedPolicy(unpublished)
        self.words_per_minute = words_per_minute

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_file(self, category: Category, path: Path) -> ContentItem[Frontmatter]:
        """Read and parse one content file.

        Raises:
            ContentParseError: If the file cannot be read or decoded, or
                does not parse against its category schema.
        """
        slug = slug_for(path)
        with content_context(category, slug):
            logger.debug("Loading %s", path)
            try:
                text = read_content_file(path)
            except (OSError, UnicodeDecodeError) as exc:
                logger.debug("Unreadable: %s", exc)
                raise ContentParseError(
                    f"could not read file ({exc.__class__.__name__})",
                    path=path,
                    errors=[str(exc)],
                ) from exc
            return parse_content(text, category, slug, path=path)

    def _hides_unpublished(self) -> bool:
        return self.unpublished is UnpublishedPolicy.HIDDEN

    def list_by_category(self, category: Category | str) -> list[ContentItem[Frontmatter]]:
        """Published items of *category*, newest first.

        A missing category directory yields ``[]``. Items dated the same
        day keep filename order.

        Raises:
            ContentParseError: If any file in the category is malformed.
        """
        cat = Category(category)
        files = find_content_files(category_dir(self.content_root, cat))
        items = [self.load_file(cat, path) for path in files]
        listed = [item for item in items if item.frontmatter.published is not False]
        listed.sort(key=lambda item: item.date, reverse=True)
        logger.debug("Listed %s: %d files, %d published", cat.value, len(files), len(listed))
        return listed

    def get_by_category_and_slug(
        self, category: Category | str, slug: str
    ) -> ContentItem[Frontmatter] | None:
        """Parse ``{slug}.md`` in *category*, or return ``None``.

        Never raises: a missing file, unreadable file, malformed frontmatter,
        or a slug that escapes the category directory all yield ``None``.
        Under the ``unlisted`` policy the published flag is not consulted.
        """
        try:
            cat = Category(category)
            path = resolve_content_path(self.content_root, cat, slug)
            item = self.load_file(cat, path)
        except (OSError, ValueError) as exc:
            logger.debug("Lookup %s/%s failed: %s", category, slug, exc)
            return None

        if self._hides_unpublished() and item.frontmatter.published is False:
            logger.debug("Lookup %s/%s hidden (unpublished)", cat.value, slug)
            return None
        return item

    def list_slugs(self, category: Category | str) -> list[str]:
        """Slugs of every file in *category*, in filename order.

        Used to decide which detail pages to pre-render. Under the
        ``unlisted`` policy this is unfiltered, so unpublished items still
        get a page. Under ``hidden`` each file is parsed and unpublished
        ones are dropped (malformed files then raise, as listings do).
        """
        cat = Category(category)
        files = find_content_files(category_dir(self.content_root, cat))
        if not self._hides_unpublished():
            return [slug_for(path) for path in files]
        return [
            item.slug
            for item in (self.load_file(cat, path) for path in files)
            if item.frontmatter.published is not False
        ]

    def all_tags(self, category: Category | str | None = None) -> list[str]:
        """Sorted unique tags across listed items of one or all categories."""
        categories = [Category(category)] if category is not None else list(Category)
        return collect_tags(item for cat in categories for item in self.list_by_category(cat))

    # ------------------------------------------------------------------
    # Presentation helpers
    # ------------------------------------------------------------------

    @staticmethod
    def render_to_markup(body: str) -> str:
        """Markdown body -> unsanitized HTML fragment."""
        return render_markdown(body)

    def estimate_reading_time(self, text: str) -> str:
        """Reading-time label such as ``"5 min read"``."""
        return estimate_reading_time(text, self.words_per_minute)
