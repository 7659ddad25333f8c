"""Site — the single dependency injected into every service.

The Site owns the settings, the content repository, and the Jinja2
template environment. Both collaborators are created lazily so commands
that never render (``folio slugs``) never touch the template loader.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from folio.infrastructure.repository import ContentRepository
from folio.infrastructure.templates import build_template_environment

if TYPE_CHECKING:
    from pathlib import Path

    from jinja2 import Environment

    from folio.config.settings import FolioSettings

logger = logging.getLogger(__name__)


class Site:
    """Settings plus the collaborators derived from them."""

    def __init__(self, settings: FolioSettings) -> None:
        self.settings = settings
        self._repository: ContentRepository | None = None
        self._templates: Environment | None = None

    @property
    def root(self) -> Path:
        return self.settings.site_root

    @property
    def repository(self) -> ContentRepository:
        """Content repository rooted at the configured content directory."""
        if self._repository is None:
            self._repository = ContentRepository(
                self.settings.content_root,
                unpublished=self.settings.content.unpublished,
                words_per_minute=self.settings.markdown.words_per_minute,
            )
            logger.debug(
                "Content repository at %s (unpublished=%s)",
                self.settings.content_root,
                self.settings.content.unpublished,
            )
        return self._repository

    @property
    def templates(self) -> Environment:
        """Template environment with ``.folio/templates`` overrides first."""
        if self._templates is None:
            self._templates = build_template_environment("site", site_root=self.root)
        return self._templates
