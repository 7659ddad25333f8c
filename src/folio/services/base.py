"""BaseService — abstract foundation for all folio services.

Every service receives a :class:`Site` at construction time. The Site
provides the content repository, templates, and settings.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from folio.config.discovery import content_dir_problem
from folio.domain.content import ContentParseError
from folio.domain.types import Category
from folio.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from folio.infrastructure.repository import ContentRepository
    from folio.infrastructure.site import Site

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class ContentService(BaseService):
            def slugs(self, category: str) -> ServiceResult:
                return ServiceResult(ok=True, op="slugs", data=...)
    """

    def __init__(self, site: Site) -> None:
        self._site = site

    @property
    def _repo(self) -> ContentRepository:
        return self._site.repository

    @staticmethod
    def _parse_category(op: str, value: str) -> Category | ServiceResult:
        """Coerce *value* to a Category, or build the INVALID_CATEGORY failure."""
        try:
            return Category(value)
        except ValueError:
            return ServiceResult.failure(
                op,
                ErrorCode.INVALID_CATEGORY,
                f"Unknown category: {value!r}",
                detail={"allowed": [c.value for c in Category]},
            )

    @staticmethod
    def _parse_failure(op: str, exc: ContentParseError) -> ServiceResult:
        """Wrap a fatal content parse error into a failed result."""
        logger.warning("Content parse error: %s", exc)
        return ServiceResult.failure(op, ErrorCode.PARSE_ERROR, str(exc), detail=exc.to_detail())

    def _layout_warnings(self) -> list[str]:
        """Warnings about the site layout itself, such as a missing content dir."""
        problem = content_dir_problem(self._repo.content_root)
        return [problem] if problem else []
