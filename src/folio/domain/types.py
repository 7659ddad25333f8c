"""Content categories and classification enums.

Each category maps to one directory under the content root and one
frontmatter schema (see :mod:`folio.domain.content`).
"""

from __future__ import annotations

from enum import StrEnum


class Category(StrEnum):
    """Fixed set of content categories."""

    PROJECTS = "projects"
    EXPERIMENTS = "experiments"
    FINDINGS = "findings"
    THOUGHTS = "thoughts"
    BLOG = "blog"


class ProjectStatus(StrEnum):
    """Lifecycle states a project may declare."""

    COMPLETED = "completed"
    IN_PROGRESS = "in-progress"
    ARCHIVED = "archived"


class ExperimentStatus(StrEnum):
    """Lifecycle states an experiment may declare."""

    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    PAUSED = "paused"


class PostCategory(StrEnum):
    """Blog post flavour."""

    INSIGHT = "insight"
    REFLECTION = "reflection"


class UnpublishedPolicy(StrEnum):
    """How ``published: false`` items are treated outside listings.

    UNLISTED keeps today's behavior: the item is dropped from listings but
    slug enumeration and direct lookup still return it, so a static page
    is still generated for it. HIDDEN drops it everywhere.
    """

    UNLISTED = "unlisted"
    HIDDEN = "hidden"


STATUS_LABELS: dict[str, str] = {
    "completed": "Completed",
    "in-progress": "In Progress",
    "paused": "Paused",
    "archived": "Archived",
}
