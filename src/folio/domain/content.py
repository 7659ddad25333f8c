"""Content models — frontmatter schemas, content items, and parsing.

Frontmatter model attributes map 1:1 to YAML frontmatter keys. Keys the
authors write in camelCase (``githubUrl``, ``coverImage``...) are bound
through pydantic aliases so Python code stays snake_case.

Parsing is strict: a file whose YAML is malformed, or whose frontmatter
does not satisfy its category schema, raises :class:`ContentParseError`.
Callers decide whether that is fatal (listings) or collapses to "absent"
(single-item lookup).

Pure parsing utilities live here so that the dependency direction stays
clean: infrastructure -> domain, never the reverse.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from pathlib import Path
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, Field, StrictBool, ValidationError, field_validator
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from folio.domain.types import Category, ExperimentStatus, PostCategory, ProjectStatus

_FRONTMATTER_DELIMITER = "---"

# Recognized content file extension (fixed for every category).
CONTENT_EXTENSION = ".md"


def _new_yaml() -> YAML:
    """Create a fresh round-trip YAML parser.

    ruamel.yaml's YAML object is stateful; a new instance per call keeps a
    failed load from leaking into the next one.
    """
    return YAML()


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class ContentParseError(ValueError):
    """A content file could not be parsed or did not match its schema.

    Attributes:
        path: The offending file (None when parsing raw text).
        errors: One human-readable line per problem.
    """

    def __init__(self, message: str, *, path: Path | None = None, errors: list[str] | None = None):
        self.path = path
        self.errors = errors or []
        where = f"{path}: " if path else ""
        super().__init__(f"{where}{message}")

    def to_detail(self) -> dict[str, Any]:
        return {"path": str(self.path) if self.path else None, "errors": self.errors}


# ---------------------------------------------------------------------------
# Frontmatter parsing
# ---------------------------------------------------------------------------


def parse_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """Parse YAML frontmatter and body from markdown content.

    Expects the file to start with ``---`` on the first line. The second
    ``---`` closes the YAML block. Everything after is the body.

    Handles both ``\\n`` and ``\\r\\n`` line endings and a leading BOM.

    Returns:
        A ``(frontmatter_dict, body_text)`` tuple. If no frontmatter
        delimiters are found, returns ``({}, content)``.

    Raises:
        ruamel.yaml.error.YAMLError: If the YAML block is malformed.
    """
    normalized = content.lstrip("\ufeff").replace("\r\n", "\n")
    lines = normalized.split("\n")
    if not lines or lines[0].strip() != _FRONTMATTER_DELIMITER:
        return {}, content

    end_idx: int | None = None
    for i, line in enumerate(lines[1:], start=1):
        if line.strip() == _FRONTMATTER_DELIMITER:
            end_idx = i
            break

    if end_idx is None:
        return {}, content

    yaml_block = "\n".join(lines[1:end_idx])
    body = "\n".join(lines[end_idx + 1 :])

    if body.startswith("\n"):
        body = body[1:]

    fm: Any = _new_yaml().load(yaml_block) or {}
    return fm, body


# ---------------------------------------------------------------------------
# Frontmatter models
# ---------------------------------------------------------------------------


class Frontmatter(BaseModel):
    """Fields common to every category."""

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}

    title: str
    date: datetime.date
    excerpt: str | None = None
    tags: list[str] = Field(default_factory=list)
    published: StrictBool = True

    _category: ClassVar[Category | None] = None

    @field_validator("date", mode="before")
    @classmethod
    def _coerce_datetime(cls, value: Any) -> Any:
        if isinstance(value, datetime.datetime):
            return value.date()
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def _none_tags(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("published", mode="before")
    @classmethod
    def _none_published(cls, value: Any) -> Any:
        # Only an explicit false unpublishes.
        return True if value is None else value

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the authored (aliased) key names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ProjectFrontmatter(Frontmatter):
    _category: ClassVar[Category | None] = Category.PROJECTS

    status: ProjectStatus
    cover_image: str | None = Field(default=None, alias="coverImage")
    github_url: str | None = Field(default=None, alias="githubUrl")
    live_url: str | None = Field(default=None, alias="liveUrl")
    featured: StrictBool = False


class ExperimentFrontmatter(Frontmatter):
    _category: ClassVar[Category | None] = Category.EXPERIMENTS

    status: ExperimentStatus
    github_url: str | None = Field(default=None, alias="githubUrl")


class BlogPostFrontmatter(Frontmatter):
    """Blog post. ``readingTime`` is an optional authored override."""

    _category: ClassVar[Category | None] = Category.BLOG

    category: PostCategory = PostCategory.INSIGHT
    reading_time: str | None = Field(default=None, alias="readingTime")


class FindingFrontmatter(Frontmatter):
    _category: ClassVar[Category | None] = Category.FINDINGS


class ThoughtFrontmatter(Frontmatter):
    _category: ClassVar[Category | None] = Category.THOUGHTS


FRONTMATTER_REGISTRY: dict[Category, type[Frontmatter]] = {
    Category.PROJECTS: ProjectFrontmatter,
    Category.EXPERIMENTS: ExperimentFrontmatter,
    Category.FINDINGS: FindingFrontmatter,
    Category.THOUGHTS: ThoughtFrontmatter,
    Category.BLOG: BlogPostFrontmatter,
}


def get_frontmatter_model(category: Category | str) -> type[Frontmatter]:
    """Look up the frontmatter schema for *category*.

    Raises:
        ValueError: If *category* is not one of :class:`Category`.
    """
    return FRONTMATTER_REGISTRY[Category(category)]


# ---------------------------------------------------------------------------
# Content item
# ---------------------------------------------------------------------------

F = TypeVar("F", bound=Frontmatter)


@dataclass(frozen=True)
class ContentItem(Generic[F]):
    """One parsed content file: slug, validated frontmatter, raw markdown body."""

    slug: str
    frontmatter: F
    body: str

    @property
    def date(self) -> datetime.date:
        return self.frontmatter.date

    def summary(self) -> dict[str, Any]:
        """Listing-friendly dict (frontmatter plus slug, no body)."""
        return {"slug": self.slug, **self.frontmatter.to_dict()}


def _format_validation_errors(exc: ValidationError) -> list[str]:
    lines: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "<frontmatter>"
        lines.append(f"{loc}: {err['msg']}")
    return lines


def parse_content(
    content: str,
    category: Category | str,
    slug: str,
    *,
    path: Path | None = None,
) -> ContentItem[Frontmatter]:
    """Parse raw file text into a validated :class:`ContentItem`.

    Raises:
        ContentParseError: On malformed YAML or a schema mismatch.
    """
    model = get_frontmatter_model(category)
    try:
        fm, body = parse_frontmatter(content)
    except YAMLError as exc:
        raise ContentParseError("invalid frontmatter YAML", path=path, errors=[str(exc)]) from exc

    try:
        frontmatter = model.model_validate(fm)
    except ValidationError as exc:
        raise ContentParseError(
            f"frontmatter does not match the {Category(category)} schema",
            path=path,
            errors=_format_validation_errors(exc),
        ) from exc

    return ContentItem(slug=slug, frontmatter=frontmatter, body=body)
