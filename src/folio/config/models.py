"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, folio.toml only contains
overrides. A fresh site needs only ``[site] name`` and ``url``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from folio.domain.types import UnpublishedPolicy

# --- folio.toml sections ---


class SiteLinksConfig(BaseModel):
    """[site.links] section."""

    model_config = {"frozen": True}

    github: str | None = None
    linkedin: str | None = None


class SiteConfig(BaseModel):
    """[site] section — identity used by page metadata and JSON-LD."""

    model_config = {"frozen": True}

    name: str = "My Portfolio"
    title: str = "My Portfolio"
    description: str = "Projects, experiments, findings, and writing."
    url: str = "https://example.com"
    og_image: str = "/images/og-image.jpg"
    author: str | None = None
    job_title: str | None = None
    person_description: str | None = None
    links: SiteLinksConfig = Field(default_factory=SiteLinksConfig)

    @property
    def author_name(self) -> str:
        return self.author or self.name

    @property
    def base_url(self) -> str:
        return self.url.rstrip("/")


class ContentConfig(BaseModel):
    """[content] section."""

    model_config = {"frozen": True}

    dir: str = "content"
    unpublished: UnpublishedPolicy = UnpublishedPolicy.UNLISTED


class BuildConfig(BaseModel):
    """[build] section."""

    model_config = {"frozen": True}

    output_dir: str = "out"
    static_dir: str = "static"
    trailing_slash: bool = True


class MarkdownConfig(BaseModel):
    """[markdown] section."""

    model_config = {"frozen": True}

    pygments_style: str = "monokai"
    words_per_minute: int = Field(default=200, gt=0)


class SitemapConfig(BaseModel):
    """[sitemap] section."""

    model_config = {"frozen": True}

    # Hand-made pages served from the static dir, e.g. ["about", "now"].
    static_pages: list[str] = Field(default_factory=list)
    robots: bool = True


class FolioConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    site: SiteConfig = Field(default_factory=SiteConfig)
    content: ContentConfig = Field(default_factory=ContentConfig)
    build: BuildConfig = Field(default_factory=BuildConfig)
    markdown: MarkdownConfig = Field(default_factory=MarkdownConfig)
    sitemap: SitemapConfig = Field(default_factory=SitemapConfig)
