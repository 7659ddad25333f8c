"""Page metadata and schema.org JSON-LD generation.

Consumes only frontmatter-level fields (title, excerpt, date) and the
``[site]`` config; it knows nothing about how content is stored.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, Field

from folio.config.models import SiteConfig

OG_IMAGE_WIDTH = 1200
OG_IMAGE_HEIGHT = 630
_SCHEMA_CONTEXT = "https://schema.org"


class OpenGraphImage(BaseModel):
    model_config = {"frozen": True}

    url: str
    width: int = OG_IMAGE_WIDTH
    height: int = OG_IMAGE_HEIGHT
    alt: str


class OpenGraph(BaseModel):
    model_config = {"frozen": True}

    type: str = "website"
    url: str
    title: str
    description: str
    images: list[OpenGraphImage] = Field(default_factory=list)
    site_name: str


class TwitterCard(BaseModel):
    model_config = {"frozen": True}

    card: str = "summary_large_image"
    title: str
    description: str
    images: list[str] = Field(default_factory=list)


class PageMetadata(BaseModel):
    """Everything a page's ``<head>`` needs."""

    model_config = {"frozen": True}

    title: str
    description: str
    canonical: str
    open_graph: OpenGraph
    twitter: TwitterCard


def page_metadata(
    site: SiteConfig,
    *,
    title: str | None = None,
    description: str | None = None,
    image: str | None = None,
    path: str = "",
) -> PageMetadata:
    """Build head metadata for one page.

    A page title becomes ``"{title} | {site.name}"``; pages without one
    (the home page) use the site's full title. Empty descriptions and
    images fall back to the site defaults.
    """
    page_title = f"{title} | {site.name}" if title else site.title
    page_description = description or site.description
    page_image = image or site.og_image
    page_url = f"{site.base_url}{path}"

    return PageMetadata(
        title=page_title,
        description=page_description,
        canonical=page_url,
        open_graph=OpenGraph(
            url=page_url,
            title=page_title,
            description=page_description,
            images=[OpenGraphImage(url=page_image, alt=page_title)],
            site_name=site.name,
        ),
        twitter=TwitterCard(
            title=page_title,
            description=page_description,
            images=[page_image],
        ),
    )


def person_json_ld(site: SiteConfig) -> dict[str, Any]:
    """schema.org ``Person`` for the site owner."""
    data: dict[str, Any] = {
        "@context": _SCHEMA_CONTEXT,
        "@type": "Person",
        "name": site.author_name,
        "url": site.base_url,
        "sameAs": [link for link in (site.links.github, site.links.linkedin) if link],
    }
    if site.job_title:
        data["jobTitle"] = site.job_title
    if site.person_description:
        data["description"] = site.person_description
    return data


def website_json_ld(site: SiteConfig) -> dict[str, Any]:
    """schema.org ``WebSite``."""
    return {
        "@context": _SCHEMA_CONTEXT,
        "@type": "WebSite",
        "name": site.name,
        "url": site.base_url,
        "description": site.description,
    }


def blog_posting_json_ld(
    site: SiteConfig,
    *,
    title: str,
    description: str,
    date_published: str,
    path: str,
) -> dict[str, Any]:
    """schema.org ``BlogPosting`` for a detail page.

    *path* is site-relative without a leading slash, e.g. ``"blog/hello"``.
    """
    return {
        "@context": _SCHEMA_CONTEXT,
        "@type": "BlogPosting",
        "headline": title,
        "description": description,
        "datePublished": date_published,
        "author": {"@type": "Person", "name": site.author_name},
        "url": f"{site.base_url}/{path.lstrip('/')}",
    }


def json_ld_script(data: dict[str, Any]) -> str:
    """Serialize *data* for embedding inside ``<script type="application/ld+json">``.

    ``</`` is escaped so a string value cannot close the script element.
    """
    return json.dumps(data, ensure_ascii=False).replace("</", "<\\/")
