"""Markdown -> HTML rendering via Python-Markdown and Pygments.

Output is NOT sanitized: content is written by the site author and raw
HTML in a body passes through untouched.

Heading anchors mirror the site's original behaviour: every heading gets a
slug id and its text is wrapped in an ``<a class="heading-anchor">``
pointing at that id. Absolute links open in a new tab.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as etree
from typing import Any

import markdown
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor
from pygments.formatters import HtmlFormatter

logger = logging.getLogger(__name__)

ANCHOR_CLASS = "heading-anchor"
ANCHOR_LABEL = "Link to section"
HIGHLIGHT_CLASS = "highlight"

_EXTENSIONS: list[str | Extension] = [
    "extra",  # tables, fenced_code, footnotes, attr_list, abbr
    "sane_lists",
    "codehilite",
    "toc",
]

_EXTENSION_CONFIGS: dict[str, dict[str, Any]] = {
    "codehilite": {"css_class": HIGHLIGHT_CLASS, "guess_lang": False},
    "toc": {"anchorlink": True, "anchorlink_class": ANCHOR_CLASS},
}


class _HeadingAnchorProcessor(Treeprocessor):
    """Label the anchors the toc extension wraps around heading text."""

    def run(self, root: etree.Element) -> None:
        for el in root.iter("a"):
            if ANCHOR_CLASS in (el.get("class") or "").split():
                el.set("aria-label", ANCHOR_LABEL)


class _ExternalLinkProcessor(Treeprocessor):
    """Open absolute http(s) links in a new tab without leaking the opener."""

    def run(self, root: etree.Element) -> None:
        for el in root.iter("a"):
            href = el.get("href") or ""
            if href.startswith(("http://", "https://")):
                el.set("target", "_blank")
                el.set("rel", "noopener noreferrer")


class SiteLinksExtension(Extension):
    """Register the anchor/link tree processors after ``toc`` (priority 5)."""

    def extendMarkdown(self, md: markdown.Markdown) -> None:  # noqa: N802
        md.treeprocessors.register(_HeadingAnchorProcessor(md), "heading_anchor", 4)
        md.treeprocessors.register(_ExternalLinkProcessor(md), "external_link", 3)


def _new_markdown() -> markdown.Markdown:
    """Fresh converter per call; ``markdown.Markdown`` keeps per-document state."""
    return markdown.Markdown(
        extensions=[*_EXTENSIONS, SiteLinksExtension()],
        extension_configs=_EXTENSION_CONFIGS,
        output_format="html",
    )


def render_markdown(body: str) -> str:
    """Convert a markdown body to an HTML fragment.

    Supports headings with anchors, fenced and highlighted code blocks,
    block quotes, tables, footnotes, and links. No caching: every call
    converts from scratch.
    """
    html = _new_markdown().convert(body)
    logger.debug("Rendered markdown (%d chars -> %d chars)", len(body), len(html))
    return html


def highlight_css(style: str = "monokai") -> str:
    """Pygments stylesheet for code blocks rendered by :func:`render_markdown`.

    Raises:
        pygments.util.ClassNotFound: If *style* is not a Pygments style.
    """
    return HtmlFormatter(style=style).get_style_defs(f".{HIGHLIGHT_CLASS}")
