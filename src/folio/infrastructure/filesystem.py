"""Filesystem operations for site content and build output.

INVARIANT: Files are truth. Content is read fresh on every call; nothing
here caches. Authoring happens out-of-band by editing files before a
rebuild.

Pure parsing utilities live in :mod:`folio.domain.content`. This module
handles actual file I/O, path resolution, and file discovery.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from folio.domain.content import CONTENT_EXTENSION
from folio.domain.types import Category

# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def read_content_file(path: Path) -> str:
    """Read a content file as UTF-8 text."""
    return path.read_text(encoding="utf-8")


def write_output_file(path: Path, text: str) -> None:
    """Write a rendered artifact, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def copy_static_tree(source: Path, destination: Path) -> int:
    """Mirror *source* into *destination*. Returns the number of files copied.

    A missing *source* is not an error (sites without static assets).
    """
    if not source.is_dir():
        return 0
    shutil.copytree(source, destination, dirs_exist_ok=True)
    return sum(1 for p in source.rglob("*") if p.is_file())


def clean_directory(path: Path) -> None:
    """Remove *path* and everything below it, if it exists."""
    if path.exists():
        shutil.rmtree(path)


# ---------------------------------------------------------------------------
# Path resolution
# ---------------------------------------------------------------------------


def category_dir(content_root: Path, category: Category | str) -> Path:
    """Directory backing *category*: ``{content_root}/{category}``."""
    return content_root / Category(category).value


def resolve_content_path(content_root: Path, category: Category | str, slug: str) -> Path:
    """Resolve ``{content_root}/{category}/{slug}.md``.

    Raises:
        ValueError: If *slug* is empty or the path escapes the category dir.
    """
    if not slug or slug in (".", ".."):
        msg = f"Invalid slug: {slug!r}"
        raise ValueError(msg)

    base = category_dir(content_root, category)
    result = base / f"{slug}{CONTENT_EXTENSION}"

    # Guard against path traversal via crafted slugs
    if result.resolve().parent != base.resolve():
        msg = f"Slug escapes category directory: {slug!r}"
        raise ValueError(msg)

    return result


def output_overlap(output_dir: Path, *, site_root: Path, sources: dict[str, Path]) -> str | None:
    """Describe how *output_dir* overlaps the site's own files, or ``None``.

    The output directory may not be the site root or one of its ancestors,
    and may not contain, equal, or sit inside any of *sources*.
    """
    out = output_dir.resolve()
    root = site_root.resolve()
    if root.is_relative_to(out):
        return f"output directory {out} contains the site root {root}"
    for name, source in sources.items():
        src = source.resolve()
        if src.is_relative_to(out) or out.is_relative_to(src):
            return f"output directory {out} overlaps the {name} directory {src}"
    return None


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------


def find_content_files(directory: Path) -> list[Path]:
    """List content files directly inside *directory*, in filename order.

    Only regular files with the content extension count; subdirectories
    are not walked. A missing directory yields ``[]``.
    """
    if not directory.is_dir():
        return []
    return sorted(
        (p for p in directory.iterdir() if p.is_file() and p.suffix == CONTENT_EXTENSION),
        key=lambda p: p.name,
    )


def slug_for(path: Path) -> str:
    """Slug of a content file: its filename minus the extension."""
    return path.name.removesuffix(CONTENT_EXTENSION)
