"""Locate a folio site on disk.

A site is the directory holding ``folio.toml``. It is found by walking up
from the working directory, the way git finds ``.git/``, unless
``--config`` or the ``FOLIO_CONFIG`` env var names the file directly.
Relative paths in the config (``[content] dir``, ``[build] output_dir``)
resolve against that directory, the site root.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from folio.config.models import FolioConfig

CONFIG_FILENAME = "folio.toml"
CONFIG_ENV_VAR = "FOLIO_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Path of the ``folio.toml`` governing *start* (default: cwd), or None.

    ``FOLIO_CONFIG`` wins when set; if it points at a missing file nothing
    is found rather than falling back to the walk-up.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config(explicit: str | None = None, start: Path | None = None) -> Path | None:
    """The config file for a CLI run: ``--config`` if it exists, else discovery.

    An explicit path that does not exist yields None, so the run uses
    defaults instead of a config found elsewhere.
    """
    if explicit:
        p = Path(explicit)
        return p if p.is_file() else None
    return find_config(start)


def site_root_for(config_path: Path | None, start: Path | None = None) -> Path:
    """Directory that relative config paths resolve against.

    The config file's parent when there is one, else *start* (default: cwd).
    """
    if config_path is not None:
        return config_path.parent
    return start or Path.cwd()


def load_config(path: Path | None = None, cwd: Path | None = None) -> FolioConfig:
    """Load and validate a site's ``folio.toml``.

    If *path* is None, uses find_config(*cwd*) to discover the file.
    Returns default FolioConfig if no file is found.
    """
    if path is None:
        path = find_config(cwd)

    if path is None:
        return FolioConfig()

    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    return FolioConfig.model_validate(data)


def content_dir_problem(content_root: Path) -> str | None:
    """Describe what is wrong with *content_root*, or None if it is usable.

    A missing directory is not fatal (every category lists as empty) but
    usually means ``[content] dir`` or the site root is wrong.
    """
    if not content_root.exists():
        return f"Content directory {content_root} does not exist; check [content] dir"
    if not content_root.is_dir():
        return f"Content path {content_root} is not a directory"
    return None
