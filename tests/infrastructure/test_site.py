"""Tests for the Site container."""

from __future__ import annotations

from pathlib import Path

from folio.config.settings import FolioSettings
from folio.domain.types import UnpublishedPolicy
from folio.infrastructure.site import Site


class TestSite:
    def test_repository_uses_settings(self, site: Site, settings: FolioSettings) -> None:
        repo = site.repository
        assert repo.content_root == settings.content_root
        assert repo.unpublished is UnpublishedPolicy.UNLISTED
        assert site.repository is repo

    def test_repository_policy_from_config(self, site_root: Path) -> None:
        toml = site_root / "folio.toml"
        toml.write_text(
            toml.read_text(encoding="utf-8") + '\n[content]\nunpublished = "hidden"\n',
            encoding="utf-8",
        )
        site = Site(FolioSettings.from_cli(site_root=site_root))
        assert site.repository.unpublished is UnpublishedPolicy.HIDDEN

    def test_templates_cached(self, site: Site) -> None:
        assert site.templates is site.templates

    def test_root(self, site: Site, site_root: Path) -> None:
        assert site.root == site_root
