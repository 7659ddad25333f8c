"""Tests for the Jinja2 environment: overrides and filters."""

from __future__ import annotations

import datetime
from pathlib import Path

from folio.infrastructure.templates import build_template_environment


class TestTemplateEnvironment:
    def test_packaged_templates_load(self) -> None:
        env = build_template_environment("site")
        assert env.get_template("robots.txt.j2") is not None

    def test_site_override_wins(self, tmp_path: Path) -> None:
        override = tmp_path / ".folio" / "templates" / "site"
        override.mkdir(parents=True)
        (override / "robots.txt.j2").write_text("custom {{ sitemap_url }}", encoding="utf-8")
        env = build_template_environment("site", site_root=tmp_path)
        out = env.get_template("robots.txt.j2").render(sitemap_url="x")
        assert out == "custom x"

    def test_flat_override_layout(self, tmp_path: Path) -> None:
        override = tmp_path / ".folio" / "templates"
        override.mkdir(parents=True)
        (override / "robots.txt.j2").write_text("flat", encoding="utf-8")
        env = build_template_environment("site", site_root=tmp_path)
        assert env.get_template("robots.txt.j2").render() == "flat"

    def test_autoescape(self) -> None:
        env = build_template_environment("site")
        assert env.from_string("{{ value }}").render(value="<b>") == "&lt;b&gt;"
        named = env.get_template("robots.txt.j2")
        assert "&lt;" in named.render(sitemap_url="<x>")


class TestFilters:
    def test_format_date_long(self) -> None:
        env = build_template_environment("site")
        out = env.from_string("{{ d|format_date }}").render(d=datetime.date(2024, 3, 1))
        assert out == "March 1, 2024"

    def test_format_date_short(self) -> None:
        env = build_template_environment("site")
        out = env.from_string("{{ d|format_date('short') }}").render(d=datetime.date(2024, 3, 1))
        assert out == "Mar 1, 2024"

    def test_status_label(self) -> None:
        env = build_template_environment("site")
        tmpl = env.from_string("{{ s|status_label }}")
        assert tmpl.render(s="in-progress") == "In Progress"
        assert tmpl.render(s="archived") == "Archived"
        assert tmpl.render(s="mystery") == "mystery"
