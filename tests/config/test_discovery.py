"""Tests for folio.toml discovery and loading."""

from pathlib import Path

import pytest

from folio.config.discovery import (
    CONFIG_ENV_VAR,
    content_dir_problem,
    find_config,
    load_config,
    resolve_config,
    site_root_for,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestFindConfig:
    def test_walks_up(self, tmp_path: Path) -> None:
        (tmp_path / "folio.toml").write_text("")
        deep = tmp_path / "a" / "b"
        deep.mkdir(parents=True)
        assert find_config(deep) == (tmp_path / "folio.toml").resolve()

    def test_not_found(self, tmp_path: Path) -> None:
        # tmp dirs live under the system temp root, which has no folio.toml.
        assert find_config(tmp_path) is None

    def test_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = tmp_path / "elsewhere.toml"
        custom.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(custom))
        assert find_config(tmp_path / "ignored") == custom

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "folio.toml").write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None


class TestResolveConfig:
    def test_explicit_path_wins(self, tmp_path: Path) -> None:
        (tmp_path / "folio.toml").write_text("")
        other = tmp_path / "other.toml"
        other.write_text("")
        assert resolve_config(str(other), tmp_path) == other

    def test_missing_explicit_path_does_not_fall_back(self, tmp_path: Path) -> None:
        (tmp_path / "folio.toml").write_text("")
        assert resolve_config(str(tmp_path / "nope.toml"), tmp_path) is None

    def test_discovers_without_explicit_path(self, tmp_path: Path) -> None:
        (tmp_path / "folio.toml").write_text("")
        assert resolve_config(None, tmp_path) == (tmp_path / "folio.toml").resolve()


class TestSiteRoot:
    def test_config_parent(self, tmp_path: Path) -> None:
        assert site_root_for(tmp_path / "site" / "folio.toml") == tmp_path / "site"

    def test_start_without_config(self, tmp_path: Path) -> None:
        assert site_root_for(None, tmp_path) == tmp_path

    def test_cwd_without_config(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert site_root_for(None) == Path.cwd()


class TestContentDirProblem:
    def test_existing_dir(self, tmp_path: Path) -> None:
        assert content_dir_problem(tmp_path) is None

    def test_missing_dir(self, tmp_path: Path) -> None:
        problem = content_dir_problem(tmp_path / "content")
        assert problem is not None
        assert "does not exist" in problem
        assert "[content] dir" in problem

    def test_file_instead_of_dir(self, tmp_path: Path) -> None:
        path = tmp_path / "content"
        path.write_text("")
        problem = content_dir_problem(path)
        assert problem is not None
        assert "not a directory" in problem


class TestLoadConfig:
    def test_defaults_without_file(self, tmp_path: Path) -> None:
        config = load_config(cwd=tmp_path)
        assert config.site.name == "My Portfolio"
        assert config.sitemap.robots is True

    def test_loads_sections(self, tmp_path: Path) -> None:
        path = tmp_path / "folio.toml"
        path.write_text(
            '[site]\nname = "Jane"\n[site.links]\ngithub = "https://github.com/jane"\n'
            '[sitemap]\nstatic_pages = ["about", "now"]\n'
        )
        config = load_config(path)
        assert config.site.links.github == "https://github.com/jane"
        assert config.sitemap.static_pages == ["about", "now"]
