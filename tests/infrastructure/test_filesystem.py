"""Tests for filesystem helpers: discovery, path resolution, output."""

from __future__ import annotations

from pathlib import Path

import pytest

from folio.domain.types import Category
from folio.infrastructure.filesystem import (
    category_dir,
    clean_directory,
    copy_static_tree,
    find_content_files,
    output_overlap,
    resolve_content_path,
    slug_for,
    write_output_file,
)


class TestFindContentFiles:
    def test_missing_directory(self, tmp_path: Path) -> None:
        assert find_content_files(tmp_path / "nope") == []

    def test_only_markdown_in_name_order(self, tmp_path: Path) -> None:
        for name in ("b.md", "a.md", "notes.txt", "c.markdown"):
            (tmp_path / name).write_text("x", encoding="utf-8")
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "d.md").write_text("x", encoding="utf-8")
        assert [p.name for p in find_content_files(tmp_path)] == ["a.md", "b.md"]

    def test_slug_for(self) -> None:
        assert slug_for(Path("content/blog/hello-world.md")) == "hello-world"
        assert slug_for(Path("content/blog/v1.2.md")) == "v1.2"


class TestResolveContentPath:
    def test_resolves(self, tmp_path: Path) -> None:
        path = resolve_content_path(tmp_path, Category.BLOG, "hello")
        assert path == tmp_path / "blog" / "hello.md"

    def test_category_dir(self, tmp_path: Path) -> None:
        assert category_dir(tmp_path, "findings") == tmp_path / "findings"

    @pytest.mark.parametrize("slug", ["", ".", "..", "../secret", "nested/slug"])
    def test_rejects_unsafe_slugs(self, tmp_path: Path, slug: str) -> None:
        with pytest.raises(ValueError):
            resolve_content_path(tmp_path, Category.BLOG, slug)


class TestOutput:
    def test_write_creates_parents(self, tmp_path: Path) -> None:
        target = tmp_path / "out" / "blog" / "hello" / "index.html"
        write_output_file(target, "<p>hi</p>")
        assert target.read_text(encoding="utf-8") == "<p>hi</p>"

    def test_copy_static_tree(self, tmp_path: Path) -> None:
        static = tmp_path / "static"
        (static / "images").mkdir(parents=True)
        (static / "favicon.ico").write_bytes(b"\x00")
        (static / "images" / "og.jpg").write_bytes(b"\xff")
        out = tmp_path / "out"
        assert copy_static_tree(static, out) == 2
        assert (out / "images" / "og.jpg").read_bytes() == b"\xff"

    def test_copy_missing_static_is_noop(self, tmp_path: Path) -> None:
        assert copy_static_tree(tmp_path / "static", tmp_path / "out") == 0
        assert not (tmp_path / "out").exists()

    def test_clean_directory(self, tmp_path: Path) -> None:
        out = tmp_path / "out"
        write_output_file(out / "stale.html", "old")
        clean_directory(out)
        assert not out.exists()
        clean_directory(out)  # already gone


class TestOutputOverlap:
    @pytest.fixture
    def layout(self, tmp_path: Path) -> dict[str, Path]:
        sources = {"content": tmp_path / "content", "static": tmp_path / "static"}
        for path in sources.values():
            path.mkdir()
        return sources

    def test_separate_dir_is_fine(self, tmp_path: Path, layout: dict[str, Path]) -> None:
        assert output_overlap(tmp_path / "out", site_root=tmp_path, sources=layout) is None

    def test_site_root(self, tmp_path: Path, layout: dict[str, Path]) -> None:
        problem = output_overlap(tmp_path, site_root=tmp_path, sources=layout)
        assert problem is not None
        assert "site root" in problem

    def test_ancestor_of_site_root(self, tmp_path: Path, layout: dict[str, Path]) -> None:
        assert output_overlap(tmp_path.parent, site_root=tmp_path, sources=layout) is not None

    @pytest.mark.parametrize("relative", ["content", "content/blog", "static", "static/img"])
    def test_overlapping_source(
        self, tmp_path: Path, layout: dict[str, Path], relative: str
    ) -> None:
        problem = output_overlap(tmp_path / relative, site_root=tmp_path, sources=layout)
        assert problem is not None
        assert relative.split("/")[0] in problem

    def test_relative_path_resolved(
        self, tmp_path: Path, layout: dict[str, Path], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        assert output_overlap(Path("."), site_root=tmp_path, sources=layout) is not None
