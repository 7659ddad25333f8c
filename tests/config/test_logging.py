"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog

from folio.config.logging import HANDLER_NAME, configure_logging, content_context
from folio.domain.types import Category
from folio.infrastructure.repository import ContentRepository


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    folio = logging.getLogger("folio")
    folio_level = folio.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    folio.setLevel(folio_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("folio").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("folio").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("folio.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "folio.test"
        assert "timestamp" in parsed

    def test_stdlib_folio_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("folio.services.build").debug("Wrote %s", "index.html")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Wrote index.html"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "folio.services.build"

    def test_markdown_debug_is_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("MARKDOWN").debug("extension noise")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        names = [h.get_name() for h in logging.getLogger().handlers]
        assert names.count(HANDLER_NAME) == 1

    def test_foreign_handlers_survive(self) -> None:
        foreign = logging.NullHandler()
        logging.getLogger().addHandler(foreign)
        configure_logging()
        assert foreign in logging.getLogger().handlers


class TestContentContext:
    def test_binds_category_and_slug(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        with content_context(Category.BLOG, "hello"):
            logging.getLogger("folio.infrastructure.repository").warning("Loading")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["category"] == "blog"
        assert parsed["slug"] == "hello"

    def test_unbound_after_exit(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        with content_context("blog", "hello"):
            pass
        logging.getLogger("folio.services.build").warning("done")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert "slug" not in parsed

    def test_repository_load_logs_with_context(
        self, capfd: pytest.CaptureFixture[str], tmp_path: Path
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        repo = ContentRepository(tmp_path)
        assert repo.get_by_category_and_slug("thoughts", "missing") is None
        records = [json.loads(line) for line in capfd.readouterr().err.splitlines()]
        loading = [r for r in records if r["event"].startswith(("Loading", "Unreadable"))]
        assert len(loading) == 2
        assert all(r["category"] == "thoughts" for r in loading)
        assert all(r["slug"] == "missing" for r in loading)
