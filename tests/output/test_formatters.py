"""Tests for output mode selection."""

import json

from folio.output.formatters import OutputSettings, format_result
from folio.services.result import ServiceResult


def _result() -> ServiceResult:
    return ServiceResult(
        ok=True,
        op="slugs",
        data={"items": [{"slug": "a"}, {"slug": "b"}]},
        warnings=["careful"],
    )


class TestFormatResult:
    def test_json(self) -> None:
        data = json.loads(format_result(_result(), settings=OutputSettings(json_output=True)))
        assert data["ok"] is True
        assert data["op"] == "slugs"
        assert data["warnings"] == ["careful"]

    def test_json_wins_over_quiet(self) -> None:
        out = format_result(_result(), settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(out)["op"] == "slugs"

    def test_quiet(self) -> None:
        assert format_result(_result(), settings=OutputSettings(quiet=True)) == "a\nb"

    def test_default_is_human(self) -> None:
        out = format_result(_result())
        assert "2 slugs" in out
