"""Tests for reading-time estimation."""

from __future__ import annotations

import pytest

from folio.domain.reading import count_words, estimate_reading_time


class TestCountWords:
    def test_whitespace_separated(self) -> None:
        assert count_words("one two\nthree\tfour") == 4

    def test_empty(self) -> None:
        assert count_words("") == 0
        assert count_words("   \n ") == 0


class TestEstimateReadingTime:
    def test_empty_is_zero(self) -> None:
        assert estimate_reading_time("") == "0 min read"

    def test_exact_minute(self) -> None:
        assert estimate_reading_time("word " * 200) == "1 min read"

    def test_partial_minute_rounds_up(self) -> None:
        assert estimate_reading_time("word " * 300) == "2 min read"
        assert estimate_reading_time("word") == "1 min read"

    def test_hair_over_a_minute_stays(self) -> None:
        # 201 / 200 = 1.005 rounds to 1.0 at two decimals.
        assert estimate_reading_time("word " * 201) == "1 min read"

    def test_custom_speed(self) -> None:
        assert estimate_reading_time("word " * 300, words_per_minute=100) == "3 min read"

    def test_rejects_non_positive_speed(self) -> None:
        with pytest.raises(ValueError):
            estimate_reading_time("word", words_per_minute=0)

    def test_monotonic(self) -> None:
        minutes = [
            int(estimate_reading_time("word " * n).split()[0]) for n in range(0, 1200, 37)
        ]
        assert minutes == sorted(minutes)
