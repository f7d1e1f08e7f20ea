"""Tests for weight-based locale selection."""

from edgelocale.i18n.ranges import LanguageRange
from edgelocale.i18n.selection import select_locale


class TestSelectLocale:
    def test_empty_candidates(self):
        assert select_locale([]) is None

    def test_single_candidate(self):
        assert select_locale([LanguageRange("es", 0.0)]) == "es"

    def test_highest_weight_wins(self):
        candidates = [LanguageRange("en", 0.8), LanguageRange("es", 1.0)]
        assert select_locale(candidates) == "es"

    def test_highest_weight_wins_regardless_of_position(self):
        candidates = [LanguageRange("es", 0.9), LanguageRange("en", 0.1)]
        assert select_locale(candidates) == "es"

    def test_latest_wins_on_equal_weight(self):
        candidates = [LanguageRange("en", 0.5), LanguageRange("es", 0.5)]
        assert select_locale(candidates) == "es"

        candidates = [LanguageRange("es", 1.0), LanguageRange("en", 1.0)]
        assert select_locale(candidates) == "en"

    def test_input_is_not_mutated(self):
        candidates = [LanguageRange("es", 1.0), LanguageRange("en", 0.1)]
        select_locale(candidates)
        assert candidates == [LanguageRange("es", 1.0), LanguageRange("en", 0.1)]
