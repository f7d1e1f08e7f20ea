"""Tests for the negotiation engine and the negotiate() entry point."""

import pytest
from structlog.testing import capture_logs

from edgelocale.i18n.catalog import LocaleCatalog
from edgelocale.i18n.negotiation import NegotiationEngine, NegotiationResult, negotiate
from edgelocale.kernel.exceptions import ConfigurationFault

SUPPORTED = {"en", "es"}


def _negotiate(cookie=None, accept_language=None, cookie_name="locale"):
    return negotiate(cookie, accept_language, cookie_name, SUPPORTED, "en")


class TestWellFormedHeaders:
    @pytest.mark.parametrize(
        ("header", "expected"),
        [
            ("en", "en"),
            ("es", "es"),
            ("de", "en"),
            ("en;q=0.8,es", "es"),
            ("es;q=0.8,en", "en"),
            ("de,en;q=0.8", "en"),
            ("de,es;q=0.8", "es"),
            ("es;q=NaN", "es"),
            ("es;q=NaN,en;q=0.01", "en"),
            ("de,en;q=0.2,es;q=0.8", "es"),
            ("EN", "en"),
            ("ES", "es"),
            ("en-US", "en"),
            ("EN-US", "en"),
            ("ES-419", "es"),
        ],
    )
    def test_resolves_header(self, header, expected):
        assert _negotiate(accept_language=[header]) == expected


class TestMalformedHeaders:
    @pytest.mark.parametrize("header", ["", "dhbeiyu292dfiue2", None])
    def test_resolves_to_default_without_logging(self, header):
        with capture_logs() as logs:
            assert _negotiate(accept_language=[header]) == "en"
        assert logs == []

    def test_absent_header(self):
        assert _negotiate() == "en"
        assert _negotiate(accept_language=[]) == "en"

    def test_non_string_header_logs_and_defaults(self):
        with capture_logs() as logs:
            assert _negotiate(accept_language=[{}]) == "en"
        assert len(logs) == 1
        assert logs[0]["log_level"] == "error"
        assert logs[0]["event"].startswith("Error performing language negotiation: ")
        assert logs[0]["error_type"] == "ParseError"

    def test_nan_float_header_logs_and_defaults(self):
        with capture_logs() as logs:
            assert _negotiate(accept_language=[float("nan")]) == "en"
        assert len(logs) == 1

    def test_only_first_value_is_used(self):
        assert _negotiate(accept_language=["en", "es"]) == "en"

    def test_bare_string_is_treated_as_single_value(self):
        assert _negotiate(accept_language="es") == "es"

    def test_mapping_in_place_of_values_logs_and_defaults(self):
        with capture_logs() as logs:
            assert _negotiate(cookie={"value": "locale=es"}, accept_language=["en"]) == "en"
        assert len(logs) == 1
        assert logs[0]["stage"] == "performing cookie language negotiation"
        assert logs[0]["error_type"] == "KeyError"

    def test_non_sequence_header_values_log_and_default(self):
        with capture_logs() as logs:
            assert _negotiate(accept_language=42) == "en"
        assert logs[0]["stage"] == "performing language negotiation"


class TestWeightEdgeCases:
    def test_empty_weight_keeps_full_weight(self):
        assert _negotiate(accept_language=["es;,en;q=0.5"]) == "es"

    def test_space_after_comma_makes_locale_unsupported(self):
        assert _negotiate(accept_language=["de, es"]) == "en"

    def test_space_before_weight_prefix_zeroes_weight(self):
        assert _negotiate(accept_language=["es; q=0.5,en;q=0.1"]) == "en"

    def test_weight_above_one_ties_with_unweighted_range(self):
        assert _negotiate(accept_language=["en;q=2,es"]) == "es"
        assert _negotiate(accept_language=["es,en;q=2"]) == "en"


class TestCookiePriority:
    @pytest.mark.parametrize("header", ["en", "en;q=1.0,es;q=0.1", "de"])
    def test_supported_cookie_wins_over_header(self, header):
        assert _negotiate(cookie=["locale=es"], accept_language=[header]) == "es"

    def test_cookie_alone(self):
        assert _negotiate(cookie=["SomeCookie=1; locale=es-419"]) == "es"

    def test_unsupported_cookie_falls_back_to_header(self):
        assert _negotiate(cookie=["locale=de"], accept_language=["es"]) == "es"

    def test_missing_cookie_falls_back_to_header(self):
        assert _negotiate(cookie=["SomeCookie=1; AnotherOne=A"], accept_language=["es"]) == "es"

    def test_both_unsupported_falls_back_to_default(self):
        assert _negotiate(cookie=["locale=de"], accept_language=["fr"]) == "en"

    def test_malformed_cookie_does_not_block_header(self):
        with capture_logs() as logs:
            assert _negotiate(cookie=[{}], accept_language=["es"]) == "es"
        assert len(logs) == 1
        assert logs[0]["event"].startswith("Error performing cookie language negotiation: ")
        assert logs[0]["error_type"] == "ExtractionError"

    def test_malformed_header_does_not_block_cookie(self):
        with capture_logs() as logs:
            assert _negotiate(cookie=["locale=es"], accept_language=[{}]) == "es"
        assert len(logs) == 1
        assert logs[0]["stage"] == "performing language negotiation"

    def test_both_malformed_logs_twice_and_defaults(self):
        with capture_logs() as logs:
            assert _negotiate(cookie=[{}], accept_language=[{}]) == "en"
        assert [entry["error_type"] for entry in logs] == ["ExtractionError", "ParseError"]

    def test_custom_cookie_name(self):
        assert _negotiate(cookie=["lang=es"], accept_language=["en"], cookie_name="lang") == "es"
        assert _negotiate(cookie=["locale=es"], accept_language=["en"], cookie_name="lang") == "en"


class TestNegotiationEngine:
    def setup_method(self):
        self.engine = NegotiationEngine(LocaleCatalog(frozenset(SUPPORTED), "en"), "locale")

    def test_reports_default_source(self):
        assert self.engine.resolve(None, None) == NegotiationResult("en", "default")

    def test_reports_header_source(self):
        assert self.engine.resolve(None, ["es"]) == NegotiationResult("es", "header")

    def test_reports_cookie_source(self):
        assert self.engine.resolve(["locale=es"], ["en"]) == NegotiationResult("es", "cookie")

    def test_is_repeatable(self):
        first = self.engine.resolve(["locale=de"], ["en;q=0.2,es;q=0.8"])
        second = self.engine.resolve(["locale=de"], ["en;q=0.2,es;q=0.8"])
        assert first == second == NegotiationResult("es", "header")

    def test_injected_logger_receives_failures(self):
        calls = []

        class _Logger:
            def error(self, event, **kwargs):
                calls.append((event, kwargs))

        engine = NegotiationEngine(LocaleCatalog(frozenset(SUPPORTED), "en"), "locale", logger=_Logger())
        assert engine.resolve([42], None).locale == "en"
        assert calls[0][0] == "Error performing cookie language negotiation: Cookie value must be a string, got int"

    def test_does_not_mutate_inputs(self):
        cookies = ["locale=es"]
        headers = ["en;q=0.8,es"]
        self.engine.resolve(cookies, headers)
        assert cookies == ["locale=es"]
        assert headers == ["en;q=0.8,es"]


class TestNegotiateEntryPoint:
    def test_result_always_in_supported_or_default(self):
        for header in ["de", "fr;q=1", "", "zz-ZZ", "es", "en"]:
            assert _negotiate(accept_language=[header]) in SUPPORTED | {"en"}

    def test_default_outside_supported(self):
        assert negotiate(None, ["de"], "locale", {"es"}, "en") == "en"

    def test_bad_catalog_raises(self):
        with pytest.raises(ConfigurationFault):
            negotiate(None, ["en"], "locale", set(), "en")

    def test_end_to_end_cases(self):
        assert _negotiate(accept_language=["de,en;q=0.2,es;q=0.8"]) == "es"
        assert _negotiate(cookie=["locale=es-419"], accept_language=["en"]) == "es"
