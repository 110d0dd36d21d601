"""Unit tests for the template formatting helpers."""

from datetime import date

import pytest

from vitae.contexts.templating.locale_formatter import (
    LocaleContext,
    format_date,
    format_generated_at,
    parse_date,
    remove_protocol,
    template_helpers,
)

EN = LocaleContext("en")
ES = LocaleContext("es")


@pytest.mark.unit
class TestFormatDate:
    """Tests for format_date."""

    def test_missing_date_is_present(self):
        assert format_date(None, EN) == "Present"
        assert format_date("", EN) == "Present"

    def test_present_label_override(self):
        locale = LocaleContext("es", labels={"present": "Actualidad"})

        assert format_date(None, locale) == "Actualidad"

    def test_present_fallback_not_localized(self):
        assert format_date(None, ES) == "Present"

    def test_english(self):
        assert format_date("2025-01-15", EN) == "Jan 2025"

    def test_year_month_only(self):
        assert format_date("2024-11", EN) == "Nov 2024"

    def test_year_only(self):
        assert format_date("2019", EN) == "Jan 2019"

    def test_datetime_string(self):
        assert format_date("2025-03-02T10:00:00Z", EN) == "Mar 2025"

    def test_spanish_capitalized(self):
        assert format_date("2025-01-15", ES) == "Ene 2025"

    def test_french_period_stripped(self):
        assert format_date("2025-01-15", LocaleContext("fr")) == "Janv 2025"

    def test_region_code_uses_language(self):
        assert format_date("2025-01-15", LocaleContext("es-MX")) == "Ene 2025"

    def test_unmapped_locale_falls_back_to_english(self):
        assert format_date("2025-01-15", LocaleContext("xx")) == "Jan 2025"

    @pytest.mark.parametrize("lang", ["en", "es", "fr", "de", "it", "pt", "xx"])
    def test_exactly_one_space(self, lang):
        result = format_date("2025-09-01", LocaleContext(lang))

        month, year = result.split(" ")
        assert year == "2025"
        assert month == month.strip()

    def test_non_date_passes_through(self):
        assert format_date("sometime", EN) == "sometime"


@pytest.mark.unit
def test_parse_date_invalid_month():
    assert parse_date("2025-13-01") is None


@pytest.mark.unit
def test_locale_context_for_record():
    record = {"labels": {"present": "Hoy"}}

    locale = LocaleContext.for_record(record, "es")

    assert locale.lang == "es"
    assert locale.labels == {"present": "Hoy"}


@pytest.mark.unit
def test_locale_context_ignores_non_mapping_labels():
    assert LocaleContext.for_record({"labels": ["x"]}, "en").labels == {}


@pytest.mark.unit
class TestRemoveProtocol:
    """Tests for remove_protocol."""

    @pytest.mark.parametrize(
        "url, expected",
        [
            ("https://github.com/someone", "github.com/someone"),
            ("http://example.com", "example.com"),
            ("ftp://files.example.com/a", "files.example.com/a"),
            ("//cdn.example.com/lib.js", "cdn.example.com/lib.js"),
            ("example.com/path", "example.com/path"),
            ("mailto:someone@example.com", "mailto:someone@example.com"),
        ],
    )
    def test_remove_protocol(self, url, expected):
        assert remove_protocol(url) == expected

    def test_only_leading_protocol_removed(self):
        assert remove_protocol("https://a.com/?next=https://b.com") == "a.com/?next=https://b.com"

    def test_empty(self):
        assert remove_protocol(None) == ""
        assert remove_protocol("") == ""


@pytest.mark.unit
def test_format_generated_at():
    assert format_generated_at("en", date(2025, 1, 15)) == "Jan 15, 2025"


@pytest.mark.unit
def test_template_helpers_bound_to_locale():
    helpers = template_helpers(LocaleContext("es", labels={"present": "Actualidad"}))

    assert helpers["formatDate"]() == "Actualidad"
    assert helpers["formatDate"]("2025-01-15") == "Ene 2025"
    assert helpers["removeProtocol"]("https://x.dev") == "x.dev"
