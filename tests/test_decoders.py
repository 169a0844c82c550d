"""Tests for text, date and number decoding."""
import pytest

from macro.sentiment.src.decoders import decode_date, decode_number, normalize_text


class TestNormalizeText:
    def test_uppercases_and_trims(self):
        assert normalize_text("  nasdaq mini ") == "NASDAQ MINI"

    @pytest.mark.parametrize("dash", ["–", "—", "−", "‒", "-"])
    def test_dash_variants_fold_to_hyphen(self, dash):
        assert normalize_text(f"NASDAQ{dash}100") == "NASDAQ-100"

    def test_whitespace_runs_collapse(self):
        assert normalize_text("E-MINI\t NASDAQ\n\n100") == "E-MINI NASDAQ 100"

    def test_idempotent(self):
        once = normalize_text("e–mini  nasdaq")
        assert normalize_text(once) == once


class TestDecodeDate:
    @pytest.mark.parametrize(
        "token,expected",
        [
            ("250805", "2025-08-05"),
            ("08/05/25", "2025-08-05"),
            ("08/05/1995", "1995-08-05"),
            ("2025-08-05", "2025-08-05"),
            ("not-a-date", "not-a-date"),
        ],
    )
    def test_known_encodings(self, token, expected):
        assert decode_date(token) == expected

    def test_pivot_puts_high_years_in_1900s(self):
        assert decode_date("950105") == "1995-01-05"
        assert decode_date("01/05/71") == "1971-01-05"

    def test_pivot_boundary_stays_in_2000s(self):
        assert decode_date("700105") == "2070-01-05"

    def test_slash_date_keeps_source_padding(self):
        assert decode_date("8/5/25") == "2025-8-5"

    def test_quoted_token(self):
        assert decode_date('"250805"') == "2025-08-05"


class TestDecodeNumber:
    @pytest.mark.parametrize(
        "token,expected",
        [
            ("12,345", 12345),
            ('"1,000"', 1000),
            ("+50", 50),
            (None, 0),
            ("abc", 0),
            ("", 0),
            ("  7 ", 7),
            ("12abc", 0),
            ("inf", 0),
            (2500, 2500),
        ],
    )
    def test_decode(self, token, expected):
        assert decode_number(token) == expected

    def test_fraction_kept(self):
        assert decode_number("37.5") == 37.5

    def test_integral_values_are_plain_ints(self):
        assert type(decode_number("30,000")) is int
