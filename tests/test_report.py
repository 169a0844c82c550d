"""Tests for artifact assembly and the AAII overlay."""
from macro.sentiment.src.aaii import read_aaii_readings
from macro.sentiment.src.records import ParsedRecord
from macro.sentiment.src.report import (
    ARTIFACT_VERSION,
    build_aaii_section,
    build_artifact,
    build_cot_section,
    print_summary,
)
from macro.sentiment.src.snapshot import PriorValues


class TestCotSection:
    def test_rows(self, nasdaq_config):
        rec = ParsedRecord("NASDAQ MINI", "2025-08-05", 30000, 20000)
        cot = build_cot_section(rec, PriorValues(net=1, long=2, short=3), nasdaq_config, "cftc")
        assert cot["weekEnding"] == "2025-08-05"
        assert cot["instrument"] == "NASDAQ-100 E-mini"
        assert cot["rows"] == [
            {"label": "Non-Comm Net", "value": 10000, "prev": 1, "max": 80000},
            {"label": "Non-Comm Long", "value": 30000, "prev": 2, "max": 180000},
            {"label": "Non-Comm Short", "value": 20000, "prev": 3, "max": 180000},
        ]


class TestAaii:
    def test_reads_env_with_zero_default(self):
        env = {"AAII_BULLISH": "41.2", "AAII_BULLISH_PREV": "38", "AAII_BEARISH": "abc"}
        readings = read_aaii_readings(env)
        assert [(r.label, r.pct, r.prev) for r in readings] == [
            ("Bullish", 41.2, 38),
            ("Neutral", 0, 0),
            ("Bearish", 0, 0),
        ]

    def test_section(self):
        section = build_aaii_section("2025-08-05", read_aaii_readings({}))
        assert section["source"] == "manual"
        assert [d["label"] for d in section["data"]] == ["Bullish", "Neutral", "Bearish"]


class TestArtifact:
    def test_shape(self):
        art = build_artifact({"weekEnding": "x"}, {"data": []})
        assert set(art) == {"cot", "aaii", "updated", "version"}
        assert art["version"] == ARTIFACT_VERSION
        assert art["updated"].startswith("20")

    def test_print_summary_handles_missing_prev(self, nasdaq_config, capsys):
        rec = ParsedRecord("NASDAQ MINI", "2025-08-05", 30000, 20000)
        art = build_artifact(build_cot_section(rec, PriorValues(), nasdaq_config, "cftc"), {"data": []})
        print_summary(art)
        out = capsys.readouterr().out
        for label in ("Non-Comm Net", "Non-Comm Long", "Non-Comm Short"):
            assert label in out
        assert "30,000" in out
        assert "N/A" in out

    def test_print_summary_shows_change(self, nasdaq_config, capsys):
        rec = ParsedRecord("NASDAQ MINI", "2025-08-05", 30000, 20000)
        prior = PriorValues(net=12000, long=25000, short=13000)
        art = build_artifact(build_cot_section(rec, prior, nasdaq_config, "cftc"), {"data": []})
        print_summary(art)
        out = capsys.readouterr().out
        assert "5,000" in out
        assert "-2,000" in out
        assert "N/A" not in out
