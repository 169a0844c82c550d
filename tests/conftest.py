import pytest

from macro.sentiment.src.config import get_config

NASDAQ_CSV_LINE = (
    '"NASDAQ-100 STOCK INDEX (MINI) - CHICAGO MERCANTILE EXCHANGE","250805","2025-08-05",'
    '"209742","CME  ","00","209","254,118","63,041","48,517","1,926"'
)

REPORT_TEXT = "\n".join(
    [
        '"Market and Exchange Names","As of Date in Form YYMMDD","As of Date in Form YYYY-MM-DD"',
        '"E-MINI S&P 500 - CHICAGO MERCANTILE EXCHANGE","250805","2025-08-05","13874A","CME  ","00","138",'
        '"2,104,331","287,214","512,903","40,114"',
        NASDAQ_CSV_LINE,
        '"RUSSELL E-MINI - CHICAGO MERCANTILE EXCHANGE","250805","2025-08-05","239742","CME  ","00","239",'
        '"455,001","41,200","98,004","2,001"',
    ]
)


@pytest.fixture
def nasdaq_config():
    return get_config("NASDAQ_MINI")


@pytest.fixture
def report_text():
    return REPORT_TEXT


def make_snapshot(week_ending, net=1000, long=5000, short=4000, source="cftc"):
    return {
        "cot": {
            "weekEnding": week_ending,
            "source": source,
            "instrument": "NASDAQ-100 E-mini",
            "rows": [
                {"label": "Non-Comm Net", "value": net, "prev": None, "max": 80000},
                {"label": "Non-Comm Long", "value": long, "prev": None, "max": 180000},
                {"label": "Non-Comm Short", "value": short, "prev": None, "max": 180000},
            ],
        },
        "aaii": {"weekEnding": week_ending, "source": "manual", "data": []},
        "updated": "2025-07-30T00:00:00+00:00",
        "version": 1,
    }


@pytest.fixture
def snapshot_factory():
    return make_snapshot
