#!/usr/bin/env python3
"""Weekly sentiment snapshot: CFTC COT positioning + manual AAII survey.

Usage:
    python build_sentiment.py
    python build_sentiment.py --config SP500_MINI --out data/sp500_sentiment.json
    BARCHART_API_KEY=... python build_sentiment.py --provider barchart

AAII readings are taken from AAII_BULLISH, AAII_NEUTRAL, AAII_BEARISH and
their *_PREV variants (environment or .env).
"""
import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from macro.sentiment.src.config import DEFAULT_OUT_PATH, get_config, list_configs
from macro.sentiment.src.errors import CotError
from macro.sentiment.src.pipeline import PROVIDERS, choose_strategy, run_pipeline
from macro.sentiment.src.report import print_summary
from macro.sentiment.src.snapshot import load_snapshot


def main(argv=None) -> int:
    load_dotenv()
    available = list_configs()

    ap = argparse.ArgumentParser(description="Build the weekly COT/AAII sentiment JSON.")
    ap.add_argument(
        "--config",
        default="NASDAQ_MINI",
        choices=available,
        help=f"Instrument to extract. Available: {', '.join(available)}",
    )
    ap.add_argument("--provider", default="cftc", choices=PROVIDERS, help="COT data source.")
    ap.add_argument(
        "--out",
        default=os.getenv("SENTIMENT_OUT_PATH", str(DEFAULT_OUT_PATH)),
        help="Output JSON path (also read as last week's snapshot).",
    )
    ap.add_argument("--url", default=None, help="Override the report URL.")
    ap.add_argument("--api-key", default=os.getenv("BARCHART_API_KEY"), help="Barchart OnDemand API key.")
    ap.add_argument("--list-configs", action="store_true", help="List instrument configs and exit.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    if args.list_configs:
        for name in available:
            cfg = get_config(name)
            print(f"  {name:<12} -> {cfg.instrument}")
        return 0

    config = get_config(args.config)
    out_path = Path(args.out)

    try:
        snapshot = load_snapshot(out_path)
        strategy = choose_strategy(args.provider, args.api_key, snapshot)
        artifact = run_pipeline(
            config=config,
            strategy=strategy,
            out_path=out_path,
            snapshot=snapshot,
            provider=args.provider,
            api_key=args.api_key,
            url=args.url,
        )
    except CotError as e:
        print(f"Sentiment build failed: {e}", file=sys.stderr)
        return 1

    print_summary(artifact)
    print(f"Wrote {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
