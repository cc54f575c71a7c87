#!/usr/bin/env python3
"""Technical analysis of a Binance futures klines dump.

Reads the JSON array returned by /fapi/v1/klines (fetched separately), then
prints the indicator snapshot and the trading signal.

Usage:
    python scripts/analyze_candles.py klines.json
    python scripts/analyze_candles.py klines.json --price 2650.5 --json
    curl -s ".../fapi/v1/klines?symbol=XAUUSDT&interval=1h" | python scripts/analyze_candles.py -
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path and load environment
sys.path.insert(0, str(Path(__file__).parent.parent))
load_dotenv(Path(__file__).parent.parent / ".env")

from goldwatch.adapters.mappers.kline_mapper import KlinePayloadError, parse_klines
from goldwatch.application.queries.analyze_market import MarketAnalysis, analyze_market
from goldwatch.domain.models.enums import TimeFrame
from goldwatch.infrastructure.config import get_settings

logger = logging.getLogger(__name__)


def print_analysis(analysis: MarketAnalysis, timeframe: TimeFrame | None) -> None:
    """Print a human-readable report."""
    indicators = analysis.indicators
    signal = analysis.signal
    frame = f" ({timeframe.label})" if timeframe else ""

    print()
    print("=" * 60)
    print(f" ANALYSIS{frame}: {analysis.sample_count} candles @ {analysis.current_price:,.2f}")
    print("=" * 60)
    print(f"  RSI:        {indicators.rsi:8.2f}")
    print(
        f"  MACD:       {indicators.macd.macd:8.2f}  signal {indicators.macd.signal:8.2f}"
        f"  hist {indicators.macd.histogram:8.2f}"
    )
    print(
        f"  Bollinger:  {indicators.bollinger.lower:,.2f} / {indicators.bollinger.middle:,.2f}"
        f" / {indicators.bollinger.upper:,.2f}"
    )
    averages = indicators.moving_averages
    print(
        f"  MA5/10/20/50: {averages.ma5:,.2f} / {averages.ma10:,.2f}"
        f" / {averages.ma20:,.2f} / {averages.ma50:,.2f}"
    )
    print()
    print(f"  SIGNAL: {signal.type.value.upper()} ({signal.strength.value})")
    print(f"  Support {signal.support_level:,}  Resistance {signal.resistance_level:,}")
    for reason in signal.all_reasons:
        print(f"    - {reason}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Indicators and signal for a klines dump")
    parser.add_argument("path", help="klines JSON file, or - for stdin")
    parser.add_argument("--price", type=float, default=None, help="Spot price (default: last close)")
    parser.add_argument(
        "--timeframe",
        choices=[frame.value for frame in TimeFrame],
        default=None,
        help="Candle interval, for display only",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a report")
    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        if args.path == "-":
            rows = json.load(sys.stdin)
        else:
            with open(args.path, encoding="utf-8") as f:
                rows = json.load(f)
        series = parse_klines(rows, max_candles=settings.candle_buffer_size)
    except (OSError, json.JSONDecodeError, KlinePayloadError) as e:
        logger.error("Cannot read klines from %s: %s", args.path, e)
        return 1

    analysis = analyze_market(
        series,
        current_price=args.price,
        min_samples=settings.min_indicator_samples,
    )

    if args.json:
        print(
            json.dumps(
                {
                    "current_price": analysis.current_price,
                    "indicators": analysis.indicators.model_dump(mode="json"),
                    "signal": analysis.signal.model_dump(mode="json"),
                },
                indent=2,
                ensure_ascii=False,
            )
        )
    else:
        timeframe = TimeFrame(args.timeframe) if args.timeframe else None
        print_analysis(analysis, timeframe)

    return 0


if __name__ == "__main__":
    sys.exit(main())
