"""CLI subcommand: metrics (performance metrics and trade statistics)."""

from __future__ import annotations

import argparse
from typing import Any

from folio_analytics.config import DEFAULT_RISK_FREE_RATE, NOT_AVAILABLE


def register(subparsers: Any) -> None:
    """Register metrics subcommand."""
    p = subparsers.add_parser("metrics", help="Compute performance metrics")
    p.add_argument("--returns", default=None, metavar="CSV",
                   help="CSV of period returns (fractions)")
    p.add_argument("--values", default=None, metavar="CSV",
                   help="CSV of portfolio values (returns are derived if --returns is omitted)")
    p.add_argument("--positions", default=None, metavar="JSON",
                   help="JSON array of position records")
    p.add_argument("--column", default=None, metavar="NAME",
                   help="Column to read from the CSV files (default: first numeric)")
    p.add_argument("--risk-free-rate", type=float, default=DEFAULT_RISK_FREE_RATE,
                   dest="risk_free_rate", metavar="RATE",
                   help=f"Risk-free rate per period (default: {DEFAULT_RISK_FREE_RATE})")
    p.set_defaults(func=_run_metrics)


def _run_metrics(args: argparse.Namespace) -> None:
    from folio_analytics.cli._helpers import format_value, load_positions, load_series
    from folio_analytics.metrics import calculate_performance_metrics, calculate_trade_statistics

    if args.returns is None and args.values is None and args.positions is None:
        raise SystemExit("Nothing to analyze: pass --returns, --values and/or --positions")

    returns = load_series(args.returns, args.column) if args.returns else None
    values = load_series(args.values, args.column) if args.values else None
    positions = load_positions(args.positions) if args.positions else None

    m = calculate_performance_metrics(
        returns=returns,
        values=values,
        positions=positions,
        risk_free_rate=args.risk_free_rate,
    )
    max_dd = m.max_drawdown * 100 if m.max_drawdown is not None else None

    print("\nPerformance Metrics")
    print("=" * 40)
    print(f"  Sharpe Ratio:       {format_value(m.sharpe_ratio)}")
    print(f"  Volatility:         {format_value(m.volatility, precision=4)}")
    print(f"  Max Drawdown:       {format_value(max_dd, '%')}")
    print(f"  Win Rate:           {format_value(m.win_rate, '%', precision=1)}")
    print(f"  Average Hold Time:  {format_value(m.average_hold_time, ' days', precision=1)}")

    if positions is not None:
        s = calculate_trade_statistics(positions)
        print("\nTrade Statistics")
        print("=" * 40)
        print(f"  Total Trades:       {s.total_trades} ({s.winning_trades}W / {s.losing_trades}L)")
        print(f"  Average Win:        {format_value(s.average_win)}")
        print(f"  Average Loss:       {format_value(s.average_loss)}")
        print(f"  Profit Factor:      {format_value(s.profit_factor)}")
        print(f"  Total P&L:          {format_value(s.total_pl)}")
        symbol = s.most_traded_symbol or NOT_AVAILABLE
        print(f"  Most Traded:        {symbol} ({s.most_traded_count} positions)")
