"""CLI subcommands: risk (portfolio heat) and size (position sizing)."""

from __future__ import annotations

import argparse
from typing import Any


def register(subparsers: Any) -> None:
    """Register risk and size subcommands."""
    p = subparsers.add_parser("risk", help="Assess portfolio heat from open positions")
    p.add_argument("--positions", required=True, metavar="JSON",
                   help="JSON array of position records")
    p.set_defaults(func=_run_risk)

    s = subparsers.add_parser("size", help="Position size for a risk budget and stop distance")
    s.add_argument("--portfolio-value", type=float, required=True,
                   dest="portfolio_value", metavar="VALUE")
    s.add_argument("--risk-pct", type=float, default=2.0, dest="risk_pct", metavar="PCT",
                   help="Portfolio percentage to risk (default: 2)")
    s.add_argument("--stop-loss-pct", type=float, required=True,
                   dest="stop_loss_pct", metavar="PCT",
                   help="Stop distance in percent")
    s.set_defaults(func=_run_size)


def _run_risk(args: argparse.Namespace) -> None:
    from folio_analytics.cli._helpers import load_positions
    from folio_analytics.risk import assess_portfolio_risk, calculate_position_risk

    positions = load_positions(args.positions)
    open_positions = [p for p in positions if p.is_open]
    assessment = assess_portfolio_risk(positions)

    print(f"\nPortfolio Heat ({len(open_positions)} open positions)")
    print("=" * 40)
    for p in open_positions:
        print(f"  {p.symbol or '-':<10} {calculate_position_risk(p):6.2f}%")
    print(f"\n  Heat:   {assessment.heat:.2f}")
    print(f"  Level:  {assessment.level.value} ({assessment.color})")


def _run_size(args: argparse.Namespace) -> None:
    from folio_analytics.risk import calculate_position_size

    size = calculate_position_size(args.portfolio_value, args.risk_pct, args.stop_loss_pct)
    print(f"Position size: {size:,.2f}")
