"""Closed-trade statistics (counts, average win/loss, profit factor)."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from folio_analytics.metrics.models import TradeStatistics
from folio_analytics.metrics.performance import calculate_win_rate
from folio_analytics.portfolio import Position

__all__ = ["calculate_trade_statistics"]


def calculate_trade_statistics(positions: Iterable[Position]) -> TradeStatistics:
    """
    Summarize closed trades.

    A trade with zero gross P&L counts as a loss. Profit factor is gross
    profit divided by absolute gross loss, and None when nothing was lost.
    Most traded symbol counts positions of any status.

    Args:
        positions: Position snapshots

    Returns:
        TradeStatistics (all zeros when there are no closed positions)
    """
    positions = list(positions)
    closed = [p for p in positions if p.is_closed]

    symbol_counts = Counter(p.symbol for p in positions if p.symbol)
    top_symbol, top_count = (None, 0)
    if symbol_counts:
        # Ties resolve alphabetically so the result does not depend on input order
        top_symbol, top_count = min(symbol_counts.items(), key=lambda kv: (-kv[1], kv[0]))

    if not closed:
        return TradeStatistics(most_traded_symbol=top_symbol, most_traded_count=top_count)

    wins = [p.gross_pl for p in closed if p.gross_pl > 0]
    losses = [p.gross_pl for p in closed if p.gross_pl <= 0]

    gross_profit = sum(wins)
    gross_loss = abs(sum(losses))
    profit_factor = gross_profit / gross_loss if gross_loss > 0 else None

    return TradeStatistics(
        total_trades=len(closed),
        winning_trades=len(wins),
        losing_trades=len(losses),
        win_rate=calculate_win_rate(closed),
        average_win=gross_profit / len(wins) if wins else 0.0,
        average_loss=sum(losses) / len(losses) if losses else 0.0,
        profit_factor=profit_factor,
        total_pl=sum(p.gross_pl for p in closed),
        most_traded_symbol=top_symbol,
        most_traded_count=top_count,
    )
