"""folio-analytics CLI entry point.

Commands:
    metrics   Performance metrics from return/value series and positions
    risk      Portfolio heat and risk level from open positions
    size      Position size for a risk budget and stop distance

Example usage:
    folio-analytics metrics --values equity.csv --positions positions.json
    folio-analytics risk --positions positions.json
    folio-analytics size --portfolio-value 100000 --risk-pct 2 --stop-loss-pct 5
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from folio_analytics.__version__ import __version__
from folio_analytics.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="folio-analytics",
        description="Portfolio risk and performance analytics",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        metavar="LEVEL",
        help="Logging verbosity (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    from folio_analytics.cli import cmd_metrics, cmd_risk

    cmd_metrics.register(subparsers)
    cmd_risk.register(subparsers)

    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    func = getattr(args, "func", None)
    if func is None:
        parser.print_help()
        sys.exit(1)

    try:
        func(args)
    except (OSError, ValueError) as e:
        # Unreadable or malformed input files; engine errors are rendered as N/A
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
