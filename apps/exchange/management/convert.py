"""
Convert an amount from the command line.

    python -m apps.exchange.management.convert 1 try usd
"""

import argparse
import logging
import sys
from typing import List, Optional

from apps.exchange.application.dto import ResolverConfig
from apps.exchange.domain.errors import ExchangeError
from apps.exchange.domain.services import RateResolver


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="convert",
        description="Convert an amount between currencies using the CBR daily rates",
    )
    parser.add_argument('amount', type=float, help='Amount to convert')
    parser.add_argument('from_currency', help='Source currency code, e.g. TRY')
    parser.add_argument('to_currency', help='Target currency code, e.g. USD')
    parser.add_argument(
        '--refresh',
        action='store_true',
        help='Ignore the local snapshot and fetch fresh rates'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log cache and network activity'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    options = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if options.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    resolver = RateResolver.from_config(ResolverConfig.from_settings())

    try:
        if options.refresh:
            resolver.refresh()
        result = resolver.convert_amount(options.amount, options.from_currency, options.to_currency)
    except (ExchangeError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(
        f"{result.amount} {result.source_currency} = "
        f"{result.converted_amount} {result.exchanged_currency} "
        f"(rate {result.rate})"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
