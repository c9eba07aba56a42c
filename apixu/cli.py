#!/usr/bin/env python
"""
Command-line interface for the Apixu weather API.

Each subcommand maps to one client operation and prints the response
as JSON.

Usage:
    apixu current London --lang fr
    apixu forecast "48.85,2.35" --days 3 --hour 14
    apixu history Paris --since 2019-01-01 --until 2019-01-05
    python -m apixu.cli conditions
"""

import argparse
import logging
import sys
from datetime import date, datetime
from typing import Optional

from dotenv import load_dotenv

from config.settings import get_settings
from apixu.api.client import ApixuClient, create_client
from apixu.api.exceptions import ApixuError, InvalidQueryError


logger = logging.getLogger(__name__)


def parse_date(date_str: str) -> date:
    """Parse date string in YYYY-MM-DD format."""
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid date format: '{date_str}'. Use YYYY-MM-DD format."
        )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="apixu",
        description="Query the Apixu weather API and print the response as JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Current weather in French
  apixu current London --lang fr

  # Three day forecast, 2pm only
  apixu forecast London --days 3 --hour 14

  # History for a date range
  apixu history Paris --since 2019-01-01 --until 2019-01-05
        """
    )
    parser.add_argument(
        '--api-key',
        type=str,
        default=None,
        help='Apixu API key. Default: APIXU_API_KEY from environment/.env'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose output'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('conditions', help='Weather condition codes reference')

    current = subparsers.add_parser('current', help='Current weather')
    current.add_argument('query', help='Location (city, "lat,lon", postcode...)')
    current.add_argument('--lang', default=None, help='Response language code')

    search = subparsers.add_parser('search', help='Search locations')
    search.add_argument('query', help='Location to search for')

    forecast = subparsers.add_parser('forecast', help='Weather forecast')
    forecast.add_argument('query', help='Location')
    forecast.add_argument('--days', type=int, required=True, help='Number of forecast days')
    forecast.add_argument('--hour', type=int, default=None, help='Only return this hour (0-23)')
    forecast.add_argument('--lang', default=None, help='Response language code')

    history = subparsers.add_parser('history', help='Historical weather')
    history.add_argument('query', help='Location')
    history.add_argument('--since', type=parse_date, required=True, help='First day (YYYY-MM-DD)')
    history.add_argument('--until', type=parse_date, default=None, help='Last day (YYYY-MM-DD)')
    history.add_argument('--lang', default=None, help='Response language code')

    return parser


def run_command(client: ApixuClient, args: argparse.Namespace, default_language: str):
    """
    Run the client operation selected by the parsed arguments.

    Returns:
        Response model of the operation
    """
    lang = getattr(args, 'lang', None)
    if lang is None:
        lang = default_language

    if args.command == 'conditions':
        return client.conditions()
    if args.command == 'current':
        return client.current(args.query, lang=lang)
    if args.command == 'search':
        return client.search(args.query)
    if args.command == 'forecast':
        return client.forecast(args.query, args.days, hour=args.hour, lang=lang)
    if args.command == 'history':
        return client.history(args.query, since=args.since, until=args.until, lang=lang)

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[list] = None) -> int:
    """Main entry point for CLI."""
    load_dotenv()

    parser = create_parser()
    args = parser.parse_args(argv)

    settings = get_settings()

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        stream=sys.stderr,
    )

    try:
        client = create_client(api_key=args.api_key, settings=settings)
        result = run_command(client, args, settings.default_language)
    except InvalidQueryError as e:
        logger.error(f"Invalid request: {e}")
        return 2
    except ApixuError as e:
        logger.error(f"Error calling Apixu: {e}")
        return 1

    print(result.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
