#!/usr/bin/env python3
"""
Milanuncios Motorcycle Scraper - Main Script
Scrapes the first page of road motorcycle ads from https://www.milanuncios.com/

Usage:
    python milanuncios_scraper.py
    python milanuncios_scraper.py --price-max 5000 --year-min 2012 --output out
    python milanuncios_scraper.py --html saved_page.html
"""

import argparse
import logging
import sys
from pathlib import Path

import requests

import config
from milanuncios import export, scraper
from milanuncios.models import SearchFilter

logger = logging.getLogger(__name__)


def setup_logging(level: str = config.LOG_LEVEL):
    """Configure logging to stderr so stdout only carries the JSON."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def parse_args(argv=None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        The parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Milanuncios Motorcycle Scraper - Extract road motorcycle ads as JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default search, JSON to stdout
  python milanuncios_scraper.py

  # Custom price and year range, also write ads.json/ads.csv to ./out
  python milanuncios_scraper.py --price-min 2000 --price-max 5000 --year-min 2012 --output out

  # Parse a page saved earlier instead of fetching
  python milanuncios_scraper.py --html page.html
        """,
    )

    defaults = config.DEFAULT_SEARCH
    parser.add_argument("--price-min", default=defaults["price_min"], help="Minimum price in euros")
    parser.add_argument("--price-max", default=defaults["price_max"], help="Maximum price in euros")
    parser.add_argument("--year-min", default=defaults["year_min"], help="Oldest registration year")
    parser.add_argument("--year-max", default=defaults["year_max"], help="Newest registration year")
    parser.add_argument("--cc-min", default=defaults["cc_min"], help="Minimum engine size (cc)")
    parser.add_argument("--cc-max", default=defaults["cc_max"], help="Maximum engine size (cc)")
    parser.add_argument("--kms-max", default=defaults["kms_max"], help="Maximum mileage (km)")

    parser.add_argument(
        "--html",
        type=str,
        help="Parse a saved results page (read as Latin-1) instead of fetching",
    )

    parser.add_argument(
        "--output",
        type=str,
        help="Also export ads.json and ads.csv to this directory",
    )

    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar while parsing ads",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {config.LOG_LEVEL})",
    )

    return parser.parse_args(argv)


def search_from_args(args: argparse.Namespace) -> SearchFilter:
    """Build the search filter from the parsed bound arguments."""
    return SearchFilter(
        price_min=args.price_min,
        price_max=args.price_max,
        year_min=args.year_min,
        year_max=args.year_max,
        cc_min=args.cc_min,
        cc_max=args.cc_max,
        kms_max=args.kms_max,
    )


def main(argv=None) -> int:
    """Main entry point for the scraper."""
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        if args.html:
            html = Path(args.html).read_text(encoding=config.PAGE_ENCODING)
            document = scraper.parse_document(html)
        else:
            document = scraper.fetch_search_page(search_from_args(args))
    except (requests.RequestException, OSError) as e:
        logger.error(f"Could not load the results page: {e}")
        return 1

    ads, _ = scraper.scrape_ads(document, progress=args.progress)

    sys.stdout.write(export.ads_to_json(ads))
    sys.stdout.write("\n")

    if args.output:
        export.export_ads(ads, Path(args.output))

    return 0


if __name__ == "__main__":
    sys.exit(main())
