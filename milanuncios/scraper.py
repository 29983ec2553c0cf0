"""
Milanuncios Scraper - Core Scraping Module
Handles fetching the search results page and turning it into a parse tree.
"""

import logging
import time
import warnings
from typing import List, Tuple

import requests
from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning

import config
from . import parser
from .models import Ad, SearchFilter

warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)

logger = logging.getLogger(__name__)


def fetch_page(
    url: str,
    params=None,
    session: requests.Session = None,
    encoding: str = config.PAGE_ENCODING,
) -> str:
    """
    Fetch a page and decode it with the site's legacy encoding.

    Transient request errors are retried with exponential backoff; the last
    error is re-raised once the retries are used up.

    Args:
        url: The URL to fetch
        params: Optional query-string parameters
        session: Optional requests Session for connection pooling; when
            omitted a session is opened and closed for this call
        encoding: Character set the body is decoded with

    Returns:
        The decoded HTML
    """
    if session is None:
        with requests.Session() as own_session:
            return _get_with_retries(own_session, url, params, encoding)
    return _get_with_retries(session, url, params, encoding)


def _get_with_retries(session: requests.Session, url: str, params, encoding: str) -> str:
    for attempt in range(config.MAX_RETRIES):
        try:
            response = session.get(
                url,
                params=params,
                headers=config.HEADERS,
                timeout=config.TIMEOUT,
            )
            response.raise_for_status()

            response.encoding = encoding
            return response.text

        except requests.RequestException as e:
            logger.warning(f"Attempt {attempt + 1}/{config.MAX_RETRIES} failed for {url}: {e}")
            if attempt < config.MAX_RETRIES - 1:
                time.sleep(2 ** attempt)
            else:
                logger.error(f"Failed to fetch {url} after {config.MAX_RETRIES} attempts")
                raise


def parse_document(html: str) -> BeautifulSoup:
    """
    Parse decoded HTML into a BeautifulSoup tree using lxml.

    Args:
        html: The page markup

    Returns:
        The parsed document
    """
    return BeautifulSoup(html, "lxml")


def fetch_search_page(
    search: SearchFilter,
    search_url: str = config.SEARCH_URL,
    session: requests.Session = None,
    nearby: str = config.NEARBY_FLAG,
) -> BeautifulSoup:
    """Fetch page one of the search results and parse it."""
    logger.info(f"Fetching search results: {search_url}")
    html = fetch_page(search_url, params=search.to_params(nearby), session=session)
    return parse_document(html)


def scrape_ads(
    document: BeautifulSoup,
    detail_base_url: str = config.DETAIL_BASE_URL,
    progress: bool = False,
) -> Tuple[List[Ad], int]:
    """
    Run both extraction passes over a parsed results page.

    Returns:
        The ads in page order and the estimated total page count
    """
    total_pages = parser.get_total_pages(document)
    logger.info(f"Total pages available: {total_pages}")

    ads = parser.parse_ads(document, detail_base_url, progress=progress)
    logger.info(f"Found {len(ads)} ads on page")

    return ads, total_pages
