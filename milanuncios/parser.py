"""
Milanuncios Scraper - HTML Parser Module
Extracts one ad record per listing card and estimates the result page count.
"""

import logging
import re
from typing import List, Optional, Tuple

from tqdm import tqdm

import config
from .models import Ad
from .tree import Node, by_class, find, find_all, first_attribute_value, leading_text, text_content

logger = logging.getLogger(__name__)

_AGE_TABLE = dict(config.AGE_ABBREVIATIONS)
_AGE_PATTERN = re.compile("|".join(re.escape(word) for word, _ in config.AGE_ABBREVIATIONS))
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _class_text(item: Node, class_name: str) -> str:
    """Leading text of the first descendant with the given class, or ''."""
    return leading_text(find(item, by_class(class_name)))


def get_item_title(item: Node) -> str:
    """Return the card title, e.g. "CBR600 - Honda"."""
    return _class_text(item, config.TITLE_CLASS)


def split_model_make(title: str) -> Tuple[str, str]:
    """
    Split a "<model> - <make>" title.

    Returns (model, make). Titles without exactly one separator give two
    empty strings.
    """
    parts = title.split(config.TITLE_SEPARATOR)
    if len(parts) == 2:
        return parts[0], parts[1]
    return "", ""


def get_item_price(item: Node) -> str:
    """Return the price text with the euro sign appended, even when empty."""
    return _class_text(item, config.PRICE_CLASS) + config.CURRENCY_SUFFIX


def get_item_year(item: Node) -> str:
    """Return the registration year as published."""
    return _class_text(item, config.YEAR_CLASS)


def get_item_kms(item: Node) -> str:
    """Return the mileage as published, e.g. "25.000 kms"."""
    return _class_text(item, config.KMS_CLASS)


def get_item_url(item: Node, detail_base_url: str = config.DETAIL_BASE_URL) -> str:
    """
    Build the absolute detail page URL for a listing card.

    The title link's first attribute holds the relative ad path. A card
    without a title link, or a title link without attributes, gives ''.
    """
    title_node = find(item, by_class(config.TITLE_CLASS))
    path = first_attribute_value(title_node)
    if path is None:
        return ""
    return "/".join([detail_base_url, path])


def get_item_location(item: Node) -> str:
    """
    Extract the region from a locality string such as "Madrid (Centro)".

    Only the text after the first "(" is considered; one trailing ")" is
    dropped.
    """
    text = _class_text(item, config.LOCATION_CLASS)
    if "(" not in text:
        return ""
    return text.split("(")[1].removesuffix(")")


def abbreviate_age(text: str) -> str:
    """Replace Spanish time units with single letters ("2 horas" -> "2 h")."""
    return _AGE_PATTERN.sub(lambda m: _AGE_TABLE[m.group(0)], text)


def get_item_age(item: Node) -> str:
    """Return the ad age with abbreviated units, e.g. "3 d"."""
    return abbreviate_age(_class_text(item, config.AGE_CLASS))


def parse_ad(item: Node, detail_base_url: str = config.DETAIL_BASE_URL) -> Ad:
    """
    Build an Ad from a single listing card.

    Missing elements leave the matching field empty; this never raises for
    incomplete cards.
    """
    model, make = split_model_make(get_item_title(item))
    return Ad(
        age=get_item_age(item),
        price=get_item_price(item),
        year=get_item_year(item),
        kms=get_item_kms(item),
        make=make,
        model=model,
        location=get_item_location(item),
        url=get_item_url(item, detail_base_url),
    )


def parse_ads(root: Node, detail_base_url: str = config.DETAIL_BASE_URL, progress: bool = False) -> List[Ad]:
    """
    Extract every ad on a listing page.

    Args:
        root: The parsed document (or any subtree of it)
        detail_base_url: Base URL that relative ad paths are joined to
        progress: Show a tqdm progress bar over the listing cards

    Returns:
        A list of Ad records in document order (possibly empty)
    """
    items = find_all(root, by_class(config.AD_ITEM_CLASS))
    logger.debug(f"Found {len(items)} ad cards")

    return [
        parse_ad(item, detail_base_url)
        for item in tqdm(items, desc="Parsing ads", disable=not progress)
    ]


def parse_summary_total(text: str) -> Optional[int]:
    """
    Read the total from a paginator summary such as "1-20 de 83".

    Returns None when the text has no "de" token or the part after it is not
    a plain ASCII integer (optionally signed).
    """
    parts = text.split(config.SUMMARY_SEPARATOR)
    if len(parts) < 2:
        return None
    value = parts[1].strip()
    if not _INTEGER.fullmatch(value):
        return None
    return int(value)


def get_total_pages(root: Node) -> int:
    """
    Estimate the total number of result pages.

    The paginator link count is the first guess (the last link is "next",
    so it is not counted). A summary like "1-20 de 83" overrides it when it
    parses.

    Args:
        root: The parsed listing page

    Returns:
        The page count, at least 1
    """
    page_count = 1

    page_links = find_all(root, by_class(config.PAGE_LINK_CLASS))
    if len(page_links) > 1:
        page_count = len(page_links) - 1

    summary = find(root, by_class(config.PAGE_SUMMARY_CLASS))
    if summary is None:
        return page_count

    summary_text = text_content(summary)
    total = parse_summary_total(summary_text)
    if total is None or total < 1:
        logger.debug(f"Unreadable paginator summary {summary_text!r}, using {page_count} pages")
        return page_count

    return total
