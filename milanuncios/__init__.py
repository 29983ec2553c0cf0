"""
Milanuncios Motorcycle Scraper - Extraction Modules
"""

from .models import Ad, SearchFilter
from .parser import parse_ad, parse_ads, get_total_pages
from .scraper import fetch_page, fetch_search_page, parse_document, scrape_ads
from .export import ads_to_json, export_ads

__all__ = [
    "Ad",
    "SearchFilter",
    "parse_ad",
    "parse_ads",
    "get_total_pages",
    "fetch_page",
    "fetch_search_page",
    "parse_document",
    "scrape_ads",
    "ads_to_json",
    "export_ads",
]
