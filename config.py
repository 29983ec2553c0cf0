"""
Milanuncios Motorcycle Scraper - Configuration Settings
"""

from pathlib import Path

# Base paths
BASE_DIR = Path(__file__).parent
OUTPUT_DIR = BASE_DIR / "output"

# Milanuncios URLs
BASE_URL = "https://www.milanuncios.com"
DETAIL_SECTION = "motos-de-carretera"
SEARCH_PATH = f"{DETAIL_SECTION}/abs.htm"

SEARCH_URL = f"{BASE_URL}/{SEARCH_PATH}"
DETAIL_BASE_URL = f"{BASE_URL}/{DETAIL_SECTION}"

# The listing pages are served as Latin-1
PAGE_ENCODING = "ISO-8859-1"

# Request settings
HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "es-ES,es;q=0.9",
    "Connection": "keep-alive",
}

MAX_RETRIES = 3
TIMEOUT = 30  # seconds

# Default search bounds (price in euros, engine size in cc)
DEFAULT_SEARCH = {
    "price_min": "1000",
    "price_max": "4000",
    "year_min": "2010",
    "year_max": "2016",
    "cc_min": "250",
    "cc_max": "800",
    "kms_max": "30000",
}

# "cerca" = include listings from nearby provinces
NEARBY_FLAG = "s"

# Structural class markers on the listing page
AD_ITEM_CLASS = "aditem"
TITLE_CLASS = "aditem-detail-title"
PRICE_CLASS = "aditem-price"
YEAR_CLASS = "ano"
KMS_CLASS = "kms"
LOCATION_CLASS = "x4"
AGE_CLASS = "x6"
PAGE_LINK_CLASS = "adlist-paginator-pagelink"
PAGE_SUMMARY_CLASS = "adlist-paginator-summary"

# Field normalisation
TITLE_SEPARATOR = " - "
CURRENCY_SUFFIX = "€"
SUMMARY_SEPARATOR = "de"

# Order matters: longer forms first so "horas" is not eaten by "hora"
AGE_ABBREVIATIONS = [
    ("horas", "h"),
    ("hora", "h"),
    ("días", "d"),
    ("día", "d"),
]

# Output filenames
JSON_OUTPUT_NAME = "ads.json"
CSV_OUTPUT_NAME = "ads.csv"

# Logging
LOG_LEVEL = "INFO"
