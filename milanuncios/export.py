"""
Milanuncios Scraper - Export Module
"""

import json
import logging
from pathlib import Path
from typing import List

import pandas as pd

import config
from .models import Ad

logger = logging.getLogger(__name__)


def ads_to_json(ads: List[Ad]) -> str:
    """Render ads as an indented JSON array, keeping non-ASCII text as is."""
    return json.dumps([ad.to_dict() for ad in ads], indent=2, ensure_ascii=False)


def export_ads(ads: List[Ad], output_dir: Path) -> dict:
    """
    Export ads to JSON and CSV files.

    Args:
        ads: The ads to write
        output_dir: Directory for the output files (created if missing)

    Returns:
        A dict mapping each format that was written to its path
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    written = {}

    logger.info(f"Exporting {len(ads)} ads...")

    json_file = output_dir / config.JSON_OUTPUT_NAME
    try:
        with open(json_file, "w", encoding="utf-8") as f:
            f.write(ads_to_json(ads))
        written["json"] = json_file
        logger.info(f"JSON exported to: {json_file}")
    except OSError as e:
        logger.error(f"Failed to export JSON: {e}")

    csv_file = output_dir / config.CSV_OUTPUT_NAME
    try:
        df = pd.DataFrame([ad.to_dict() for ad in ads], columns=list(Ad.__dataclass_fields__))
        df.to_csv(csv_file, index=False, encoding="utf-8")
        written["csv"] = csv_file
        logger.info(f"CSV exported to: {csv_file}")
    except OSError as e:
        logger.error(f"Failed to export CSV: {e}")

    return written
