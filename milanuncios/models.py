"""
Milanuncios Scraper - Data Models
"""

from dataclasses import asdict, dataclass
from types import MappingProxyType
from typing import Dict, Mapping

import config


@dataclass(frozen=True)
class Ad:
    """A single motorcycle listing as shown on the search results page."""

    age: str = ""
    price: str = ""
    year: str = ""
    kms: str = ""
    make: str = ""
    model: str = ""
    location: str = ""
    url: str = ""

    def to_dict(self) -> Dict[str, str]:
        """Return the ad as a plain dict, in field order."""
        return asdict(self)


@dataclass(frozen=True)
class SearchFilter:
    """
    Search constraints sent to the listing page.

    Bounds are carried as text and passed through untouched; the site accepts
    whatever it accepts, so no ordering or format checks happen here.
    """

    price_min: str = ""
    price_max: str = ""
    year_min: str = ""
    year_max: str = ""
    cc_min: str = ""
    cc_max: str = ""
    kms_max: str = ""

    @classmethod
    def default(cls) -> "SearchFilter":
        """Build the filter from the configured default search bounds."""
        return cls(**config.DEFAULT_SEARCH)

    def to_params(self, nearby: str = config.NEARBY_FLAG) -> Mapping[str, str]:
        """
        Return the query-string parameters as a read-only mapping.

        Args:
            nearby: Value of the "cerca" flag (include nearby provinces)

        Returns:
            The search parameters keyed by their query-string names
        """
        return MappingProxyType({
            "desde": self.price_min,
            "hasta": self.price_max,
            "anod": self.year_min,
            "anoh": self.year_max,
            "ccd": self.cc_min,
            "cch": self.cc_max,
            "kms": self.kms_max,
            "cerca": nearby,
        })
