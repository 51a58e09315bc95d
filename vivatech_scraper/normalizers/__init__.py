"""Domain normalizers."""

from vivatech_scraper.normalizers.country import (
    country_from_city,
    country_from_name,
    is_likely_country,
)

__all__ = ["country_from_city", "country_from_name", "is_likely_country"]
