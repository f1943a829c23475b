#!/usr/bin/env python3
"""Script to check that the city catalog can be built from the dataset."""

from collections import Counter

from worldclock.config import settings
from worldclock.data.catalog import CatalogBuilder
from worldclock.errors import CatalogError
from worldclock.utils.logger import setup_logger

logger = setup_logger(__name__)


def check_catalog():
    """Build the catalog and print a summary."""
    print("\n" + "=" * 60)
    print("CATALOG STATUS CHECK")
    print("=" * 60 + "\n")
    print(f"Source: {settings.dataset_url}")

    try:
        catalog = CatalogBuilder().build()
    except CatalogError as e:
        print(f"{type(e).__name__}: {e}")
        return

    countries = Counter(entry.country for entry in catalog.values())
    print(f"Entries: {len(catalog)}")
    print(f"Countries: {len(countries)}")

    unflagged = sorted(
        {label.split(" - ")[0] for label in catalog if label.startswith(settings.fallback_flag)}
    )
    print(f"\nCountries without a flag: {len(unflagged)}")
    for name in unflagged:
        print(f"  {name}")

    print("\nLargest countries:")
    for country, count in countries.most_common(10):
        print(f"  {country}: {count} cities")

    print("\n" + "=" * 60 + "\n")


if __name__ == "__main__":
    check_catalog()
