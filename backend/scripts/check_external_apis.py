#!/usr/bin/env python3
"""
Check that Open Food Facts is reachable and the filter catalog loads.
Run from backend: python scripts/check_external_apis.py
Exit 0 if both are fine; 1 otherwise.
"""
import sys
from pathlib import Path
from typing import Tuple

# Add backend to path when run as script
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from dotenv import load_dotenv
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

# Short timeout for health check
HEALTH_TIMEOUT = 8
# Nutella 400g, long-lived OFF entry with ingredients
PROBE_BARCODE = "3017620422003"


def check_open_food_facts() -> Tuple[bool, str]:
    """Return (success, message)."""
    from filtrafood.external_apis import OpenFoodFactsClient, ProductLookupError
    client = OpenFoodFactsClient(timeout=HEALTH_TIMEOUT, max_retries=1)
    try:
        info = client.get_product(PROBE_BARCODE)
    except ProductLookupError as e:
        return False, str(e)
    if info is None:
        return False, f"probe barcode {PROBE_BARCODE} not found"
    return True, f"ok (product={info.product_name})"


def check_filters() -> Tuple[bool, str]:
    """Return (success, message)."""
    from filtrafood.config import get_filters_dir
    from filtrafood.filters import FilterCatalog, FilterCatalogError
    try:
        catalog = FilterCatalog.load(get_filters_dir())
    except FilterCatalogError as e:
        return False, str(e)
    if not len(catalog):
        return False, f"no filters in {get_filters_dir()}"
    return True, f"ok ({len(catalog)} filters: {', '.join(catalog.list_ids())})"


def main() -> int:
    print("Checking FiltraFood dependencies...")
    filters_ok, filters_msg = check_filters()
    print(f"  Filters:         {'OK' if filters_ok else 'FAIL'} - {filters_msg}")
    off_ok, off_msg = check_open_food_facts()
    print(f"  Open Food Facts: {'OK' if off_ok else 'FAIL'} - {off_msg}")
    if filters_ok and off_ok:
        print("All checks passed.")
        return 0
    print("At least one check failed.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
