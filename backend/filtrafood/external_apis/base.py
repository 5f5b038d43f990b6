"""
Types for external product lookups.
"""
from dataclasses import dataclass


class ProductLookupError(Exception):
    """External product database unreachable, timed out, or answered garbage."""


@dataclass(frozen=True)
class ProductInfo:
    """Product as returned by a lookup. ingredients_text is lowercased, possibly empty."""
    barcode: str
    product_name: str
    ingredients_text: str = ""

    @property
    def has_ingredients(self) -> bool:
        return bool(self.ingredients_text)
