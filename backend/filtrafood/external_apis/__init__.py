"""
External product database connectors. Open Food Facts (free, no key).
"""
from .base import ProductInfo, ProductLookupError
from .open_food_facts import OpenFoodFactsClient

__all__ = [
    "ProductInfo",
    "ProductLookupError",
    "OpenFoodFactsClient",
]
