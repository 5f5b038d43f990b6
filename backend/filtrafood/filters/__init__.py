from .filter_schema import FilterDefinition, FilterCatalogError
from .filter_catalog import FilterCatalog

__all__ = [
    "FilterDefinition",
    "FilterCatalogError",
    "FilterCatalog",
]
