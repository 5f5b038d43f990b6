"""
Filter definition record. One JSON file per filter: {"name": str, "keywords": [str, ...]}.
"""
from dataclasses import dataclass, field
from typing import Optional


class FilterCatalogError(Exception):
    """Filter data missing or malformed. The service cannot start without it."""


@dataclass(frozen=True)
class FilterDefinition:
    id: str
    name: Optional[str] = None
    keywords: tuple[str, ...] = field(default_factory=tuple)

    @property
    def display_name(self) -> str:
        return self.name or self.id

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.display_name,
            "keywordCount": len(self.keywords),
        }

    @classmethod
    def from_dict(cls, filter_id: str, d: dict) -> "FilterDefinition":
        if not isinstance(d, dict):
            raise FilterCatalogError(f"{filter_id}: record must be a JSON object, got {type(d).__name__}")
        name = d.get("name")
        if name is not None and not isinstance(name, str):
            raise FilterCatalogError(f"{filter_id}: 'name' must be a string")
        keywords = d.get("keywords")
        if keywords is None:
            keywords = []
        if not isinstance(keywords, list) or not all(isinstance(k, str) for k in keywords):
            raise FilterCatalogError(f"{filter_id}: 'keywords' must be a list of strings")
        return cls(id=filter_id, name=name or None, keywords=tuple(keywords))
