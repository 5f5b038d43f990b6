"""
Loads filter definitions from a directory of <id>.json files. Read-only after load.
"""
from pathlib import Path
from typing import Iterable, Iterator, Optional
import json
import logging

from .filter_schema import FilterDefinition, FilterCatalogError

logger = logging.getLogger(__name__)


class FilterCatalog:
    def __init__(self, definitions: Iterable[FilterDefinition] = ()):
        self._by_id: dict[str, FilterDefinition] = {}
        for definition in definitions:
            if definition.id in self._by_id:
                raise FilterCatalogError(f"Duplicate filter id: {definition.id}")
            self._by_id[definition.id] = definition

    @classmethod
    def load(cls, filters_dir: Path) -> "FilterCatalog":
        """
        Read every *.json file in filters_dir; id is the file name without extension.
        Raises FilterCatalogError if the directory is unreadable or a record is malformed.
        """
        filters_dir = Path(filters_dir)
        try:
            paths = sorted(p for p in filters_dir.iterdir() if p.is_file() and p.suffix == ".json")
        except OSError as e:
            raise FilterCatalogError(f"Cannot read filters directory {filters_dir}: {e}") from e

        definitions = []
        for path in paths:
            try:
                with open(path, encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, ValueError) as e:
                raise FilterCatalogError(f"Cannot parse filter file {path.name}: {e}") from e
            definitions.append(FilterDefinition.from_dict(path.stem, data))

        catalog = cls(definitions)
        logger.info("FILTER_CATALOG loaded %d filters from %s ids=%s", len(catalog), filters_dir, catalog.list_ids())
        return catalog

    def get(self, filter_id: str) -> Optional[FilterDefinition]:
        return self._by_id.get(filter_id)

    def list_ids(self) -> list[str]:
        return list(self._by_id.keys())

    def __contains__(self, filter_id: object) -> bool:
        return filter_id in self._by_id

    def __iter__(self) -> Iterator[FilterDefinition]:
        return iter(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)
