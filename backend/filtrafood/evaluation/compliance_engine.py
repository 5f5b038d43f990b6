"""
Keyword compliance engine: lowercased ingredient text vs. requested filters.
First filter (request order) with a matching keyword (stored order) decides the verdict.
"""
from typing import Optional, Sequence
import logging

from filtrafood.filters import FilterCatalog, FilterDefinition
from filtrafood.models.verdict import Verdict, CAUSE_NO_INGREDIENTS

logger = logging.getLogger(__name__)


def parse_filter_ids(raw: str) -> list[str]:
    """'db_vegan,db_halal' -> ['db_vegan', 'db_halal']. Order and empty entries are kept."""
    return raw.split(",")


def find_matching_keyword(ingredients_text: str, definition: FilterDefinition) -> Optional[str]:
    """
    First keyword (stored order) contained in ingredients_text, case-insensitive.
    Plain substring match: 'egg' matches 'eggplant'.
    """
    text = ingredients_text.lower()
    for keyword in definition.keywords:
        if keyword.lower() in text:
            return keyword
    return None


class ComplianceEngine:
    """Evaluates ingredient text against filters of a read-only FilterCatalog."""

    def __init__(self, catalog: FilterCatalog):
        self._catalog = catalog

    def evaluate(self, ingredients_text: str, filter_ids: Sequence[str]) -> Verdict:
        """
        Returns Verdict.incompatible for the first requested filter with a match,
        Verdict.compatible otherwise. Unknown filter ids are skipped.
        """
        if not ingredients_text:
            return Verdict.unknown(CAUSE_NO_INGREDIENTS)

        for filter_id in filter_ids:
            definition = self._catalog.get(filter_id)
            if definition is None:
                logger.debug("COMPLIANCE_ENGINE unknown filter skipped id=%s", filter_id)
                continue
            keyword = find_matching_keyword(ingredients_text, definition)
            if keyword is not None:
                logger.info(
                    "COMPLIANCE_ENGINE match filter=%s keyword=%s",
                    filter_id, keyword,
                )
                return Verdict.incompatible(filter_id, definition.display_name, keyword)

        return Verdict.compatible()
