"""
Check pipeline: validate params -> product lookup -> compliance engine -> verdict.
Every outcome, including failures, comes back as a Verdict.
"""
import logging
from typing import Optional

from filtrafood.evaluation.compliance_engine import ComplianceEngine, parse_filter_ids
from filtrafood.models.verdict import Verdict, CAUSE_NOT_FOUND, CAUSE_NO_INGREDIENTS

logger = logging.getLogger(__name__)


def run_check(
    barcode: Optional[str],
    filters: Optional[str],
    *,
    engine: ComplianceEngine,
    lookup,
) -> Verdict:
    """
    barcode: product barcode; filters: comma-separated filter ids ("db_vegan,db_halal").
    lookup: any object with get_product(barcode) -> ProductInfo | None.
    """
    if not barcode or not filters:
        logger.info("CHECK rejected missing params barcode=%r filters=%r", barcode, filters)
        return Verdict.error()

    filter_ids = parse_filter_ids(filters)
    logger.info("CHECK barcode=%s filters=%s", barcode, filter_ids)

    try:
        product = lookup.get_product(barcode)
        if product is None:
            return Verdict.unknown(CAUSE_NOT_FOUND)
        if not product.has_ingredients:
            return Verdict.unknown(CAUSE_NO_INGREDIENTS, product_name=product.product_name)

        verdict = engine.evaluate(product.ingredients_text, filter_ids)
        logger.info(
            "VERDICT barcode=%s status=%s cause=%s",
            barcode, verdict.status_label, verdict.cause,
        )
        return verdict.with_product_name(product.product_name)
    except Exception as e:
        logger.error("CHECK failed barcode=%s: %s", barcode, e, exc_info=True)
        return Verdict.server_error()
