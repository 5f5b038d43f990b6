"""
Open Food Facts product lookup by barcode (no key required).
Product: https://world.openfoodfacts.org/api/v2/product/<barcode>.json
"""
import logging
from typing import Optional, Sequence

from filtrafood.config import (
    OFF_MAX_RETRIES,
    OFF_TIMEOUT,
    get_ingredient_locales,
    get_open_food_facts_base_url,
    get_open_food_facts_user_agent,
)
from filtrafood.external_apis.base import ProductInfo, ProductLookupError
from filtrafood.external_apis.http_retry import get_with_retries
from filtrafood.models.verdict import UNKNOWN_PRODUCT_NAME

logger = logging.getLogger(__name__)


def extract_ingredients_text(product: dict, locales: Sequence[str]) -> str:
    """
    ingredients_text_<locale> for each locale in order, then ingredients_text.
    First non-empty value wins; result is lowercased ("" when none).
    """
    fields = [f"ingredients_text_{loc}" for loc in locales] + ["ingredients_text"]
    for field in fields:
        value = product.get(field)
        if value and isinstance(value, str):
            return value.lower()
    return ""


def product_from_payload(barcode: str, data: dict, locales: Sequence[str]) -> Optional[ProductInfo]:
    """Map an OFF v2 product payload to ProductInfo. None when OFF says not found."""
    product = data.get("product")
    if data.get("status") != 1 or not product:
        return None
    name = product.get("product_name")
    if not isinstance(name, str) or not name:
        name = UNKNOWN_PRODUCT_NAME
    return ProductInfo(
        barcode=barcode,
        product_name=name,
        ingredients_text=extract_ingredients_text(product, locales),
    )


class OpenFoodFactsClient:
    """
    Barcode lookup against Open Food Facts.
    get_product returns ProductInfo, None when the product is unknown,
    and raises ProductLookupError on transport errors, timeouts, 5xx or bad JSON.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = OFF_TIMEOUT,
        max_retries: int = OFF_MAX_RETRIES,
        locales: Optional[Sequence[str]] = None,
        user_agent: Optional[str] = None,
    ):
        self.base_url = (base_url or get_open_food_facts_base_url()).rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self.locales = list(locales) if locales is not None else get_ingredient_locales()
        self.headers = {"User-Agent": user_agent or get_open_food_facts_user_agent()}

    def product_url(self, barcode: str) -> str:
        return f"{self.base_url}/{barcode}.json"

    def get_product(self, barcode: str) -> Optional[ProductInfo]:
        url = self.product_url(barcode)
        resp, err = get_with_retries(
            url,
            headers=self.headers,
            timeout=self.timeout,
            max_retries=self.max_retries,
        )
        if err is not None:
            logger.warning("OPEN_FOOD_FACTS fetch failed after retries barcode=%s error=%s", barcode, err)
            raise ProductLookupError(f"Open Food Facts unreachable: {err}")

        # Unknown barcodes come back as 404 with a JSON body {"status": 0, ...}
        if resp.status_code != 404 and not 200 <= resp.status_code < 300:
            logger.warning("OPEN_FOOD_FACTS bad status barcode=%s status=%s", barcode, resp.status_code)
            raise ProductLookupError(f"Open Food Facts returned HTTP {resp.status_code}")
        try:
            data = resp.json()
        except ValueError as e:
            logger.warning("OPEN_FOOD_FACTS invalid JSON barcode=%s error=%s", barcode, e)
            raise ProductLookupError("Open Food Facts returned invalid JSON") from e
        if not isinstance(data, dict):
            raise ProductLookupError("Open Food Facts returned an unexpected payload")

        info = product_from_payload(barcode, data, self.locales)
        if info is None:
            logger.info("OPEN_FOOD_FACTS not found barcode=%s", barcode)
        else:
            logger.info(
                "OPEN_FOOD_FACTS found barcode=%s name=%s ingredients_chars=%d",
                barcode, info.product_name[:80], len(info.ingredients_text),
            )
        return info
