"""
FiltraFood FastAPI application.

Endpoints:
    GET  /          Health check
    GET  /filters   Available dietary filters
    GET  /check     ?barcode=...&filtres=db_vegan,db_halal -> verdict
"""
from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import List, Optional
import logging
import sys
from dotenv import load_dotenv
from pathlib import Path

# Load env vars
load_dotenv(Path(__file__).parent / ".env")

from filtrafood.config import log_config, get_filters_dir, get_host, get_port, get_log_level
from filtrafood.filters import FilterCatalog, FilterCatalogError
from filtrafood.evaluation.compliance_engine import ComplianceEngine
from filtrafood.external_apis import OpenFoodFactsClient
from filtrafood.check_service import run_check

# Logger
logging.basicConfig(level=get_log_level())
logger = logging.getLogger(__name__)


# --- Response Models ---
class CheckResponse(BaseModel):
    status: str
    productName: Optional[str] = None
    cause: str


class FilterSummary(BaseModel):
    id: str
    name: str
    keywordCount: int


def load_catalog_or_exit() -> FilterCatalog:
    """Startup precondition: without filter data the service is meaningless."""
    filters_dir = get_filters_dir()
    try:
        return FilterCatalog.load(filters_dir)
    except FilterCatalogError as e:
        logger.error("ERREUR: Impossible de charger les filtres depuis %s: %s", filters_dir, e)
        sys.exit(1)


def create_app(catalog: Optional[FilterCatalog] = None, lookup=None) -> FastAPI:
    """
    Build the app around an already-loaded catalog and a product lookup.
    Defaults: catalog from FILTERS_DIR, Open Food Facts client.
    """
    log_config()
    catalog = catalog if catalog is not None else load_catalog_or_exit()
    lookup = lookup if lookup is not None else OpenFoodFactsClient()
    engine = ComplianceEngine(catalog)

    app = FastAPI(title="FiltraFood API")

    # CORS: the mobile app calls the service directly
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    def health_check():
        return {"status": "ok", "service": "FiltraFood", "filters": len(catalog)}

    @app.get("/filters", response_model=List[FilterSummary])
    def list_filters():
        return [definition.to_dict() for definition in catalog]

    @app.get("/check", response_model=CheckResponse, response_model_exclude_none=True)
    def check(
        barcode: Optional[str] = Query(None),
        filtres: Optional[str] = Query(None),
    ):
        """Classify a product (by barcode) against comma-separated filter ids."""
        verdict = run_check(barcode, filtres, engine=engine, lookup=lookup)
        body = CheckResponse(**verdict.to_dict())
        return JSONResponse(status_code=verdict.http_status, content=body.model_dump(exclude_none=True))

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    logger.info("Serveur FiltraFood démarré sur http://%s:%d", get_host(), get_port())
    uvicorn.run("app:app", host=get_host(), port=get_port())
