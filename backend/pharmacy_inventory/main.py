"""
Pharmacy Inventory API.

Thin HTTP surface over InventoryStore. Every route maps to one store
operation on the drugs / drugs/{id} addresses; store errors become
400 / 404 / 409 responses.
"""
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware

from pharmacy_inventory import __version__
from pharmacy_inventory.api.routes import addresses, drugs
from pharmacy_inventory.core.config import settings
from pharmacy_inventory.core.exceptions import BusinessError, InventoryError
from pharmacy_inventory.db.init_db import init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the drugs table (and the sample drug, if enabled) on startup."""
    logger.info("Initializing database...")
    init_db()
    logger.info("Database initialized")
    yield


app = FastAPI(
    title="Pharmacy Inventory API",
    description="Drug inventory: stock, sales and records.",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=[
        "Content-Type",
        "Accept",
        "Origin",
    ],
    max_age=600,  # Cache preflight for 10 minutes
)


@app.exception_handler(InventoryError)
async def inventory_error_handler(request: Request, exc: InventoryError):
    return await http_exception_handler(request, BusinessError.from_inventory_error(exc))


app.include_router(drugs.router, prefix="/drugs", tags=["drugs"])
app.include_router(addresses.router, prefix="/addresses", tags=["addresses"])


@app.get("/health")
def health():
    return {"status": "ok"}
