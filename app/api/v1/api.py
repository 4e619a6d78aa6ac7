import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, APIRouter
from app.api.v1.endpoints import calculator, rates, pincodes
from app.core.database import create_db_and_tables
from app.services.rate_table import rate_table_store

logger = logging.getLogger(__name__)

router = APIRouter()
router.include_router(calculator.router, prefix="/api/v1", tags=["Calculator"])
router.include_router(rates.router, prefix="/api/v1", tags=["Rates"])
router.include_router(pincodes.router, prefix="/api/v1", tags=["Pincodes & Zones"])


@asynccontextmanager
async def lifespan(app: FastAPI):
	# On startup
	create_db_and_tables()
	# fail fast on a broken rate table instead of on the first request
	rate_table_store.get()
	logger.info("Rate table ready: %s", rate_table_store.path)
	yield
