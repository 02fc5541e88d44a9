"""FastAPI application for the BizTime API."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.common import set_biztime_db
from api.companies import router as companies_router
from api.industries import router as industries_router
from api.invoices import router as invoices_router
from biztime.config import get_cors_origins, get_database_url
from biztime.db import BizTimeDatabase

load_dotenv()

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

biztime_db: Optional[BizTimeDatabase] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app."""
    global biztime_db
    try:
        biztime_db = BizTimeDatabase(get_database_url(), pool_pre_ping=True)

        # Set the database instance used by the routers
        set_biztime_db(biztime_db)

        logger.info("BizTimeDatabase initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        biztime_db = None

    yield

    # Cleanup on shutdown
    if biztime_db:
        biztime_db.close()
        set_biztime_db(None)
        logger.info("BizTimeDatabase connection closed")


# Initialize FastAPI app
app = FastAPI(
    title="BizTime API",
    description="Companies, invoices and industries backed by PostgreSQL",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def health_check() -> dict:
    """Health check endpoint."""
    return {"message": "BizTime API is running!"}


app.include_router(companies_router)
app.include_router(invoices_router)
app.include_router(industries_router)
