"""
Receipt Processor — FastAPI application entry-point.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from receipt_processor import __version__
from receipt_processor.config import settings
from receipt_processor.errors import register_exception_handlers
from receipt_processor.routers.receipts import router as receipts_router
from receipt_processor.store import ReceiptStore

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s  %(name)-30s  %(levelname)-5s  %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: one store per application, dropped on shutdown
    app.state.receipt_store = ReceiptStore()
    logger.info("Receipt store ready (environment: %s)", settings.ENVIRONMENT)
    yield
    logger.info("Shutting down, discarding %d receipts", len(app.state.receipt_store))


app = FastAPI(
    title="Receipt Processor",
    description="Receipt intake → validation → points scoring",
    version=__version__,
    lifespan=lifespan,
    debug=settings.DEBUG,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/")
async def root():
    return {"service": "Receipt Processor", "version": __version__, "status": "running"}


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


app.include_router(receipts_router, tags=["Receipts"])
