"""
Receipt Points — FastAPI application entry-point.
"""
import logging
import time
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.receipts.store import ReceiptStore, get_store

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s  %(name)-30s  %(levelname)-5s  %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting (environment=%s)", settings.ENVIRONMENT)
    yield
    logger.info("Shutting down with %d receipts in memory", len(get_store()))


app = FastAPI(
    title="Receipt Points",
    description="Receipt submission → loyalty points scoring → points lookup",
    version="0.1.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s -> %d (%.1f ms)",
        request.method, request.url.path, response.status_code, elapsed_ms,
    )
    return response


@app.exception_handler(RequestValidationError)
async def invalid_receipt_handler(request: Request, exc: RequestValidationError):
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": "Invalid receipt format"})


@app.get("/")
async def root():
    return {"service": "Receipt Points", "version": "0.1.0", "status": "running"}


@app.get("/health")
async def health_check(store: ReceiptStore = Depends(get_store)):
    return {"status": "healthy", "receipts": len(store)}


# ── Register API router ──────────────────────────────────────────────────
from app.receipts.routers.receipts import router as receipts_router  # noqa: E402

app.include_router(receipts_router, tags=["Receipts"])
