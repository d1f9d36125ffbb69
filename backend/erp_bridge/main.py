from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from erp_bridge.routers import webhooks, orders
from erp_bridge.database import engine, Base
from erp_bridge.config import settings
from erp_bridge.exceptions import StorageError, DispatchError
import erp_bridge.models  # noqa: F401  (register tables on Base.metadata)
import logging
import sys

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

logger = logging.getLogger(__name__)

# Log startup information
logger.info("="*60)
logger.info("Starting ERP Bridge API")
logger.info("="*60)
logger.info(f"Database: {settings.database_url.split('@')[-1]}")
logger.info(f"Partner API URL: {settings.partner_api_url}")
logger.info(f"Partner API token configured: {bool(settings.partner_api_token)}")
if not settings.partner_api_token:
    logger.warning("PARTNER_API_TOKEN not set - invoices will be sent without credentials")
logger.info("="*60)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create tables for local use (Alembic migrations cover deployed databases)
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(
    lifespan=lifespan,
    title="ERP Bridge API",
    description="Receives EDI 850 purchase orders and sends EDI 810 invoices",
    version="1.0.0"
)


def parse_cors_origins(origins_str: str) -> list:
    """Parse comma-separated CORS origins into a list"""
    return [origin.strip() for origin in origins_str.split(",") if origin.strip()]


app.add_middleware(
    CORSMiddleware,
    allow_origins=parse_cors_origins(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# Include routers
app.include_router(webhooks.router)  # Inbound EDI from Zenbridge
app.include_router(orders.router)


@app.get("/")
def root():
    return {"message": "ERP Bridge API", "version": "1.0.0"}


@app.get("/health")
def health_check():
    return {"status": "healthy"}


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error(f"Storage failure on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=503, content={"detail": f"Database unavailable: {exc}"})


@app.exception_handler(DispatchError)
async def dispatch_error_handler(request: Request, exc: DispatchError):
    logger.error(f"Dispatch failure on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=502, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logging.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": f"Internal server error: {str(exc)}"},
    )
