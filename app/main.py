"""
Payment System API - Main Application Entry Point
Invoices and the card/cheque payments applied to them.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.config import settings
from app.core.registry import InvoiceRegistry
from app.api.router import api_router


logger = logging.getLogger(__name__)


def create_registry() -> InvoiceRegistry:
    """Build the invoice registry from settings, seeding the default invoice."""
    registry = InvoiceRegistry(
        first_invoice_id=settings.FIRST_INVOICE_ID,
        first_payment_id=settings.FIRST_PAYMENT_ID,
    )
    if settings.SEED_DEFAULT_INVOICE:
        registry.seed_default_invoice(settings.DEFAULT_CUSTOMER_NAME)
    return registry


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    # Startup
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"Environment: {settings.ENVIRONMENT}")

    app.state.registry = create_registry()
    logger.info("Invoice registry initialized")

    yield

    # Shutdown
    logger.info("Shutting down, in-memory invoices are discarded")


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="""
## Payment System API

Track invoices and the payments applied to them.

### Features:

* **Invoices** - Create, list, inspect and delete invoices
* **Card payments** - Card number, holder, expiry and CVV
* **Cheque payments** - Cheque number, bank and account holder
* **Running totals** - Every invoice keeps the sum of its payments
    """,
    version=settings.APP_VERSION,
    docs_url="/docs" if settings.is_development else None,
    redoc_url="/redoc" if settings.is_development else None,
    openapi_url="/openapi.json" if settings.is_development else None,
    lifespan=lifespan,
)


# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Exception handlers
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report missing or malformed fields as a bad request."""
    errors = []
    for error in exc.errors():
        field = " -> ".join(str(loc) for loc in error["loc"])
        errors.append({
            "field": field,
            "message": error["msg"],
            "type": error["type"],
        })

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": "Invalid request data",
            "errors": errors,
        },
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Log unexpected failures and hide the details from the client."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Something went wrong!"},
    )


# Include API router
app.include_router(api_router, prefix=settings.API_PREFIX)


# Health check endpoint
@app.get(
    "/health",
    tags=["Health"],
    summary="Server health check",
)
async def health_check():
    """Check if the API is running."""
    return {
        "status": "healthy",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
    }


# Root endpoint
@app.get(
    "/",
    tags=["Info"],
    summary="API information",
)
async def root():
    """Get API information."""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "description": "Invoices with card and cheque payments",
        "api": settings.API_PREFIX,
        "docs": "/docs" if settings.is_development else "Disabled in production",
        "health": "/health",
    }


# For running with uvicorn directly
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development,
    )
