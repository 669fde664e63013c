import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dlsolutions.core.config import settings
from dlsolutions.core.errors import ServiceError
from dlsolutions.routers import (
    admin_messages,
    ai,
    contact,
    crm_contacts,
    crm_pipeline,
    payment_methods,
)
from dlsolutions.services.ai_service import get_ai_service

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

OPENAPI_TAGS = [
    {"name": "Payment Methods", "description": "Manage the caller's saved cards."},
    {"name": "Contact", "description": "Public contact form."},
    {"name": "Admin", "description": "Admin inbox over contact messages."},
    {"name": "CRM", "description": "Contacts, notes, bulk actions and exports."},
    {"name": "CRM Pipeline", "description": "Deals, tasks and the activity log."},
    {"name": "AI", "description": "AI writing and analysis assistant."},
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    if get_ai_service.cache_info().currsize:
        await get_ai_service().client.close()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.version,
    description=(
        "Backend for the DL Solutions website: payment methods, contact form, "
        "admin inbox, CRM and AI assistant."
    ),
    openapi_tags=OPENAPI_TAGS,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=headers)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request", "errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


app.include_router(
    payment_methods.router, prefix="/payment-methods", tags=["Payment Methods"]
)
app.include_router(contact.router, prefix="/contact", tags=["Contact"])
app.include_router(admin_messages.router, prefix="/admin/messages", tags=["Admin"])
app.include_router(crm_contacts.router, prefix="/crm/contacts", tags=["CRM"])
app.include_router(crm_pipeline.router, prefix="/crm", tags=["CRM Pipeline"])
app.include_router(ai.router, prefix="/ai", tags=["AI"])


@app.get("/")
async def root() -> dict[str, str]:
    return {
        "app": settings.APP_NAME,
        "version": settings.version,
        "domain": settings.APP_DOMAIN,
        "status": "running",
    }


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
