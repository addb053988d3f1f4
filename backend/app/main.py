# Quotation management backend entrypoint: FastAPI app and router wiring.

import time

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.app.api import customers
from backend.app.api import dashboard
from backend.app.api import items
from backend.app.api import login
from backend.app.api import quotations
from backend.app.api import register
from backend.app.api import settings as settings_api
from backend.app.api import templates
from backend.app.core.dev_seed import seed_development_data
from backend.app.core.logging_config import logger, setup_logging
from backend.app.core.settings import get_settings
from backend.app.db.base import Base
from backend.app.db.session import SessionLocal, engine

setup_logging()

settings = get_settings()
app = FastAPI(title=settings.app_name, version=settings.api_version)

origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(register.router)
app.include_router(login.router)
app.include_router(customers.router)
app.include_router(items.router)
app.include_router(quotations.router)
app.include_router(settings_api.router)
app.include_router(templates.router)
app.include_router(dashboard.router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation error", "errors": jsonable_encoder(exc.errors())},
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    logger.info(
        "request_completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        latency_ms=round((time.perf_counter() - started) * 1000, 2),
    )
    return response


@app.get("/")
def read_root():
    return {"app": "Crystal Line Quotations backend", "status": "ok"}


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.on_event("startup")
def prepare_database():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_development_data(db)
    finally:
        db.close()
    logger.info("startup", service="quotations-api", environment=settings.environment)
