# src/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from src.api.dependencies import get_membership_store
from src.api.errors import request_validation_exception_handler
from src.api.middleware import PrometheusMiddleware, RequestLoggingMiddleware
from src.api.routes import health, waitlist
from src.config.settings import settings
from src.utils.logger import get_logger

logger = get_logger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    store_factory = app.dependency_overrides.get(get_membership_store, get_membership_store)
    store_factory().initialize()
    logger.info(f"Waitlist API started with {settings.WAITLIST_STORE} store")
    yield

app = FastAPI(
    title="Waitlist API",
    description="""
    Waitlist registrar: accepts an email address, registers each normalized
    email at most once and reports how many people have joined.
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# Browser client is served from a different origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(PrometheusMiddleware)
app.add_middleware(RequestLoggingMiddleware)

app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

# Include routers
app.include_router(waitlist.router)
app.include_router(health.router)

# Create metrics endpoint
metrics_app = make_asgi_app()
app.mount("/metrics", metrics_app)

def run():
    import uvicorn
    uvicorn.run("src.main:app", host="0.0.0.0", port=settings.PORT, reload=settings.DEBUG)

if __name__ == "__main__":
    run()
