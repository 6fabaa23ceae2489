import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from farmbooks.core.config import get_settings
from farmbooks.api.v1 import api_router

settings = get_settings()

app = FastAPI(
    title=settings.project_name,
    openapi_url=f"{settings.api_v1_prefix}/openapi.json",
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.api_v1_prefix)


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "name": settings.project_name,
        "docs": "/docs",
    }


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.on_event("startup")
async def startup_event():
    """Configure logging and, when enabled, create missing tables."""
    logging.basicConfig(level=settings.log_level)
    logging.info(f"Starting {settings.project_name}")

    if settings.create_tables_on_startup:
        from farmbooks.models import Base
        from farmbooks.db.session import engine
        Base.metadata.create_all(bind=engine)
