import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lilian.config import settings
from lilian.database import init_db
from lilian.logging_config import setup_logging
from lilian.routes import admin, content, donations, members

setup_logging(settings.log_level, settings.log_file or None)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.project_name)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# Include routers
app.include_router(members.router, prefix="/api", tags=["members"])
app.include_router(donations.router, prefix="/api", tags=["donations"])
app.include_router(content.router, prefix="/api", tags=["content"])
app.include_router(admin.router, prefix="/api", tags=["admin"])


@app.on_event("startup")
def on_startup():
    init_db()
    route_count = sum(1 for r in app.routes if getattr(r, "path", None))
    logger.info(f"{settings.project_name} started with {route_count} routes")


@app.get("/api/health")
def health_check():
    """Liveness probe"""
    return {"app_name": settings.project_name, "status": "healthy"}
