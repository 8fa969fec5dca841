import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.adapters.sqlite.migrator import SQLiteMigrator
from src.api.deps import get_settings
from src.config import load_config, validate_startup

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = get_settings()

    # Load config and migrate on startup (fail-fast)
    try:
        config = load_config(settings.config_path)
        validate_startup(config)
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        SQLiteMigrator(settings.db_path).run_migrations()
        logger.info("Config loaded from %s", settings.config_path)
    except Exception as e:
        logger.critical("Startup failed: %s", e)
        raise

    yield


app = FastAPI(
    title="Chamber Directory API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from src.api.routes import (  # noqa: E402
    admin,
    auth,
    dashboard,
    downloads,
    members,
    public_ssr,
    upload,
)

app.include_router(auth.router, prefix="/api/auth", tags=["Auth"])
app.include_router(members.router, prefix="/api", tags=["Members"])
app.include_router(dashboard.router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(admin.router, prefix="/api/admin", tags=["Admin"])
app.include_router(downloads.router, prefix="/api/download", tags=["Downloads"])
app.include_router(upload.router, prefix="", tags=["Uploads"])
app.include_router(public_ssr.router, prefix="", tags=["SSR"])


# Browser clients on other origins (admin front end in development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health_check() -> dict[str, Any]:
    return {"status": "ok", "service": "chamber-directory"}
