from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import estimate

logger = logging.getLogger("tatami_estimate")

app = FastAPI(
    title=settings.APP_NAME,
    description="Progressive price estimates for tatami re-covering and installation",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(estimate.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": settings.APP_NAME}


@app.on_event("startup")
def configure_logging():
    """Apply LOG_LEVEL to the app loggers. Handlers and format come from the server (uvicorn)."""
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    for name in ("backend", "tatami_estimate"):
        logging.getLogger(name).setLevel(level)
    logger.info("%s started (currency=%s)", settings.APP_NAME, settings.CURRENCY)
