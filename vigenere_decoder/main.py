"""Decoder API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map DecoderError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan context manager

Run with: uvicorn vigenere_decoder.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vigenere_decoder.api.error_handlers import register_error_handlers
from vigenere_decoder.api.routes import decode, health
from vigenere_decoder.config import get_settings
from vigenere_decoder.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Decoder API started")
    yield
    logger.info("Decoder API shutting down")


settings = get_settings()
app = FastAPI(
    title="Vigenère Decoder API", version=settings.service_version, lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(decode.router)

register_error_handlers(app)
