"""Agent Gateway API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map GatewayError → flat {"error": ...} JSON responses
    - CORS configured from settings (not hardcoded)
    - The engine client is NOT built on startup; the shared handle is closed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Three error handler layers: GatewayError (domain), RequestValidationError
      (Pydantic), Exception (catch-all)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agent_gateway.api.error_handlers import register_error_handlers
from agent_gateway.api.routes import agents, health
from agent_gateway.config import get_settings
from agent_gateway.infrastructure.observability import setup_logging
from agent_gateway.infrastructure.service_handle import agent_service_handle

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Agent Gateway API started")
    yield
    await agent_service_handle.aclose()
    logger.info("Agent Gateway API shutting down")


app = FastAPI(
    title="Agent Gateway API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(agents.router)

register_error_handlers(app)
