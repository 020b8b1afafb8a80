"""FastAPI application with lifespan and health endpoint."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from faq_bot.config import get_settings
from faq_bot.logging_config import configure_logging
from faq_bot.slack.router import router as slack_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: load config and configure logging on startup."""
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    yield


app = FastAPI(
    title="FAQ Bot",
    lifespan=lifespan,
)
app.include_router(slack_router)


@app.get("/health")
async def health():
    """Health check endpoint for Cloud Run and local development."""
    return {
        "status": "ok",
        "service": "faq-bot",
        "version": "0.1.0",
    }
