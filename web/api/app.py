"""FastAPI application for password generation and breach checks."""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from shared.config.config import config
from shared.domain.models import PasswordRequest, PasswordOutcome, CheckRequest, BreachCheckResult
from checker.infrastructure.breach_client import BreachClient
from web.services.password_service import generate_and_check

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Own one breach client for the lifetime of the application."""
    app.state.breach_client = BreachClient()
    logger.info(f"Breach client ready (api={config.BREACH_API_URL}, timeout={config.BREACH_REQUEST_TIMEOUT}s)")
    try:
        yield
    finally:
        await app.state.breach_client.close()


app = FastAPI(title="Password Generator Service", lifespan=lifespan)


@app.get("/health")
async def health_check() -> dict:
    """
    Health check endpoint.

    Returns:
        Dict with status "ok" if service is healthy.
    """
    return {"status": "ok"}


@app.post("/generate", response_model=PasswordOutcome)
async def generate_endpoint(payload: PasswordRequest, request: Request) -> PasswordOutcome:
    """
    Generate a password from the given fragments and check it for breaches.

    Always answers 200; incomplete input, exhausted generation and an
    unverifiable breach check are reported through the outcome status.
    """
    return await generate_and_check(payload, request.app.state.breach_client)


@app.post("/check", response_model=BreachCheckResult)
async def check_endpoint(payload: CheckRequest, request: Request) -> BreachCheckResult:
    """
    Check an existing password against the breach database.

    Returns:
        BreachCheckResult; UNKNOWN if the range query could not complete.
    """
    return await request.app.state.breach_client.check_password(payload.password)
