"""Observability configuration using Logfire.

Services and adapters log through logfire directly:

    import logfire

    logfire.info("Credits debited", user_id=user_id, balance=balance)

    with logfire.span("credit_ledger.debit", user_id=user_id):
        ...
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from autoblog.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the process.

    Cloud sending is enabled when explicitly requested, or otherwise when a
    token is configured. Console output is always on.

    Args:
        settings: Application settings
    """
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    else:
        send_to_logfire = bool(settings.observability.logfire_token)

    config_kwargs: dict[str, Any] = {
        "service_name": "autoblog-api",
        "service_version": settings.git_sha,
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by the app.

    Args:
        app: FastAPI application instance
    """
    # Generation requests carry base64 photos; keep bodies out of spans
    logfire.instrument_fastapi(app, capture_headers=False)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL queries issued through the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx() -> None:
    """Trace outbound HTTP requests (Naver profile API)."""
    logfire.instrument_httpx()
