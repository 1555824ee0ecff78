"""Observability setup with Logfire.

Every process (API server, console, migrations) calls ``configure_logfire``
once at startup. Application code then logs and traces directly::

    logfire.info("User created", user_id=str(user.id), email=user.email)

    with logfire.span("user_service.update_user", user_id=str(user_id)):
        ...
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from roster.config import ObservabilitySettings, Settings


def should_send_to_logfire(observability: ObservabilitySettings) -> bool:
    """Decide whether telemetry leaves the process.

    An explicit ``send_to_logfire`` wins; otherwise a configured token
    enables sending.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings, service_name: str = "roster-api") -> None:
    """Configure Logfire for this process.

    Args:
        settings: Application settings
        service_name: Name reported for this process, e.g. ``roster-console``
    """
    observability = settings.observability
    send = should_send_to_logfire(observability)

    logfire.configure(
        service_name=service_name,
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire=send,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        service=service_name,
        environment=settings.environment,
        send_to_logfire=send,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    """Add method, path and client host to request spans."""
    extra: dict[str, Any] = {}
    if hasattr(request, "method"):
        extra["method"] = request.method
    if hasattr(request, "url"):
        extra["path"] = request.url.path
    client = getattr(request, "client", None)
    if client:
        extra["client_host"] = client.host
    return {**attributes, **extra}


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by the application."""
    logfire.instrument_fastapi(
        app,
        capture_headers=True,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through the engine.

    Args:
        engine: Async engine; its sync engine is what gets instrumented
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info("SQLAlchemy instrumented", dialect=engine.dialect.name)
