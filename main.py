"""
Demo API module for basicauth.

Responsibilities:
    - Expose an open liveness endpoint
    - Expose endpoints protected by HTTP Basic authentication, one wrapped
      with the `protect` function and one with a shared `BasicAuth` object

Architecture:
    - App Factory pattern (create_app) for test isolation and DI.
    - The credential Provider is injected; by default an in-memory provider
      seeded from BASICAUTH_USERS is used.

LLM Prompt Example:
    "Explain how to structure a FastAPI service with an application factory
    where the authentication backend is injected rather than imported."
"""

import logging
from typing import Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from basicauth import BasicAuth, MemoryProvider, Provider, protect
from basicauth.config import settings

GREETING = "Hello!"


def create_app(provider: Optional[Provider] = None) -> FastAPI:
    """
    Factory function to build and configure a new FastAPI app instance.

    Args:
        provider (Provider, optional): Credential source. Defaults to a
            MemoryProvider built from `settings.USERS`.

    Returns:
        FastAPI: A configured application instance.
    """
    app = FastAPI(
        title="Basic Auth Demo",
        description="HTTP Basic authentication wrapper for FastAPI handlers",
        docs_url="/docs",
    )
    log = logging.getLogger("basicauth")

    # basic console logging (optional)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=settings.LOG_LEVEL)

    if provider is None:
        provider = MemoryProvider(settings.USERS, disabled=settings.DISABLED_USERS)
        log.info(
            "basicauth memory provider: %d users, %d disabled",
            len(settings.USERS),
            len(settings.DISABLED_USERS),
        )
    else:
        log.info("basicauth provider: %s", type(provider).__name__)

    auth = BasicAuth(provider)

    # ----------------------------------------------------------------
    # Routes
    # ----------------------------------------------------------------
    @app.get("/health")
    def health() -> Dict[str, str]:
        return {"status": "ok"}

    def hello(request: Request) -> PlainTextResponse:
        """Plain greeting, only reachable with valid credentials."""
        return PlainTextResponse(GREETING + "\n")

    app.get("/hello")(protect(hello, provider))

    @app.get("/whoami")
    @auth.protect
    async def whoami(request: Request) -> Dict[str, str]:
        """
        Confirm the caller authenticated.

        The wrapper does not pass the user on; handlers that need it read
        the Authorization header themselves.
        """
        return {"message": "authenticated"}

    return app


# `uvicorn main:app --reload` and `from main import app` continue to work.
app = create_app()
