"""
basicauth package initializer.

HTTP Basic authentication (RFC 7617) for FastAPI/Starlette handlers.
"""

from .errors import BasicAuthError, CredentialsNotFound, MalformedAuthorization
from .protect import REALM, BasicAuth, authenticate, parse_authorization, protect, protect_with, unauthorized
from .provider import Credentials, MemoryProvider, Provider

__all__ = [
    "REALM",
    "BasicAuth",
    "BasicAuthError",
    "Credentials",
    "CredentialsNotFound",
    "MalformedAuthorization",
    "MemoryProvider",
    "Provider",
    "authenticate",
    "parse_authorization",
    "protect",
    "protect_with",
    "unauthorized",
]
