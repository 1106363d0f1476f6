"""
Base credential provider interface for basicauth.

Purpose:
    Define the one-method contract the Basic auth decorator depends on,
    so credentials can live in a dict, a database or a remote service
    without the decorator knowing about it.

Testing & Coverage:
    Abstract declarations are not executed directly in tests and are
    annotated with `# pragma: no cover`.

LLM Prompt Example:
    "Show how a narrow lookup interface lets an auth decorator stay
    independent of where user credentials are stored."
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict


class Credentials(BaseModel):
    """User credentials as returned by a Provider lookup."""

    model_config = ConfigDict(frozen=True)

    user: bytes
    password: bytes


class Provider(ABC):
    """Abstract base class for credential providers."""

    @abstractmethod  # pragma: no cover
    def find(self, user: bytes) -> Credentials:
        """
        Return the credentials of `user`.

        Args:
            user (bytes): Raw user name taken verbatim from the request.

        Returns:
            Credentials: Holds the expected password for `user`.

        Raises:
            CredentialsNotFound: If the user is unknown or must not be
                authorised (e.g. a disabled account).

        LLM Prompt Example:
            "Explain why an auth provider should report unknown and
            disabled users with the same error."
        """
        raise NotImplementedError
