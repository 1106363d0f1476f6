"""
Exceptions for the basicauth package.

None of these ever reach an HTTP client: the decorator converts every
authentication failure into the same 401 challenge. They exist so the
individual steps (header parsing, credential lookup) can be used and
tested on their own.
"""


class BasicAuthError(Exception):
    """Base class for basicauth errors."""


class MalformedAuthorization(BasicAuthError, ValueError):
    """The Authorization header is absent, not Basic, not Base64 or has no ':'."""


class CredentialsNotFound(BasicAuthError, LookupError):
    """
    Raised by a Provider when the user is unknown or must not authenticate.

    Disabled accounts use this too; callers cannot tell the two apart.
    """
