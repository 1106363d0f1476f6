"""
HTTP Basic authentication wrapper for FastAPI/Starlette handlers.

Responsibilities:
    - Parse the `Authorization: Basic <base64(user:password)>` header
    - Look the claimed user up in a Provider
    - Forward the request to the wrapped handler on a password match
    - Otherwise answer 401 with a `WWW-Authenticate` challenge

Design:
    - Every failure (no header, other scheme, bad Base64, no ':', unknown
      user, wrong password) yields the same response, so clients cannot
      tell an unknown user from a wrong password.
    - Any exception from the Provider is one more failed login.
    - The wrapper keeps no state between requests; the only shared object
      is the injected Provider. Async handlers do the lookup in the
      threadpool.
    - Nothing is logged here. Applications log around the wrapper.

Usage:
    >>> provider = MemoryProvider({"user": "password"})
    >>> @app.get("/hello")
    ... @protect_with(provider)
    ... def hello(request: Request): ...

    or, reusing one provider for many handlers:

    >>> auth = BasicAuth(provider)
    >>> app.get("/hello")(auth.protect(hello))

LLM Prompt Example:
    "Show how to wrap FastAPI endpoints with a Basic auth check that keeps
    the endpoint signature intact for dependency injection."
"""

import base64
import binascii
import hmac
import inspect
from functools import wraps
from http import HTTPStatus
from typing import Any, Callable, Dict, Optional, Tuple, TypeVar

from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

from basicauth.errors import MalformedAuthorization
from basicauth.provider.base import Provider

F = TypeVar("F", bound=Callable[..., Any])

REALM = "Restricted"
PREFIX = "Basic "
REQUEST_PARAM = "basicauth_request"


def unauthorized() -> Response:
    """Return the 401 challenge sent for every authentication failure."""
    status = HTTPStatus.UNAUTHORIZED
    return PlainTextResponse(
        status.phrase + "\n",
        status_code=status.value,
        headers={
            "WWW-Authenticate": f'Basic realm="{REALM}"',
            "X-Content-Type-Options": "nosniff",
        },
    )


def parse_authorization(value: Optional[str]) -> Tuple[bytes, bytes]:
    """
    Split an Authorization header value into (user, password).

    Args:
        value (Optional[str]): Raw header value, None if the header is absent.

    Returns:
        Tuple[bytes, bytes]: User and password exactly as sent. The split
        happens on the first ':' only, so the password may contain ':'.

    Raises:
        MalformedAuthorization: If the value does not start with "Basic "
            (case-sensitive), the payload is not padded standard Base64,
            or the decoded payload has no ':'.
    """
    if not value or not value.startswith(PREFIX):
        raise MalformedAuthorization("not a Basic authorization")

    try:
        # Starlette decodes header bytes as latin-1, so this is lossless.
        encoded = value[len(PREFIX):].encode("latin-1")
        payload = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise MalformedAuthorization("invalid base64 payload") from exc

    user, sep, password = payload.partition(b":")
    if not sep:
        raise MalformedAuthorization("missing ':' separator")
    return user, password


def authenticate(value: Optional[str], provider: Provider) -> bool:
    """
    Return True if the header value carries valid credentials for `provider`.

    Any exception from parsing or from `provider.find` counts as a failed
    login: a broken provider must answer exactly like an unknown user.
    """
    try:
        user, password = parse_authorization(value)
        expected = provider.find(user)
        return hmac.compare_digest(password, expected.password)
    except Exception:
        return False


def _request_parameter(handler: Callable[..., Any]) -> Optional[str]:
    """Name of the handler parameter annotated with `Request`, if any."""
    for name, param in inspect.signature(handler).parameters.items():
        annotation = param.annotation
        if isinstance(annotation, type) and issubclass(annotation, Request):
            return name
    return None


def _with_request_parameter(handler: Callable[..., Any]) -> inspect.Signature:
    """Handler signature plus a keyword-only Request for FastAPI to fill in."""
    signature = inspect.signature(handler)
    params = list(signature.parameters.values())
    extra = inspect.Parameter(REQUEST_PARAM, inspect.Parameter.KEYWORD_ONLY, annotation=Request)
    if params and params[-1].kind is inspect.Parameter.VAR_KEYWORD:
        params.insert(len(params) - 1, extra)
    else:
        params.append(extra)
    return signature.replace(parameters=params)


def _find_request(args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> Request:
    for arg in (*args, *kwargs.values()):
        if isinstance(arg, Request):
            return arg
    raise TypeError("Basic auth protected handlers must be called with a Request")


def protect(handler: F, provider: Provider) -> F:
    """
    Wrap `handler` so it only runs for requests with valid Basic credentials.

    Args:
        handler (Callable): Sync or async endpoint. If it takes no `Request`
            parameter, the wrapper declares a keyword-only one so FastAPI
            still hands it the request; it is not passed on to `handler`.
        provider (Provider): Source of the expected credentials.

    Returns:
        Callable: A handler of the same kind. On failure it returns the
        `unauthorized()` response without calling `handler`. Async handlers
        look the user up in the threadpool so a slow provider does not
        block the event loop.
    """
    injected = _request_parameter(handler) is None

    def _split(args, kwargs):
        if injected and REQUEST_PARAM in kwargs:
            kwargs = dict(kwargs)
            return kwargs.pop(REQUEST_PARAM), kwargs
        return _find_request(args, kwargs), kwargs

    if inspect.iscoroutinefunction(handler):

        @wraps(handler)
        async def async_wrapper(*args, **kwargs):
            request, kwargs = _split(args, kwargs)
            header = request.headers.get("Authorization")
            if not await run_in_threadpool(authenticate, header, provider):
                return unauthorized()
            return await handler(*args, **kwargs)

        wrapper = async_wrapper
    else:

        @wraps(handler)
        def sync_wrapper(*args, **kwargs):
            request, kwargs = _split(args, kwargs)
            if not authenticate(request.headers.get("Authorization"), provider):
                return unauthorized()
            return handler(*args, **kwargs)

        wrapper = sync_wrapper

    if injected:
        wrapper.__signature__ = _with_request_parameter(handler)  # type: ignore[attr-defined]
    return wrapper  # type: ignore[return-value]


def protect_with(provider: Provider) -> Callable[[F], F]:
    """Decorator-factory form of `protect` for use with `@` syntax."""

    def decorator(handler: F) -> F:
        return protect(handler, provider)

    return decorator


class BasicAuth:
    """Holds one Provider and protects any number of handlers with it."""

    def __init__(self, provider: Provider) -> None:
        self.provider = provider

    def protect(self, handler: F) -> F:
        """Same as `protect(handler, self.provider)`."""
        return protect(handler, self.provider)

    __call__ = protect
