"""
In-memory credential provider for basicauth.

Responsibilities:
    - Map user names to plaintext passwords held in a dict
    - Refuse disabled users exactly like unknown ones

Design:
    This is a reference implementation of the Provider contract, used by
    the demo app and the test suite. Production deployments plug in their
    own Provider backed by whatever stores their users.
"""

from typing import Dict, Iterable, Mapping, Union

from basicauth.errors import CredentialsNotFound

from .base import Credentials, Provider

Text = Union[str, bytes]


def _to_bytes(value: Text) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


class MemoryProvider(Provider):
    def __init__(self, users: Mapping[Text, Text], disabled: Iterable[Text] = ()):
        """
        Build the provider from a user -> password mapping.

        Internal schema:
            self.users = {user_bytes: password_bytes}
            self.disabled = {user_bytes, ...}

        `str` keys and values are UTF-8 encoded; `bytes` are kept as is.
        The mapping is copied, later changes to `users` are not seen.
        """
        self.users: Dict[bytes, bytes] = {
            _to_bytes(user): _to_bytes(password) for user, password in users.items()
        }
        self.disabled = frozenset(_to_bytes(user) for user in disabled)

    def find(self, user: bytes) -> Credentials:
        """
        Look up `user`.

        Raises:
            CredentialsNotFound: If the user is missing or disabled.
        """
        password = self.users.get(user)
        if password is None or user in self.disabled:
            raise CredentialsNotFound(user)
        return Credentials(user=user, password=password)

    def __len__(self) -> int:
        return len(self.users)
