"""
Runtime configuration for the basicauth demo application
========================================================

Reads environment variables (only here) and exposes a `settings` object.
The decorator itself takes no configuration; these values only seed the
demo app in `main.py`.

Users
-----
- BASICAUTH_USERS          : comma-separated "user:password" entries (default "demo:demo").
                             Each entry is split on its first ':', so passwords may contain ':'
                             but not ','.
- BASICAUTH_DISABLED_USERS : comma-separated user names that must not authenticate.

Logging
-------
- BASICAUTH_LOG_LEVEL      : level name for the demo app logger (default "INFO").
"""

import os
from typing import Dict, FrozenSet


def parse_users(raw: str) -> Dict[str, str]:
    """
    Parse "user:password,other:secret" into a dict.

    Raises:
        ValueError: If an entry has no ':' or an empty user name.
    """
    users: Dict[str, str] = {}
    for entry in raw.split(","):
        entry = entry.strip()
        if not entry:
            continue
        user, sep, password = entry.partition(":")
        if not sep or not user:
            raise ValueError(f"Invalid BASICAUTH_USERS entry: {entry!r}")
        users[user] = password
    return users


def parse_names(raw: str) -> FrozenSet[str]:
    return frozenset(name.strip() for name in raw.split(",") if name.strip())


class _Settings:
    def __init__(self) -> None:
        self.USERS: Dict[str, str] = parse_users(os.getenv("BASICAUTH_USERS", "demo:demo"))
        self.DISABLED_USERS: FrozenSet[str] = parse_names(os.getenv("BASICAUTH_DISABLED_USERS", ""))
        self.LOG_LEVEL: str = os.getenv("BASICAUTH_LOG_LEVEL", "INFO").strip().upper()


def load_settings() -> _Settings:
    """Read the environment now; use in tests after monkeypatching env vars."""
    return _Settings()


settings = load_settings()
