"""
Credential providers: the lookup contract and an in-memory implementation.
"""

from .base import Credentials, Provider
from .memory import MemoryProvider

__all__ = ["Credentials", "Provider", "MemoryProvider"]
