"""Destination vault access."""

from .adapter import Vault
from .writer import write_all

__all__ = ["Vault", "write_all"]
