"""High-level clients."""

from .catalog import SystemCatalog

__all__ = ["SystemCatalog"]
