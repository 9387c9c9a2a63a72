"""Entity package: Category."""

from .table import CategoryTable

__all__ = ["CategoryTable"]
