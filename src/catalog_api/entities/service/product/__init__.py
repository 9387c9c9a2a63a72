"""Entity package: Product.

- Product / ProductUpdate: domain models and field validation
- ProductTable / ProductImageTable: database persistence models
- ProductRepository: data access layer
"""

from .entity import INT64_MAX, INT64_MIN, Product, ProductUpdate
from .repository import ProductRepository
from .table import ProductImageTable, ProductTable

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "Product",
    "ProductImageTable",
    "ProductRepository",
    "ProductTable",
    "ProductUpdate",
]
