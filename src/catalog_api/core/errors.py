"""Domain errors raised by the storage layer and rendered by the HTTP layer."""


class CatalogError(Exception):
    """Base class for catalog domain errors."""


class StorageError(CatalogError):
    """A statement against the backing store failed."""


class ProductNotFoundError(StorageError):
    """No product row matches the requested identifier."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"No product found with id {product_id}")
        self.product_id = product_id


class InvalidProductError(CatalogError):
    """An incoming product payload violated one or more field rules."""

    code = "invalid_data"
    message = "Please provide valid Products's data"

    def __init__(self, fields: dict[str, str]) -> None:
        super().__init__(self.message)
        self.fields = fields
