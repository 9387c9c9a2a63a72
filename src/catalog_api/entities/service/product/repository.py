"""Data-access layer for products."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, select

from src.catalog_api.core.errors import ProductNotFoundError, StorageError
from src.catalog_api.entities.service.category.table import CategoryTable

from .entity import Product, ProductUpdate
from .table import ProductImageTable, ProductTable

if TYPE_CHECKING:
    from loguru import Logger


def _select_products():
    return (
        select(ProductTable, CategoryTable.category_name, ProductImageTable.image_url)
        .join(
            CategoryTable,
            col(ProductTable.category_id) == col(CategoryTable.category_id),
            isouter=True,
        )
        .join(
            ProductImageTable,
            col(ProductImageTable.product_id) == col(ProductTable.id),
            isouter=True,
        )
    )


class ProductRepository:
    """Data-access layer for products.

    Reads join each product with its category name and image URLs. Mutations
    run in a single transaction that is rolled back on any failure.

    Args:
        session: Session the repository issues its statements on.
        log: Logger accepting structured context through ``bind``; errors
            are reported there before being raised as ``StorageError``.
    """

    def __init__(self, session: Session, log: Logger | None = None) -> None:
        self._session = session
        self._log = (log or logger).bind(component="product_repository")

    @staticmethod
    def _to_entity(
        row: ProductTable, category_name: str | None, image_urls: list[str] | None
    ) -> Product:
        return Product(
            id=row.id,
            name=row.name,
            description=row.des,
            price=row.price,
            discount=row.discount,
            available_quantity=row.available_quantity,
            category_id=row.category_id,
            category_name=category_name,
            image_urls=image_urls or [],
        )

    def _fetch(self, product_id: int) -> Product:
        statement = _select_products().where(col(ProductTable.id) == product_id).limit(1)
        result = self._session.exec(statement).first()
        if result is None:
            raise ProductNotFoundError(product_id)
        return self._to_entity(*result)

    def list_all(self) -> list[Product]:
        """Return every product ordered by name."""
        statement = _select_products().order_by(
            col(ProductTable.name), col(ProductTable.id)
        )
        try:
            rows = self._session.exec(statement).all()
        except SQLAlchemyError as exc:
            self._log.bind(err=str(exc)).error("Error listing products")
            raise StorageError("Error listing products") from exc
        return [self._to_entity(*row) for row in rows]

    def get_by_id(self, product_id: int) -> Product:
        """Return the product with ``product_id``.

        Raises:
            ProductNotFoundError: No product has this identifier.
            StorageError: The query could not be executed.
        """
        try:
            return self._fetch(product_id)
        except ProductNotFoundError:
            self._log.bind(product_id=product_id).info("Product not found")
            raise
        except SQLAlchemyError as exc:
            self._log.bind(err=str(exc), product_id=product_id).error(
                "Error selecting product by id"
            )
            raise StorageError(f"Error selecting product {product_id}") from exc

    def delete_by_id(self, product_id: int) -> None:
        """Delete the product and its image row.

        Deleting an identifier that matches nothing is not an error.
        """
        try:
            image = self._session.get(ProductImageTable, product_id)
            if image is not None:
                self._session.delete(image)
            row = self._session.get(ProductTable, product_id)
            if row is not None:
                self._session.delete(row)
            self._session.commit()
        except SQLAlchemyError as exc:
            self._session.rollback()
            self._log.bind(err=str(exc), product_id=product_id).error(
                "Error deleting product"
            )
            raise StorageError(f"Error deleting product {product_id}") from exc

        if row is None:
            self._log.bind(product_id=product_id).debug("Delete matched no product")

    def _set_image_urls(self, product_id: int, image_urls: list[str]) -> None:
        image = self._session.get(ProductImageTable, product_id)
        if image is None:
            image = ProductImageTable(product_id=product_id)
        image.image_url = list(image_urls)
        self._session.add(image)
        self._session.flush()

    def update_by_id(self, product: ProductUpdate, product_id: int) -> Product:
        """Overwrite the product's attributes and return the stored result.

        The existing row is fetched, updated, its image URLs replaced when the
        payload carries them, then re-read. All of it commits together or not
        at all.

        Raises:
            ProductNotFoundError: No product has this identifier.
            StorageError: Any statement failed; nothing was changed.
        """
        try:
            row = self._session.get(ProductTable, product_id)
            if row is None:
                raise ProductNotFoundError(product_id)

            row.name = product.name
            row.des = product.description
            row.price = product.price
            row.discount = product.discount
            row.available_quantity = product.available_quantity
            row.category_id = product.category_id
            self._session.add(row)
            self._session.flush()

            if product.image_urls is not None:
                self._set_image_urls(product_id, product.image_urls)

            updated = self._fetch(product_id)
            self._session.commit()
        except ProductNotFoundError:
            self._session.rollback()
            self._log.bind(product_id=product_id).info("Product to update not found")
            raise
        except SQLAlchemyError as exc:
            self._session.rollback()
            self._log.bind(err=str(exc), product_id=product_id).error(
                "Error updating product"
            )
            raise StorageError(f"Error updating product {product_id}") from exc

        return updated
