"""Unit tests for ProductRepository against an in-memory SQLite database."""

from unittest.mock import Mock

import pytest
from sqlalchemy.exc import OperationalError
from sqlmodel import Session

from src.catalog_api.core.errors import ProductNotFoundError, StorageError
from src.catalog_api.entities.service.category import CategoryTable
from src.catalog_api.entities.service.product import (
    Product,
    ProductImageTable,
    ProductRepository,
    ProductTable,
    ProductUpdate,
)
from tests.fixtures.core import PEN_IMAGES


def _payload(**overrides) -> ProductUpdate:
    fields = {
        "name": "Gel Pen",
        "description": "Black gel pen",
        "price": 2.0,
        "discount": 0.25,
        "available_quantity": 7,
        "category_id": 2,
    }
    fields.update(overrides)
    return ProductUpdate(**fields)


def _db_failure() -> OperationalError:
    return OperationalError("UPDATE productimage", {}, Exception("disk I/O error"))


class TestListAll:
    def test_empty_store(self, session: Session):
        assert ProductRepository(session).list_all() == []

    def test_ordered_by_name(self, repository: ProductRepository, seeded_session: Session):
        seeded_session.add(
            ProductTable(id=2, name="Eraser", des="White eraser", category_id=1)
        )
        seeded_session.add(
            ProductTable(id=3, name="Stapler", des="Metal stapler", category_id=2)
        )
        seeded_session.commit()

        names = [product.name for product in repository.list_all()]

        assert names == ["Eraser", "Pen", "Stapler"]

    def test_includes_products_without_images(
        self, repository: ProductRepository, seeded_session: Session
    ):
        seeded_session.add(ProductTable(id=2, name="Eraser", des="White", category_id=1))
        seeded_session.commit()

        eraser = next(p for p in repository.list_all() if p.id == 2)

        assert eraser.image_urls == []
        assert eraser.category_name == "Stationery"

    def test_query_failure_raises_storage_error(
        self, repository: ProductRepository, seeded_session: Session, monkeypatch
    ):
        def failing_exec(*args, **kwargs):
            raise _db_failure()

        monkeypatch.setattr(seeded_session, "exec", failing_exec)

        with pytest.raises(StorageError):
            repository.list_all()


class TestGetById:
    def test_returns_joined_product(self, repository: ProductRepository):
        product = repository.get_by_id(1)

        assert isinstance(product, Product)
        assert product.id == 1
        assert product.name == "Pen"
        assert product.description == "Blue pen"
        assert product.price == 1.5
        assert product.discount == 0
        assert product.available_quantity == 10
        assert product.category_id == 1
        assert product.category_name == "Stationery"
        assert product.image_urls == PEN_IMAGES

    def test_missing_product_raises_not_found(self, repository: ProductRepository):
        with pytest.raises(ProductNotFoundError) as exc_info:
            repository.get_by_id(999)

        assert exc_info.value.product_id == 999
        # Callers that only know about storage failures still catch it
        assert isinstance(exc_info.value, StorageError)

    def test_unknown_category_leaves_name_empty(
        self, repository: ProductRepository, seeded_session: Session
    ):
        seeded_session.add(ProductTable(id=5, name="Mystery", des="?", category_id=42))
        seeded_session.commit()

        product = repository.get_by_id(5)

        assert product.category_id == 42
        assert product.category_name is None


class TestUpdateById:
    def test_updates_and_returns_stored_state(self, repository: ProductRepository):
        updated = repository.update_by_id(_payload(), 1)

        assert updated.id == 1
        assert updated.name == "Gel Pen"
        assert updated.description == "Black gel pen"
        assert updated.price == 2.0
        assert updated.discount == 0.25
        assert updated.available_quantity == 7
        assert updated.category_id == 2
        assert updated.category_name == "Office Furniture"
        assert repository.get_by_id(1) == updated

    def test_keeps_images_when_payload_has_none(self, repository: ProductRepository):
        updated = repository.update_by_id(_payload(image_urls=None), 1)

        assert updated.image_urls == PEN_IMAGES

    def test_replaces_images(self, repository: ProductRepository):
        updated = repository.update_by_id(_payload(image_urls=["new.jpg"]), 1)

        assert updated.image_urls == ["new.jpg"]

    def test_creates_missing_image_row(
        self, repository: ProductRepository, seeded_session: Session
    ):
        seeded_session.add(ProductTable(id=2, name="Eraser", des="White", category_id=1))
        seeded_session.commit()

        updated = repository.update_by_id(
            _payload(name="Eraser", image_urls=["eraser.jpg"]), 2
        )

        assert updated.image_urls == ["eraser.jpg"]
        assert seeded_session.get(ProductImageTable, 2) is not None

    def test_is_idempotent(self, repository: ProductRepository):
        payload = _payload(image_urls=["a.jpg", "b.jpg"])

        first = repository.update_by_id(payload, 1)
        second = repository.update_by_id(payload, 1)

        assert first == second

    def test_missing_product_raises_not_found(self, repository: ProductRepository):
        with pytest.raises(ProductNotFoundError):
            repository.update_by_id(_payload(), 999)

    def test_failure_rolls_back_every_statement(
        self, repository: ProductRepository, monkeypatch
    ):
        """A failing image update must not leave the product row half-updated."""

        def failing_set_image_urls(product_id, image_urls):
            raise _db_failure()

        monkeypatch.setattr(repository, "_set_image_urls", failing_set_image_urls)

        with pytest.raises(StorageError):
            repository.update_by_id(_payload(image_urls=["new.jpg"]), 1)

        product = repository.get_by_id(1)
        assert product.name == "Pen"
        assert product.category_id == 1
        assert product.image_urls == PEN_IMAGES


class TestDeleteById:
    def test_delete_then_get_fails(self, repository: ProductRepository):
        repository.delete_by_id(1)

        with pytest.raises(ProductNotFoundError):
            repository.get_by_id(1)

    def test_removes_image_row(
        self, repository: ProductRepository, seeded_session: Session
    ):
        repository.delete_by_id(1)

        assert seeded_session.get(ProductImageTable, 1) is None
        # Categories are not owned by products
        assert seeded_session.get(CategoryTable, 1) is not None

    def test_missing_product_is_not_an_error(self, repository: ProductRepository):
        repository.delete_by_id(999)

        assert [p.id for p in repository.list_all()] == [1]

    def test_commit_failure_raises_storage_error(
        self, repository: ProductRepository, seeded_session: Session, monkeypatch
    ):
        def failing_commit():
            raise _db_failure()

        monkeypatch.setattr(seeded_session, "commit", failing_commit)

        with pytest.raises(StorageError):
            repository.delete_by_id(1)

        monkeypatch.undo()
        assert repository.get_by_id(1).name == "Pen"


class TestLogging:
    def test_errors_are_reported_to_injected_logger(self, seeded_session: Session):
        log = Mock()
        repository = ProductRepository(seeded_session, log=log)
        bound = log.bind.return_value

        def failing_exec(*args, **kwargs):
            raise _db_failure()

        seeded_session.exec = failing_exec  # type: ignore[method-assign]
        try:
            with pytest.raises(StorageError):
                repository.get_by_id(1)
        finally:
            del seeded_session.exec

        log.bind.assert_called_once_with(component="product_repository")
        context = bound.bind.call_args.kwargs
        assert context["product_id"] == 1
        assert "disk I/O error" in context["err"]
        bound.bind.return_value.error.assert_called_once()
