"""Schema creation and development seeding."""

from collections.abc import Iterable

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel

from src.catalog_api.core.services.database.db_session import build_engine
from src.catalog_api.entities.service.category import CategoryTable
from src.catalog_api.entities.service.product import ProductImageTable, ProductTable
from src.catalog_api.runtime.context import get_config


class DbManageService:
    def __init__(self, engine: Engine | None = None):
        self._engine = engine if engine is not None else build_engine(get_config())

    def create_all(self) -> None:
        """Create all database tables."""
        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def seed(
        self,
        categories: Iterable[CategoryTable],
        products: Iterable[ProductTable],
        images: Iterable[ProductImageTable],
    ) -> dict[str, int]:
        """Insert or replace the given rows in one transaction.

        Rows are merged on their primary key, so seeding the same file twice
        leaves one copy of every record.
        """
        counts = {"categories": 0, "products": 0, "images": 0}
        with Session(self._engine) as session:
            for category in categories:
                session.merge(category)
                counts["categories"] += 1
            for product in products:
                session.merge(product)
                counts["products"] += 1
            for image in images:
                session.merge(image)
                counts["images"] += 1
            session.commit()

        logger.bind(**counts).info("Database seeded")
        return counts
