"""Database initialization and seeding."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from src.catalog_api.core.services.database.db_manage import DbManageService
from src.catalog_api.entities.service.category import CategoryTable
from src.catalog_api.entities.service.product import ProductImageTable, ProductTable


class SeedCategory(BaseModel):
    category_id: int
    category_name: str


class SeedProduct(BaseModel):
    id: int
    name: str
    des: str
    price: float = 0
    discount: float = 0
    available_quantity: int = 0
    category_id: int
    image_urls: list[str] | None = None


class SeedData(BaseModel):
    """Shape of a seed file: categories first, then products referencing them."""

    categories: list[SeedCategory] = Field(default_factory=list)
    products: list[SeedProduct] = Field(default_factory=list)


def load_seed_file(path: Path) -> SeedData:
    with open(path) as f:
        loaded = yaml.safe_load(f) or {}
    return SeedData.model_validate(loaded)


def init_db(db_manage_service: DbManageService | None = None) -> None:
    """Create all database tables."""
    (db_manage_service or DbManageService()).create_all()


def seed_db(path: Path, db_manage_service: DbManageService | None = None) -> dict[str, int]:
    """Create tables, then load the records of the seed file at ``path``."""
    service = db_manage_service or DbManageService()
    data = load_seed_file(path)
    service.create_all()
    return service.seed(
        categories=[CategoryTable(**c.model_dump()) for c in data.categories],
        products=[
            ProductTable(**p.model_dump(exclude={"image_urls"})) for p in data.products
        ],
        images=[
            ProductImageTable(product_id=p.id, image_url=p.image_urls)
            for p in data.products
            if p.image_urls is not None
        ],
    )


if __name__ == "__main__":
    init_db()
