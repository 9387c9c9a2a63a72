"""Product database table models."""

import json
from typing import Any

from sqlalchemy import Column, Text
from sqlalchemy.types import TypeDecorator
from sqlmodel import Field, SQLModel


class JSONEncodedList(TypeDecorator):
    """A list of strings stored as JSON-encoded text."""

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Any) -> str | None:
        if value is None:
            return None
        return json.dumps(list(value))

    def process_result_value(self, value: Any, dialect: Any) -> list[str] | None:
        if value is None or value == "":
            return None
        return json.loads(value)


class ProductTable(SQLModel, table=True):
    """Database persistence model for products.

    Column names follow the existing catalog schema, hence ``des`` for the
    description.
    """

    __tablename__ = "products"

    id: int | None = Field(default=None, primary_key=True)
    name: str
    des: str
    price: float = 0
    discount: float = 0
    available_quantity: int = 0
    category_id: int = Field(foreign_key="category.category_id")


class ProductImageTable(SQLModel, table=True):
    """Image URLs of a product, one row per product."""

    __tablename__ = "productimage"

    product_id: int = Field(primary_key=True, foreign_key="products.id")
    image_url: list[str] | None = Field(
        default=None, sa_column=Column(JSONEncodedList)
    )
