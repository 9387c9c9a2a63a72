"""Category database table model."""

from sqlmodel import Field, SQLModel


class CategoryTable(SQLModel, table=True):
    """Persistence model for product categories.

    Categories are maintained outside the API; products only join against
    them to surface a readable category name.
    """

    __tablename__ = "category"

    category_id: int | None = Field(default=None, primary_key=True)
    category_name: str
