"""Entity: Product.

The wire format keeps the catalog's historical JSON keys (``Name``, ``Des``,
``Available_quantity``, ...), so every field carries an alias and responses
are serialized by alias.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

# Integer columns are signed 64-bit
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ProductBase(BaseModel):
    """Attributes shared by stored products and update payloads."""

    # Amounts must be finite; 1e400 decodes to inf
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    name: str = Field(default="", alias="Name", description="Product name")
    description: str = Field(default="", alias="Des", description="Product description")
    price: float = Field(default=0, alias="Price", description="Unit price")
    discount: float = Field(default=0, alias="Discount", description="Discount amount")
    available_quantity: int = Field(
        default=0,
        ge=INT64_MIN,
        le=INT64_MAX,
        alias="Available_quantity",
        description="Units in stock",
    )
    category_id: int = Field(
        default=0,
        ge=INT64_MIN,
        le=INT64_MAX,
        alias="Category",
        description="Category identifier",
    )


class Product(ProductBase):
    """Product as read back from the store, joined with category and images."""

    id: int = Field(alias="Id", description="Unique identifier of the product")
    category_name: str | None = Field(
        default=None, alias="Category_Name", description="Name of the joined category"
    )
    image_urls: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("ProductImage_url", "image_urls"),
        serialization_alias="ProductImage_url",
        description="Image URLs of the product",
    )


class ProductUpdate(ProductBase):
    """Payload of a product update.

    Fields missing from the request body decode to zero values, so an omitted
    name is reported by validation rather than rejected by the decoder.
    ``image_urls`` left as ``None`` keeps the stored images untouched.
    """

    image_urls: list[str] | None = Field(
        default=None,
        validation_alias=AliasChoices("ProductImage_url", "PrdouctImage_url", "image_urls"),
        serialization_alias="ProductImage_url",
    )

    def validate_fields(self) -> dict[str, str]:
        """Check every field rule and return a field -> message mapping.

        All violations are reported together; the payload is valid when the
        mapping is empty.
        """
        field_errors: dict[str, str] = {}

        if not self.name.strip():
            field_errors["name"] = "Can't be blank Name"

        if not self.description.strip():
            field_errors["description"] = "Can't be blank Description"

        if self.price < 0:
            field_errors["price"] = "Can't be Price less than zero"

        if self.discount < 0:
            field_errors["discount"] = "Can't be Discount less than zero"

        if self.available_quantity < 0:
            field_errors["available_quantity"] = (
                "Can't be Available_quantity less than zero"
            )

        return field_errors

    def is_valid(self) -> bool:
        return not self.validate_fields()
