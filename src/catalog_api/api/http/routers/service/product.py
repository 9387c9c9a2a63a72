"""Product API router.

Storage and validation failures are raised as domain errors and rendered
into the error envelope by the handlers registered on the application.
"""

from typing import Annotated

from fastapi import APIRouter, Body, Depends, Path, Response

from src.catalog_api.api.http.deps import get_product_repository
from src.catalog_api.api.http.schemas import DataEnvelope, ErrorEnvelope
from src.catalog_api.core.errors import InvalidProductError
from src.catalog_api.entities.service.product import (
    INT64_MAX,
    INT64_MIN,
    Product,
    ProductRepository,
    ProductUpdate,
)

ProductId = Annotated[int, Path(ge=INT64_MIN, le=INT64_MAX)]

router = APIRouter(
    tags=["products"],
    responses={
        400: {"model": ErrorEnvelope, "description": "Invalid id, body or product data"},
        500: {"model": ErrorEnvelope, "description": "Storage failure"},
    },
)


@router.get("/products", response_model=DataEnvelope[list[Product]])
def list_products(
    repository: ProductRepository = Depends(get_product_repository),
) -> DataEnvelope[list[Product]]:
    """List all products."""
    return DataEnvelope[list[Product]](data=repository.list_all())


@router.get(
    "/product/{product_id}",
    response_model=DataEnvelope[Product],
    responses={404: {"model": ErrorEnvelope}},
)
def get_product(
    product_id: ProductId,
    repository: ProductRepository = Depends(get_product_repository),
) -> DataEnvelope[Product]:
    """Get a product by ID."""
    return DataEnvelope[Product](data=repository.get_by_id(product_id))


@router.delete("/product/{product_id}", response_class=Response)
def delete_product(
    product_id: ProductId,
    repository: ProductRepository = Depends(get_product_repository),
) -> Response:
    """Delete a product. Unknown identifiers are not an error."""
    repository.delete_by_id(product_id)
    return Response(status_code=200)


@router.put(
    "/product/{product_id}",
    response_model=DataEnvelope[Product],
    responses={404: {"model": ErrorEnvelope}},
)
def update_product(
    product_id: ProductId,
    product: ProductUpdate = Body(...),
    repository: ProductRepository = Depends(get_product_repository),
) -> DataEnvelope[Product]:
    """Validate the payload, update the product and return its stored state."""
    field_errors = product.validate_fields()
    if field_errors:
        raise InvalidProductError(field_errors)

    return DataEnvelope[Product](data=repository.update_by_id(product, product_id))
