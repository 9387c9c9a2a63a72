"""FastAPI dependency implementations."""

from collections.abc import Iterator

from fastapi import Depends, Request
from loguru import logger
from sqlmodel import Session

from src.catalog_api.api.http.app_data import ApplicationDependencies
from src.catalog_api.entities.service.product import ProductRepository


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a request-scoped database session, closed after the response."""
    app_deps = get_app_dependencies(request)
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_product_repository(
    session: Session = Depends(get_db_session),
) -> ProductRepository:
    return ProductRepository(session, log=logger)
