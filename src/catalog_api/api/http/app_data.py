from dataclasses import dataclass

from src.catalog_api.core.services import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
