from .database.db_manage import DbManageService
from .database.db_session import DbSessionService, build_engine

__all__ = ["DbManageService", "DbSessionService", "build_engine"]
