from inventario.database.base import Base
from inventario.database.engine import create_db_engine, engine, ensure_database_dir, init_schema
from inventario.database.session import SessionLocal, build_session_factory, get_db

__all__ = [
    "Base",
    "SessionLocal",
    "build_session_factory",
    "create_db_engine",
    "engine",
    "ensure_database_dir",
    "get_db",
    "init_schema",
]
