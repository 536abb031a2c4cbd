from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, sessionmaker

from products_api.config import Settings
from products_api.models.database_models import Base
from products_api.utils.logging import get_logger

logger = get_logger(__name__)


class Database:
    """Owns the engine and session factory for one application instance"""

    def __init__(self, settings: Settings):
        options = dict(settings.engine_options)
        if settings.database_url.startswith("sqlite"):
            options.setdefault("connect_args", {"check_same_thread": False})

        self.engine = create_engine(
            settings.database_url, echo=settings.sql_echo, **options
        )
        self.sessionLocal = sessionmaker(
            autocommit=False, autoflush=False, bind=self.engine
        )

    def connect(self) -> bool:
        """Check the connection and create missing tables.

        Failures are logged and reported through the return value so the
        process keeps serving (requests will then fail individually).
        """
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            Base.metadata.create_all(self.engine)
            logger.info("Database connection established")
            return True
        except Exception as e:
            logger.error("Could not connect to the database: {}", e)
            return False

    def reset(self):
        """Drop and recreate every table"""
        Base.metadata.drop_all(self.engine)
        Base.metadata.create_all(self.engine)

    def dispose(self):
        self.engine.dispose()

    def session(self) -> Session:
        return self.sessionLocal()


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
