"""Database engine and session management."""

from collections.abc import Generator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from restoman.db.base import Base


class Database:
    """Engine plus session factory built once by the application factory."""

    def __init__(self, database_url: str | None = None, *, engine: Engine | None = None) -> None:
        if engine is None:
            if database_url is None:
                raise ValueError("database_url or engine is required")
            connect_args: dict[str, bool] = {}
            if database_url.startswith("sqlite"):
                connect_args["check_same_thread"] = False
            engine = create_engine(database_url, connect_args=connect_args)
        self.engine: Engine = engine
        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def init_schema(self) -> None:
        """Register every model table and create missing ones."""
        # Importing the package populates Base.metadata.
        import restoman.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Generator[Session, None, None]:
    """Yield a database session and ensure proper cleanup."""
    database: Database = request.app.state.db
    db: Session = database.session_factory()
    try:
        yield db
    finally:
        db.close()
