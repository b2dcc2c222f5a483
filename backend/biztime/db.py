from collections.abc import Iterator

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase, Session


class Base(DeclarativeBase):
    pass


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # sqlite só aplica FK (e ON DELETE CASCADE) com o pragma ligado por conexão
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Engine + session factory with an explicit open/close lifecycle.

    One instance lives on ``app.state.db`` between startup and shutdown;
    routes reach it only through the ``get_db`` dependency.
    """

    def __init__(self, url: str, echo: bool = False):
        self._is_sqlite = url.startswith("sqlite")
        self.engine: Engine = create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False} if self._is_sqlite else {},
        )
        if self._is_sqlite:
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        self.SessionLocal = sessionmaker(bind=self.engine, autocommit=False, autoflush=False)

    def create_all(self) -> None:
        # registra os models no metadata antes do create_all
        import biztime.models.company  # noqa: F401
        import biztime.models.invoice  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self) -> None:
        self.engine.dispose()


# dependency padrão FastAPI
def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.db.session()
    try:
        yield db
    finally:
        db.close()
