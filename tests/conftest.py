"""
Tests run against an in-memory SQLite store with foreign keys switched on.
DB_URL is set before liftlog is imported so nothing reaches for Postgres.
"""
import os
os.environ.setdefault("DB_URL", "sqlite+pysqlite:///:memory:")

import uuid
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from liftlog import models  # noqa: F401  # registers tables on Base.metadata
from liftlog.db import Base, get_db, make_engine
from liftlog.main import app


@pytest.fixture
def engine():
    eng = make_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(eng)
    yield eng
    Base.metadata.drop_all(eng)
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    s = session_factory()
    yield s
    s.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        s = session_factory()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def uniq_email(prefix="u"):
    return f"{prefix}-{uuid.uuid4().hex[:8]}@ex.com"
