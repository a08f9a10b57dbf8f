# tests/conftest.py
import os
import tempfile

# Keep infra.db.base from touching the real per-user data dir.
os.environ.setdefault("PM_DATA_DIR", tempfile.mkdtemp(prefix="task-schedule-tests-"))

import pytest
from sqlalchemy.orm import sessionmaker

from infra.db.base import Base, make_engine
import infra.db.models  # noqa: F401
from infra.services import build_service_dict


@pytest.fixture
def session():
    # separate in-memory DB for tests
    engine = make_engine("sqlite:///:memory:")
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def services(session):
    return build_service_dict(session)
