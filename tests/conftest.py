import os
import tempfile
import uuid

# settings are read at import time, point everything at throwaway locations first
_scratch = tempfile.mkdtemp(prefix="lecturer-portal-tests-")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_DIR", os.path.join(_scratch, "logs"))
os.environ.setdefault("STATIC_DIR", os.path.join(_scratch, "static"))
os.environ.setdefault("STORAGE_DIR", os.path.join(_scratch, "static", "storage"))

import pytest
from sqlalchemy.orm import sessionmaker

from lecturer_portal.client import PortalClient
from lecturer_portal.database import Base, make_engine
from lecturer_portal.models.registry import AuthUser
from lecturer_portal.storage import BlobStore


@pytest.fixture
def engine(tmp_path):
    eng = make_engine(f"sqlite:///{tmp_path / 'portal.db'}")
    Base.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def make_lecturer(session_factory):
    """Create an auth identity (and through the signup hook, its profile)."""

    def _make(full_name="Ada Lovelace", email=None):
        db = session_factory()
        try:
            user = AuthUser(
                email=email or f"{uuid.uuid4().hex[:8]}@uni.test",
                password_hash="not-a-real-hash",
                user_metadata={"full_name": full_name} if full_name else {},
            )
            db.add(user)
            db.commit()
            return user.id
        finally:
            db.close()

    return _make


@pytest.fixture
def make_client(session_factory):
    sessions = []

    def _make(identity):
        db = session_factory()
        sessions.append(db)
        return PortalClient(db, identity)

    yield _make
    for db in sessions:
        db.close()


@pytest.fixture
def lecturer(make_lecturer):
    return make_lecturer("Ada Lovelace")


@pytest.fixture
def other_lecturer(make_lecturer):
    return make_lecturer("Grace Hopper")


@pytest.fixture
def client(make_client, lecturer):
    return make_client(lecturer)


@pytest.fixture
def other_client(make_client, other_lecturer):
    return make_client(other_lecturer)


@pytest.fixture
def store(tmp_path):
    return BlobStore(tmp_path / "blobs", "/static/storage")


@pytest.fixture
def anyio_backend():
    return "asyncio"


def student_fields(**overrides):
    fields = {
        "student_name": "Jane Doe",
        "student_email": "jane@uni.test",
        "student_id": "S-001",
        "class": "CS101",
        "phone": None,
    }
    fields.update(overrides)
    return fields
