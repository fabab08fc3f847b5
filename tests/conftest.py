import os
import tempfile
import pytest

os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="tubeshare-public-"))

from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from tubeshare.main import app
from tubeshare.api.dependencies import get_storage
from tubeshare.core.storage import UploadStorage
from tubeshare.db.base import Base, import_models
from tubeshare.db.session import build_engine, get_db


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "public"


@pytest.fixture
def db_session_factory(tmp_path):
    """
    Fresh SQLite database per test.
    """
    engine = build_engine(f"sqlite:///{tmp_path / 'test.db'}")
    import_models()
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    engine.dispose()


@pytest.fixture
def db_session(db_session_factory):
    session = db_session_factory()
    yield session
    session.close()


@pytest.fixture
def client(db_session_factory, upload_dir):
    def override_get_db():
        db = db_session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storage] = lambda: UploadStorage(str(upload_dir))
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def register(client):
    """
    Returns a helper that registers a user and gives back (response body, auth headers).
    """
    counter = {"n": 0}

    def _register(first_name="Ada", last_name="Lovelace", email=None, password="secret123"):
        counter["n"] += 1
        email = email or f"user{counter['n']}@example.com"
        response = client.post("/register", json={
            "firstName": first_name,
            "lastName": last_name,
            "email": email,
            "password": password,
        })
        assert response.status_code == 200, response.text
        body = response.json()
        return body, {"Authorization": body["token"]}

    return _register


@pytest.fixture
def upload(client):
    """
    Returns a helper that uploads a small video for the given auth headers.
    """
    def _upload(headers, title="My first video", description="Hello", filename="clip.mp4", thumbnail=None):
        data = {"title": title, "description": description}
        if thumbnail is not None:
            data["thumbnail"] = thumbnail
        response = client.post(
            "/video",
            data=data,
            files={"url": (filename, b"\x00\x00\x00\x18ftypmp42", "video/mp4")},
            headers=headers,
        )
        assert response.status_code == 200, response.text
        return response.json()

    return _upload
