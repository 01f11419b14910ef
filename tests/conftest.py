import os
import tempfile

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

_public_dir = tempfile.mkdtemp(prefix='blog-public-')
os.environ.setdefault('DATABASE_URL', 'sqlite://')
os.environ.setdefault('JWT_SECRET', 'test-secret')
os.environ.setdefault('BCRYPT_ROUNDS', '4')
os.environ.setdefault('PUBLIC_DIR', _public_dir)
os.environ.setdefault('UPLOAD_DIR', os.path.join(_public_dir, 'Images'))

from fastapi.testclient import TestClient  # noqa: E402

from backend.core import config  # noqa: E402
from backend.database import Base, get_db  # noqa: E402
from backend.main import app  # noqa: E402
from backend.models.post import Post  # noqa: E402
from backend.models.user import User  # noqa: E402


@pytest.fixture
def blog_db():
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine, tables=[User.__table__, Post.__table__])

    db = testing_session_local()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine, tables=[Post.__table__, User.__table__])


@pytest.fixture
def upload_dir(tmp_path, monkeypatch: pytest.MonkeyPatch):
    directory = tmp_path / 'Images'
    monkeypatch.setattr(config, 'UPLOAD_DIR', str(directory))
    return directory


@pytest.fixture
def client(blog_db, upload_dir):
    def override_get_db():
        yield blog_db

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def register_and_login(client):
    def _register_and_login(email: str = 'a@x.com', password: str = 'pw', name: str = 'A'):
        client.post('/', json={'name': name, 'email': email, 'password': password})
        return client.post('/login', json={'email': email, 'password': password})

    return _register_and_login
