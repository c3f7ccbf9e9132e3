import pytest

from articlehub import create_app
from articlehub.extensions import db
from articlehub.store import get_store


@pytest.fixture
def app(tmp_path):
    app = create_app("testing", {"PUBLIC_FOLDER": str(tmp_path / "public")})
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    with app.app_context():
        yield get_store()


@pytest.fixture
def author(store):
    return store.upsert_author("Misbakhul Munir")
