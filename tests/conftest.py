import pytest

from memorycards import create_app
from memorycards.extensions import db


@pytest.fixture
def app():
    app = create_app("testing")
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def ctx(app):
    """An application context for tests that call the models directly."""
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


def signup(client, name="Alice", email="alice@example.com", password="password1"):
    return client.post("/user/signup", data={
        "name": name, "email": email, "password": password,
    })


def login(client, email="alice@example.com", password="password1"):
    return client.post("/user/login", data={"email": email, "password": password})


@pytest.fixture
def auth_client(client):
    """A client with a signed-up, logged-in user."""
    signup(client)
    resp = login(client)
    assert resp.status_code == 303
    return client
