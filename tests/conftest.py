from unittest.mock import patch

import pytest

from parish.models import User
from parish.models import db as _db


@pytest.fixture(scope="session")
def app():
    """Create a Flask application configured for testing (session-scoped)."""
    with (
        patch("parish.upgrade"),
        patch("parish._seed_admin_if_needed"),
    ):
        from parish import create_app

        _app = create_app("testing")

    yield _app


@pytest.fixture(autouse=True)
def db(app):
    """Create all tables before each test, drop them after."""
    with app.app_context():
        _db.create_all()
        yield _db
        _db.session.remove()
        _db.drop_all()


@pytest.fixture()
def client(app):
    """Unauthenticated test client."""
    return app.test_client()


def _make_user(
    email="viewer@example.org",
    password="ViewerPass1",
    role="viewer",
    display_name="Parish Volunteer",
    is_active_account=True,
):
    """Create and persist a User. Callable multiple times per test."""
    user = User(
        email=email,
        display_name=display_name,
        role=role,
        is_active_account=is_active_account,
    )
    user.set_password(password)
    _db.session.add(user)
    _db.session.commit()
    return user


def _login(client, email="viewer@example.org", password="ViewerPass1"):
    """Log in via the real JSON login route and return the response."""
    return client.post("/api/auth/login", json={"email": email, "password": password})


@pytest.fixture()
def viewer(db):
    return _make_user()


@pytest.fixture()
def admin_user(db):
    return _make_user(
        email="rector@example.org",
        password="AdminPass1",
        role="admin",
        display_name="Parish Rector",
    )


@pytest.fixture()
def viewer_client(client, viewer):
    """A test client logged in as a viewer."""
    _login(client, viewer.email, "ViewerPass1")
    return client


@pytest.fixture()
def admin_client(client, admin_user):
    """A test client logged in as an admin."""
    _login(client, admin_user.email, "AdminPass1")
    return client
