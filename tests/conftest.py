"""Pytest fixtures: a throwaway SQLite file, recreated for every test."""
import os
import tempfile
from datetime import date, timedelta

import pytest

# The database module reads DATABASE_PATH at import time
_tmpdir = tempfile.mkdtemp(prefix="weddingplanner-tests-")
os.environ["DATABASE_PATH"] = os.path.join(_tmpdir, "test.db")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from weddingplanner.app import app  # noqa: E402
from weddingplanner.database import database, get_models  # noqa: E402


@pytest.fixture(autouse=True)
def clean_db():
    """Drop and recreate every table so each test starts empty."""
    models = get_models()
    # A request that failed mid-test can leave its connection open and the file locked
    if not database.is_closed():
        database.close()
    with database.connection_context():
        database.drop_tables(models)
        database.create_tables(models)
    yield
    if not database.is_closed():
        database.close()


@pytest.fixture()
def flask_app():
    app.config["TESTING"] = True
    return app


@pytest.fixture()
def client(flask_app):
    """One browser session."""
    return flask_app.test_client()


@pytest.fixture()
def make_client(flask_app):
    """Factory for extra browser sessions, one per simulated user."""
    def _make():
        return flask_app.test_client()
    return _make


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def register(client, email="a@x.com", password="password1", confirm=None,
             first_name="Ada", last_name="Lovelace"):
    """POST the registration form."""
    return client.post("/users/create", data={
        "first_name": first_name,
        "last_name": last_name,
        "email": email,
        "password": password,
        "confirm_password": password if confirm is None else confirm,
    })


def login(client, email="a@x.com", password="password1"):
    return client.post("/login", data={"email": email, "password": password})


def logout(client):
    return client.post("/logout")


def create_wedding(client, days_ahead=1, **overrides):
    """POST the wedding form with a date `days_ahead` days from today."""
    data = {
        "nearlywed_one": "Romeo",
        "nearlywed_two": "Juliet",
        "date": (date.today() + timedelta(days=days_ahead)).isoformat(),
        "address": "1 Balcony Lane, Verona",
    }
    data.update(overrides)
    return client.post("/weddings/create", data=data)


def commit(client, wedding_id):
    return client.post("/commitments/create", data={"wedding_id": str(wedding_id)})
