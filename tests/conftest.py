import pytest

from app import create_app


@pytest.fixture
def app():
    return create_app({"TESTING": True, "CALENDAR_DEFAULT_MONTH": "2017-03"})


@pytest.fixture
def client(app):
    return app.test_client()
