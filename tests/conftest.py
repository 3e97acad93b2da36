import pytest

from app import create_app


@pytest.fixture
def flask_app():
    app = create_app()
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(flask_app):
    return flask_app.test_client()
