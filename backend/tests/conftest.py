import os
import sys
import pytest

# Ensure the backend root (containing the `scoreboard` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from scoreboard import create_app, rooms, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    HOST = '127.0.0.1'
    PORT = 3089
    CORS_ORIGIN = 'http://localhost:5173'
    SOCKETIO_NAMESPACE = '/'
    PUBLIC_FOLDER = os.path.join(CURRENT_DIR, 'no-public-folder')
    HONOR_LEAVE_ROOM = True
    LOG_LEVEL = 'DEBUG'


@pytest.fixture()
def config_class():
    return TestConfig


@pytest.fixture()
def flask_app(config_class):
    application = create_app(config_class)
    with application.app_context():
        yield application
    rooms.clear()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def connect(flask_app):
    """Factory for Socket.IO test clients; all are disconnected on teardown."""
    opened = []

    def _connect():
        test_client = socketio.test_client(
            flask_app,
            flask_test_client=flask_app.test_client(),
        )
        assert test_client.is_connected()
        opened.append(test_client)
        return test_client

    yield _connect
    for test_client in opened:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except Exception:
            pass


@pytest.fixture()
def sio_client(connect):
    return connect()
