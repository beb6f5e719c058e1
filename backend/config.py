import os

basedir = os.path.abspath(os.path.dirname(__file__))


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    HOST = os.environ.get('SCOREBOARD_HOST', '0.0.0.0')
    PORT = int(os.environ.get('SCOREBOARD_PORT', '3089'))
    # Single origin allowed for cross-origin HTTP and Socket.IO access
    CORS_ORIGIN = os.environ.get('SCOREBOARD_CORS_ORIGIN', 'http://localhost:5173')
    SOCKETIO_NAMESPACE = os.environ.get('SCOREBOARD_NAMESPACE', '/')
    # Built client assets, served at /
    PUBLIC_FOLDER = os.environ.get('SCOREBOARD_PUBLIC_FOLDER') or os.path.join(basedir, 'public')
    # When False, leaveRoom is accepted but membership persists until disconnect
    HONOR_LEAVE_ROOM = _env_flag('SCOREBOARD_HONOR_LEAVE_ROOM', True)
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    SOCKETIO_LOGGER = _env_flag('SOCKETIO_LOGGER', False)
    ENGINEIO_LOGGER = _env_flag('ENGINEIO_LOGGER', False)
