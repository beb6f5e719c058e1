from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from config import Config
from scoreboard.rooms import RoomRegistry

socketio = SocketIO(async_mode=None)
rooms = RoomRegistry()


def create_app(config_class=Config):
    # Serve the built client straight from the public folder, like a static host
    public_folder = getattr(config_class, 'PUBLIC_FOLDER', None)
    flask_app = Flask(__name__, static_folder=public_folder, static_url_path='')
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    origin = flask_app.config['CORS_ORIGIN']
    CORS(flask_app, origins=[origin])

    # The Socket.IO server enforces the same single origin on its handshake
    socketio.init_app(
        flask_app,
        cors_allowed_origins=[origin],
        logger=flask_app.config.get('SOCKETIO_LOGGER', False),
        engineio_logger=flask_app.config.get('ENGINEIO_LOGGER', False),
    )
    rooms.init_app(flask_app)

    from scoreboard.main import main
    flask_app.register_blueprint(main)

    from scoreboard.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace=flask_app.config.get('SOCKETIO_NAMESPACE', '/'))

    @click.command('serve')
    @click.option('--host', default=None, help='Interface to bind (defaults to HOST).')
    @click.option('--port', default=None, type=int, help='Port to listen on (defaults to PORT).')
    @click.option('--debug/--no-debug', default=False)
    def serve_command(host, port, debug):
        """Runs the relay with the Socket.IO server."""
        host = host or flask_app.config['HOST']
        port = port or flask_app.config['PORT']
        flask_app.logger.info(f"[startup] relay listening on {host}:{port} origin={origin}")
        socketio.run(flask_app, host=host, port=port, debug=debug, allow_unsafe_werkzeug=True)

    flask_app.cli.add_command(serve_command)

    return flask_app
