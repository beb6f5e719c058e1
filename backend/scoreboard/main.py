import os

from flask import Blueprint, current_app, jsonify

from scoreboard import rooms

main = Blueprint('main', __name__)


@main.route('/')
def index():
    static_folder = current_app.static_folder
    if static_folder and os.path.isfile(os.path.join(static_folder, 'index.html')):
        return current_app.send_static_file('index.html')
    return jsonify({'message': 'Welcome to the scoreboard relay!'})


@main.route('/health')
def health():
    # Membership counts only; the relay holds no grid state
    return jsonify({
        'status': 'ok',
        'connections': rooms.connection_count(),
        'rooms': rooms.snapshot(),
    })
