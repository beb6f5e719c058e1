import pytest

from scoreboard import create_app, rooms


def test_index_without_public_folder(client):
    res = client.get('/')
    assert res.status_code == 200
    assert 'message' in res.get_json()


def test_index_serves_built_client(config_class, tmp_path):
    (tmp_path / 'index.html').write_text('<html><body>scoreboard</body></html>')
    (tmp_path / 'app.js').write_text('console.log("hi")')
    cfg = type('PublicConfig', (config_class,), {'PUBLIC_FOLDER': str(tmp_path)})
    application = create_app(cfg)
    test_client = application.test_client()

    res = test_client.get('/')
    assert res.status_code == 200
    assert b'scoreboard' in res.data

    res = test_client.get('/app.js')
    assert res.status_code == 200
    rooms.clear()


def test_health_reports_membership(client, connect):
    assert client.get('/health').get_json() == {'status': 'ok', 'connections': 0, 'rooms': {}}
    a, b = connect(), connect()
    # Connected sockets count even before they join anything
    assert client.get('/health').get_json()['connections'] == 2
    a.emit('joinRoom', 'masa1')
    b.emit('joinRoom', 'masa2')
    b.emit('joinRoom', 'masa1')
    body = client.get('/health').get_json()
    assert body['connections'] == 2
    assert body['rooms'] == {'masa1': 2, 'masa2': 1}


@pytest.mark.parametrize('origin, allowed', [
    ('http://localhost:5173', True),
    ('http://evil.example', False),
])
def test_cors_single_origin(client, origin, allowed):
    res = client.get('/health', headers={'Origin': origin})
    assert (res.headers.get('Access-Control-Allow-Origin') == origin) is allowed


def test_serve_command_is_registered(flask_app):
    assert 'serve' in flask_app.cli.commands
