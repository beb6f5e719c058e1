from collections.abc import Mapping
from typing import Any, Optional

from flask import current_app, request
from flask_socketio import emit, join_room, leave_room

from scoreboard import rooms, socketio


def _get_sid() -> str:
    # request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _room_name(value: Any) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None


def handle_connect(auth=None):
    rooms.connect(_get_sid())
    current_app.logger.info(f"[connect] sid={_get_sid()}")


def handle_disconnect(reason=None):
    # The Socket.IO server already dropped its own room entries for this sid
    sid = _get_sid()
    left = rooms.drop(sid)
    current_app.logger.info(f"[disconnect] sid={sid} rooms={sorted(left)} reason={reason}")


def handle_join_room(room=None):
    name = _room_name(room)
    if name is None:
        current_app.logger.debug(f"[ignored] joinRoom sid={_get_sid()} room={room!r}")
        return
    join_room(name)
    added = rooms.join(_get_sid(), name)
    current_app.logger.info(
        f"[join] sid={_get_sid()} room={name} members={len(rooms.members(name))} new={added}"
    )


def handle_leave_room(room=None):
    name = _room_name(room)
    if name is None:
        current_app.logger.debug(f"[ignored] leaveRoom sid={_get_sid()} room={room!r}")
        return
    if not current_app.config.get('HONOR_LEAVE_ROOM', True):
        # Accepted but membership stays until the connection closes
        current_app.logger.info(f"[leave] sid={_get_sid()} room={name} kept=until-disconnect")
        return
    leave_room(name)
    removed = rooms.leave(_get_sid(), name)
    current_app.logger.info(f"[leave] sid={_get_sid()} room={name} removed={removed}")


def handle_send_data(payload=None):
    """Re-emit the payload verbatim as receiveData to every member of its room.

    The sender gets its own copy too. Only ``room`` is read; ``data`` is
    passed through untouched and never kept.
    """
    if not isinstance(payload, Mapping):
        current_app.logger.debug(f"[ignored] sendData sid={_get_sid()} payload is {type(payload).__name__}")
        return
    name = _room_name(payload.get('room'))
    if name is None:
        current_app.logger.debug(f"[ignored] sendData sid={_get_sid()} without room")
        return
    emit('receiveData', payload, to=name)
    current_app.logger.info(
        f"[broadcast] sid={_get_sid()} room={name} recipients={len(rooms.members(name))}"
    )


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register the relay's Socket.IO event handlers on ``namespace``.

    Event names match the ones the browser clients already speak:
    joinRoom, leaveRoom, sendData (in) and receiveData (out).
    """
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('joinRoom', handle_join_room, namespace=namespace)
    socketio.on_event('leaveRoom', handle_leave_room, namespace=namespace)
    socketio.on_event('sendData', handle_send_data, namespace=namespace)
