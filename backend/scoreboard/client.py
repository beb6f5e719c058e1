import logging
from typing import Any, Callable, Dict, List, Optional

import socketio

from scoreboard.services.grid import apply_row_edit, new_grid, standing

logger = logging.getLogger(__name__)


class ScoreboardSession:
    """A client's side of the relay protocol.

    Holds the last-known grid locally. The relay never sends the current
    grid on join, so a fresh session starts from ``grid`` (or a blank one)
    until some member of the room pushes.
    """

    def __init__(self, url: str, room: str, name: str,
                 sio: Optional[socketio.Client] = None,
                 grid: Optional[List[Dict[str, Any]]] = None,
                 on_update: Optional[Callable[[List[Dict[str, Any]]], None]] = None):
        self.url = url
        self.room = room
        self.name = name
        self.grid = grid if grid is not None else new_grid()
        self.on_update = on_update
        self.connected = False
        self.sio = sio if sio is not None else socketio.Client()
        self.sio.on('connect', self._on_connect)
        self.sio.on('disconnect', self._on_disconnect)
        self.sio.on('connect_error', self._on_connect_error)
        self.sio.on('receiveData', self._on_receive_data)

    def connect(self, **kwargs) -> None:
        self.sio.connect(self.url, **kwargs)

    def disconnect(self) -> None:
        self.sio.disconnect()

    def join(self) -> None:
        self.sio.emit('joinRoom', self.room)

    def leave(self) -> None:
        self.sio.emit('leaveRoom', self.room)

    def push(self) -> None:
        self.sio.emit('sendData', {'room': self.room, 'data': self.grid})

    def edit_row(self, row_id: str, values: Dict[str, Any]) -> None:
        # Local only; call push() to share it
        self.grid = apply_row_edit(self.grid, row_id, values, editor=self.name)

    def standing(self) -> Dict[str, Any]:
        return standing(self.grid)

    def _on_connect(self):
        self.connected = True
        logger.info("[connect] %s", self.url)

    def _on_disconnect(self, *args):
        self.connected = False
        logger.info("[disconnect] %s", self.url)

    def _on_connect_error(self, data=None):
        self.connected = False
        logger.warning("[connect-error] %s: %s", self.url, data)

    def _on_receive_data(self, payload):
        data = payload.get('data') if isinstance(payload, dict) else None
        if data is None:
            return
        self.grid = data
        if self.on_update is not None:
            self.on_update(data)
