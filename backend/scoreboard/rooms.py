from collections import defaultdict
from typing import Dict, Set


class RoomRegistry:
    """Process-local map of Socket.IO connections to the rooms they joined.

    Kept in step with the Socket.IO server's own room membership so that
    handlers can log and report who is where. Nothing about the grid is
    stored here; an entry lives from connect until disconnect.
    """

    def __init__(self):
        self._members: Dict[str, Set[str]] = defaultdict(set)
        self._rooms_by_sid: Dict[str, Set[str]] = defaultdict(set)

    def init_app(self, app):
        self.clear()
        app.extensions['scoreboard_rooms'] = self

    def clear(self) -> None:
        self._members.clear()
        self._rooms_by_sid.clear()

    def connect(self, sid: str) -> None:
        self._rooms_by_sid.setdefault(sid, set())

    def join(self, sid: str, room: str) -> bool:
        if room in self._rooms_by_sid.get(sid, ()):
            return False
        self._members[room].add(sid)
        self._rooms_by_sid[sid].add(room)
        return True

    def leave(self, sid: str, room: str) -> bool:
        if room not in self._rooms_by_sid.get(sid, ()):
            return False
        self._rooms_by_sid[sid].discard(room)
        self._members[room].discard(sid)
        if not self._members[room]:
            del self._members[room]
        return True

    def drop(self, sid: str) -> Set[str]:
        """Forget a connection entirely. Returns the rooms it belonged to."""
        left = set(self._rooms_by_sid.get(sid, ()))
        for room in left:
            self.leave(sid, room)
        self._rooms_by_sid.pop(sid, None)
        return left

    def members(self, room: str) -> Set[str]:
        return set(self._members.get(room, ()))

    def rooms_of(self, sid: str) -> Set[str]:
        return set(self._rooms_by_sid.get(sid, ()))

    def snapshot(self) -> Dict[str, int]:
        return {room: len(sids) for room, sids in self._members.items()}

    def connection_count(self) -> int:
        # Every open connection, whether or not it joined a room
        return len(self._rooms_by_sid)
