import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple, Union

Number = Union[int, float]
Row = Dict[str, Any]

PLAYER_FIELDS = tuple(
    f"user{player}{kind}" for player in (1, 2, 3, 4) for kind in ('Point', 'Punish')
)
MODIFIED_DATE_FORMAT = '%d.%m.%Y %H:%M'
DEFAULT_ROWS = 5


def new_grid(rows: int = DEFAULT_ROWS) -> List[Row]:
    return [{'id': str(uuid.uuid4()), 'no': index} for index in range(1, rows + 1)]


def _number(value: Any) -> Number:
    if value is None or value == '':
        return 0
    if isinstance(value, bool):
        raise ValueError(f"Not a point value: {value!r}")
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            return float(text)
    raise ValueError(f"Not a point value: {value!r}")


def apply_row_edit(grid: List[Row], row_id: str, values: Dict[str, Any],
                   editor: str, now: Optional[datetime] = None) -> List[Row]:
    """Return a copy of ``grid`` with one row's player values replaced.

    Team 1 is players 1 and 2, team 2 is players 3 and 4. The row's team
    totals and audit fields are recomputed; every other row is left as is.
    """
    if not any(row.get('id') == row_id for row in grid):
        raise KeyError(row_id)
    cleaned = {field: _number(values.get(field)) for field in PLAYER_FIELDS}
    stamp = (now or datetime.now()).strftime(MODIFIED_DATE_FORMAT)

    updated = []
    for row in grid:
        if row.get('id') != row_id:
            updated.append(row)
            continue
        updated.append({
            **row,
            **cleaned,
            'point1': cleaned['user1Point'] + cleaned['user2Point'],
            'punish1': cleaned['user1Punish'] + cleaned['user2Punish'],
            'point2': cleaned['user3Point'] + cleaned['user4Point'],
            'punish2': cleaned['user3Punish'] + cleaned['user4Punish'],
            'modifiedBy': editor,
            'modifiedDate': stamp,
        })
    return updated


def team_totals(grid: List[Row]) -> Tuple[Number, Number]:
    team1 = sum((row.get('point1') or 0) + (row.get('punish1') or 0) for row in grid)
    team2 = sum((row.get('point2') or 0) + (row.get('punish2') or 0) for row in grid)
    return team1, team2


def standing(grid: List[Row]) -> Dict[str, Any]:
    """Team totals, the leading team and the gap between them.

    Lower total leads in this game. Team 2 is reported as leader on a tie.
    """
    team1, team2 = team_totals(grid)
    leader = 1 if team1 < team2 else 2
    return {
        'team1': team1,
        'team2': team2,
        'leader': leader,
        'difference': abs(team1 - team2),
    }
