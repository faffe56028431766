from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

import pytest

Point = Tuple[int, int]


def _snake(snake_id: str, body: Sequence[Point]) -> Dict:
    points = [{"x": x, "y": y} for x, y in body]
    return {
        "id": snake_id,
        "name": snake_id,
        "health": 90,
        "body": points,
        "head": points[0],
        "length": len(points),
        "latency": "",
        "shout": "",
    }


def _game_state(
    me: Sequence[Point],
    others: Optional[Dict[str, Sequence[Point]]] = None,
    food: Sequence[Point] = (),
    hazards: Sequence[Point] = (),
    hazard_damage: int = 14,
    size: int = 10,
) -> Dict:
    you = _snake("me", me)
    snakes: List[Dict] = [you]
    for snake_id, body in (others or {}).items():
        snakes.append(_snake(snake_id, body))
    return {
        "game": {
            "id": "game-1",
            "ruleset": {
                "name": "standard",
                "version": "v1",
                "settings": {"hazardDamagePerTurn": hazard_damage},
            },
            "timeout": 500,
        },
        "turn": 7,
        "board": {
            "width": size,
            "height": size,
            "food": [{"x": x, "y": y} for x, y in food],
            "hazards": [{"x": x, "y": y} for x, y in hazards],
            "snakes": snakes,
        },
        "you": you,
    }


@pytest.fixture
def game_state():
    """Factory building a Battlesnake /move payload; our snake is always "me"."""
    return _game_state
