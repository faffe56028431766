"""
Turn snapshots
--------------
Decodes a Battlesnake request payload into plain dataclasses and lays the
scene out on a fresh Board.
"""
from __future__ import annotations
from typing import Dict, List
from dataclasses import dataclass, field

from gridsnake.board import Board, Coord, TileType


class MalformedSnapshot(ValueError):
    """The payload is missing a snake or carries an empty body."""

# ---------------------------------
# Data models
# ---------------------------------
@dataclass
class Snake:
    id: str
    health: int
    body: List[Coord]  # head first

    @property
    def head(self) -> Coord:
        return self.body[0]

    @property
    def length(self) -> int:
        return len(self.body)

    @property
    def tail(self) -> Coord:
        return self.body[-1]


@dataclass
class Snapshot:
    width: int
    height: int
    you: Snake
    snakes: List[Snake]
    food: List[Coord] = field(default_factory=list)
    hazards: List[Coord] = field(default_factory=list)
    hazard_damage: int = 0
    game_id: str = ""
    turn: int = 0

# ---------------------------------
# Parsing (supports Battlesnake API variations)
# ---------------------------------

def _coords(points: List[Dict]) -> List[Coord]:
    return [(p["x"], p["y"]) for p in points]


def parse_snake(s: Dict) -> Snake:
    raw = s["body"]
    if isinstance(raw, dict) and "data" in raw:
        raw = raw["data"]
    body = _coords(raw)
    if not body:
        raise MalformedSnapshot(f"snake {s.get('id')!r} has an empty body")
    return Snake(id=s["id"], health=s.get("health", 0), body=body)


def parse_snapshot(payload: Dict) -> Snapshot:
    b = payload["board"]
    game = payload.get("game", {})
    settings = game.get("ruleset", {}).get("settings", {})

    you = parse_snake(payload["you"])
    snakes = [parse_snake(s) for s in b.get("snakes", [])]
    if all(s.id != you.id for s in snakes):
        raise MalformedSnapshot(f"snake {you.id!r} is not on the board")

    return Snapshot(
        width=b["width"],
        height=b["height"],
        you=you,
        snakes=snakes,
        food=_coords(b.get("food", [])),
        hazards=_coords(b.get("hazards", [])),
        hazard_damage=settings.get("hazardDamagePerTurn", 0),
        game_id=game.get("id", ""),
        turn=payload.get("turn", 0),
    )

# ---------------------------------
# Scene building
# ---------------------------------

def build_board(snapshot: Snapshot) -> Board:
    """Lay every snake, food item and hazard of ``snapshot`` on a new Board.

    Bodies go down first, then heads, then tails, so a single-segment snake
    ends up as a TAIL tile. Food overwrites whatever was there.
    """
    board = Board(snapshot.width, snapshot.height)

    for snake in snapshot.snakes:
        for c in snake.body:
            board.set_kind(c, TileType.BODY)
            board.set_owner(c, snake.id)
        board.set_kind(snake.head, TileType.HEAD)
        board.set_kind(snake.tail, TileType.TAIL)

    for c in snapshot.food:
        board.set_kind(c, TileType.FOOD)
        board.set_owner(c, None)

    for c in snapshot.hazards:
        board.set_hazard(c, True)

    return board
