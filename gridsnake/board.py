"""
Board model
-----------
A width x height surface of tiles. Each tile carries an occupant type, the id
of the snake that owns it (heads, bodies and tails only) and a hazard flag.

Coordinates are (x, y) with the origin at the bottom-left, x growing right and
y growing up, matching the Battlesnake API.
"""
from __future__ import annotations
from typing import Dict, List, Optional, Tuple
from dataclasses import dataclass, replace
from enum import Enum

# ---------------------------------
# Types & helpers
# ---------------------------------
Coord = Tuple[int, int]


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


DIRS: Dict[Direction, Coord] = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


def step(c: Coord, direction: Direction) -> Coord:
    dx, dy = DIRS[direction]
    return (c[0] + dx, c[1] + dy)


class TileType(Enum):
    EMPTY = "."
    FOOD = "f"
    HEAD = "H"
    BODY = "b"
    TAIL = "t"


class OutOfBounds(IndexError):
    """A coordinate outside the board was looked up."""


@dataclass
class Tile:
    coord: Coord
    kind: TileType = TileType.EMPTY
    owner: Optional[str] = None
    hazard: bool = False

# ---------------------------------
# Board
# ---------------------------------

class Board:
    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"board must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height
        self.tiles: List[Tile] = [
            Tile(coord=(x, y)) for y in range(height) for x in range(width)
        ]

    def in_bounds(self, c: Coord) -> bool:
        x, y = c
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, c: Coord) -> int:
        if not self.in_bounds(c):
            raise OutOfBounds(f"{c} is outside the {self.width}x{self.height} board")
        return c[1] * self.width + c[0]

    def get(self, c: Coord) -> Tile:
        return self.tiles[self._index(c)]

    def set_kind(self, c: Coord, kind: TileType) -> None:
        self.tiles[self._index(c)].kind = kind

    def set_hazard(self, c: Coord, hazard: bool) -> None:
        self.tiles[self._index(c)].hazard = hazard

    def set_owner(self, c: Coord, owner: Optional[str]) -> None:
        self.tiles[self._index(c)].owner = owner

    def neighbors(self, c: Coord) -> List[Tile]:
        """In-bounds adjacent tiles, always ordered left, right, down, up."""
        x, y = c
        res = []
        if x > 0:
            res.append(self.get((x - 1, y)))
        if x < self.width - 1:
            res.append(self.get((x + 1, y)))
        if y > 0:
            res.append(self.get((x, y - 1)))
        if y < self.height - 1:
            res.append(self.get((x, y + 1)))
        return res

    def is_legal(self, c: Coord) -> bool:
        """True if a head could enter ``c`` without hitting a wall, head or body.

        Tails, food and hazards are all enterable; hazards cost health but do
        not kill outright.
        """
        if not self.in_bounds(c):
            return False
        return self.get(c).kind not in (TileType.HEAD, TileType.BODY)

    def _find(self, snake_id: str, kind: TileType) -> Optional[Coord]:
        for t in self.tiles:
            if t.kind is kind and t.owner == snake_id:
                return t.coord
        return None

    def find_head(self, snake_id: str) -> Optional[Coord]:
        return self._find(snake_id, TileType.HEAD)

    def find_tail(self, snake_id: str) -> Optional[Coord]:
        return self._find(snake_id, TileType.TAIL)

    def cells_owned_by(self, snake_id: str) -> List[Coord]:
        return [t.coord for t in self.tiles if t.owner == snake_id]

    @staticmethod
    def direction_between(a: Coord, b: Coord) -> Optional[Direction]:
        """Direction from ``a`` towards ``b`` when they share exactly one axis."""
        if a[0] == b[0] and a[1] != b[1]:
            return Direction.UP if a[1] < b[1] else Direction.DOWN
        if a[1] == b[1] and a[0] != b[0]:
            return Direction.RIGHT if a[0] < b[0] else Direction.LEFT
        return None

    def clone(self) -> Board:
        other = Board.__new__(Board)
        other.width = self.width
        other.height = self.height
        other.tiles = [replace(t) for t in self.tiles]
        return other

    def render(self) -> str:
        # top row first so the text reads like the game viewer
        rows = []
        for y in range(self.height - 1, -1, -1):
            cells = []
            for x in range(self.width):
                t = self.tiles[y * self.width + x]
                label = t.owner if t.owner is not None else t.kind.value
                cells.append(label + ("!" if t.hazard else ""))
            rows.append(" ".join(cells))
        return "\n".join(rows)

    __str__ = render
