"""Single-turn Battlesnake move engine."""
from gridsnake.board import Board, Direction, OutOfBounds, Tile, TileType
from gridsnake.logic import NoLegalMove, choose_move, decide, flood_fill
from gridsnake.snapshot import MalformedSnapshot, Snake, Snapshot, build_board, parse_snapshot

__all__ = [
    "Board",
    "Direction",
    "MalformedSnapshot",
    "NoLegalMove",
    "OutOfBounds",
    "Snake",
    "Snapshot",
    "Tile",
    "TileType",
    "build_board",
    "choose_move",
    "decide",
    "flood_fill",
    "parse_snapshot",
]
