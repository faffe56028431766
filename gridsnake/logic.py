"""
Move selection
--------------
One-turn heuristic, no search:
- Safety: walls, heads and bodies are never entered; a tail is unsafe while
  its snake is too short to drag it away
- Tails of snakes about to eat are avoided (they stay put)
- Hazard cost scaled by the ruleset's damage per turn
- Head-to-head: step next to shorter heads, keep away from equal/longer ones
- Food pull: one point per food item lying in a direction
- Space: flood fill from the new head, penalise pockets under SPACE_THRESHOLD
- Ties broken at random
"""
from __future__ import annotations
from typing import Dict, List, Optional, Set
import logging
import random

from gridsnake.board import Board, Coord, Direction, TileType, step
from gridsnake.config import (
    FALLBACK_MOVE,
    SHORT_SNAKE_LENGTH,
    SNAKE_INFO,
    SPACE_THRESHOLD,
    WEIGHTS,
)
from gridsnake.snapshot import Snapshot, build_board, parse_snapshot

logger = logging.getLogger(__name__)


class NoLegalMove(Exception):
    """Every direction runs into a wall, a head or a body."""

# ---------------------------------
# Safety
# ---------------------------------

def is_safe(board: Board, c: Coord) -> bool:
    if not board.is_legal(c):
        return False
    tile = board.get(c)
    if tile.kind is TileType.TAIL and tile.owner is not None:
        if len(board.cells_owned_by(tile.owner)) < SHORT_SNAKE_LENGTH:
            return False
    return True


def safe_moves(board: Board, head: Coord) -> List[Direction]:
    return [d for d in Direction if is_safe(board, step(head, d))]

# ---------------------------------
# Space
# ---------------------------------

def flood_fill(board: Board, start: Coord) -> int:
    """Count the legal cells reachable from ``start``.

    The start tile itself only counts if it is legal; on a board where it has
    just been marked HEAD it does not.
    """
    stack = [t.coord for t in board.neighbors(start)]
    stack.append(start)
    seen: Set[Coord] = set()
    count = 0
    while stack:
        c = stack.pop()
        if c in seen:
            continue
        seen.add(c)
        if not board.is_legal(c):
            continue
        count += 1
        for n in board.neighbors(c):
            if n.coord not in seen:
                stack.append(n.coord)
    return count


def space_after(board: Board, snapshot: Snapshot, direction: Direction) -> int:
    """Reachable cells once our head has stepped in ``direction``."""
    you = snapshot.you
    nxt = step(you.head, direction)
    sim = board.clone()
    sim.set_kind(you.head, TileType.BODY)
    sim.set_kind(nxt, TileType.HEAD)
    sim.set_owner(nxt, you.id)
    return flood_fill(sim, nxt)

# ---------------------------------
# Scoring
# ---------------------------------

def score_moves(board: Board, snapshot: Snapshot,
                legal: Optional[List[Direction]] = None) -> Dict[Direction, int]:
    you = snapshot.you
    head = you.head
    if legal is None:
        legal = safe_moves(board, head)
    weights = {d: 0 for d in Direction}

    for n in board.neighbors(head):
        d = Board.direction_between(head, n.coord)

        if n.kind is TileType.TAIL and n.owner is not None:
            owner_head = board.find_head(n.owner)
            if owner_head is not None and any(
                t.kind is TileType.FOOD for t in board.neighbors(owner_head)
            ):
                weights[d] += WEIGHTS["tail_food"]

        if n.hazard:
            weights[d] -= WEIGHTS["hazard_factor"] * snapshot.hazard_damage

        if is_safe(board, n.coord):
            for n2 in board.neighbors(n.coord):
                if n2.kind is not TileType.HEAD or n2.owner == you.id:
                    continue
                if you.length > len(board.cells_owned_by(n2.owner)):
                    weights[d] += WEIGHTS["head_smaller"]
                else:
                    weights[d] += WEIGHTS["head_bigger"]

    # every food item pulls on both axes independently
    for fx, fy in snapshot.food:
        if fx < head[0]:
            weights[Direction.LEFT] += WEIGHTS["food"]
        if fx > head[0]:
            weights[Direction.RIGHT] += WEIGHTS["food"]
        if fy < head[1]:
            weights[Direction.DOWN] += WEIGHTS["food"]
        if fy > head[1]:
            weights[Direction.UP] += WEIGHTS["food"]

    for d in legal:
        space = space_after(board, snapshot, d)
        if space < SPACE_THRESHOLD:
            weights[d] -= (SPACE_THRESHOLD - space) * WEIGHTS["space_penalty"]

    return weights


def pick_move(weights: Dict[Direction, int], legal: List[Direction],
              rng: Optional[random.Random] = None) -> Direction:
    candidates = {d: w for d, w in weights.items() if d in legal}
    if not candidates:
        raise NoLegalMove("no direction leads to a legal tile")
    best = max(candidates.values())
    tied = [d for d, w in candidates.items() if w == best]
    return (rng or random).choice(tied)


def choose_move(board: Board, snapshot: Snapshot,
                rng: Optional[random.Random] = None) -> Direction:
    legal = safe_moves(board, snapshot.you.head)
    weights = score_moves(board, snapshot, legal)
    logger.debug("%s weights %s legal %s", snapshot.game_id,
                 {d.value: w for d, w in weights.items()}, [d.value for d in legal])
    try:
        return pick_move(weights, legal, rng)
    except NoLegalMove:
        logger.warning("%s turn %s: no legal move, falling back to %s",
                       snapshot.game_id, snapshot.turn, FALLBACK_MOVE.value)
        return FALLBACK_MOVE

# ---------------------------------
# Game lifecycle
# ---------------------------------

def info() -> Dict:
    logger.info("INFO")
    return dict(SNAKE_INFO)


def start(payload: Dict) -> None:
    logger.info("%s START", payload.get("game", {}).get("id", ""))


def end(payload: Dict) -> None:
    logger.info("%s END", payload.get("game", {}).get("id", ""))


def decide(payload: Dict, rng: Optional[random.Random] = None) -> Direction:
    snapshot = parse_snapshot(payload)
    board = build_board(snapshot)
    logger.debug("board\n%s", board)
    move = choose_move(board, snapshot, rng)
    logger.info("%s MOVE %s: %s", snapshot.game_id, snapshot.turn, move.value)
    return move
