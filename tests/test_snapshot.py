"""Tests for gridsnake.snapshot."""

from __future__ import annotations

import pytest

from gridsnake.board import TileType
from gridsnake.snapshot import MalformedSnapshot, Snake, Snapshot, build_board, parse_snapshot


class TestParse:
    def test_fields(self, game_state) -> None:
        payload = game_state(
            [(2, 0), (1, 0), (0, 0)],
            others={"b": [(5, 5), (5, 6)]},
            food=[(3, 3)],
            hazards=[(9, 9)],
            hazard_damage=15,
        )
        snap = parse_snapshot(payload)
        assert (snap.width, snap.height) == (10, 10)
        assert snap.you.id == "me"
        assert snap.you.head == (2, 0)
        assert snap.you.tail == (0, 0)
        assert snap.you.length == 3
        assert [s.id for s in snap.snakes] == ["me", "b"]
        assert snap.food == [(3, 3)]
        assert snap.hazards == [(9, 9)]
        assert snap.hazard_damage == 15
        assert snap.game_id == "game-1"
        assert snap.turn == 7

    def test_missing_settings_default_to_no_damage(self, game_state) -> None:
        payload = game_state([(2, 0), (1, 0)])
        del payload["game"]["ruleset"]
        assert parse_snapshot(payload).hazard_damage == 0

    def test_legacy_body_shape(self, game_state) -> None:
        payload = game_state([(2, 0), (1, 0)])
        # "you" is the same dict as the first board snake, so wrap it once
        for s in payload["board"]["snakes"]:
            s["body"] = {"data": s["body"]}
        assert parse_snapshot(payload).you.body == [(2, 0), (1, 0)]

    def test_empty_body_fails_fast(self, game_state) -> None:
        payload = game_state([(2, 0)])
        payload["you"]["body"] = []
        with pytest.raises(MalformedSnapshot):
            parse_snapshot(payload)

    def test_you_missing_from_board(self, game_state) -> None:
        payload = game_state([(2, 0)])
        payload["board"]["snakes"] = []
        with pytest.raises(MalformedSnapshot):
            parse_snapshot(payload)


def _snapshot(snakes, food=(), hazards=()) -> Snapshot:
    return Snapshot(
        width=6, height=6, you=snakes[0], snakes=list(snakes),
        food=list(food), hazards=list(hazards),
    )


class TestBuildBoard:
    def test_head_body_tail(self) -> None:
        me = Snake("me", 100, [(2, 2), (2, 1), (2, 0)])
        board = build_board(_snapshot([me]))
        assert board.get((2, 2)).kind is TileType.HEAD
        assert board.get((2, 1)).kind is TileType.BODY
        assert board.get((2, 0)).kind is TileType.TAIL
        assert all(board.get(c).owner == "me" for c in me.body)
        assert board.get((3, 3)).owner is None

    def test_single_segment_snake_is_tail(self) -> None:
        me = Snake("me", 100, [(1, 1)])
        board = build_board(_snapshot([me]))
        assert board.get((1, 1)).kind is TileType.TAIL
        assert board.find_head("me") is None
        assert board.find_tail("me") == (1, 1)

    def test_stacked_tail_after_eating(self) -> None:
        me = Snake("me", 100, [(3, 1), (2, 1), (1, 1), (1, 1)])
        board = build_board(_snapshot([me]))
        assert board.get((1, 1)).kind is TileType.TAIL
        assert len(board.cells_owned_by("me")) == 3

    def test_food_and_hazards(self) -> None:
        me = Snake("me", 100, [(2, 2), (2, 1)])
        board = build_board(_snapshot([me], food=[(4, 4)], hazards=[(4, 4), (2, 2)]))
        assert board.get((4, 4)).kind is TileType.FOOD
        assert board.get((4, 4)).hazard
        assert board.get((2, 2)).kind is TileType.HEAD
        assert board.get((2, 2)).hazard

    def test_food_on_snake_wins_and_clears_owner(self) -> None:
        me = Snake("me", 100, [(2, 2), (2, 1), (2, 0)])
        board = build_board(_snapshot([me], food=[(2, 1)]))
        assert board.get((2, 1)).kind is TileType.FOOD
        assert board.get((2, 1)).owner is None
