"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from board_game_grid import Piece, Square, SquareSet


@pytest.fixture
def column() -> list[Square]:
    """Four empty squares stacked on x=0, ids 1-4 from y=0 up to y=3."""
    return [Square(id=i + 1, x=0, y=i) for i in range(4)]


@pytest.fixture
def board() -> SquareSet:
    """Empty 8x8 position; square ids run 1-64 row by row."""
    return SquareSet(
        [{"id": y * 8 + x + 1, "x": x, "y": y} for y in range(8) for x in range(8)]
    )


@pytest.fixture
def piece() -> Piece:
    return Piece(id=1, player_number=1)
