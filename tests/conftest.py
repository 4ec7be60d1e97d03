from __future__ import annotations

import pytest

from cup_tetris.game import GameConfig, GameState, TileKind, new_game


def fill_row(state: GameState, row: int, kind: TileKind = TileKind.T, skip: tuple = ()) -> None:
    for x in range(state.config.width):
        if x not in skip:
            state.board.cells[row, x] = kind


@pytest.fixture
def state() -> GameState:
    return new_game(GameConfig(random_seed=1234))
