from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Tuple

import numpy as np

from . import movement
from .collision import piece_is_blocked
from .grid import HEIGHT, WIDTH, Board
from .pieces import ActivePiece, Point, TileKind, random_kind
from .rules import ScoringRules


class Action(IntEnum):
    NONE = 0
    MOVE_LEFT = 1
    MOVE_RIGHT = 2
    ROTATE_LEFT = 3
    ROTATE_RIGHT = 4
    SOFT_DROP = 5
    HARD_DROP = 6


@dataclass
class GameConfig:
    width: int = WIDTH
    height: int = HEIGHT
    random_seed: Optional[int] = None
    fps: int = 30  # input polling rate of the driver
    fall_period: int = 15  # frames between gravity ticks

    @property
    def spawn_offset(self) -> Point:
        return Point(self.width // 2, 1)


@dataclass(frozen=True)
class StepOutcome:
    lines_cleared: int = 0
    did_spawn: bool = False
    is_game_over: bool = False


@dataclass
class GameState:
    """Everything one game owns. Only ``advance`` and ``reset_game`` mutate it."""

    config: GameConfig
    rules: ScoringRules
    rng: random.Random
    board: Board
    piece: Optional[ActivePiece] = None
    next_kind: TileKind = TileKind.EMPTY
    score: int = 0
    lines_cleared_total: int = 0
    pieces_spawned: int = 0
    game_over: bool = False
    last_outcome: StepOutcome = field(default_factory=StepOutcome)

    @property
    def active_kind(self) -> TileKind:
        assert self.piece is not None
        return self.piece.kind

    def active_points(self) -> Tuple[Point, ...]:
        assert self.piece is not None
        return self.piece.absolute_points()

    def shadow_points(self) -> Tuple[Point, ...]:
        """Where the piece would come to rest under full gravity."""
        assert self.piece is not None
        return movement.hard_drop(self.board, self.piece).absolute_points()

    def render_grid(self) -> np.ndarray:
        # Shadow first so the active piece wins where they overlap
        grid = self.board.clone_state()
        if self.piece is None or self.game_over:
            return grid
        for p in self.shadow_points():
            if not TileKind(int(grid[p.y, p.x])).is_filled:
                grid[p.y, p.x] = TileKind.SHADOW
        for p in self.active_points():
            if self.board.is_inside(p):
                grid[p.y, p.x] = self.piece.kind
        return grid


def gravity_due(frame: int, config: GameConfig) -> bool:
    return frame % config.fall_period == 0


def _spawn(state: GameState) -> None:
    state.piece = ActivePiece.spawn(state.next_kind, state.config.spawn_offset)
    state.next_kind = random_kind(state.rng)
    state.pieces_spawned += 1
    # A piece born overlapping settled tiles can only land on top of them
    if piece_is_blocked(state.board, state.piece):
        state.game_over = True


def reset_game(state: GameState, seed: Optional[int] = None) -> None:
    if seed is not None:
        state.rng.seed(seed)
    state.board.reset()
    state.score = 0
    state.lines_cleared_total = 0
    state.pieces_spawned = 0
    state.game_over = False
    state.last_outcome = StepOutcome()
    state.next_kind = random_kind(state.rng)
    _spawn(state)


def new_game(config: Optional[GameConfig] = None, rules: Optional[ScoringRules] = None) -> GameState:
    config = config or GameConfig()
    state = GameState(
        config=config,
        rules=rules or ScoringRules(),
        rng=random.Random(config.random_seed),
        board=Board(config.width, config.height),
    )
    reset_game(state)
    return state


def _apply_action(state: GameState, action: Action) -> bool:
    board, piece = state.board, state.piece
    assert piece is not None
    if action == Action.MOVE_LEFT:
        result = movement.move_left(board, piece)
    elif action == Action.MOVE_RIGHT:
        result = movement.move_right(board, piece)
    elif action == Action.ROTATE_LEFT:
        result = movement.rotate_counter_clockwise(board, piece)
    elif action == Action.ROTATE_RIGHT:
        result = movement.rotate_clockwise(board, piece)
    elif action == Action.SOFT_DROP:
        result = movement.fall(board, piece)
    elif action == Action.HARD_DROP:
        dropped = movement.hard_drop(board, piece)
        result = movement.MoveResult(dropped, dropped != piece)
    else:
        return False
    state.piece = result.piece
    return result.accepted


def _land(state: GameState) -> StepOutcome:
    assert state.piece is not None
    for p in state.piece.absolute_points():
        state.board.set_cell(p, state.piece.kind)
    lines = state.board.clear_full_rows()
    state.score += state.rules.score_for_lines(lines)
    state.lines_cleared_total += lines
    if state.board.top_row_has_filled_cell():
        state.game_over = True
        return StepOutcome(lines_cleared=lines, did_spawn=False, is_game_over=True)
    _spawn(state)
    return StepOutcome(lines_cleared=lines, did_spawn=True, is_game_over=state.game_over)


def advance(state: GameState, action: Action = Action.NONE, gravity_due: bool = False) -> StepOutcome:
    """Run one simulation step.

    The input action is applied first; a rejected move or rotation simply
    leaves the piece where it was. When ``gravity_due`` is set the piece
    falls one row, and if it cannot, it lands: its tiles are written to the
    board, full rows are cleared and scored, and either the game ends
    (something settled in the top row) or the next piece spawns.

    Once the game is over further calls change nothing.
    """
    if state.game_over:
        state.last_outcome = StepOutcome(is_game_over=True)
        return state.last_outcome

    _apply_action(state, Action(action))

    outcome = StepOutcome()
    if gravity_due:
        assert state.piece is not None
        state.piece, fell = movement.fall(state.board, state.piece)
        if not fell:
            outcome = _land(state)
    state.last_outcome = outcome
    return outcome
