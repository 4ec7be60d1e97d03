"""Game module for Cup Tetris.

Exports the simulation engine and supporting classes:
- Board: the cup of settled tiles, row queries and line clearing
- TileKind, Point, PieceShape, ActivePiece: piece geometry and catalog
- point_is_blocked / piece_is_blocked: collision checks
- ScoringRules: per-landing score law
- GameState, advance: game state and the one-step round controller
"""

from .grid import Board, WIDTH, HEIGHT
from .pieces import (
    ActivePiece,
    CATALOG,
    PLAYABLE_KINDS,
    PieceShape,
    Point,
    TileKind,
    random_kind,
    shape_for,
)
from .collision import piece_is_blocked, point_is_blocked
from .rules import ScoringRules
from .core import (
    Action,
    GameConfig,
    GameState,
    StepOutcome,
    advance,
    gravity_due,
    new_game,
    reset_game,
)

__all__ = [
    "Board",
    "WIDTH",
    "HEIGHT",
    "ActivePiece",
    "CATALOG",
    "PLAYABLE_KINDS",
    "PieceShape",
    "Point",
    "TileKind",
    "random_kind",
    "shape_for",
    "piece_is_blocked",
    "point_is_blocked",
    "ScoringRules",
    "Action",
    "GameConfig",
    "GameState",
    "StepOutcome",
    "advance",
    "gravity_due",
    "new_game",
    "reset_game",
]
