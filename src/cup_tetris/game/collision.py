from __future__ import annotations

from .grid import Board
from .pieces import ActivePiece, Point


def point_is_blocked(board: Board, point: Point) -> bool:
    if not board.is_inside(point):
        return True
    return board.cell_at(point).is_filled


def piece_is_blocked(board: Board, piece: ActivePiece) -> bool:
    return any(point_is_blocked(board, p) for p in piece.absolute_points())
