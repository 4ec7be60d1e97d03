"""Legal moves for the falling piece.

Every helper builds a candidate piece and keeps it only when the collision
check passes; otherwise the original piece comes back untouched. There is
no wall-kick search.
"""

from __future__ import annotations

from typing import NamedTuple

from .collision import piece_is_blocked
from .grid import Board
from .pieces import ActivePiece


class MoveResult(NamedTuple):
    piece: ActivePiece
    accepted: bool


def _attempt(board: Board, piece: ActivePiece, candidate: ActivePiece) -> MoveResult:
    if piece_is_blocked(board, candidate):
        return MoveResult(piece, False)
    return MoveResult(candidate, True)


def translate(board: Board, piece: ActivePiece, dx: int, dy: int) -> MoveResult:
    return _attempt(board, piece, piece.translated(dx, dy))


def move_left(board: Board, piece: ActivePiece) -> MoveResult:
    return translate(board, piece, -1, 0)


def move_right(board: Board, piece: ActivePiece) -> MoveResult:
    return translate(board, piece, 1, 0)


def fall(board: Board, piece: ActivePiece) -> MoveResult:
    return translate(board, piece, 0, 1)


def rotate_clockwise(board: Board, piece: ActivePiece) -> MoveResult:
    return _attempt(board, piece, piece.rotated_clockwise())


def rotate_counter_clockwise(board: Board, piece: ActivePiece) -> MoveResult:
    return _attempt(board, piece, piece.rotated_counter_clockwise())


def hard_drop(board: Board, piece: ActivePiece) -> ActivePiece:
    # At most board.height iterations: each accepted fall uses up a row.
    while True:
        piece, accepted = fall(board, piece)
        if not accepted:
            return piece
