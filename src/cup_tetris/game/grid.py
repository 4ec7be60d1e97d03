from __future__ import annotations

import numpy as np

from .pieces import Point, TileKind


WIDTH = 10
HEIGHT = 20


def filled_mask(cells: np.ndarray) -> np.ndarray:
    return (cells != TileKind.EMPTY) & (cells != TileKind.SHADOW)


class Board:
    """Fixed-size cup of tiles, row 0 is the top.

    Cells hold ``TileKind`` values in an int8 array. Writes are not bounds
    checked; they only ever come from a piece already validated by the
    collision helpers.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        self.width = int(width)
        self.height = int(height)
        self.cells = np.full((self.height, self.width), TileKind.EMPTY, dtype=np.int8)

    def reset(self) -> None:
        self.cells.fill(TileKind.EMPTY)

    @staticmethod
    def is_filled(kind: TileKind) -> bool:
        return TileKind(kind).is_filled

    def is_inside(self, point: Point) -> bool:
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def cell_at(self, point: Point) -> TileKind:
        if not self.is_inside(point):
            raise IndexError(f"{point} is outside the {self.width}x{self.height} board")
        return TileKind(int(self.cells[point.y, point.x]))

    def set_cell(self, point: Point, kind: TileKind) -> None:
        self.cells[point.y, point.x] = int(kind)

    def row_is_full(self, row: int) -> bool:
        return bool(np.all(filled_mask(self.cells[row])))

    def clear_row(self, row: int) -> None:
        # Drop the row and push a fresh empty one in at the top
        remaining = np.delete(self.cells, row, axis=0)
        top = np.full((1, self.width), TileKind.EMPTY, dtype=np.int8)
        self.cells = np.vstack((top, remaining))

    def clear_full_rows(self) -> int:
        """Clear every full row scanning top to bottom, return how many went."""
        cleared = 0
        for row in range(self.height):
            if self.row_is_full(row):
                self.clear_row(row)
                cleared += 1
        return cleared

    def top_row_has_filled_cell(self) -> bool:
        return bool(np.any(filled_mask(self.cells[0])))

    def max_height(self) -> int:
        non_empty_rows = np.where(np.any(filled_mask(self.cells), axis=1))[0]
        if non_empty_rows.size == 0:
            return 0
        return self.height - int(non_empty_rows[0])

    def count_holes(self) -> int:
        holes = 0
        mask = filled_mask(self.cells)
        for x in range(self.width):
            seen_block = False
            for filled in mask[:, x]:
                if filled:
                    seen_block = True
                elif seen_block:
                    holes += 1
        return holes

    def clone_state(self) -> np.ndarray:
        return self.cells.copy()

    def copy(self) -> "Board":
        board = Board(self.width, self.height)
        board.cells = self.cells.copy()
        return board
