from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Tuple


class TileKind(IntEnum):
    EMPTY = 0
    SQUARE = 1
    STICK = 2
    S = 3
    Z = 4
    L = 5
    J = 6
    T = 7
    SHADOW = 8  # non-solid landing preview

    @property
    def is_filled(self) -> bool:
        return self not in (TileKind.EMPTY, TileKind.SHADOW)

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS: Dict[TileKind, str] = {
    TileKind.EMPTY: "",
    TileKind.SQUARE: "Square",
    TileKind.STICK: "Stick",
    TileKind.S: "S",
    TileKind.Z: "Z",
    TileKind.L: "L",
    TileKind.J: "J",
    TileKind.T: "T",
    TileKind.SHADOW: "Shadow",
}

PLAYABLE_KINDS: Tuple[TileKind, ...] = tuple(k for k in TileKind if k.is_filled)


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def shifted(self, dx: int, dy: int) -> "Point":
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class PieceShape:
    """Four points relative to a local origin plus the kind they paint.

    Rotation happens about the local origin, y grows downwards.
    """

    points: Tuple[Point, ...]
    kind: TileKind

    def rotated_clockwise(self) -> "PieceShape":
        return PieceShape(tuple(Point(-p.y, p.x) for p in self.points), self.kind)

    def rotated_counter_clockwise(self) -> "PieceShape":
        return PieceShape(tuple(Point(p.y, -p.x) for p in self.points), self.kind)


def _shape(kind: TileKind, *coords: Tuple[int, int]) -> PieceShape:
    return PieceShape(tuple(Point(x, y) for x, y in coords), kind)


# The square pivots on a corner, so rotating it keeps the 2x2 silhouette.
CATALOG: Dict[TileKind, PieceShape] = {
    TileKind.SQUARE: _shape(TileKind.SQUARE, (0, 0), (0, 1), (1, 0), (1, 1)),
    TileKind.STICK: _shape(TileKind.STICK, (-1, 0), (0, 0), (1, 0), (2, 0)),
    TileKind.S: _shape(TileKind.S, (-1, 0), (0, 0), (0, -1), (1, -1)),
    TileKind.Z: _shape(TileKind.Z, (-1, -1), (0, -1), (0, 0), (1, 0)),
    TileKind.L: _shape(TileKind.L, (0, 1), (0, 0), (0, -1), (-1, -1)),
    TileKind.J: _shape(TileKind.J, (0, 1), (0, 0), (0, -1), (1, -1)),
    TileKind.T: _shape(TileKind.T, (-1, 0), (0, 0), (1, 0), (0, 1)),
}


def shape_for(kind: TileKind) -> PieceShape:
    """Canonical layout for a playable kind. Raises KeyError for EMPTY/SHADOW."""
    return CATALOG[TileKind(kind)]


def random_kind(rng: random.Random) -> TileKind:
    # Plain uniform draw, repeats allowed.
    return rng.choice(PLAYABLE_KINDS)


@dataclass(frozen=True)
class ActivePiece:
    shape: PieceShape
    offset: Point

    @classmethod
    def spawn(cls, kind: TileKind, offset: Point) -> "ActivePiece":
        return cls(shape_for(kind), offset)

    @property
    def kind(self) -> TileKind:
        return self.shape.kind

    def absolute_points(self) -> Tuple[Point, ...]:
        return tuple(p + self.offset for p in self.shape.points)

    def translated(self, dx: int, dy: int) -> "ActivePiece":
        return ActivePiece(self.shape, self.offset.shifted(dx, dy))

    def rotated_clockwise(self) -> "ActivePiece":
        return ActivePiece(self.shape.rotated_clockwise(), self.offset)

    def rotated_counter_clockwise(self) -> "ActivePiece":
        return ActivePiece(self.shape.rotated_counter_clockwise(), self.offset)
