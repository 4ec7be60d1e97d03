from __future__ import annotations

from typing import Dict, Tuple

from cup_tetris.game import TileKind


RGB = Tuple[int, int, int]

PALETTE: Dict[TileKind, RGB] = {
    TileKind.EMPTY: (20, 20, 26),
    TileKind.SQUARE: (240, 240, 0),
    TileKind.STICK: (0, 240, 240),
    TileKind.S: (0, 240, 0),
    TileKind.Z: (240, 0, 0),
    TileKind.L: (240, 160, 0),
    TileKind.J: (0, 0, 240),
    TileKind.T: (160, 0, 240),
    TileKind.SHADOW: (70, 70, 80),
}


def color_for(value: int) -> RGB:
    return PALETTE[TileKind(int(value))]
