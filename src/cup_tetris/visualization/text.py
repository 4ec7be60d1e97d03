from __future__ import annotations

from cup_tetris.game import GameState, TileKind

TILE_SPACE = "  "
TILE_FILLED = "[]"


def render_text(state: GameState) -> str:
    """Classic terminal frame: legend, border, one line per row, border."""
    grid = state.render_grid()
    border = "+" + "=" * (len(TILE_FILLED) * state.config.width) + "+"
    lines = [
        f"score: {state.score}",
        f"next: {state.next_kind.label}",
        "",
        border,
    ]
    for row in grid:
        lines.append("".join(TILE_SPACE if int(v) == TileKind.EMPTY else TILE_FILLED for v in row))
    lines.append(border)
    return "\n".join(lines)


def print_state(state: GameState) -> None:
    print(render_text(state))
