from __future__ import annotations

from typing import Dict

import pygame

from cup_tetris.game import Action, GameConfig, advance, gravity_due, new_game, reset_game
from .renderer import Renderer


KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.MOVE_LEFT,
    pygame.K_RIGHT: Action.MOVE_RIGHT,
    pygame.K_UP: Action.ROTATE_RIGHT,
    pygame.K_z: Action.ROTATE_LEFT,
    pygame.K_DOWN: Action.SOFT_DROP,
    pygame.K_SPACE: Action.HARD_DROP,
    # classic terminal key map
    pygame.K_h: Action.MOVE_LEFT,
    pygame.K_l: Action.MOVE_RIGHT,
    pygame.K_u: Action.ROTATE_LEFT,
    pygame.K_i: Action.ROTATE_RIGHT,
    pygame.K_j: Action.HARD_DROP,
    pygame.K_k: Action.SOFT_DROP,
}


def run(config: GameConfig | None = None) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        state = new_game(config)
        renderer = Renderer(cell_size=28)
        screen = pygame.display.set_mode(renderer.window_size(state))
        pygame.display.set_caption("Cup Tetris")

        frame = 0
        running = True
        while running:
            # Only the last key pressed during a frame is applied
            action = Action.NONE
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r and state.game_over:
                        reset_game(state)
                        frame = 0
                    else:
                        action = KEY_TO_ACTION.get(event.key, action)

            if not state.game_over:
                advance(state, action, gravity_due(frame, state.config))
                frame += 1

            renderer.draw(screen, state)
            clock.tick(state.config.fps)
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()
