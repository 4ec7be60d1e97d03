"""Gymnasium environments for Cup Tetris."""

from __future__ import annotations

from gymnasium.envs.registration import register

# Register default 10x20 environment (7 discrete actions)
register(
    id="CupTetris-10x20-v0",
    entry_point="cup_tetris.env.cup_tetris_env:CupTetrisEnv",
)

__all__ = ["CupTetris-10x20-v0"]
