from __future__ import annotations

import argparse
from typing import Optional

import gymnasium as gym

import cup_tetris.env  # noqa: F401
from cup_tetris.visualization.text import render_text


def run_random(steps: int = 2000, seed: Optional[int] = None) -> float:
    env = gym.make("CupTetris-10x20-v0")
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)
    total_reward = 0.0
    games = 0
    for _ in range(steps):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total_reward += float(reward)
        if terminated or truncated:
            games += 1
            print(render_text(env.unwrapped.state))
            print(f"game {games}: score {info['score']}  lines {info['lines_cleared_total']}")
            obs, info = env.reset()
    env.close()
    print(f"Random agent total reward: {total_reward:.2f} over {games} finished games")
    return total_reward


def main() -> None:
    p = argparse.ArgumentParser()
    p.add_argument("--steps", type=int, default=2000)
    p.add_argument("--seed", type=int, default=None)
    args = p.parse_args()
    run_random(args.steps, args.seed)


if __name__ == "__main__":  # pragma: no cover
    main()
