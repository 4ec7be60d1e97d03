from __future__ import annotations

import argparse

import gymnasium as gym
import pygame

import cup_tetris.env  # ensure registration
from cup_tetris.visualization.renderer import Renderer


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--model", type=str, required=True)
    p.add_argument("--steps", type=int, default=2000)
    p.add_argument("--fps", type=int, default=10)
    p.add_argument("--gravity_period", type=int, default=1)
    return p


def main() -> None:
    args = build_parser().parse_args()
    from stable_baselines3 import PPO

    env = gym.make("CupTetris-10x20-v0", gravity_period=args.gravity_period)
    model = PPO.load(args.model, device="auto")
    renderer = Renderer(cell_size=28)

    pygame.init()
    try:
        screen = pygame.display.set_mode(renderer.window_size(env.unwrapped.state))
        pygame.display.set_caption("Cup Tetris - Agent Eval")
        clock = pygame.time.Clock()

        obs, info = env.reset()
        total_reward = 0.0
        games = 0
        for _ in range(args.steps):
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    return

            action, _ = model.predict(obs, deterministic=True)
            obs, reward, terminated, truncated, info = env.step(action)
            total_reward += float(reward)
            renderer.draw(screen, env.unwrapped.state)
            if terminated or truncated:
                games += 1
                print(f"game {games}: score {info['score']}  lines {info['lines_cleared_total']}")
                obs, info = env.reset()
            clock.tick(args.fps)
        print(f"Total reward {total_reward:.1f} over {games} finished games")
    finally:
        env.close()
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    main()
