"""
Watch a recorded RunnerEnv episode: feeds a saved jump trace back through
the same seed and draws the observation vector on top.

  python -m experiments.replay --policy heuristic --seed 105 [--slow]
  python -m experiments.replay --trace path/to/<seed>_actions.npy

Keys: SPACE pause, N one decision while paused, R from the top, ESC quit.
"""

from __future__ import annotations
import argparse
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import numpy as np
import pygame

from src.env.runner_env import RunnerEnv

DEFAULT_OUT_DIR = "experiments/runs"
OBS_LABELS = ("y", "vy", "ground", "coyote", "speed", "e1_dx", "e1_w", "e2_dx", "p_dx", "p_y")


def _trace_files(args) -> Tuple[Path, Path]:
    """(actions.npy, meta.txt) for --trace, or for --policy/--seed under --out-dir."""
    if args.trace:
        actions = Path(args.trace)
    else:
        if args.seed is None:
            raise SystemExit("pass --seed or --trace")
        actions = Path(args.out_dir) / "traces" / args.policy / f"{args.seed}_actions.npy"
    if not actions.exists():
        raise FileNotFoundError(f"no trace at {actions}")
    return actions, actions.with_name(actions.name.replace("_actions.npy", "_meta.txt"))

def _meta(path: Path) -> Dict[str, str]:
    if not path.exists():
        return {}
    pairs = (line.split("=", 1) for line in path.read_text(encoding="utf-8").splitlines() if "=" in line)
    return {k.strip(): v.strip() for k, v in pairs}

def _draw_overlay(env: RunnerEnv, step_idx: int, action: Optional[int]):
    surf = pygame.display.get_surface()
    if surf is None or env.world is None:
        return
    font = pygame.font.SysFont("jetbrainsmono", 16)
    obs = env._get_obs()
    s = env.world.state

    lines: List[str] = [
        f"Step={step_idx}  Action={'NOOP' if action == 0 else ('JUMP' if action == 1 else '-')}",
        f"Score={int(s.score)}  t={s.elapsed:.2f}s  speed={s.scroll_speed:.0f}",
        "  ".join(f"{k}={v:.2f}" for k, v in zip(OBS_LABELS[:5], obs[:5])),
        "  ".join(f"{k}={v:.2f}" for k, v in zip(OBS_LABELS[5:], obs[5:])),
    ]

    panel = pygame.Surface((460, 20 * (len(lines) + 1)), pygame.SRCALPHA)
    panel.fill((10, 20, 35, 160))
    surf.blit(panel, (12, 48))

    y0 = 54
    for i, txt in enumerate(lines):
        surf.blit(font.render(txt, True, (210, 230, 255)), (20, y0 + i * 20))

    pygame.display.flip()

def replay_episode(seed: int, actions: np.ndarray, frame_skip: int, slow: bool = False):
    """Step RunnerEnv through `actions` in a window; same seed + frame_skip reproduces the run."""
    env = RunnerEnv(render_mode="human", frame_skip=frame_skip, time_limit_seconds=None)
    env.reset(seed=seed)

    paused = False
    single_step = False
    step_idx = 0
    action: Optional[int] = None
    clock = pygame.time.Clock()

    try:
        running = True
        while running and step_idx < len(actions):
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        paused = not paused
                    elif event.key == pygame.K_n and paused:
                        single_step = True
                    elif event.key == pygame.K_r:
                        env.reset(seed=seed)
                        step_idx = 0
                        action = None
                        paused = False

            if paused and not single_step:
                env.render()
                _draw_overlay(env, step_idx, action=None)
                clock.tick(60)
                continue
            single_step = False

            action = int(actions[step_idx])
            _, _, term, trunc, _ = env.step(action)
            _draw_overlay(env, step_idx, action)
            step_idx += 1

            clock.tick(15 if slow else 60)

            if term or trunc:
                pygame.time.delay(600)
                break
    finally:
        env.close()

def main(argv=None):
    ap = argparse.ArgumentParser(description="Replay a recorded RunnerEnv episode.")
    ap.add_argument("--seed", type=int, help="Episode seed (read from <seed>_actions.npy when omitted)")
    ap.add_argument("--policy", default="random", help="Trace subfolder: random / heuristic")
    ap.add_argument("--trace", default="", help="Explicit .npy action file")
    ap.add_argument("--out-dir", default=DEFAULT_OUT_DIR)
    ap.add_argument("--frame-skip", type=int, default=0, help="0 = from the meta sidecar, else 4")
    ap.add_argument("--slow", action="store_true", help="Show at the decision rate (~15 fps)")
    args = ap.parse_args(argv)

    actions_path, meta_path = _trace_files(args)
    meta = _meta(meta_path)
    seed = args.seed
    if seed is None:
        seed = int(meta.get("seed", actions_path.stem.split("_")[0]))
    frame_skip = args.frame_skip or int(meta.get("frame_skip", 4))

    actions = np.load(actions_path)
    if actions.ndim != 1:
        raise ValueError(f"expected a 1D action array, got {actions.shape}")

    print(f"seed={seed} decisions={len(actions)} frame_skip={frame_skip}  (SPACE pause, N step, R restart, ESC quit)")
    replay_episode(seed=seed, actions=actions, frame_skip=frame_skip, slow=args.slow)


if __name__ == "__main__":
    main()
