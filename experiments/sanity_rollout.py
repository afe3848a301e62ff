"""
Score random vs. heuristic jumpers over a seed list.

One CSV row per episode (score, length, which enemy ended it); with
--save-traces the per-step jump decisions are kept as <seed>_actions.npy
so experiments.replay can show the run again.

  python -m experiments.sanity_rollout --policies heuristic --seeds 1,2,3 --save-traces
"""

from __future__ import annotations
import argparse
import csv
from pathlib import Path
from typing import Callable, List, NamedTuple, Optional

import numpy as np

from src.env.runner_env import RunnerEnv

Policy = Callable[[np.ndarray], int]

CSV_FIELDS = ["policy", "seed", "frame_skip", "decisions", "return", "score",
              "terminated", "truncated", "hit_enemy", "grounded_ratio"]


class Episode(NamedTuple):
    policy: str
    seed: int
    frame_skip: int
    decisions: int
    ret: float
    score: float
    terminated: bool
    truncated: bool
    hit_enemy: Optional[int]
    grounded_ratio: float

    def csv_row(self) -> list:
        return [self.policy, self.seed, self.frame_skip, self.decisions, f"{self.ret:.1f}",
                f"{self.score:.1f}", int(self.terminated), int(self.truncated),
                "" if self.hit_enemy is None else self.hit_enemy, f"{self.grounded_ratio:.3f}"]


def random_jumper(seed: int, jump_prob: float = 0.2) -> Policy:
    rng = np.random.RandomState(10_000 + seed)
    return lambda _obs: int(rng.random_sample() < jump_prob)


def enemy_jumper() -> Policy:
    """
    Jump when the nearest enemy is close and a jump can still fire. The
    trigger distance grows with scroll speed so the airtime still covers it.
    """
    def act(obs: np.ndarray) -> int:
        can_jump, speed_norm, enemy_dx = obs[3] == 1.0, obs[4], obs[5]
        return int(can_jump and enemy_dx < 0.08 + 0.06 * speed_norm)
    return act


POLICIES = {
    "random": random_jumper,
    "heuristic": lambda seed: enemy_jumper(),
}


def play(policy_name: str, seed: int, frame_skip: int, max_decisions: int):
    """Run one episode; returns (Episode, actions, observations)."""
    policy = POLICIES[policy_name](seed)
    env = RunnerEnv(frame_skip=frame_skip)
    actions: List[int] = []
    observations: List[np.ndarray] = []
    ret, grounded = 0.0, 0
    term = trunc = False
    try:
        obs, info = env.reset(seed=seed)
        observations.append(obs)
        while len(actions) < max_decisions and not (term or trunc):
            a = policy(obs)
            obs, r, term, trunc, info = env.step(a)
            actions.append(a)
            observations.append(obs)
            ret += r
            grounded += int(info["on_ground"])
    finally:
        env.close()

    ep = Episode(policy_name, seed, frame_skip, len(actions), ret, info["score"],
                 bool(term), bool(trunc), info["hit_enemy"], grounded / max(1, len(actions)))
    return ep, actions, observations


def save_trace(trace_dir: Path, ep: Episode, actions: List[int], observations: Optional[List[np.ndarray]]):
    trace_dir.mkdir(parents=True, exist_ok=True)
    np.save(trace_dir / f"{ep.seed}_actions.npy", np.asarray(actions, dtype=np.int8))
    if observations is not None:
        np.save(trace_dir / f"{ep.seed}_obs.npy", np.stack(observations).astype(np.float32))
    (trace_dir / f"{ep.seed}_meta.txt").write_text(
        f"seed={ep.seed}\nframe_skip={ep.frame_skip}\npolicy={ep.policy}\n", encoding="utf-8")


def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--policies", default="both", choices=["random", "heuristic", "both"])
    ap.add_argument("--seeds", default="", help="Comma-separated; default 101..120")
    ap.add_argument("--frame-skip", type=int, default=4)
    ap.add_argument("--steps", type=int, default=10_000, help="Decision cap per episode")
    ap.add_argument("--out-dir", default="experiments/runs")
    ap.add_argument("--save-traces", action="store_true")
    ap.add_argument("--save-obs", action="store_true", help="Also keep per-step observations")
    args = ap.parse_args(argv)

    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    seeds = [int(s) for s in args.seeds.split(",") if s.strip()] or list(range(101, 121))
    names = ["random", "heuristic"] if args.policies == "both" else [args.policies]

    csv_path = out_dir / "episodes.csv"
    new_file = not csv_path.exists()
    print(f"{names} x {len(seeds)} seeds, frame_skip={args.frame_skip} -> {csv_path}")

    with csv_path.open("a", newline="") as f:
        writer = csv.writer(f)
        if new_file:
            writer.writerow(CSV_FIELDS)
        for name in names:
            for seed in seeds:
                ep, actions, observations = play(name, seed, args.frame_skip, args.steps)
                writer.writerow(ep.csv_row())
                if args.save_traces:
                    save_trace(out_dir / "traces" / name, ep, actions,
                               observations if args.save_obs else None)
                print(f"[{name}] seed={seed} decisions={ep.decisions} score={ep.score:.1f} "
                      f"hit={ep.hit_enemy} trunc={ep.truncated}")

    print("done")


if __name__ == "__main__":
    main()
