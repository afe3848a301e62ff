# src/env/runner_env.py
from __future__ import annotations
from typing import Optional, Dict, Any

import numpy as np
import gymnasium as gym
import pygame

from src.runner.assets import AssetLibrary, headless_assets
from src.runner.config import WIDTH, HEIGHT
from src.runner.render import Renderer
from src.runner.world import InputEvent, World
from src.env.observations import build_observation, observation_bounds


class RunnerEnv(gym.Env):
    """
    Sky Runner Gymnasium environment (vector observations).
    - Simulation at 60 Hz (internal), same World.tick as the game.
    - Agent acts every `frame_skip` frames (default 4) -> 15 decisions/sec.
    - Actions: 0 = NOOP, 1 = JUMP (a buffered press, like the keyboard).
    - Observation: shape (10,), float32 (see observations.build_observation).
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 time_limit_seconds: Optional[float] = 60.0,
                 assets: Optional[AssetLibrary] = None):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)
        self.assets = assets if assets is not None else headless_assets()

        self.sim_fps = 60
        self.dt = 1.0 / self.sim_fps

        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            self.time_limit_decisions = int(self.sim_fps * time_limit_seconds / self.frame_skip)

        self.action_space = gym.spaces.Discrete(2)
        low, high = observation_bounds()
        self.observation_space = gym.spaces.Box(low=low, high=high, dtype=np.float32)

        self.world: Optional[World] = None
        self.timestep: int = 0
        self.current_seed: Optional[int] = None

        self.screen = None
        self.clock = None
        self.renderer = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)

        # explicit seed -> spawner seed (exact replays); otherwise derive from np_random
        if seed is not None:
            world_seed = int(seed)
        else:
            world_seed = int(self.np_random.integers(0, 2**31 - 1))

        self.world = World(self.assets, seed=world_seed)
        self.world.reset()
        self.timestep = 0
        self.current_seed = world_seed

        if self.render_mode == "human":
            self.render()
        return self._get_obs(), self._info()

    def step(self, action):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.world is not None, "call reset() before step()"

        if int(action) == 1:
            self.world.push(InputEvent.JUMP)

        for _ in range(self.frame_skip):
            self.world.tick(self.dt)
            if self.world.state.over:
                break

        terminated = self.world.state.over
        reward = -1.0 if terminated else 1.0

        self.timestep += 1
        truncated = False
        if (self.time_limit_decisions is not None) and (self.timestep >= self.time_limit_decisions):
            truncated = not terminated

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._info()

    # -------------------- Helpers --------------------

    def _get_obs(self) -> np.ndarray:
        w = self.world
        return build_observation(w.player, w.spawner.enemies, w.spawner.platforms, w.state.scroll_speed)

    def _info(self) -> Dict[str, Any]:
        s = self.world.state
        return {
            "score": s.score,
            "elapsed": s.elapsed,
            "seed": self.current_seed,
            "timestep": self.timestep,
            "on_ground": s.player.on_ground,
            "hit_enemy": self.world.hit_enemy,
        }

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.world is None:
            return None

        if self.renderer is None:
            pygame.init()
            if self.render_mode == "human":
                self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
                pygame.display.set_caption("Sky Runner - Gym Env")
                self.clock = pygame.time.Clock()
            else:
                self.screen = pygame.Surface((WIDTH, HEIGHT))
            self.renderer = Renderer(self.assets, jitter_seed=0)

        if self.render_mode == "human":
            # keep the OS from flagging the window as hung
            pygame.event.pump()

        self.renderer.draw(self.screen, self.world.snapshot())

        if self.render_mode == "human":
            pygame.display.flip()
            self.clock.tick(self.metadata.get("render_fps", 60))
            return None

        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.renderer is not None:
            if self.render_mode == "human":
                pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.clock = None
            self.renderer = None
