# src/runner/player.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

from .config import (
    PLAYER_X, PLAYER_W, PLAYER_H, GRAVITY, GROUND_Y, JUMP_VY,
    COYOTE_S, JUMP_BUFFER_S, RUN_FRAME_S, RUN_FRAMES,
)
from .spawner import Platform


@dataclass
class Player:
    """
    Auto-running player at a fixed x. Only the vertical axis is simulated:
    - gravity pulls down (+y)
    - lands on the ground band or on the top face of platforms
    - jumps go through a small buffer/coyote window instead of setting vy directly
    """
    x: float = float(PLAYER_X)
    y: float = 0.0
    vy: float = 0.0
    w: float = float(PLAYER_W)
    h: float = float(PLAYER_H)
    anim: str = "idle"          # idle | run | jump | fall
    frame: int = 0
    frame_t: float = 0.0
    on_ground: bool = True
    coyote: float = 0.0         # > 0 while a jump is still allowed
    jump_buffer: float = 0.0    # > 0 while a jump press is remembered

    @property
    def ground_rest_y(self) -> float:
        return GROUND_Y - self.h

    def reset(self):
        """Stand on the ground, ready to run."""
        self.y = self.ground_rest_y
        self.vy = 0.0
        self.on_ground = True
        self.anim = "run"
        self.frame = 0
        self.frame_t = 0.0
        self.coyote = 0.0
        self.jump_buffer = 0.0

    def request_jump(self):
        """A jump press only opens the buffer window; the physics step decides."""
        self.jump_buffer = JUMP_BUFFER_S

    def update_physics(self, dt: float) -> float:
        """Integrate gravity (velocity first, then position). Returns the pre-integration y."""
        self.vy += GRAVITY * dt
        self.y += self.vy * dt
        return self.y - self.vy * dt

    def resolve_collisions_swept(self, prev_y: float, platforms: Sequence[Platform], dt: float) -> bool:
        """
        Vertical resolution against platform tops (swept, so fast falls
        cannot tunnel) and then the ground. Returns True if standing on anything.
        """
        landed = False
        for p in platforms:
            # feet crossed the top face during this tick
            falling = prev_y + self.h <= p.y and self.y + self.h >= p.y
            # narrow band so grazing a platform corner does not count
            within = self.x + self.w * 0.6 > p.x and self.x + self.w * 0.4 < p.x + p.w
            if falling and within:
                # overlapping platforms: last one wins
                self._stand_at(p.y - self.h)
                landed = True

        if not landed:
            if self.y >= self.ground_rest_y:
                self._stand_at(self.ground_rest_y)
            else:
                self.on_ground = False
                self.coyote -= dt
        return self.on_ground

    def _stand_at(self, y: float):
        self.y = y
        self.vy = 0.0
        self.on_ground = True
        self.coyote = COYOTE_S

    def apply_jump_buffer(self, dt: float) -> bool:
        """Consume a buffered press if the coyote window is still open. Returns True on jump."""
        if self.jump_buffer > 0:
            self.jump_buffer -= dt
            if self.coyote > 0:
                self.vy = JUMP_VY
                self.jump_buffer = 0.0
                self.coyote = 0.0
                return True
        return False

    def update_animation(self, dt: float, run_frames: int = RUN_FRAMES):
        if not self.on_ground:
            self.anim = "jump" if self.vy < 0 else "fall"
        else:
            self.anim = "run"

        if self.anim == "run":
            self.frame_t += dt
            if self.frame_t > RUN_FRAME_S:
                self.frame_t = 0.0
                self.frame = (self.frame + 1) % run_frames

    def step(self, dt: float, platforms: Sequence[Platform], run_frames: int = RUN_FRAMES) -> bool:
        """One full player tick. Returns True if a jump fired this tick."""
        prev_y = self.update_physics(dt)
        self.resolve_collisions_swept(prev_y, platforms, dt)
        jumped = self.apply_jump_buffer(dt)
        self.update_animation(dt, run_frames)
        return jumped
