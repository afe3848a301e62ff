# src/runner/world.py
"""
Authoritative per-tick state and the tick orchestrator.

World.tick(dt) is the only mutator of game state. Input arrives as events
pushed onto a queue and consumed at the start of the next tick, so a run is
fully determined by (seed, dt sequence, event sequence).
"""
from __future__ import annotations
import enum
import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Optional, Tuple

from .assets import AssetLibrary
from .collisions import first_hit
from .config import (
    SPEED_BASE, SPEED_RAMP, SPEED_MAX, SCORE_PER_S, SHAKE_ON_HIT, SHAKE_DECAY,
    STATUS_LOADING, STATUS_PLAYING, STATUS_OVER,
)
from .player import Player
from .spawner import Spawner

logger = logging.getLogger(__name__)


class InputEvent(enum.Enum):
    JUMP = "jump"
    RESTART = "restart"


def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


@dataclass
class SimulationState:
    running: bool = False
    over: bool = False
    score: float = 0.0
    elapsed: float = 0.0
    scroll_speed: float = SPEED_BASE
    shake: float = 0.0
    status: str = STATUS_LOADING
    player: Player = field(default_factory=Player)


# --- read-only views for the renderer / observers ---

@dataclass(frozen=True)
class PlayerView:
    x: float
    y: float
    w: float
    h: float
    vy: float
    anim: str
    frame: int
    on_ground: bool


@dataclass(frozen=True)
class EntityView:
    x: float
    y: float
    w: float
    h: float
    variant: int = -1   # enemy sprite index; -1 for platforms


@dataclass(frozen=True)
class Snapshot:
    running: bool
    over: bool
    score: float
    elapsed: float
    scroll_speed: float
    shake: float
    status: str
    player: PlayerView
    enemies: Tuple[EntityView, ...]
    platforms: Tuple[EntityView, ...]

    @property
    def hud_score(self) -> int:
        return int(self.score)


class World:
    """One game session: state + player + spawner, advanced by tick(dt)."""

    def __init__(self, assets: AssetLibrary, seed: Optional[int] = None):
        self.assets = assets
        self.state = SimulationState()
        self.spawner = Spawner(assets, seed)
        self.events: Deque[InputEvent] = deque()
        self.hit_enemy: Optional[int] = None

    @property
    def player(self) -> Player:
        return self.state.player

    @property
    def seed(self) -> int:
        return self.spawner.seed

    def reset(self):
        s = self.state
        s.running = True
        s.over = False
        s.score = 0.0
        s.elapsed = 0.0
        s.scroll_speed = SPEED_BASE
        s.shake = 0.0
        s.status = STATUS_PLAYING
        s.player.reset()
        self.spawner.reset()
        self.events.clear()
        self.hit_enemy = None
        logger.info("session start (seed=%d)", self.seed)

    def push(self, event: InputEvent):
        self.events.append(event)

    def _drain_events(self):
        s = self.state
        # reset() empties the queue; presses after a RESTART in the same batch still apply
        pending = list(self.events)
        self.events.clear()
        for ev in pending:
            if ev is InputEvent.JUMP:
                if s.running and not s.over:
                    s.player.request_jump()
            elif ev is InputEvent.RESTART:
                if s.over:
                    self.reset()

    def tick(self, dt: float):
        self._drain_events()
        s = self.state
        if s.running and not s.over:
            s.elapsed += dt
            s.score += dt * SCORE_PER_S
            s.scroll_speed = clamp(SPEED_BASE + s.elapsed * SPEED_RAMP, SPEED_BASE, SPEED_MAX)

            s.player.step(dt, self.spawner.platforms, self.assets.run_frames)
            self.spawner.update_and_generate(dt, s.scroll_speed)
            self._check_enemy_hits()

        s.shake *= SHAKE_DECAY

    def _check_enemy_hits(self):
        hit = first_hit(self.state.player, self.spawner.enemies)
        if hit is None:
            return
        s = self.state
        s.over = True
        s.shake = SHAKE_ON_HIT
        s.status = STATUS_OVER
        self.hit_enemy = hit
        logger.info("game over: score=%d elapsed=%.2fs speed=%.0f", int(s.score), s.elapsed, s.scroll_speed)

    def snapshot(self) -> Snapshot:
        s = self.state
        p = s.player
        return Snapshot(
            running=s.running,
            over=s.over,
            score=s.score,
            elapsed=s.elapsed,
            scroll_speed=s.scroll_speed,
            shake=s.shake,
            status=s.status,
            player=PlayerView(p.x, p.y, p.w, p.h, p.vy, p.anim, p.frame, p.on_ground),
            enemies=tuple(EntityView(e.x, e.y, e.w, e.h, e.variant) for e in self.spawner.enemies),
            platforms=tuple(EntityView(q.x, q.y, q.w, q.h) for q in self.spawner.platforms),
        )
