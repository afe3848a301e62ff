# src/runner/spawner.py
from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import List, Optional

from .assets import AssetLibrary
from .config import (
    GROUND_Y, SPAWN_X, CULL_X,
    ENEMY_FIRST_S, ENEMY_MIN_S, ENEMY_MAX_S, ENEMY_H, ENEMY_SINK,
    PLATFORM_FIRST_S, PLATFORM_MIN_S, PLATFORM_MAX_S, PLATFORM_WIDTHS, PLATFORM_H,
    PLATFORM_TOP_MIN, PLATFORM_TOP_MAX,
)

logger = logging.getLogger(__name__)


@dataclass
class Enemy:
    x: float
    y: float
    w: float
    h: float
    variant: int    # index into AssetLibrary.enemies


@dataclass
class Platform:
    x: float
    y: float
    w: float
    h: float = float(PLATFORM_H)


class Spawner:
    """
    Endless stream of ground enemies and floating platforms scrolling left.
    Two independent countdowns; each expiry spawns one entity just past the
    right edge and re-arms with a random interval.
    """
    def __init__(self, assets: AssetLibrary, seed: Optional[int] = None):
        if seed is None:
            seed = random.randrange(0, 2**32 - 1)
        self.seed = seed
        self.rng = random.Random(seed)
        self.assets = assets
        self.enemies: List[Enemy] = []
        self.platforms: List[Platform] = []
        self.enemy_t = ENEMY_FIRST_S
        self.platform_t = PLATFORM_FIRST_S

    def reset(self):
        """Empty the world and re-arm the timers. The RNG keeps its stream."""
        self.enemies = []
        self.platforms = []
        self.enemy_t = ENEMY_FIRST_S
        self.platform_t = PLATFORM_FIRST_S

    def spawn_enemy(self) -> Enemy:
        variant = self.rng.randrange(len(self.assets.enemies))
        sprite = self.assets.enemies[variant]
        h = float(ENEMY_H)
        scale = h / sprite.height
        enemy = Enemy(
            x=float(SPAWN_X),
            y=GROUND_Y - h + ENEMY_SINK,
            w=sprite.width * scale,
            h=h,
            variant=variant,
        )
        self.enemies.append(enemy)
        self.enemy_t = self.rng.uniform(ENEMY_MIN_S, ENEMY_MAX_S)
        logger.debug("enemy v%d w=%.1f, next in %.2fs", variant, enemy.w, self.enemy_t)
        return enemy

    def spawn_platform(self) -> Platform:
        platform = Platform(
            x=float(SPAWN_X),
            y=self.rng.uniform(PLATFORM_TOP_MIN, PLATFORM_TOP_MAX),
            w=float(self.rng.choice(PLATFORM_WIDTHS)),
        )
        self.platforms.append(platform)
        self.platform_t = self.rng.uniform(PLATFORM_MIN_S, PLATFORM_MAX_S)
        logger.debug("platform w=%.0f y=%.1f, next in %.2fs", platform.w, platform.y, self.platform_t)
        return platform

    def update_and_generate(self, dt: float, scroll_speed: float):
        """Tick timers (spawning on expiry), scroll everything left, drop what left the screen."""
        self.enemy_t -= dt
        if self.enemy_t <= 0:
            self.spawn_enemy()

        self.platform_t -= dt
        if self.platform_t <= 0:
            self.spawn_platform()

        dx = scroll_speed * dt
        for e in self.enemies:
            e.x -= dx
        for p in self.platforms:
            p.x -= dx

        self.enemies = [e for e in self.enemies if e.x + e.w > CULL_X]
        self.platforms = [p for p in self.platforms if p.x + p.w > CULL_X]
