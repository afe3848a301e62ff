# src/env/observations.py
"""
Vector observation for the runner (shape (10,), float32):

    [y_norm, vy_norm, on_ground, coyote_ready, speed_norm,
     enemy1_dx, enemy1_w, enemy2_dx, platform_dx, platform_y]

Distances are measured from the player's right edge (enemies) or x
(platforms), divided by WIDTH and clipped to [0, 1]; 1.0 means
"nothing ahead". Vertical values are divided by GROUND_Y.
"""
from __future__ import annotations
from typing import List, Sequence

import numpy as np

from src.runner.config import (
    WIDTH, GROUND_Y, PLAYER_H, JUMP_VY, SPEED_BASE, SPEED_MAX, ENEMY_H,
)

OBS_SIZE = 10
VY_SCALE = abs(JUMP_VY)
ENEMY_W_SCALE = 2.0 * ENEMY_H


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else (1.0 if x > 1.0 else x)


def _enemies_ahead(player, enemies: Sequence) -> List:
    """Enemies not yet fully behind the player, nearest first."""
    ahead = [e for e in enemies if e.x + e.w > player.x]
    ahead.sort(key=lambda e: e.x)
    return ahead


def _platform_ahead(player, platforms: Sequence):
    ahead = [p for p in platforms if p.x + p.w > player.x]
    return min(ahead, key=lambda p: p.x) if ahead else None


def build_observation(player, enemies: Sequence, platforms: Sequence, scroll_speed: float) -> np.ndarray:
    y_norm = _clamp01(player.y / max(1.0, GROUND_Y - PLAYER_H))
    vy_norm = max(-1.0, min(1.0, player.vy / VY_SCALE))
    speed_norm = _clamp01((scroll_speed - SPEED_BASE) / (SPEED_MAX - SPEED_BASE))

    front = player.x + player.w
    ahead = _enemies_ahead(player, enemies)
    e1_dx, e1_w, e2_dx = 1.0, 0.0, 1.0
    if ahead:
        e1_dx = _clamp01((ahead[0].x - front) / WIDTH)
        e1_w = _clamp01(ahead[0].w / ENEMY_W_SCALE)
    if len(ahead) > 1:
        e2_dx = _clamp01((ahead[1].x - front) / WIDTH)

    plat = _platform_ahead(player, platforms)
    p_dx, p_y = 1.0, 1.0
    if plat is not None:
        p_dx = _clamp01((plat.x - player.x) / WIDTH)
        p_y = _clamp01(plat.y / GROUND_Y)

    return np.array([
        y_norm, vy_norm,
        1.0 if player.on_ground else 0.0,
        1.0 if player.coyote > 0 else 0.0,
        speed_norm,
        e1_dx, e1_w, e2_dx,
        p_dx, p_y,
    ], dtype=np.float32)


def observation_bounds():
    low = np.zeros(OBS_SIZE, dtype=np.float32)
    low[1] = -1.0
    high = np.ones(OBS_SIZE, dtype=np.float32)
    return low, high
