# src/runner/collisions.py
from __future__ import annotations
from typing import NamedTuple, Optional, Sequence, Tuple

from .config import PLAYER_HIT_INSET, PLAYER_HIT_SCALE, ENEMY_HIT_INSET, ENEMY_HIT_SCALE


class Box(NamedTuple):
    x: float
    y: float
    w: float
    h: float


def rect_hit(a: Box, b: Box) -> bool:
    """Strict AABB overlap: touching edges do not count."""
    return (a.x < b.x + b.w and a.x + a.w > b.x and
            a.y < b.y + b.h and a.y + a.h > b.y)


def shrink(x: float, y: float, w: float, h: float,
           inset: Tuple[float, float], scale: Tuple[float, float]) -> Box:
    """Hitbox inside a sprite box; inset and scale are fractions of w/h."""
    return Box(x + w * inset[0], y + h * inset[1], w * scale[0], h * scale[1])


def player_hitbox(player) -> Box:
    # forgiving: drops the hair/feet margins of the sprite
    return shrink(player.x, player.y, player.w, player.h, PLAYER_HIT_INSET, PLAYER_HIT_SCALE)


def enemy_hitbox(enemy) -> Box:
    return shrink(enemy.x, enemy.y, enemy.w, enemy.h, ENEMY_HIT_INSET, ENEMY_HIT_SCALE)


def first_hit(player, enemies: Sequence) -> Optional[int]:
    """Index of the first enemy whose hitbox overlaps the player's, else None."""
    me = player_hitbox(player)
    for i, e in enumerate(enemies):
        if rect_hit(me, enemy_hitbox(e)):
            return i
    return None
