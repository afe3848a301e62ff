# src/runner/render.py
from __future__ import annotations
import random
from typing import Dict, Optional, Tuple

import pygame

from .assets import AssetLibrary, Sprite
from .config import (
    WIDTH, HEIGHT, GROUND_Y,
    COLOR_SKY_TOP, COLOR_SKY_BOTTOM, COLOR_MOUNTAIN, COLOR_GROUND,
    COLOR_PLAT, COLOR_PLAT_LIP, COLOR_HUD, COLOR_OVERLAY, COLOR_FG,
    COLOR_PLAYER_BOX, COLOR_ENEMY_BOX,
)
from .world import Snapshot

MOUNTAIN_SPACING = 260
MOUNTAIN_H = 160
MOUNTAIN_SPEED = 20.0   # px/s, far layer
PLAT_LIP_H = 6


def _vertical_gradient(size: Tuple[int, int], top, bottom) -> pygame.Surface:
    w, h = size
    surf = pygame.Surface((w, h))
    for y in range(h):
        t = y / max(1, h - 1)
        c = tuple(int(top[i] + (bottom[i] - top[i]) * t) for i in range(3))
        pygame.draw.line(surf, c, (0, y), (w, y))
    return surf


class Renderer:
    """
    Draws a Snapshot. Never touches the World itself.
    Sprites without a handle (headless) are drawn as flat boxes.
    """
    def __init__(self, assets: AssetLibrary, jitter_seed: Optional[int] = None):
        self.assets = assets
        self.jitter = random.Random(jitter_seed)
        self.frame = pygame.Surface((WIDTH, HEIGHT))
        self.sky = _vertical_gradient((WIDTH, HEIGHT), COLOR_SKY_TOP, COLOR_SKY_BOTTOM)
        self.overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
        self.overlay.fill(COLOR_OVERLAY)
        self._scaled: Dict[Tuple[int, int, int], pygame.Surface] = {}
        self.font = pygame.font.SysFont("system-ui", 22, bold=True)
        self.big_font = pygame.font.SysFont("system-ui", 44, bold=True)
        self.status_font = pygame.font.SysFont("system-ui", 16)

    def _blit_sprite(self, surf: pygame.Surface, sprite: Sprite, x: float, y: float,
                     w: float, h: float, fallback_color):
        size = (max(1, int(w)), max(1, int(h)))
        if sprite.handle is None:
            pygame.draw.rect(surf, fallback_color, pygame.Rect((int(x), int(y)), size))
            return
        key = (id(sprite.handle),) + size
        img = self._scaled.get(key)
        if img is None:
            img = pygame.transform.smoothscale(sprite.handle, size)
            self._scaled[key] = img
        surf.blit(img, (int(x), int(y)))

    def draw(self, screen: pygame.Surface, snap: Snapshot):
        f = self.frame
        f.blit(self.sky, (0, 0))

        # far mountains, slow parallax
        shift = (snap.elapsed * MOUNTAIN_SPEED) % MOUNTAIN_SPACING
        for i in range(6):
            x0 = i * MOUNTAIN_SPACING - shift
            pygame.draw.polygon(f, COLOR_MOUNTAIN, [
                (x0, GROUND_Y),
                (x0 + MOUNTAIN_SPACING / 2, GROUND_Y - MOUNTAIN_H),
                (x0 + MOUNTAIN_SPACING, GROUND_Y),
            ])

        pygame.draw.rect(f, COLOR_GROUND, pygame.Rect(0, GROUND_Y, WIDTH, HEIGHT - GROUND_Y))

        for p in snap.platforms:
            pygame.draw.rect(f, COLOR_PLAT, pygame.Rect(int(p.x), int(p.y), int(p.w), int(p.h)))
            pygame.draw.rect(f, COLOR_PLAT_LIP,
                             pygame.Rect(int(p.x), int(p.y + p.h - PLAT_LIP_H), int(p.w), PLAT_LIP_H))

        pl = snap.player
        self._blit_sprite(f, self.assets.player_sprite(pl.anim, pl.frame),
                          pl.x, pl.y, pl.w, pl.h, COLOR_PLAYER_BOX)

        for e in snap.enemies:
            self._blit_sprite(f, self.assets.enemies[e.variant], e.x, e.y, e.w, e.h, COLOR_ENEMY_BOX)

        f.blit(self.font.render(f"Score: {snap.hud_score}", True, COLOR_HUD), (20, 16))
        status = self.status_font.render(snap.status, True, COLOR_HUD)
        f.blit(status, (20, HEIGHT - status.get_height() - 12))

        if snap.over:
            f.blit(self.overlay, (0, 0))
            txt = self.big_font.render("GAME OVER", True, COLOR_FG)
            f.blit(txt, (WIDTH // 2 - txt.get_width() // 2, HEIGHT // 2 - txt.get_height() // 2))

        ox = oy = 0
        if snap.shake > 0:
            ox = int(self.jitter.uniform(-snap.shake, snap.shake))
            oy = int(self.jitter.uniform(-snap.shake, snap.shake))
        screen.fill(COLOR_HUD)
        screen.blit(f, (ox, oy))


def draw_status_screen(screen: pygame.Surface, text: str):
    """Full-screen message used before a session can start (loading / load failure)."""
    screen.fill(COLOR_HUD)
    font = pygame.font.SysFont("system-ui", 28, bold=True)
    msg = font.render(text, True, COLOR_FG)
    screen.blit(msg, (WIDTH // 2 - msg.get_width() // 2, HEIGHT // 2 - msg.get_height() // 2))
