# src/runner/assets.py
"""
Sprite lookup injected into the simulation.

The simulation only reads sprite sizes (enemy aspect ratio) and the number
of run frames; the opaque ``handle`` (a pygame Surface, or None for headless
sprites) is passed straight through to the renderer.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import pygame

from .config import (
    ASSET_DIR_DEFAULT, IDLE_FILE, JUMP_FILE, FALL_FILE, RUN_FILES, ENEMY_FILES,
    PLAYER_W, PLAYER_H, RUN_FRAMES,
)

logger = logging.getLogger(__name__)


class AssetLoadError(RuntimeError):
    """A required sprite could not be loaded; the session cannot start."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"failed to load {path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass(frozen=True)
class Sprite:
    width: int
    height: int
    handle: Optional[pygame.Surface] = None


@dataclass
class AssetLibrary:
    idle: Sprite
    jump: Sprite
    fall: Sprite
    run: List[Sprite] = field(default_factory=list)
    enemies: List[Sprite] = field(default_factory=list)

    @property
    def run_frames(self) -> int:
        return len(self.run)

    def player_sprite(self, anim: str, frame: int) -> Sprite:
        """Sprite for the player's animation state (run uses the frame index)."""
        if anim == "run":
            return self.run[frame % len(self.run)]
        if anim == "jump":
            return self.jump
        if anim == "fall":
            return self.fall
        return self.idle


def _load_one(asset_dir: str, name: str) -> Sprite:
    path = os.path.join(asset_dir, name)
    try:
        surf = pygame.image.load(path)
    except (pygame.error, FileNotFoundError, OSError) as e:
        raise AssetLoadError(path, str(e)) from e
    # convert_alpha needs a display; headless loads keep the raw surface
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        surf = surf.convert_alpha()
    w, h = surf.get_size()
    if w <= 0 or h <= 0:
        raise AssetLoadError(path, "image has zero size")
    return Sprite(width=w, height=h, handle=surf)


def load_assets(asset_dir: str = ASSET_DIR_DEFAULT) -> AssetLibrary:
    """
    Load every sprite the game needs. All-or-nothing: the first failure
    raises AssetLoadError and nothing is returned.
    """
    logger.info("loading sprites from %s", asset_dir)
    lib = AssetLibrary(
        idle=_load_one(asset_dir, IDLE_FILE),
        jump=_load_one(asset_dir, JUMP_FILE),
        fall=_load_one(asset_dir, FALL_FILE),
        run=[_load_one(asset_dir, n) for n in RUN_FILES],
        enemies=[_load_one(asset_dir, n) for n in ENEMY_FILES],
    )
    logger.info("loaded %d run frames, %d enemy variants", lib.run_frames, len(lib.enemies))
    return lib


def headless_assets(
    enemy_sizes: Sequence[Tuple[int, int]] = ((90, 100), (120, 100), (70, 100)),
    run_frames: int = RUN_FRAMES,
) -> AssetLibrary:
    """Size-only sprites for the environment and tests (no image files, no display)."""
    box = Sprite(PLAYER_W, PLAYER_H)
    return AssetLibrary(
        idle=box,
        jump=box,
        fall=box,
        run=[box] * run_frames,
        enemies=[Sprite(w, h) for (w, h) in enemy_sizes],
    )
