# src/tests/test_assets.py
from __future__ import annotations
import os
import sys

import pygame
import pytest

from src.runner.assets import AssetLoadError, Sprite, headless_assets, load_assets
from src.runner.config import (
    IDLE_FILE, JUMP_FILE, FALL_FILE, RUN_FILES, ENEMY_FILES, RUN_FRAMES, PLAYER_W, PLAYER_H,
)
from tools.generate_sprites import generate


def write_png(path, size):
    surf = pygame.Surface(size, pygame.SRCALPHA)
    surf.fill((200, 80, 80, 255))
    pygame.image.save(surf, str(path))


def write_full_set(asset_dir):
    for name in (IDLE_FILE, JUMP_FILE, FALL_FILE) + RUN_FILES:
        write_png(asset_dir / name, (64, 96))
    for i, name in enumerate(ENEMY_FILES):
        write_png(asset_dir / name, (40 + 20 * i, 50))


def test_load_full_set(tmp_path):
    write_full_set(tmp_path)
    lib = load_assets(str(tmp_path))
    assert lib.run_frames == RUN_FRAMES
    assert [(s.width, s.height) for s in lib.enemies] == [(40, 50), (60, 50), (80, 50)]
    assert all(s.handle is not None for s in lib.run + lib.enemies)


def test_missing_directory_fails(tmp_path):
    with pytest.raises(AssetLoadError) as exc:
        load_assets(str(tmp_path / "nope"))
    assert exc.value.path.endswith(IDLE_FILE)


def test_single_missing_file_fails_whole_load(tmp_path):
    write_full_set(tmp_path)
    os.remove(tmp_path / ENEMY_FILES[2])
    with pytest.raises(AssetLoadError) as exc:
        load_assets(str(tmp_path))
    assert exc.value.path.endswith(ENEMY_FILES[2])


def test_corrupt_file_fails(tmp_path):
    write_full_set(tmp_path)
    (tmp_path / RUN_FILES[3]).write_bytes(b"not a png")
    with pytest.raises(AssetLoadError):
        load_assets(str(tmp_path))


def test_generated_sprite_set_loads(tmp_path):
    generate(str(tmp_path))
    lib = load_assets(str(tmp_path))
    assert lib.run_frames == RUN_FRAMES
    assert (lib.idle.width, lib.idle.height) == (PLAYER_W, PLAYER_H)
    assert [(s.width, s.height) for s in lib.enemies] == [(90, 100), (120, 100), (70, 100)]


def test_headless_library():
    lib = headless_assets()
    assert lib.run_frames == RUN_FRAMES
    assert len(lib.enemies) == 3
    assert lib.idle == Sprite(PLAYER_W, PLAYER_H)
    assert all(s.handle is None for s in lib.enemies)


def test_player_sprite_by_animation():
    lib = headless_assets()
    lib.run = [Sprite(i + 1, 1) for i in range(RUN_FRAMES)]
    lib.jump, lib.fall, lib.idle = Sprite(100, 1), Sprite(200, 1), Sprite(300, 1)
    assert lib.player_sprite("run", 3).width == 4
    assert lib.player_sprite("jump", 3).width == 100
    assert lib.player_sprite("fall", 0).width == 200
    assert lib.player_sprite("idle", 0).width == 300


def main():
    sys.exit(pytest.main([__file__, "-q"]))


if __name__ == "__main__":
    main()
