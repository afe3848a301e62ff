#!/usr/bin/env python3
"""Generate the runner's sprite set (player poses, run cycle, enemies) as PNGs."""

import argparse
import math
import os

import pygame

from src.runner.config import (
    ASSET_DIR_DEFAULT, IDLE_FILE, JUMP_FILE, FALL_FILE, RUN_FILES, ENEMY_FILES,
    PLAYER_W, PLAYER_H,
)

SKIN = (255, 214, 170, 255)
SHIRT = (37, 99, 235, 255)
PANTS = (30, 41, 59, 255)
OUTLINE = (15, 23, 42, 255)


def _limb(surface, color, start, angle_deg, length, width=7):
    """Draw a limb from start at angle (0 = straight down). Returns the end point."""
    a = math.radians(angle_deg)
    end = (start[0] + math.sin(a) * length, start[1] + math.cos(a) * length)
    pygame.draw.line(surface, color, start, end, width)
    pygame.draw.circle(surface, color, (int(end[0]), int(end[1])), width // 2)
    return end


def create_runner(arm_a, arm_b, leg_a, leg_b, knee_a=0, knee_b=0, w=PLAYER_W, h=PLAYER_H):
    """Stick-ish runner posed by limb angles (degrees, positive = forward)."""
    surface = pygame.Surface((w, h), pygame.SRCALPHA)
    cx = w // 2
    head_r = h // 10
    neck = (cx, head_r * 2 + 4)
    hip = (cx, int(h * 0.58))

    # back limbs first so the front ones overlap
    _limb(surface, PANTS, _limb(surface, PANTS, hip, leg_b, h * 0.2), leg_b - knee_b, h * 0.2)
    _limb(surface, SKIN, neck, arm_b, h * 0.28, 6)

    pygame.draw.line(surface, SHIRT, neck, hip, 16)
    pygame.draw.circle(surface, SKIN, (cx, head_r + 3), head_r)
    pygame.draw.circle(surface, OUTLINE, (cx, head_r + 3), head_r, 2)
    pygame.draw.circle(surface, OUTLINE, (cx + head_r // 2, head_r + 1), 2)

    _limb(surface, PANTS, _limb(surface, PANTS, hip, leg_a, h * 0.2), leg_a - knee_a, h * 0.2)
    _limb(surface, SKIN, neck, arm_a, h * 0.28, 6)
    return surface


def create_run_frame(i, frames):
    phase = 2 * math.pi * i / frames
    swing = 40 * math.sin(phase)
    bend = 35 * max(0.0, math.cos(phase))
    return create_runner(-swing, swing, swing, -swing, knee_a=bend, knee_b=35 - bend)


def create_slime(w=90, h=100, color=(34, 197, 94, 255)):
    """Round blob enemy."""
    surface = pygame.Surface((w, h), pygame.SRCALPHA)
    body = pygame.Rect(4, h // 3, w - 8, h - h // 3 - 2)
    pygame.draw.ellipse(surface, color, body)
    pygame.draw.ellipse(surface, OUTLINE, body, 2)
    for ex in (w // 3, 2 * w // 3):
        pygame.draw.circle(surface, (255, 255, 255, 255), (ex, h // 2 + 4), 7)
        pygame.draw.circle(surface, OUTLINE, (ex - 2, h // 2 + 5), 3)
    return surface


def create_spiky(w=120, h=100, color=(239, 68, 68, 255)):
    """Wide crawler with a row of spikes on its back."""
    surface = pygame.Surface((w, h), pygame.SRCALPHA)
    base_y = h // 2
    spikes = 5
    step = w / spikes
    for k in range(spikes):
        x0 = k * step
        pygame.draw.polygon(surface, (127, 29, 29, 255),
                            [(x0, base_y + 6), (x0 + step / 2, 8), (x0 + step, base_y + 6)])
    body = pygame.Rect(2, base_y, w - 4, h - base_y - 2)
    pygame.draw.rect(surface, color, body, border_radius=14)
    pygame.draw.rect(surface, OUTLINE, body, 2, border_radius=14)
    pygame.draw.circle(surface, (255, 255, 255, 255), (w // 5, base_y + 16), 6)
    return surface


def create_totem(w=70, h=100, color=(168, 85, 247, 255)):
    """Tall narrow enemy."""
    surface = pygame.Surface((w, h), pygame.SRCALPHA)
    body = pygame.Rect(6, 4, w - 12, h - 6)
    pygame.draw.rect(surface, color, body, border_radius=10)
    pygame.draw.rect(surface, OUTLINE, body, 2, border_radius=10)
    for k in range(3):
        y = 18 + k * 26
        pygame.draw.line(surface, OUTLINE, (10, y), (w - 10, y), 2)
    pygame.draw.circle(surface, (250, 204, 21, 255), (w // 2, 32), 8)
    return surface


def generate(out_dir):
    os.makedirs(out_dir, exist_ok=True)
    sprites = {
        IDLE_FILE: create_runner(-8, 8, 4, -4),
        JUMP_FILE: create_runner(-150, -120, 30, -20, knee_a=60, knee_b=70),
        FALL_FILE: create_runner(-110, 110, 10, -25, knee_a=20, knee_b=10),
    }
    for i, name in enumerate(RUN_FILES):
        sprites[name] = create_run_frame(i, len(RUN_FILES))
    for name, surf in zip(ENEMY_FILES, (create_slime(), create_spiky(), create_totem())):
        sprites[name] = surf

    for name, surf in sprites.items():
        pygame.image.save(surf, os.path.join(out_dir, name))
    return sorted(sprites)


def main(argv=None):
    ap = argparse.ArgumentParser(description=__doc__)
    ap.add_argument("--out", type=str, default=ASSET_DIR_DEFAULT, help="Output directory")
    args = ap.parse_args(argv)
    names = generate(args.out)
    print(f"Wrote {len(names)} sprites to {args.out}/")


if __name__ == "__main__":
    main()
