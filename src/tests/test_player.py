# src/tests/test_player.py
"""
Player physics: gravity integration, ground/platform resolution,
coyote time + jump buffer, animation.

Usage (from repo root):
  python -m pytest src/tests/test_player.py
  python -m src.tests.test_player
"""
from __future__ import annotations
import sys

import pytest

from src.runner.config import GRAVITY, GROUND_Y, PLAYER_H, JUMP_VY, COYOTE_S, RUN_FRAMES
from src.runner.player import Player
from src.runner.spawner import Platform

DT = 1.0 / 60.0


def grounded_player() -> Player:
    p = Player()
    p.reset()
    return p


def airborne_player(y: float, vy: float = 0.0, coyote: float = -1.0) -> Player:
    return Player(y=y, vy=vy, on_ground=False, coyote=coyote)


def test_reset_stands_on_ground():
    p = grounded_player()
    assert p.y == GROUND_Y - PLAYER_H
    assert p.vy == 0.0 and p.on_ground
    assert p.anim == "run" and p.frame == 0
    assert p.coyote == 0.0 and p.jump_buffer == 0.0


@pytest.mark.parametrize("dt", [0.0, DT, 1.0 / 30.0, 0.25])
def test_grounded_stays_grounded_without_input(dt):
    p = grounded_player()
    for _ in range(120):
        p.step(dt, [])
        assert p.on_ground
        assert p.vy == 0.0
        assert p.y == GROUND_Y - PLAYER_H


def test_free_fall_integration_order():
    p = Player(y=0.0, vy=0.0, on_ground=False)
    for _ in range(30):  # 0.5s at 60 Hz
        p.step(DT, [])
    # velocity first, then position: y = g*dt^2 * (1+..+30) = 310, near the analytic 300
    assert p.y == pytest.approx(GRAVITY * DT * DT * 465, rel=1e-9)
    assert p.y == pytest.approx(310.0, rel=1e-9)
    assert p.vy == pytest.approx(1200.0)
    assert not p.on_ground


def test_jump_from_ground_fires_once_per_press():
    p = grounded_player()
    p.request_jump()
    jumps = 0
    vys = []
    for _ in range(60):
        if p.step(DT, []):
            jumps += 1
            vys.append(p.vy)
    assert jumps == 1
    assert vys == [JUMP_VY]


def test_jump_then_next_tick_is_airborne_and_rising():
    p = grounded_player()
    p.coyote = COYOTE_S
    p.request_jump()
    assert p.step(DT, [])
    assert p.vy == JUMP_VY
    assert p.jump_buffer == 0.0 and p.coyote == 0.0

    p.step(DT, [])
    assert not p.on_ground
    assert p.anim == "jump"
    assert p.vy < 0


def test_coyote_window_allows_late_jump():
    p = airborne_player(y=200.0, coyote=0.05)
    p.request_jump()
    assert p.step(DT, [])
    assert p.vy == JUMP_VY


def test_coyote_window_expired_blocks_jump():
    p = airborne_player(y=200.0, coyote=0.01)
    p.request_jump()
    assert not p.step(DT, [])
    assert p.vy > 0
    assert p.jump_buffer > 0   # still remembered for a landing


def test_coyote_counts_down_below_zero():
    p = airborne_player(y=0.0, coyote=0.0)
    for _ in range(3):
        p.step(DT, [])
    assert p.coyote == pytest.approx(-3 * DT)


def test_buffered_press_fires_on_landing():
    rest = GROUND_Y - PLAYER_H
    p = airborne_player(y=rest - 5.0, vy=600.0)
    p.request_jump()
    assert p.step(DT, [])
    assert p.vy == JUMP_VY


def test_buffered_press_expires_in_the_air():
    p = airborne_player(y=0.0)
    p.request_jump()
    jumped = False
    for _ in range(90):
        jumped = p.step(DT, []) or jumped
    assert not jumped
    assert p.on_ground and p.vy == 0.0
    assert p.jump_buffer <= 0.0


def test_lands_on_platform_top():
    plat = Platform(x=100.0, y=300.0, w=160.0)
    p = airborne_player(y=300.0 - PLAYER_H - 2.0, vy=300.0)
    p.step(DT, [plat])
    assert p.on_ground
    assert p.y == 300.0 - PLAYER_H
    assert p.vy == 0.0
    assert p.coyote == COYOTE_S


def test_platform_edge_graze_falls_through():
    # platform starts exactly at x + 0.6w -> outside the landing band
    p = airborne_player(y=300.0 - PLAYER_H - 2.0, vy=300.0)
    plat = Platform(x=p.x + p.w * 0.6, y=300.0, w=160.0)
    p.step(DT, [plat])
    assert not p.on_ground
    assert p.y > 300.0 - PLAYER_H


def test_rising_through_platform_does_not_land():
    plat = Platform(x=100.0, y=300.0, w=160.0)
    p = airborne_player(y=300.0 - PLAYER_H + 10.0, vy=-800.0)
    p.step(DT, [plat])
    assert not p.on_ground
    assert p.vy < 0


def test_overlapping_platform_landings_last_wins():
    high = Platform(x=100.0, y=300.0, w=160.0)
    low = Platform(x=100.0, y=302.0, w=160.0)

    # a higher platform later in the list re-snaps over an earlier landing
    p = airborne_player(y=300.0 - PLAYER_H - 2.0, vy=300.0)
    p.step(DT, [low, high])
    assert p.y == 300.0 - PLAYER_H
    assert p.on_ground and p.vy == 0.0

    # once snapped, the feet no longer cross a lower platform listed later
    p = airborne_player(y=300.0 - PLAYER_H - 2.0, vy=300.0)
    p.step(DT, [high, low])
    assert p.y == 300.0 - PLAYER_H
    assert p.on_ground and p.vy == 0.0


def test_fall_animation_when_descending():
    p = airborne_player(y=0.0)
    p.step(DT, [])
    assert p.anim == "fall"


def test_run_cycle_cadence_and_wrap():
    p = grounded_player()
    for _ in range(5):
        p.step(DT, [])
    assert p.frame == 0
    p.step(DT, [])
    assert p.frame == 1
    for _ in range(6 * (RUN_FRAMES - 1)):
        p.step(DT, [])
    assert p.frame == 0


def main():
    sys.exit(pytest.main([__file__, "-q"]))


if __name__ == "__main__":
    main()
