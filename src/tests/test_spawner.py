# src/tests/test_spawner.py
from __future__ import annotations
import sys

import pytest

from src.runner.assets import headless_assets
from src.runner.config import (
    GROUND_Y, SPAWN_X, ENEMY_H, ENEMY_SINK, PLATFORM_WIDTHS, PLATFORM_H,
    PLATFORM_TOP_MIN, PLATFORM_TOP_MAX, ENEMY_FIRST_S, PLATFORM_FIRST_S,
)
from src.runner.spawner import Enemy, Platform, Spawner

DT = 1.0 / 60.0


def quiet_spawner(seed: int = 7) -> Spawner:
    """Spawner whose timers will not fire during a test."""
    sp = Spawner(headless_assets(), seed=seed)
    sp.enemy_t = sp.platform_t = 1e9
    return sp


def test_initial_timers():
    sp = Spawner(headless_assets(), seed=1)
    assert sp.enemy_t == ENEMY_FIRST_S
    assert sp.platform_t == PLATFORM_FIRST_S
    assert sp.enemies == [] and sp.platforms == []


def test_seed_is_kept_when_randomized():
    sp = Spawner(headless_assets(), seed=None)
    assert isinstance(sp.seed, int)


def test_enemy_shape_and_timer():
    sp = Spawner(headless_assets(), seed=3)
    for _ in range(50):
        e = sp.spawn_enemy()
        sprite = sp.assets.enemies[e.variant]
        assert e.x == SPAWN_X
        assert e.h == ENEMY_H
        assert e.y == GROUND_Y - ENEMY_H + ENEMY_SINK
        assert e.w == pytest.approx(sprite.width * ENEMY_H / sprite.height)
        assert 1.1 <= sp.enemy_t <= 1.8
    assert {e.variant for e in sp.enemies} == {0, 1, 2}


def test_enemy_width_follows_aspect_ratio():
    sp = Spawner(headless_assets(enemy_sizes=((50, 200),)), seed=3)
    e = sp.spawn_enemy()
    assert e.w == pytest.approx(25.0)


def test_platform_shape_and_timer():
    sp = Spawner(headless_assets(), seed=4)
    widths = set()
    for _ in range(60):
        p = sp.spawn_platform()
        widths.add(p.w)
        assert p.x == SPAWN_X
        assert p.h == PLATFORM_H
        assert PLATFORM_TOP_MIN <= p.y <= PLATFORM_TOP_MAX
        assert 2.4 <= sp.platform_t <= 3.4
    assert widths == set(float(w) for w in PLATFORM_WIDTHS)


def test_first_spawns_follow_initial_timers():
    sp = Spawner(headless_assets(), seed=5)
    sp.update_and_generate(ENEMY_FIRST_S - 0.01, 420.0)
    assert sp.enemies == []
    sp.update_and_generate(0.02, 420.0)
    assert len(sp.enemies) == 1
    assert sp.platforms == []
    sp.update_and_generate(PLATFORM_FIRST_S, 420.0)
    assert len(sp.platforms) == 1


def test_scroll_is_exact():
    sp = quiet_spawner()
    sp.enemies = [Enemy(500.0, 358.0, 90.0, 100.0, 0)]
    sp.platforms = [Platform(700.0, 300.0, 160.0)]
    sp.update_and_generate(0.1, 500.0)
    assert sp.enemies[0].x == pytest.approx(450.0)
    assert sp.platforms[0].x == pytest.approx(650.0)


def test_cull_past_left_edge_keeps_order():
    sp = quiet_spawner()
    sp.enemies = [
        Enemy(-40.0, 0.0, 10.0, 100.0, 0),   # right edge -30: stays
        Enemy(-60.0, 0.0, 10.0, 100.0, 1),   # right edge -50: gone
        Enemy(300.0, 0.0, 10.0, 100.0, 2),
    ]
    sp.platforms = [Platform(-250.0, 300.0, 200.0), Platform(10.0, 300.0, 120.0)]
    sp.update_and_generate(0.0, 420.0)
    assert [e.variant for e in sp.enemies] == [0, 2]
    assert [p.x for p in sp.platforms] == [10.0]


def test_entities_eventually_leave():
    sp = quiet_spawner()
    sp.spawn_enemy()
    sp.spawn_platform()
    sp.enemy_t = sp.platform_t = 1e9
    for _ in range(60 * 4):
        sp.update_and_generate(DT, 420.0)
    assert sp.enemies == [] and sp.platforms == []


def test_same_seed_same_stream():
    def run(seed):
        sp = Spawner(headless_assets(), seed=seed)
        out = []
        for _ in range(60 * 20):
            sp.update_and_generate(DT, 500.0)
            out.append([(e.x, e.w, e.variant) for e in sp.enemies] + [(p.x, p.y, p.w) for p in sp.platforms])
        return out

    assert run(11) == run(11)
    assert run(11) != run(12)


def test_reset_clears_and_rearms():
    sp = Spawner(headless_assets(), seed=8)
    for _ in range(300):
        sp.update_and_generate(DT, 420.0)
    sp.reset()
    assert sp.enemies == [] and sp.platforms == []
    assert sp.enemy_t == ENEMY_FIRST_S and sp.platform_t == PLATFORM_FIRST_S


def main():
    sys.exit(pytest.main([__file__, "-q"]))


if __name__ == "__main__":
    main()
