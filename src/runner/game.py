# src/runner/game.py
import sys, argparse, logging
import pygame
from pygame import K_SPACE, K_ESCAPE, K_r

from .assets import AssetLoadError, load_assets
from .config import (
    WIDTH, HEIGHT, FPS, MAX_FRAME_DT, ASSET_DIR_DEFAULT, SEED_DEFAULT,
    STATUS_LOADING, STATUS_LOAD_ERROR,
)
from .render import Renderer, draw_status_screen
from .world import InputEvent, World

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Sky Runner")
    p.add_argument("--seed", type=int, default=SEED_DEFAULT,
                   help="Spawner seed. Omit for a fresh random layout.")
    p.add_argument("--assets", type=str, default=ASSET_DIR_DEFAULT,
                   help="Directory holding idle/jump/fall/run1-7/enemy1-3 PNGs.")
    p.add_argument("--fps", type=int, default=FPS)
    p.add_argument("-v", "--verbose", action="store_true", help="Log spawns (DEBUG)")
    return p.parse_args(argv)


def _set_status(text: str):
    pygame.display.set_caption(f"Sky Runner - {text}")


def _wait_for_quit(screen, clock, text: str):
    """Load failed: keep showing the error until the window is closed."""
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT or (event.type == pygame.KEYDOWN and event.key == K_ESCAPE):
                pygame.quit(); sys.exit(1)
        draw_status_screen(screen, text)
        pygame.display.flip()
        clock.tick(10)


def run(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock = pygame.time.Clock()

    _set_status(STATUS_LOADING)
    draw_status_screen(screen, STATUS_LOADING)
    pygame.display.flip()

    try:
        assets = load_assets(args.assets)
    except AssetLoadError as e:
        logger.error("%s", e)
        _set_status(STATUS_LOAD_ERROR)
        _wait_for_quit(screen, clock, STATUS_LOAD_ERROR)
        return

    world = World(assets, seed=args.seed)
    renderer = Renderer(assets)
    world.reset()
    status = world.state.status
    _set_status(status)
    clock.tick()  # don't count loading time as the first frame

    while True:
        dt = clock.tick(args.fps) / 1000.0
        if dt > MAX_FRAME_DT:  # clamp stalls
            dt = MAX_FRAME_DT

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if event.type == pygame.KEYDOWN:
                if event.key == K_ESCAPE:
                    pygame.quit(); sys.exit()
                if event.key == K_SPACE:
                    world.push(InputEvent.JUMP)
                if event.key == K_r:
                    world.push(InputEvent.RESTART)
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                world.push(InputEvent.JUMP)

        world.tick(dt)

        snap = world.snapshot()
        if snap.status != status:
            status = snap.status
            _set_status(status)
        renderer.draw(screen, snap)
        pygame.display.flip()


if __name__ == "__main__":
    run()
