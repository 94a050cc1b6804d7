# main.py
import argparse
import logging
import os
import sys

# SDL picks its video driver when pygame loads
if "--headless" in sys.argv[1:]:
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import numpy as np
import pygame
from pygame.locals import *

from config import SCREEN_W, SCREEN_H, FPS, LOG_LEVEL
from canvas import Canvas
from renderer_opengl import GLPresenter, camera_crop
from scene import SceneState, SpaceScene, SceneryState, SceneryScene
from states import FillStrategy

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Software-rasterized animated scenes")
    p.add_argument(
        "--scene",
        choices=["space", "scenery"],
        default="space",
        help="rocket flight or mountain lake scenery",
    )
    p.add_argument(
        "--fill",
        choices=[s.value for s in FillStrategy],
        default=FillStrategy.SCANLINE.value,
        help="polygon fill strategy",
    )
    p.add_argument("--seed", type=int, default=None, help="random seed for stars and flames")
    p.add_argument(
        "--headless",
        action="store_true",
        help="render without a window (use with --save)",
    )
    p.add_argument("--frames", type=int, default=0, help="animation steps before rendering (headless)")
    p.add_argument("--save", type=str, default=None, help="write the camera view to this PNG path")
    p.add_argument("--log-level", dest="log_level", default=LOG_LEVEL)
    return p.parse_args(argv)


def save_png(canvas, camera, path):
    """Write the camera window of the canvas as a PNG, top row first."""
    view = camera_crop(canvas.to_rgb8(), camera)
    # surfarray wants (x, y) indexing with y pointing down
    surf = pygame.surfarray.make_surface(np.ascontiguousarray(np.flipud(view).transpose(1, 0, 2)))
    pygame.image.save(surf, path)
    logger.info("saved %dx%d snapshot to %s", view.shape[1], view.shape[0], path)


def make_scene(args):
    if args.scene == "scenery":
        return SceneryScene(), SceneryState()
    return SpaceScene(FillStrategy(args.fill), seed=args.seed), SceneState()


def init_pygame(caption):
    pygame.init()
    pygame.display.set_mode((SCREEN_W, SCREEN_H), DOUBLEBUF | OPENGL)
    pygame.display.set_caption(f"{caption} (software rasterizer)")


def run_headless(args):
    canvas = Canvas(SCREEN_W, SCREEN_H)
    scene, state = make_scene(args)
    state.advance(max(0, args.frames))
    scene.render(canvas, state)
    if args.save:
        save_png(canvas, state.camera, args.save)
    return canvas


def run_window(args):
    init_pygame("Scenery" if args.scene == "scenery" else "Rocket Flight")
    presenter = GLPresenter(SCREEN_W, SCREEN_H)
    canvas = Canvas(SCREEN_W, SCREEN_H)
    scene, state = make_scene(args)

    clock = pygame.time.Clock()
    running = True
    paused = False

    while running:
        clock.tick(FPS)

        for ev in pygame.event.get():
            if ev.type == QUIT:
                running = False
            elif ev.type == KEYDOWN:
                if ev.key == K_ESCAPE:
                    running = False
                elif ev.key == K_SPACE:
                    paused = not paused
                elif ev.key == K_r:
                    state.reset()
                elif ev.key == K_b and args.scene == "space":
                    scene.set_strategy(FillStrategy.BOUNDARY)
                elif ev.key == K_s and args.scene == "space":
                    scene.set_strategy(FillStrategy.SCANLINE)

        if not paused:
            state.advance()

        scene.render(canvas, state)
        presenter.clear()
        presenter.present(canvas, state.camera)
        pygame.display.flip()

    if args.save:
        save_png(canvas, state.camera, args.save)
    pygame.quit()


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.headless:
        run_headless(args)
    else:
        run_window(args)


if __name__ == "__main__":
    main()
