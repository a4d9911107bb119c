"""
App shell: window and main loop. One diffusion tick per frame, then the board is drawn and
the loop sleeps sleep_interval_ms. Engine, UI and config are wired here.
"""

import argparse
import dataclasses
import logging
import sys

import pygame

from world import DiffusionEngine, VARIANTS
from ui.grid_view import draw_grid
import config

TITLE = "Entropy"
BACKGROUND = (0, 0, 0)

logger = logging.getLogger(__name__)


def run(cfg: config.SimConfig) -> int:
    """Open the window and animate until it is closed. Returns the number of ticks run."""
    engine = DiffusionEngine(cfg)
    engine.initialize()

    h, w = cfg.dims
    pygame.init()
    screen = pygame.display.set_mode((w * cfg.size_factor, h * cfg.size_factor))
    clock = pygame.time.Clock()
    paused = False
    running = True

    while running:
        clock.tick()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    paused = not paused
        if not running:
            break

        if not paused:
            engine.step()

        screen.fill(BACKGROUND)
        draw_grid(screen, engine.board, cfg.size_factor, cfg.max_energy)
        state = " (paused)" if paused else ""
        pygame.display.set_caption(
            f"{TITLE} [{engine.variant}] tick {engine.tick} energy {engine.total_energy():.6g}{state}"
        )
        pygame.display.flip()
        pygame.time.wait(cfg.sleep_interval_ms)

    pygame.quit()
    logger.info("Window closed after %d ticks (%.1f fps)", engine.tick, clock.get_fps())
    return engine.tick


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Randomized energy diffusion on a 2D grid")
    parser.add_argument("--config", default=None, help="JSON config file (default: ./config.json if present)")
    # Overrides for values from the config file
    parser.add_argument("--variant", choices=VARIANTS, default=None, help="Diffusion variant")
    parser.add_argument("--seed", type=int, default=None, help="Random seed, -1 for a fresh one")
    parser.add_argument("--write-config", metavar="PATH", default=None,
                        help="Write the resolved config to PATH and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every tick")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        cfg = config.load_config(args.config)
        overrides = {}
        if args.variant is not None:
            overrides["variant"] = args.variant
        if args.seed is not None:
            overrides["seed"] = args.seed
        if overrides:
            cfg = dataclasses.replace(cfg, **overrides)
    except config.ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    if args.write_config:
        path = config.save_config(cfg, args.write_config)
        logger.info("Wrote config to %s", path)
        return 0

    run(cfg)
    return 0


if __name__ == "__main__":
    sys.exit(main())
