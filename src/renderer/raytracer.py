# renderer/raytracer.py
import logging
import math
import random
import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List

import numpy as np
from tqdm import tqdm

from core.errors import WorkerFailure
from core.vector import Vector3
from geometry.world import Scene
from renderer.config import RenderConfig
from renderer.integrator import ray_color
from renderer.tiles import TileBounds, assign_tiles, make_tiles
from renderer.tone_mapping import to_rgb8

logger = logging.getLogger(__name__)

def pixel_rng(seed: int, worker: int, x: int, y: int) -> random.Random:
    """
    Random generator for one pixel, derived from the global seed, the
    worker index and the pixel coordinates. Since tiles are assigned to
    workers by index, the same seed renders the same image only for the
    same thread count.
    """
    state = np.random.SeedSequence((seed, worker, x, y)).generate_state(2, dtype=np.uint64)
    return random.Random(int(state[0]) | (int(state[1]) << 64))

class Renderer:
    """
    Renders a scene into an RGB8 buffer of shape (height, width, 3), row 0
    at the top, by splitting the image into tiles and tracing them on a
    fixed pool of worker threads.
    """
    def __init__(self, scene: Scene, config: RenderConfig):
        self.scene = scene
        self.config = config.validate()

    def sample_pixel(self, col: int, row: int, rng) -> Vector3:
        """
        Sum of samples_per_pixel radiance estimates for pixel (col, row).
        Each sample jitters its position inside the pixel (box filter).
        """
        cfg = self.config
        scene = self.scene
        j = cfg.height - 1 - row  # viewport t grows upwards
        total = Vector3(0.0, 0.0, 0.0)
        for _ in range(cfg.samples_per_pixel):
            s = (col + rng.random()) / cfg.width
            t = (j + rng.random()) / cfg.height
            ray = scene.camera.get_ray(s, t, rng)
            color = ray_color(ray, scene.background, scene.world, scene.lights,
                              cfg.max_depth, rng)
            # A single bad sample must not poison the whole pixel.
            if not color.is_finite():
                color = Vector3(*(c if math.isfinite(c) else 0.0 for c in color.to_tuple()))
            total = total + color
        return total

    def render_tile(self, worker: int, tile: TileBounds, image: np.ndarray,
                    abort: threading.Event) -> bool:
        """
        Traces one tile and writes it into `image`. Returns False when the
        render was aborted before the tile was finished.
        """
        cfg = self.config
        accumulated = np.zeros((tile.height, tile.width, 3), dtype=np.float64)
        for row in range(tile.y0, tile.y1):
            for col in range(tile.x0, tile.x1):
                if abort.is_set():
                    return False
                rng = pixel_rng(cfg.seed, worker, col, row)
                c = self.sample_pixel(col, row, rng)
                accumulated[row - tile.y0, col - tile.x0] = (c.x, c.y, c.z)

        # Tiles never overlap, so writing without a lock is safe.
        image[tile.y0:tile.y1, tile.x0:tile.x1] = to_rgb8(accumulated, cfg.samples_per_pixel)
        return True

    def _run_worker(self, worker: int, tiles: List[TileBounds], image: np.ndarray,
                    abort: threading.Event, progress: tqdm):
        for tile in tiles:
            if not self.render_tile(worker, tile, image, abort):
                return
            logger.debug("Worker %d finished tile %s", worker, tile)
            progress.update(1)

    def render(self) -> np.ndarray:
        cfg = self.config
        logger.info("Rendering %s: %dx%d, %d spp, depth %d, %d thread(s)",
                    self.scene.name, cfg.width, cfg.height, cfg.samples_per_pixel,
                    cfg.max_depth, cfg.threads)
        start = time.perf_counter()

        image = np.zeros((cfg.height, cfg.width, 3), dtype=np.uint8)
        tiles = make_tiles(cfg.tile_size, cfg.width, cfg.height)
        assignments = assign_tiles(tiles, cfg.threads)
        abort = threading.Event()
        with tqdm(total=len(tiles), unit="tile", desc=self.scene.name,
                  disable=not logger.isEnabledFor(logging.INFO)) as progress:
            if cfg.threads == 1:
                try:
                    self._run_worker(0, assignments[0], image, abort, progress)
                except Exception as exc:
                    raise WorkerFailure(0, repr(exc)) from exc
            else:
                self._render_parallel(assignments, image, abort, progress)

        logger.info("Done in %.2f s", time.perf_counter() - start)
        return image

    def _render_parallel(self, assignments, image, abort, progress):
        failed_worker = None
        failure = None
        with ThreadPoolExecutor(max_workers=len(assignments),
                                thread_name_prefix="render") as pool:
            futures = {
                pool.submit(self._run_worker, worker, tiles, image, abort, progress): worker
                for worker, tiles in enumerate(assignments)
            }
            for future in as_completed(futures):
                exc = future.exception()
                if exc is not None and failure is None:
                    failed_worker, failure = futures[future], exc
                    # Remaining workers stop at their next pixel.
                    abort.set()
                    logger.error("Worker %d failed: %r; aborting render", failed_worker, exc)

        if failure is not None:
            raise WorkerFailure(failed_worker, repr(failure)) from failure

def render(scene: Scene, config: RenderConfig) -> np.ndarray:
    """Convenience wrapper: validate, render and return the RGB8 buffer."""
    return Renderer(scene, config).render()
