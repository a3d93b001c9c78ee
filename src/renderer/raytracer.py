# renderer/raytracer.py
import logging
import random
import time
from concurrent.futures import ProcessPoolExecutor
from functools import partial
from typing import Optional
import numpy as np
from camera.camera import Camera
from core.config import RenderSettings
from geometry.hittable import Hittable
from renderer.integrator import Background, ray_color

logger = logging.getLogger(__name__)


def _row_seed(seed_sequence: np.random.SeedSequence) -> int:
    return int(seed_sequence.generate_state(1, dtype=np.uint64)[0])


def render_row(row: int, seed: int, camera: Camera, world: Hittable, background: Background,
               width: int, height: int, samples_per_pixel: int, max_depth: int) -> np.ndarray:
    """
    Average ``samples_per_pixel`` jittered samples for every pixel of one
    scanline. ``row`` counts from the top of the image; ``seed`` fully
    determines the samples.
    """
    rng = random.Random(seed)
    j = height - 1 - row
    out = np.zeros((width, 3), dtype=np.float32)
    for i in range(width):
        r = g = b = 0.0
        for _ in range(samples_per_pixel):
            u = (i + rng.random()) / max(width - 1, 1)
            v = (j + rng.random()) / max(height - 1, 1)
            color = ray_color(camera.get_ray(u, v, rng), background, world, max_depth, rng)
            r += color.x
            g += color.y
            b += color.z
        out[i] = (r / samples_per_pixel, g / samples_per_pixel, b / samples_per_pixel)
    return out


class Renderer:
    """
    Renders a scene into a (height, width, 3) float32 array of linear
    colors, top row first.

    Scanlines are independent tasks, each seeded from its own child of
    ``SeedSequence(settings.seed)``, so the image does not depend on how
    many workers render it. With ``workers > 1`` rows go to a process
    pool; the scene is pickled to each worker and never mutated.
    """
    def __init__(self, settings: RenderSettings):
        self.settings = settings
        self.width = settings.width
        self.height = settings.height

    def _row_seeds(self):
        children = np.random.SeedSequence(self.settings.seed).spawn(self.height)
        return [_row_seed(child) for child in children]

    def render(self, camera: Camera, world: Hittable, background: Background,
               workers: Optional[int] = None) -> np.ndarray:
        settings = self.settings
        workers = settings.workers if workers is None else workers
        logger.info("Rendering %dx%d, %d samples/pixel, max depth %d, %d worker(s)",
                    self.width, self.height, settings.samples_per_pixel,
                    settings.max_depth, workers)

        task = partial(render_row, camera=camera, world=world, background=background,
                       width=self.width, height=self.height,
                       samples_per_pixel=settings.samples_per_pixel,
                       max_depth=settings.max_depth)
        rows = range(self.height)
        seeds = self._row_seeds()

        image = np.zeros((self.height, self.width, 3), dtype=np.float32)
        started = time.perf_counter()
        if workers > 1:
            chunksize = max(1, self.height // (workers * 4))
            with ProcessPoolExecutor(max_workers=workers) as executor:
                for row, pixels in zip(rows, executor.map(task, rows, seeds, chunksize=chunksize)):
                    image[row] = pixels
                    self._log_progress(row)
        else:
            for row, seed in zip(rows, seeds):
                image[row] = task(row, seed)
                self._log_progress(row)

        logger.info("Done in %.1fs", time.perf_counter() - started)
        return image

    def _log_progress(self, row: int) -> None:
        logger.debug("Scanlines remaining: %d", self.height - 1 - row)
