# renderer/tile_renderer.py
import logging
import multiprocessing
import queue
import random
import time
from concurrent.futures import Future, ProcessPoolExecutor, as_completed
from typing import List, Optional, Sequence, Tuple

import numpy as np

from pathtracer.camera.camera import Camera
from pathtracer.config import RenderSettings
from pathtracer.core.vector import Vector3
from pathtracer.renderer.scene import T_MAX, Scene

logger = logging.getLogger(__name__)

# Number of per-pixel timings averaged for the time-remaining estimate.
TIMING_SAMPLES = 500

Pixel = Tuple[int, int, int, int, int, int]


def partition_columns(width: int, n: int) -> List[Tuple[int, int]]:
    """
    Split [0, width) into n contiguous column ranges of width // n columns.

    The width % n rightmost columns are not assigned to any range and stay
    black in the final image.
    """
    if n < 1:
        raise ValueError(f"Need at least one partition, got {n}")
    per_range = width // n
    return [(k * per_range, (k + 1) * per_range) for k in range(n)]


def pixel_to_rgb8(color: Vector3) -> Tuple[int, int, int]:
    """
    Clamp each channel to [0, 1] and scale to 8 bits (255.99, truncated).
    """
    return tuple(int(255.99 * min(max(c, 0.0), 1.0)) for c in color)


def render_section(columns: Tuple[int, int], width: int, height: int,
                   scene: Scene, camera: Camera, samples: int,
                   rng: random.Random,
                   timing_queue: Optional["queue.Queue[float]"] = None,
                   timing_limit: int = TIMING_SAMPLES) -> List[Pixel]:
    """
    Monte-Carlo sample every pixel in the column range `columns` over the
    full image height.

    Returns (x, y, r, g, b, a) tuples. When `timing_queue` is given the time
    spent on each of the first `timing_limit` pixels (seconds) is put on it.
    """
    start, end = columns
    pixels: List[Pixel] = []
    timings_sent = 0
    for i in range(start, end):
        for j in range(height):
            tstart = time.perf_counter()
            col = Vector3.zero()
            for _ in range(samples):
                u = (i + rng.random()) / width
                v = (j + rng.random()) / height
                ray = camera.get_ray(u, v)
                col = col + scene.render(ray, 0, T_MAX, rng)
            col = col / samples

            r, g, b = pixel_to_rgb8(col)
            pixels.append((i, j, r, g, b, 255))

            if timing_queue is not None and timings_sent < timing_limit:
                timing_queue.put(time.perf_counter() - tstart)
                timings_sent += 1
    return pixels


class TileRenderer:
    """
    Renders an image with one worker process per column range.

    Each worker receives a pickled copy of the scene and camera and its own
    random generator, so nothing is shared between workers. Finished ranges
    are composited by their explicit (x, y) coordinates, so arrival order
    does not matter.
    """

    def __init__(self, scene: Scene, camera: Camera, settings: RenderSettings):
        settings.validate()
        self.scene = scene
        self.camera = camera
        self.settings = settings

    def worker_rngs(self) -> List[random.Random]:
        seed = self.settings.seed
        if seed is None:
            return [random.Random() for _ in range(self.settings.threads)]
        return [random.Random(seed + k) for k in range(self.settings.threads)]

    def render(self) -> np.ndarray:
        """
        Render the scene. Returns a (height, width, 3) uint8 array.
        """
        width, height = self.settings.width, self.settings.height
        n = self.settings.threads
        ranges = partition_columns(width, n)

        logger.info("Rendering %dx%d, %d samples per pixel, %d workers",
                    width, height, self.settings.samples, n)
        if width % n:
            logger.debug("Columns %d..%d are not assigned to any worker",
                         width - width % n, width - 1)
        render_start = time.perf_counter()

        image = np.zeros((height, width, 3), dtype=np.uint8)
        errors = []
        with multiprocessing.Manager() as manager:
            timings = manager.Queue()
            with ProcessPoolExecutor(max_workers=n) as executor:
                futures = [
                    executor.submit(render_section, columns, width, height,
                                    self.scene, self.camera, self.settings.samples,
                                    rng, timings)
                    for columns, rng in zip(ranges, self.worker_rngs())
                ]

                self._report_estimate(timings, sum(end - start for start, end in ranges) * height,
                                      futures)

                for future in as_completed(futures):
                    try:
                        pixels = future.result()
                    except Exception as e:
                        errors.append(e)
                        continue
                    for x, y, r, g, b, _a in pixels:
                        image[y, x] = (r, g, b)

        if errors:
            raise errors[0]

        logger.info("Workers finished in %.2f min(s)",
                    (time.perf_counter() - render_start) / 60.0)
        return image

    def _report_estimate(self, timings: "queue.Queue[float]", total_pixels: int,
                         futures: Sequence[Future]) -> None:
        wanted = min(TIMING_SAMPLES, total_pixels)
        if wanted == 0:
            return
        collected = []
        while len(collected) < wanted:
            try:
                collected.append(timings.get(timeout=1.0))
            except queue.Empty:
                # Every worker may have finished or died before producing enough samples.
                if all(f.done() for f in futures):
                    break
        if not collected:
            return
        average = sum(collected) / len(collected)
        remaining = (average / 60.0 * self.settings.width * self.settings.height
                     / self.settings.threads)
        logger.info("Time per pixel: %.6f sec(s), estimated time remaining: %.2f min(s)",
                    average, remaining)
