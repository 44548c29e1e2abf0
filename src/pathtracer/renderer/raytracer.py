# renderer/raytracer.py
import logging
import random
import time
from typing import Optional
import numpy as np
from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Color
from pathtracer.geometry.hittable import Hittable
from pathtracer.renderer.integrator import ray_color
from pathtracer.renderer.tone_mapping import TONE_MAPPERS

logger = logging.getLogger(__name__)

MAX_BOUNCES = 50

class Renderer:
    """
    Offline renderer: traces samples_per_pixel jittered camera rays per
    pixel and accumulates their radiance.

    Scanlines run top to bottom and every random decision draws from one
    seeded generator, so a fixed seed reproduces an image exactly.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int = 100,
                 max_depth: int = MAX_BOUNCES, background: Optional[Color] = None,
                 seed: Optional[int] = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        if samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel must be positive, got {samples_per_pixel}")
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.background = background if background is not None else Color(0.0, 0.0, 0.0)
        self.rng = random.Random(seed)
        self.accumulation_buffer = np.zeros((height, width, 3), dtype=np.float64)
        logger.info("Renderer initialized: %dx%d, %d samples, depth %d",
                    width, height, samples_per_pixel, max_depth)

    def reset_accumulation(self):
        self.accumulation_buffer.fill(0.0)

    def render_pixel(self, world: Hittable, camera: Camera, i: int, j: int) -> Color:
        """
        Sum of samples for pixel column i and row j, with j counted from the
        bottom of the image.
        """
        rng = self.rng
        u_span = max(self.width - 1, 1)
        v_span = max(self.height - 1, 1)
        pixel_color = Color(0.0, 0.0, 0.0)
        for _ in range(self.samples_per_pixel):
            u = (i + rng.random()) / u_span
            v = (j + rng.random()) / v_span
            ray = camera.get_ray(u, v, rng)
            pixel_color = pixel_color + ray_color(ray, self.background, world,
                                                  self.max_depth, rng)
        return pixel_color

    def render(self, world: Hittable, camera: Camera) -> np.ndarray:
        """
        Render the scene into the accumulation buffer and return it.

        Row 0 of the returned (height, width, 3) array is the top of the image.
        """
        self.reset_accumulation()
        start = time.perf_counter()
        for j in range(self.height - 1, -1, -1):
            logger.debug("Scanlines remaining: %d", j + 1)
            row = self.height - 1 - j
            for i in range(self.width):
                self.accumulation_buffer[row, i] = tuple(self.render_pixel(world, camera, i, j))

        elapsed = time.perf_counter() - start
        hours, rem = divmod(int(elapsed), 3600)
        minutes, seconds = divmod(rem, 60)
        logger.info("Time elapsed: %d:%02d:%02d", hours, minutes, seconds)
        return self.accumulation_buffer

    def to_image(self, tone_map: str = "gamma") -> np.ndarray:
        """Convert the accumulated radiance to 8-bit RGB."""
        try:
            mapper = TONE_MAPPERS[tone_map]
        except KeyError:
            raise ValueError(f"Unknown tone mapping: {tone_map}") from None
        return mapper(self.accumulation_buffer, self.samples_per_pixel)
