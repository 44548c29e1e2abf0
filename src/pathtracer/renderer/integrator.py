# renderer/integrator.py
import math
import random
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color
from pathtracer.geometry.hittable import Hittable

# Minimum hit distance; keeps scattered rays off their own surface.
T_MIN = 0.001

def ray_color(ray: Ray, background: Color, world: Hittable, depth: int,
              rng: random.Random) -> Color:
    """
    Radiance arriving along ray after at most depth bounces.

    Each bounce adds the emission of the surface hit, weighted by the
    product of attenuations collected so far, and continues along the
    scattered ray. A miss adds the constant background; absorption or
    running out of depth ends the path.
    """
    radiance = Color(0.0, 0.0, 0.0)
    throughput = Color(1.0, 1.0, 1.0)

    while depth > 0:
        rec = world.hit(ray, T_MIN, math.inf, rng)
        if rec is None:
            return radiance + throughput * background

        emitted = rec.material.emitted(rec.uv, rec.p)
        radiance = radiance + throughput * emitted

        scatter = rec.material.scatter(ray, rec, rng)
        if scatter is None:
            return radiance

        ray, attenuation = scatter
        throughput = throughput * attenuation
        depth -= 1

    # Bounce limit exceeded, no more light is gathered.
    return radiance
