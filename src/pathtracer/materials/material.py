# materials/material.py
import random
from typing import TYPE_CHECKING, Optional, Tuple, Union
from pathtracer.core.ray import Ray
from pathtracer.core.uv import UV
from pathtracer.core.vector import Color, Vector3
from pathtracer.materials.textures import Texture, SolidTexture

if TYPE_CHECKING:
    from pathtracer.geometry.hittable import HitRecord

def as_texture(albedo: Union[Vector3, Texture]) -> Texture:
    """
    Wraps a plain color in a SolidTexture; textures pass through.
    """
    if isinstance(albedo, Vector3):
        return SolidTexture(albedo)
    return albedo

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    """
    def __init__(self):
        self.texture = None

    def scatter(self, ray_in: Ray, rec: "HitRecord",
                rng: random.Random) -> Optional[Tuple[Ray, Color]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, uv: UV, p: Vector3) -> Color:
        """
        Radiance emitted at the hit point. Only lights emit.
        """
        return Color(0.0, 0.0, 0.0)
