# materials/isotropic.py
from typing import Tuple, Union
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_sphere
from pathtracer.core.vector import Color, Vector3
from pathtracer.materials.material import Material, as_texture
from pathtracer.materials.textures import Texture

class Isotropic(Material):
    """
    Phase function of a participating medium: scatters uniformly in all
    directions.
    """
    def __init__(self, albedo: Union[Vector3, Texture]):
        super().__init__()
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec, rng) -> Tuple[Ray, Color]:
        scattered = Ray(rec.p, random_in_unit_sphere(rng), ray_in.time)
        return scattered, self.texture.value(rec.uv, rec.p)
