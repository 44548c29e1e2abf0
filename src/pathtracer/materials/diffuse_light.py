# materials/diffuse_light.py
from typing import Union
from pathtracer.core.ray import Ray
from pathtracer.core.uv import UV
from pathtracer.core.vector import Color, Vector3
from pathtracer.materials.material import Material, as_texture
from pathtracer.materials.textures import Texture

class DiffuseLight(Material):
    """
    Emissive material that provides constant radiance with optional texture support.

    The texture can be used to create patterns in the emitted light.
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        super().__init__()
        self.texture = as_texture(emit)

    def scatter(self, ray_in: Ray, rec, rng) -> None:
        """
        Emissive materials do not scatter rays.
        """
        return None

    def emitted(self, uv: UV, p: Vector3) -> Color:
        """
        Return the emitted radiance, which can be textured.

        Args:
            uv (UV): The texture coordinates of the hit.
            p (Vector3): The hit point.

        Returns:
            Color: The emission color from the texture.
        """
        return self.texture.value(uv, p)
