# materials/textures.py
import math
from typing import Optional, Union
import numpy as np
from pathtracer.core.utils import clamp
from pathtracer.core.uv import UV
from pathtracer.core.vector import Color, Vector3
from pathtracer.materials.perlin import Perlin

class Texture:
    """Base class for all textures."""
    def value(self, uv: UV, p: Vector3) -> Color:
        """Evaluate the texture at the given UV coordinates and hit point."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")

class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    def value(self, uv: UV, p: Vector3) -> Color:
        return self.color

class CheckerTexture(Texture):
    """
    A 3D checker pattern: the sign of sin(scale*x)*sin(scale*y)*sin(scale*z)
    picks the odd texture when negative and the even texture otherwise.
    """
    def __init__(self, even: Union[Color, Texture], odd: Union[Color, Texture],
                 scale: float = 10.0):
        self.even = even if isinstance(even, Texture) else SolidTexture(even)
        self.odd = odd if isinstance(odd, Texture) else SolidTexture(odd)
        self.scale = scale

    def value(self, uv: UV, p: Vector3) -> Color:
        sines = (math.sin(self.scale * p.x) *
                 math.sin(self.scale * p.y) *
                 math.sin(self.scale * p.z))
        if sines < 0:
            return self.odd.value(uv, p)
        return self.even.value(uv, p)

class NoiseTexture(Texture):
    """A marble-like procedural texture driven by Perlin turbulence."""
    def __init__(self, scale: float = 1.0, noise: Optional[Perlin] = None):
        self.scale = scale
        self.noise = noise if noise is not None else Perlin()

    def value(self, uv: UV, p: Vector3) -> Color:
        intensity = 0.5 * (1 + math.sin(self.scale * p.z + 10 * self.noise.turb(p)))
        return Color(1.0, 1.0, 1.0) * intensity

class ImageTexture(Texture):
    """
    A texture backed by a decoded RGB bitmap of shape (height, width, 3).
    Missing data renders as solid cyan so it stands out.
    """
    BYTES_PER_PIXEL = 3

    def __init__(self, data: Optional[np.ndarray]):
        if data is None:
            self.data = None
            self.width = 0
            self.height = 0
            return
        data = np.asarray(data)
        if data.ndim != 3 or data.shape[2] < self.BYTES_PER_PIXEL:
            raise ValueError(f"Expected an RGB image array, got shape {data.shape}")
        self.data = data[:, :, :self.BYTES_PER_PIXEL]
        self.height, self.width = self.data.shape[:2]

    def value(self, uv: UV, p: Vector3) -> Color:
        if self.data is None or self.width == 0 or self.height == 0:
            return Color(0.0, 1.0, 1.0)

        # Clamp input texture coordinates to [0,1] x [1,0]
        u = clamp(uv.u, 0.0, 1.0)
        v = 1.0 - clamp(uv.v, 0.0, 1.0)  # Flip V to image coordinates

        # Convert to pixel coordinates
        i = min(int(u * self.width), self.width - 1)
        j = min(int(v * self.height), self.height - 1)

        color_scale = 1.0 / 255.0
        pixel = self.data[j, i]
        return Color(float(pixel[0]) * color_scale,
                     float(pixel[1]) * color_scale,
                     float(pixel[2]) * color_scale)
