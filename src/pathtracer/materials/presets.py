# materials/presets.py
from pathtracer.core.vector import Color
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.textures import CheckerTexture

class ColorPresets:
    """Common colors used by the demo scenes."""

    CORNELL_RED = Color(0.65, 0.05, 0.05)
    CORNELL_WHITE = Color(0.73, 0.73, 0.73)
    CORNELL_GREEN = Color(0.12, 0.45, 0.15)
    GRASS = Color(0.48, 0.83, 0.53)
    CHECKER_DARK = Color(0.2, 0.3, 0.1)
    CHECKER_LIGHT = Color(0.9, 0.9, 0.9)
    WHITE = Color(1.0, 1.0, 1.0)
    BLACK = Color(0.0, 0.0, 0.0)

    @staticmethod
    def matte(color: Color) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)

class DielectricPresets:
    """Predefined dielectric materials."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

class LightPresets:
    """Predefined light sources."""

    @staticmethod
    def white_light(intensity: float = 1.0) -> DiffuseLight:
        return DiffuseLight(Color(1.0, 1.0, 1.0) * intensity)

class TexturePresets:
    """Predefined texture presets."""

    @staticmethod
    def checkerboard(even: Color = None, odd: Color = None, scale: float = 10.0) -> CheckerTexture:
        """Create a checkerboard texture with default or custom colors."""
        if even is None:
            even = ColorPresets.CHECKER_DARK
        if odd is None:
            odd = ColorPresets.CHECKER_LIGHT
        return CheckerTexture(even, odd, scale)
