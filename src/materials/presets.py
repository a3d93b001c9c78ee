# materials/presets.py
import numpy as np
from core.vector import Color
from materials.metal import Metal
from materials.lambertian import Lambertian
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.textures import CheckerTexture, NoiseTexture

class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def brushed(color: Color = Color(0.8, 0.8, 0.9), fuzz: float = 1.0) -> Metal:
        return Metal(color, fuzz=fuzz)

    @staticmethod
    def mirror(color: Color = Color(0.7, 0.6, 0.5)) -> Metal:
        return Metal(color, fuzz=0.0)

class DielectricPresets:
    """Dielectrics by refractive index."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

class LightPresets:
    @staticmethod
    def white_light(intensity: float = 4.0) -> DiffuseLight:
        return DiffuseLight(Color(1.0, 1.0, 1.0) * intensity)

class ColorPresets:
    """Diffuse colors used by the demo scenes, including the Cornell walls."""

    RED = Color(0.65, 0.05, 0.05)
    GREEN = Color(0.12, 0.45, 0.15)
    WHITE = Color(0.73, 0.73, 0.73)
    GROUND = Color(0.48, 0.83, 0.53)

    @staticmethod
    def matte(color: Color) -> Lambertian:
        return Lambertian(color)

class TexturePresets:
    @staticmethod
    def checkerboard(even: Color = None, odd: Color = None, scale: float = 10.0) -> CheckerTexture:
        """The green and white checkered ground."""
        if even is None:
            even = Color(0.2, 0.3, 0.1)
        if odd is None:
            odd = Color(0.9, 0.9, 0.9)
        return CheckerTexture(even, odd, scale)

    @staticmethod
    def marble(scale: float = 4.0, rng: np.random.Generator = None) -> NoiseTexture:
        """Perlin marble at the given frequency; ``rng`` seeds the lattice."""
        return NoiseTexture(scale, rng=rng)
