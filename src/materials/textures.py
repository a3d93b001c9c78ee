# materials/textures.py
import math
from typing import Optional, Union
import numpy as np
from core.utils import clamp
from core.vector import Color, Vector3
from materials.perlin import Perlin

class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Vector3) -> Color:
        """Color at surface coordinates (u, v) and hit point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")


def as_texture(color_or_texture: Union[Color, Texture]) -> Texture:
    """Wrap a plain color in a SolidTexture; pass textures through."""
    if isinstance(color_or_texture, Texture):
        return color_or_texture
    return SolidTexture(color_or_texture)


class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    def value(self, u: float, v: float, p: Vector3) -> Color:
        return self.color

class CheckerTexture(Texture):
    """
    3D checker pattern: the sign of sin(sx)·sin(sy)·sin(sz) picks between
    the even and odd sub-textures, with s = ``scale``.
    """
    def __init__(self, even: Union[Color, Texture], odd: Union[Color, Texture],
                 scale: float = 10.0):
        self.even = as_texture(even)
        self.odd = as_texture(odd)
        self.scale = scale

    def value(self, u: float, v: float, p: Vector3) -> Color:
        sines = (math.sin(self.scale * p.x)
                 * math.sin(self.scale * p.y)
                 * math.sin(self.scale * p.z))
        if sines < 0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)

class NoiseTexture(Texture):
    """
    Grey Perlin patterns, selected by ``mode``:

    - ``"noise"``: smooth noise remapped to [0, 1], 0.5·(1 + noise(scale·p))
    - ``"turbulence"``: turb(scale·p), a net-like pattern
    - ``"marble"``: veins from 0.5·(1 + sin(scale·z + 10·turb(p)))
    """
    NOISE = "noise"
    TURBULENCE = "turbulence"
    MARBLE = "marble"
    MODES = (NOISE, TURBULENCE, MARBLE)

    def __init__(self, scale: float = 1.0, noise: Optional[Perlin] = None,
                 rng: Optional[np.random.Generator] = None, mode: str = MARBLE):
        if mode not in self.MODES:
            raise ValueError(f"Unknown noise mode {mode!r}; choose from {', '.join(self.MODES)}")
        self.scale = scale
        self.mode = mode
        self.noise = noise if noise is not None else Perlin(rng)

    def value(self, u: float, v: float, p: Vector3) -> Color:
        if self.mode == self.NOISE:
            level = 0.5 * (1.0 + self.noise.noise(p * self.scale))
        elif self.mode == self.TURBULENCE:
            level = self.noise.turb(p * self.scale)
        else:
            level = 0.5 * (1.0 + math.sin(self.scale * p.z + 10 * self.noise.turb(p)))
        return Color(level, level, level)

class ImageTexture(Texture):
    """
    Samples an 8-bit RGB raster (row-major, origin top-left) by nearest
    texel. u and v are clamped to [0, 1] and v is flipped so v=1 is the top
    row. A texture without pixel data, or with an empty raster, returns
    solid cyan so missing images stand out.
    """
    def __init__(self, data: Optional[np.ndarray] = None):
        if data is not None:
            data = np.asarray(data, dtype=np.uint8)
            if data.ndim != 3 or data.shape[2] < 3:
                raise ValueError(f"Expected a (height, width, 3) raster, got shape {data.shape}")
            data = data[:, :, :3]
            if data.shape[0] == 0 or data.shape[1] == 0:
                data = None
        self.data = data
        self.height, self.width = (0, 0) if data is None else data.shape[:2]

    @classmethod
    def from_buffer(cls, raw: bytes, width: int, height: int, channels: int = 3) -> "ImageTexture":
        """Build from a decoded byte buffer of ``height`` rows of ``width`` pixels."""
        expected = width * height * channels
        if len(raw) != expected:
            raise ValueError(f"Buffer holds {len(raw)} bytes, expected {expected} "
                             f"for {width}x{height}x{channels}")
        pixels = np.frombuffer(raw, dtype=np.uint8).reshape(height, width, channels)
        return cls(pixels)

    def value(self, u: float, v: float, p: Vector3) -> Color:
        if self.data is None:
            return Color(0, 1, 1)

        u = clamp(u, 0.0, 1.0)
        v = 1.0 - clamp(v, 0.0, 1.0)

        i = min(int(u * self.width), self.width - 1)
        j = min(int(v * self.height), self.height - 1)

        pixel = self.data[j, i]
        color_scale = 1.0 / 255.0
        return Color(float(pixel[0]) * color_scale,
                     float(pixel[1]) * color_scale,
                     float(pixel[2]) * color_scale)
