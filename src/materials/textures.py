# materials/textures.py
import math
from typing import Union
import numpy as np
from core.utils import clamp
from core.vector import Vector3
from materials.perlin import Perlin

class Texture:
    """Base class for all textures: a pure function (u, v, p) -> color."""
    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        """Sample the texture at texture coordinates (u, v) and hit point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")

def as_texture(color_or_texture: Union[Vector3, Texture]) -> Texture:
    """Wraps a plain color in a SolidTexture, passes textures through."""
    if isinstance(color_or_texture, Vector3):
        return SolidTexture(color_or_texture)
    return color_or_texture

class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.color

class CheckerTexture(Texture):
    """
    A 3D checker pattern alternating between two textures, evaluated on
    the hit point so it wraps around any shape.
    """
    def __init__(self, odd: Union[Vector3, Texture], even: Union[Vector3, Texture],
                 scale: float = 10.0):
        self.odd = as_texture(odd)
        self.even = as_texture(even)
        self.scale = scale

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        sines = (math.sin(self.scale * p.x)
                 * math.sin(self.scale * p.y)
                 * math.sin(self.scale * p.z))
        if sines < 0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)

class NoiseTexture(Texture):
    """
    Marble-like Perlin texture: a sine along `axis` phase-shifted by turbulence.
    """
    def __init__(self, scale: float = 4.0, turbulence_depth: int = 7,
                 turbulence_size: float = 10.0, axis: int = 2, seed: int = 0):
        self.perlin = Perlin(seed)
        self.scale = scale
        self.turbulence_depth = turbulence_depth
        self.turbulence_size = turbulence_size
        self.axis = axis

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        turb = self.turbulence_size * self.perlin.turbulence(p, self.turbulence_depth)
        shade = 0.5 * (1.0 + math.sin(self.scale * p[self.axis] + turb))
        return Vector3(shade, shade, shade)

class ImageTexture(Texture):
    """
    A texture backed by an already decoded RGB pixel buffer of shape
    (height, width, 3) with 8-bit or [0, 1] float channels. Decoding files
    is the job of materials.texture_loader.
    """
    def __init__(self, data: np.ndarray):
        data = np.asarray(data)
        if data.ndim != 3 or data.shape[2] < 3 or data.shape[0] == 0 or data.shape[1] == 0:
            raise ValueError(f"Image texture needs an (h, w, 3) buffer, got {data.shape}")
        if data.dtype == np.uint8:
            data = data[:, :, :3].astype(np.float64) / 255.0
        else:
            data = data[:, :, :3].astype(np.float64)
        self.data = data
        self.height = data.shape[0]
        self.width = data.shape[1]

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        # Clamp to [0,1] x [1,0]; image rows run top to bottom.
        u = clamp(u, 0.0, 1.0)
        v = 1.0 - clamp(v, 0.0, 1.0)

        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        color = self.data[y, x]
        return Vector3(float(color[0]), float(color[1]), float(color[2]))
