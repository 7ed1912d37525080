# materials/diffuse_light.py
import random
from typing import Optional, Tuple

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.materials.material import Material

DEFAULT_RADIANCE = Vector3(4.0, 4.0, 4.0)


class DiffuseLight(Material):
    """
    Emissive material that provides constant radiance.
    """
    def __init__(self, emit: Optional[Vector3] = None):
        self.emit = emit if emit is not None else DEFAULT_RADIANCE

    def scatter(self, ray_in: Ray, normal: Vector3, point: Vector3,
                rng: random.Random) -> Tuple[Ray, float]:
        """
        Emissive materials end the path with a terminated ray.
        """
        return Ray.terminated(), 0.0

    def emitted(self) -> Vector3:
        return self.emit

    def __repr__(self) -> str:
        return f"DiffuseLight(emit={self.emit!r})"
