# materials/metal.py
import random
from typing import Tuple

from pathtracer.core.ray import Ray
from pathtracer.core.utils import reflect
from pathtracer.core.vector import Vector3
from pathtracer.materials.material import Material


class Metal(Material):
    """
    Perfect mirror. Scattering is deterministic.
    """
    def scatter(self, ray_in: Ray, normal: Vector3, point: Vector3,
                rng: random.Random) -> Tuple[Ray, float]:
        reflected = reflect(ray_in.direction.normalize(), normal)
        return Ray(point, reflected), 1.0
