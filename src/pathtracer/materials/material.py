# materials/material.py
import random
from typing import Tuple

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3


class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials hold no mutable state and are shared by all render workers.
    """
    def scatter(self, ray_in: Ray, normal: Vector3, point: Vector3,
                rng: random.Random) -> Tuple[Ray, float]:
        """
        Computes the outgoing ray for a hit at `point` with surface `normal`.
        Returns a tuple (scattered_ray, pdf).
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self) -> Vector3:
        """
        Radiance emitted by the surface itself. Zero unless overridden.
        """
        return Vector3.zero()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
