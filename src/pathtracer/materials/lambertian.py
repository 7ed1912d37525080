# materials/lambertian.py
import math
import random
from typing import Tuple

from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_sphere
from pathtracer.core.vector import Vector3
from pathtracer.materials.material import Material


class Lambertian(Material):
    """
    Flat (Lambertian) diffuse material.
    """

    def scatter(self, ray_in: Ray, normal: Vector3, point: Vector3,
                rng: random.Random) -> Tuple[Ray, float]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Returns (scattered_ray, pdf).
        """
        # Pick a random scatter direction by adding a random vector to the normal.
        scatter_direction = normal + random_in_unit_sphere(rng)

        # If scatter_direction is degenerate (very small), just use the normal.
        if scatter_direction.length() < 1e-8:
            scatter_direction = normal

        scattered = Ray(point, scatter_direction.normalize())

        # Not consumed by the integrator yet; kept for importance sampling.
        pdf = normal.dot(ray_in.direction) / math.pi

        return scattered, pdf
