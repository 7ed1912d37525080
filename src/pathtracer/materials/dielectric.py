# materials/dielectric.py
import random
from typing import Tuple

from pathtracer.core.ray import Ray
from pathtracer.core.utils import reflect, refract, schlick
from pathtracer.core.vector import Vector3
from pathtracer.materials.material import Material

DEFAULT_REFRACTIVE_INDEX = 1.5


class Dielectric(Material):
    def __init__(self, ref_idx: float = DEFAULT_REFRACTIVE_INDEX):
        if ref_idx <= 0:
            raise ValueError(f"Refractive index must be positive, got {ref_idx}")
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, normal: Vector3, point: Vector3,
                rng: random.Random) -> Tuple[Ray, float]:
        unit_direction = ray_in.direction.normalize()
        d_dot_n = unit_direction.dot(normal)

        # Determine if we're entering or exiting the material
        if d_dot_n < 0.0:
            outward_normal = normal
            ni_over_nt = 1.0 / self.ref_idx
            cosine = -d_dot_n
        else:
            outward_normal = -normal
            ni_over_nt = self.ref_idx
            cosine = self.ref_idx * d_dot_n

        refracted = refract(unit_direction, outward_normal, ni_over_nt)
        if refracted is None:
            # Total internal reflection
            return Ray(point, reflect(unit_direction, normal)), 1.0

        reflect_prob = schlick(cosine, self.ref_idx)
        if rng.random() < reflect_prob:
            return Ray(point, reflect(unit_direction, normal)), 1.0
        return Ray(point, refracted), 1.0

    def __repr__(self) -> str:
        return f"Dielectric(ref_idx={self.ref_idx})"
