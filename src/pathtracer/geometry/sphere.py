# geometry/sphere.py
import math

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HIT_EPSILON, NO_HIT, Hittable


class Sphere(Hittable):
    """
    Represents a sphere defined by its center and radius.
    """
    def __init__(self, center: Vector3, radius: float, albedo: Vector3, material_key: str):
        super().__init__(albedo, material_key)
        self._center = center
        self._radius = float(radius)

    @property
    def center(self) -> Vector3:
        return self._center

    @property
    def radius(self) -> float:
        return self._radius

    def hit(self, ray: Ray, t_max: float) -> float:
        oc = ray.origin - self._center
        a = ray.direction.dot(ray.direction)
        if a == 0.0:
            # Terminated ray from an emissive surface.
            return NO_HIT
        half_b = oc.dot(ray.direction)
        c = oc.dot(oc) - self._radius * self._radius
        discriminant = half_b * half_b - a * c
        if discriminant < 0:
            return NO_HIT

        sqrt_disc = math.sqrt(discriminant)
        # Nearer root first, then the farther one (ray starting inside).
        t = (-half_b - sqrt_disc) / a
        if HIT_EPSILON < t < t_max:
            return t
        t = (-half_b + sqrt_disc) / a
        if HIT_EPSILON < t < t_max:
            return t
        return NO_HIT

    def normal_at(self, point: Vector3) -> Vector3:
        return (point - self._center).normalize()

    def __repr__(self) -> str:
        return (f"Sphere(center={self._center!r}, radius={self._radius}, "
                f"material_key={self.material_key!r})")
