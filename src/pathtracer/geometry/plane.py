# geometry/plane.py
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HIT_EPSILON, NO_HIT, Hittable


class Plane(Hittable):
    """
    Infinite plane through `origin` with a fixed `normal`.
    """
    def __init__(self, origin: Vector3, normal: Vector3, albedo: Vector3, material_key: str):
        super().__init__(albedo, material_key)
        self.origin = origin
        self.normal = normal.normalize()

    def hit(self, ray: Ray, t_max: float) -> float:
        denom = ray.direction.dot(self.normal)
        # Parallel (or nearly parallel) rays never hit.
        if abs(denom) > HIT_EPSILON:
            t = (self.origin - ray.origin).dot(self.normal) / denom
            if HIT_EPSILON <= t < t_max:
                return t
        return NO_HIT

    def normal_at(self, point: Vector3) -> Vector3:
        return self.normal

    @property
    def center(self) -> Vector3:
        return self.origin

    def __repr__(self) -> str:
        return (f"Plane(origin={self.origin!r}, normal={self.normal!r}, "
                f"material_key={self.material_key!r})")
