# geometry/hittable.py
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3

# Hits closer than this are rejected to avoid self-intersection at the origin
# of scattered rays. Because of it 0.0 is never a valid hit distance.
HIT_EPSILON = 0.001
NO_HIT = 0.0


class Hittable:
    """
    Abstract surface that can be hit by a ray.

    Surfaces carry their albedo and the key of their material. The key is
    resolved against a MaterialRegistry at render time, so scene files only
    need to name materials.
    """
    def __init__(self, albedo: Vector3, material_key: str):
        self.albedo = albedo
        self.material_key = material_key

    def hit(self, ray: Ray, t_max: float) -> float:
        """
        Returns the smallest hit parameter t with HIT_EPSILON < t < t_max,
        or NO_HIT.
        """
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def normal_at(self, point: Vector3) -> Vector3:
        raise NotImplementedError("normal_at() must be implemented by subclasses.")

    @property
    def center(self) -> Vector3:
        raise NotImplementedError("center must be implemented by subclasses.")

    @property
    def radius(self) -> float:
        return 0.0
