# renderer/scene.py
import random
import sys
from typing import Optional, Sequence, Tuple

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import NO_HIT, Hittable
from pathtracer.materials.registry import MaterialRegistry

# Paths deeper than this are subject to Russian roulette.
ROULETTE_DEPTH = 3
CONTINUATION_PROBABILITY = 0.3
T_MAX = sys.float_info.max


class Scene:
    """
    The surfaces to render and the materials they refer to.

    A Scene is immutable once built and is copied to every render worker.
    Surface material keys with no registered material are reported when the
    Scene is constructed and fall back to the "flat" material.

    Paths beyond ROULETTE_DEPTH are continued with probability
    CONTINUATION_PROBABILITY. By default the surviving radiance is NOT divided
    by that probability, which darkens deep paths; pass
    roulette_compensation=True for the unbiased estimator.
    """
    def __init__(self, surfaces: Sequence[Hittable],
                 materials: Optional[MaterialRegistry] = None,
                 roulette_compensation: bool = False):
        self.surfaces: Tuple[Hittable, ...] = tuple(surfaces)
        self.materials = materials if materials is not None else MaterialRegistry()
        self.roulette_compensation = roulette_compensation
        self.materials.report_missing(s.material_key for s in self.surfaces)

    @classmethod
    def from_world(cls, world, roulette_compensation: bool = False) -> "Scene":
        return cls(world.surfaces, world.materials, roulette_compensation)

    def closest_hit(self, ray: Ray, t_max: float = T_MAX) -> Optional[Tuple[float, Hittable]]:
        """
        Linear scan for the nearest surface along the ray.
        Returns (t, surface) or None.
        """
        closest_t = t_max
        closest = None
        for surface in self.surfaces:
            t = surface.hit(ray, t_max)
            if t != NO_HIT and t < closest_t:
                closest_t = t
                closest = surface
        if closest is None:
            return None
        return closest_t, closest

    def get_closest_intersection(self, ray: Ray) -> float:
        """
        Smallest positive hit distance over all surfaces, or -1.0 when the
        ray hits nothing.
        """
        hit = self.closest_hit(ray)
        if hit is None:
            return -1.0
        return hit[0]

    def render(self, ray: Ray, depth: int, t_max: float, rng: random.Random) -> Vector3:
        """
        Radiance arriving along `ray`.

        Evaluates emitted + albedo * render(scattered, depth + 1) as a loop:
        `throughput` is the product of the albedos of the surfaces visited so
        far, and each bounce adds throughput * emitted.
        """
        radiance = Vector3.zero()
        throughput = Vector3(1.0, 1.0, 1.0)

        while True:
            if depth > ROULETTE_DEPTH:
                if rng.random() > CONTINUATION_PROBABILITY:
                    break
                if self.roulette_compensation:
                    throughput = throughput / CONTINUATION_PROBABILITY

            hit = self.closest_hit(ray, t_max)
            if hit is None:
                # Black background.
                break
            t, surface = hit

            point = ray.at(t)
            normal = surface.normal_at(point)
            material = self.materials.get(surface.material_key)

            radiance = radiance + throughput * material.emitted()
            ray, _pdf = material.scatter(ray, normal, point, rng)
            throughput = throughput * surface.albedo
            depth += 1

        return radiance

    def __repr__(self) -> str:
        return f"Scene({len(self.surfaces)} surfaces, {self.materials!r})"
