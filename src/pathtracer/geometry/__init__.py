from pathtracer.geometry.hittable import HIT_EPSILON, NO_HIT, Hittable
from pathtracer.geometry.plane import Plane
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import SceneFormatError, World

__all__ = [
    "HIT_EPSILON",
    "NO_HIT",
    "Hittable",
    "Plane",
    "Sphere",
    "SceneFormatError",
    "World",
]
