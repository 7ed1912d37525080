from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray

__all__ = ["Vector3", "Ray"]
