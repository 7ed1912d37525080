# core/utils.py
import math
import random
from typing import Optional

from pathtracer.core.vector import Vector3


def random_in_unit_sphere(rng: random.Random) -> Vector3:
    """
    Returns a random point inside a unit sphere (rejection sampling).
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def refract(v: Vector3, n: Vector3, ni_over_nt: float) -> Optional[Vector3]:
    """
    Refracts unit vector v through a surface with unit normal n facing v.
    Returns None under total internal reflection.
    """
    c1 = -v.dot(n)
    k = 1.0 - ni_over_nt * ni_over_nt * (1.0 - c1 * c1)
    if k < 0.0:
        return None
    c2 = math.sqrt(k)
    return v * ni_over_nt + n * (ni_over_nt * c1 - c2)


def schlick(cosine: float, ref_idx: float) -> float:
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)
