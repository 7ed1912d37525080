# camera/camera.py
import math

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3

WORLD_UP = Vector3(0, 1, 0)


class Camera:
    """
    Pinhole camera. Maps normalized image coordinates (u, v) in [0, 1]^2 to
    world-space rays leaving `lookfrom`.
    """
    def __init__(self, lookfrom: Vector3, lookat: Vector3, up: Vector3,
                 vfov: float, aspect: float):
        self.vfov = vfov
        self.aspect = aspect
        self.origin = lookfrom

        # vfov is in degrees; the image plane sits at unit distance.
        theta = math.radians(vfov) / 2.0
        half_height = math.tan(theta)
        half_width = aspect * half_height

        w = (lookfrom - lookat).normalize()
        u = up.cross(w).normalize()
        # Negated so that v grows with the image row index.
        v = -w.cross(u)

        self.u, self.v, self.w = u, v, w
        self.horizontal = u * (2.0 * half_width)
        self.vertical = v * (2.0 * half_height)
        self.lower_left_corner = (lookfrom -
                                  u * half_width -
                                  v * half_height -
                                  w)

    def get_ray(self, u: float, v: float) -> Ray:
        direction = (self.lower_left_corner +
                     self.horizontal * u +
                     self.vertical * v -
                     self.origin)
        return Ray(self.origin, direction)

    def __repr__(self) -> str:
        return f"Camera(origin={self.origin!r}, vfov={self.vfov}, aspect={self.aspect})"
