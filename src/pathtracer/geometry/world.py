# geometry/world.py
import json
import logging
from os import PathLike
from typing import Any, List, Mapping, Union

from pathtracer.camera.camera import WORLD_UP, Camera
from pathtracer.core.errors import SceneFormatError
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable
from pathtracer.geometry.plane import Plane
from pathtracer.geometry.sphere import Sphere
from pathtracer.materials.registry import MaterialRegistry

logger = logging.getLogger(__name__)

__all__ = ["SceneFormatError", "World"]


class World:
    """
    A scene description: the camera plus the list of surfaces and the
    materials they refer to.

    Scene files are JSON objects of the form::

        {
          "camera":  {"lookfrom": [x, y, z], "lookat": [x, y, z], "fov": deg},
          "planes":  [{"origin": [..], "normal": [..], "color": [..], "mat": "flat"}],
          "spheres": [{"color": [..], "radius": r, "center": [..], "mat": "light"}],
          "materials": [{"name": "glass", "type": "dielectric", "ior": 1.5}]
        }

    "materials" is optional; every other field is required.
    """
    def __init__(self, camera: Camera, surfaces: List[Hittable],
                 materials: MaterialRegistry):
        self.camera = camera
        self.surfaces = surfaces
        self.materials = materials

    @classmethod
    def load(cls, path: Union[str, PathLike], width: int, height: int) -> "World":
        with open(path, "r", encoding="utf-8") as fh:
            try:
                data = json.load(fh)
            except json.JSONDecodeError as e:
                raise SceneFormatError(f"Error parsing {path}: {e}") from e
        world = cls.from_dict(data, width, height)
        logger.info("Loaded %s: %d surfaces, %d materials",
                    path, len(world.surfaces), len(world.materials))
        return world

    @classmethod
    def from_dict(cls, data: Any, width: int, height: int) -> "World":
        if not isinstance(data, Mapping):
            raise SceneFormatError("Scene must be a JSON object")

        cam = _require(data, "camera", Mapping, "scene")
        lookfrom = _vector(cam, "lookfrom", "camera")
        lookat = _vector(cam, "lookat", "camera")
        fov = _number(cam, "fov", "camera")
        camera = Camera(lookfrom, lookat, WORLD_UP, fov, width / height)

        surfaces: List[Hittable] = []
        for index, plane in enumerate(_require(data, "planes", list, "scene")):
            where = f"planes[{index}]"
            if not isinstance(plane, Mapping):
                raise SceneFormatError(f"{where} must be an object")
            surfaces.append(Plane(
                _vector(plane, "origin", where),
                _vector(plane, "normal", where),
                _vector(plane, "color", where),
                _require(plane, "mat", str, where),
            ))

        for index, sphere in enumerate(_require(data, "spheres", list, "scene")):
            where = f"spheres[{index}]"
            if not isinstance(sphere, Mapping):
                raise SceneFormatError(f"{where} must be an object")
            radius = _number(sphere, "radius", where)
            if radius <= 0:
                raise SceneFormatError(f"{where}.radius must be positive, got {radius!r}")
            surfaces.append(Sphere(
                _vector(sphere, "center", where),
                radius,
                _vector(sphere, "color", where),
                _require(sphere, "mat", str, where),
            ))

        materials_config = data.get("materials", [])
        if not isinstance(materials_config, list):
            raise SceneFormatError("scene.materials must be a list")
        materials = MaterialRegistry.from_config(materials_config)
        return cls(camera, surfaces, materials)

    def get_hitables(self) -> List[Hittable]:
        return list(self.surfaces)

    def get_camera(self) -> Camera:
        return self.camera


def _require(record: Mapping, key: str, kind, where: str):
    if key not in record:
        raise SceneFormatError(f"{where}: missing field {key!r}")
    value = record[key]
    if not isinstance(value, kind):
        raise SceneFormatError(f"{where}.{key} has the wrong type")
    return value


def _number(record: Mapping, key: str, where: str) -> float:
    value = _require(record, key, (int, float), where)
    if isinstance(value, bool):
        raise SceneFormatError(f"{where}.{key} must be a number")
    return float(value)


def _vector(record: Mapping, key: str, where: str) -> Vector3:
    value = _require(record, key, list, where)
    if len(value) != 3 or not all(
            isinstance(c, (int, float)) and not isinstance(c, bool) for c in value):
        raise SceneFormatError(f"{where}.{key} must be a list of 3 numbers")
    return Vector3.from_sequence(value)
