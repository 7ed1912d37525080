# materials/registry.py
import logging
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional

from pathtracer.core.errors import SceneFormatError
from pathtracer.core.vector import Vector3
from pathtracer.materials.dielectric import DEFAULT_REFRACTIVE_INDEX, Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.material import Material
from pathtracer.materials.metal import Metal

logger = logging.getLogger(__name__)

DEFAULT_KEY = "flat"


def default_materials() -> Dict[str, Material]:
    """The canonical material set every registry starts with."""
    return {
        "flat": Lambertian(),
        "metal": Metal(),
        "dielectric": Dielectric(),
        "light": DiffuseLight(),
    }


class MaterialRegistry:
    """
    Maps material keys to shared Material instances.

    Lookups never fail: an unknown key resolves to the "flat" material.
    `report_missing` logs the keys that will fall back and is called once
    while the scene is built. `get` never mutates the registry.
    """

    def __init__(self, materials: Optional[Mapping[str, Material]] = None):
        self._materials: Dict[str, Material] = default_materials()
        if materials:
            for key, material in materials.items():
                self.register(key, material)

    def register(self, key: str, material: Material) -> None:
        if not isinstance(material, Material):
            raise TypeError(f"Expected a Material for key {key!r}, got {type(material).__name__}")
        self._materials[key] = material

    @property
    def default(self) -> Material:
        return self._materials[DEFAULT_KEY]

    def get(self, key: str) -> Material:
        return self._materials.get(key, self.default)

    __getitem__ = get

    def report_missing(self, keys: Iterable[str]) -> List[str]:
        """
        Log a warning for each distinct key with no registered material and
        return those keys, sorted.
        """
        missing = sorted({key for key in keys if key not in self._materials})
        for key in missing:
            logger.warning("Material with label %r not found, using %r", key, DEFAULT_KEY)
        return missing

    def __contains__(self, key: str) -> bool:
        return key in self._materials

    def __iter__(self) -> Iterator[str]:
        return iter(self._materials)

    def __len__(self) -> int:
        return len(self._materials)

    @classmethod
    def from_config(cls, entries: Iterable[Mapping[str, Any]]) -> "MaterialRegistry":
        """
        Build a registry from the `materials` section of a scene file.

        Each entry is {"name": str, "type": str, ...params}. Supported types:
        flat/lambertian, metal, dielectric ("ior"), light ("emit": [r, g, b]).
        """
        registry = cls()
        for index, entry in enumerate(entries):
            if not isinstance(entry, Mapping):
                raise SceneFormatError(f"materials[{index}] must be an object")
            name = entry.get("name")
            if not isinstance(name, str):
                raise SceneFormatError(f"materials[{index}].name must be a string")
            registry.register(name, _material_from_entry(entry, f"materials[{index}]"))
        return registry

    def __repr__(self) -> str:
        return f"MaterialRegistry({sorted(self._materials)})"


def _material_from_entry(entry: Mapping[str, Any], where: str) -> Material:
    mat_type = entry.get("type")
    if not isinstance(mat_type, str):
        raise SceneFormatError(f"{where}.type must be a string")
    mat_type = mat_type.lower()

    if mat_type in ("flat", "lambertian"):
        return Lambertian()
    if mat_type == "metal":
        return Metal()
    if mat_type == "dielectric":
        ior = entry.get("ior", DEFAULT_REFRACTIVE_INDEX)
        if isinstance(ior, bool) or not isinstance(ior, (int, float)) or ior <= 0:
            raise SceneFormatError(f"{where}.ior must be a positive number")
        return Dielectric(float(ior))
    if mat_type == "light":
        emit = entry.get("emit")
        if emit is None:
            return DiffuseLight()
        if (not isinstance(emit, list) or len(emit) != 3
                or not all(isinstance(c, (int, float)) and not isinstance(c, bool) for c in emit)):
            raise SceneFormatError(f"{where}.emit must be a list of 3 numbers")
        return DiffuseLight(Vector3.from_sequence(emit))
    raise SceneFormatError(f"{where}: unknown material type {mat_type!r}")
