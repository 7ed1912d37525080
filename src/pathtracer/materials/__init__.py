from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.material import Material
from pathtracer.materials.metal import Metal
from pathtracer.materials.registry import DEFAULT_KEY, MaterialRegistry

__all__ = [
    "Dielectric",
    "DiffuseLight",
    "Lambertian",
    "Material",
    "Metal",
    "DEFAULT_KEY",
    "MaterialRegistry",
]
