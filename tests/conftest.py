"""Shared fixtures for the path tracer tests."""

import random

import pytest

from pathtracer.core.vector import Vector3
from pathtracer.geometry.plane import Plane
from pathtracer.geometry.sphere import Sphere
from pathtracer.materials.registry import MaterialRegistry


@pytest.fixture
def rng():
    """A seeded generator so stochastic tests are reproducible."""
    return random.Random(1234)


@pytest.fixture
def registry():
    return MaterialRegistry()


@pytest.fixture
def unit_sphere():
    """Unit sphere at the origin with a diffuse material."""
    return Sphere(Vector3(0, 0, 0), 1.0, Vector3(0.5, 0.5, 0.5), "flat")


@pytest.fixture
def floor_plane():
    """Horizontal plane through the origin facing +y."""
    return Plane(Vector3(0, 0, 0), Vector3(0, 1, 0), Vector3(0.8, 0.8, 0.8), "flat")


@pytest.fixture
def scene_dict():
    """A minimal valid scene description."""
    return {
        "camera": {"lookfrom": [0.0, 0.0, 5.0], "lookat": [0.0, 0.0, 0.0], "fov": 40.0},
        "planes": [
            {"origin": [0.0, -1.0, 0.0], "normal": [0.0, 1.0, 0.0],
             "color": [0.8, 0.8, 0.8], "mat": "flat"},
        ],
        "spheres": [
            {"color": [1.0, 0.0, 0.0], "radius": 1.0, "center": [0.0, 0.0, 0.0], "mat": "flat"},
            {"color": [1.0, 1.0, 1.0], "radius": 1.0, "center": [0.0, 4.0, 0.0], "mat": "light"},
        ],
    }
