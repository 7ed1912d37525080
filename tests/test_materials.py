"""Unit tests for material scattering.

Tests cover:
- Lambertian (flat) scatter directions and pdf
- Metal mirror reflection
- Dielectric refraction, Schlick reflectance and total internal reflection
- Diffuse light termination and emission
"""

import math
import random

import pytest

from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_sphere, reflect, refract, schlick
from pathtracer.core.vector import Vector3
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DEFAULT_RADIANCE, DiffuseLight
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal

UP = Vector3(0, 1, 0)
ORIGIN = Vector3(0, 0, 0)


class TestSamplingHelpers:
    """Tests for the random and optics helpers."""

    def test_random_in_unit_sphere(self, rng):
        for _ in range(500):
            assert random_in_unit_sphere(rng).length_squared() < 1.0

    def test_reflect(self):
        assert reflect(Vector3(1, -1, 0), UP) == Vector3(1, 1, 0)

    def test_refract_normal_incidence(self):
        d = refract(Vector3(0, -1, 0), UP, 1.0 / 1.5)
        assert d.x == pytest.approx(0.0)
        assert d.y == pytest.approx(-1.0)

    def test_refract_snells_law(self):
        s = 1.0 / math.sqrt(2.0)
        d = refract(Vector3(s, -s, 0), UP, 1.0 / 1.5)
        assert d.length() == pytest.approx(1.0)
        # sin(theta_t) = sin(theta_i) / 1.5
        assert d.x == pytest.approx(s / 1.5)

    def test_refract_total_internal_reflection(self):
        s = 1.0 / math.sqrt(2.0)
        assert refract(Vector3(s, -s, 0), UP, 1.5) is None

    def test_schlick(self):
        r0 = ((1 - 1.5) / (1 + 1.5)) ** 2
        assert schlick(1.0, 1.5) == pytest.approx(r0)
        assert schlick(0.0, 1.5) == pytest.approx(1.0)


class TestLambertian:
    """Tests for the flat diffuse material."""

    def test_scattered_ray_starts_at_hit_point(self, rng):
        point = Vector3(1, 2, 3)
        ray, _ = Lambertian().scatter(Ray(Vector3(1, 5, 3), Vector3(0, -1, 0)), UP, point, rng)
        assert ray.origin == point

    def test_scattered_direction_is_unit_and_in_hemisphere(self, rng):
        material = Lambertian()
        incoming = Ray(Vector3(0, 1, 0), Vector3(0, -1, 0))
        for _ in range(500):
            ray, _ = material.scatter(incoming, UP, ORIGIN, rng)
            assert ray.direction.length() == pytest.approx(1.0)
            # normal + point in the unit ball never points below the surface
            assert ray.direction.dot(UP) >= 0.0

    def test_pdf(self, rng):
        incoming = Ray(Vector3(0, 1, 0), Vector3(0, -1, 0))
        _, pdf = Lambertian().scatter(incoming, UP, ORIGIN, rng)
        assert pdf == pytest.approx(-1.0 / math.pi)

    def test_emits_nothing(self):
        assert Lambertian().emitted() == Vector3(0, 0, 0)


class TestMetal:
    """Tests for mirror reflection."""

    def test_angle_of_incidence_equals_reflection(self, rng):
        gen = random.Random(3)
        metal = Metal()
        for _ in range(100):
            normal = Vector3(gen.uniform(-1, 1), gen.uniform(-1, 1), gen.uniform(-1, 1)).normalize()
            incoming = Vector3(gen.uniform(-1, 1), gen.uniform(-1, 1), gen.uniform(-1, 1)).normalize()
            ray, pdf = metal.scatter(Ray(ORIGIN, incoming), normal, ORIGIN, rng)
            assert ray.direction.dot(normal) == pytest.approx(-incoming.dot(normal))
            assert ray.direction.length() == pytest.approx(incoming.length())
            assert pdf == 1.0

    def test_deterministic(self):
        incoming = Ray(Vector3(0, 1, 0), Vector3(1, -1, 0))
        a, _ = Metal().scatter(incoming, UP, ORIGIN, random.Random(1))
        b, _ = Metal().scatter(incoming, UP, ORIGIN, random.Random(2))
        assert a.direction == b.direction
        assert a.direction.x == pytest.approx(1 / math.sqrt(2))
        assert a.direction.y == pytest.approx(1 / math.sqrt(2))


class TestDielectric:
    """Tests for the refractive material."""

    def test_refracted_direction_is_unit(self, rng):
        glass = Dielectric(1.5)
        s = 1.0 / math.sqrt(2.0)
        incoming = Ray(Vector3(-1, 1, 0), Vector3(s, -s, 0))
        for _ in range(200):
            ray, _ = glass.scatter(incoming, UP, ORIGIN, rng)
            assert ray.direction.length() == pytest.approx(1.0)

    def test_normal_incidence_mostly_refracts(self, rng):
        """Schlick reflectance at normal incidence is 4% for n=1.5."""
        glass = Dielectric(1.5)
        incoming = Ray(Vector3(0, 1, 0), Vector3(0, -1, 0))
        refracted = 0
        for _ in range(2000):
            ray, _ = glass.scatter(incoming, UP, ORIGIN, rng)
            if ray.direction.y < 0:
                refracted += 1
        assert 0.93 < refracted / 2000 < 0.99

    def test_chooses_between_reflection_and_refraction(self):
        glass = Dielectric(1.5)
        incoming = Ray(Vector3(-10, 1, 0), Vector3(10, -1, 0).normalize())
        directions = set()
        gen = random.Random(5)
        for _ in range(500):
            ray, _ = glass.scatter(incoming, UP, ORIGIN, gen)
            directions.add(ray.direction.y > 0)
        assert directions == {True, False}

    def test_exit_with_total_internal_reflection(self, rng):
        """Leaving glass at a grazing angle always reflects back inside."""
        glass = Dielectric(1.5)
        s = 1.0 / math.sqrt(2.0)
        # Travelling upward inside the material, normal points outward (+y).
        incoming = Ray(ORIGIN, Vector3(s, s, 0))
        for _ in range(50):
            ray, _ = glass.scatter(incoming, UP, ORIGIN, rng)
            assert ray.direction.y == pytest.approx(-s)
            assert ray.direction.x == pytest.approx(s)

    def test_invalid_index(self):
        with pytest.raises(ValueError):
            Dielectric(0.0)


class TestDiffuseLight:
    """Tests for the emissive material."""

    def test_scatter_terminates_path(self, rng):
        ray, pdf = DiffuseLight().scatter(Ray(UP, -UP), UP, ORIGIN, rng)
        assert ray.origin.is_zero()
        assert ray.direction.is_zero()
        assert pdf == 0.0

    def test_emitted(self):
        assert DiffuseLight().emitted() == DEFAULT_RADIANCE
        assert DiffuseLight(Vector3(1, 2, 3)).emitted() == Vector3(1, 2, 3)
