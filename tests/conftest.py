"""Pytest configuration for sphere-mover tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls which can cause
    segmentation faults due to Taichi runtime conflicts. Double precision
    without fast math keeps kernel results comparable with Scene.color.
    """
    ti.init(arch=ti.cpu, default_fp=ti.f64, fast_math=False, random_seed=42)
    yield


@pytest.fixture
def sphere_mover_scene():
    """The default Sphere Mover scene and its eye point."""
    from src.spheremover.scene.presets import create_sphere_mover_scene

    return create_sphere_mover_scene()


@pytest.fixture
def empty_scene():
    """A scene with only a light: no spheres and no planes."""
    from src.spheremover.core.vector import Point3
    from src.spheremover.geometry.sphere import Sphere
    from src.spheremover.scene.scene import Scene

    return Scene(light=Sphere(Point3(0.0, 0.0, 50.0), 1.0))
