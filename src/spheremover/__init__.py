"""Sphere Mover: a small analytic ray caster.

One ray per pixel is cast from a fixed eye point into a scene of spheres,
planes and (experimentally) cubes. The nearest surface hit is shaded with a
simple diffuse light model.

Subpackages:
    core: Vector algebra, colors, rays and the Taichi frame renderer
    geometry: Primitive shapes and their ray intersection functions
    scene: The immutable Scene value, scene configuration and presets
    preview: PPM/PNG export and the interactive Sphere Mover window
"""

__version__ = "0.1.0"
