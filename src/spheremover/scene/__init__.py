"""Scene composition, configuration and presets.

Components:
    scene: Immutable Scene value with nearest-hit shading and pure moves
    config: Conversion between scenes, dictionaries and JSON files
    presets: The Sphere Mover scene and other ready-made scenes
"""

from .config import load_scene, save_scene, scene_from_dict, scene_to_dict
from .presets import (
    SphereMoverParams,
    create_single_sphere_scene,
    create_sphere_mover_scene,
    default_eye,
)
from .scene import Scene

__all__ = [
    "Scene",
    "scene_to_dict",
    "scene_from_dict",
    "load_scene",
    "save_scene",
    "SphereMoverParams",
    "create_sphere_mover_scene",
    "create_single_sphere_scene",
    "default_eye",
]
