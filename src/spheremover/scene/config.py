"""Scene serialization to plain dictionaries and JSON files.

The dictionary layout mirrors the Scene fields:

    {
        "background": [32, 32, 32],
        "light": {"center": [0, 0, 50], "radius": 1},
        "planes": [{"point": [0, 0, 100], "normal": [0, 0, 1]}],
        "spheres": [{"center": [198, 135, 50], "radius": 50}]
    }

``background``, ``planes`` and ``spheres`` are optional when loading; the
light is required.

Example:
    >>> from src.spheremover.scene.presets import create_sphere_mover_scene
    >>> scene, eye = create_sphere_mover_scene()
    >>> scene_from_dict(scene_to_dict(scene)) == scene
    True
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from src.spheremover.core.color import DARKGRAY
from src.spheremover.core.vector import Vector3
from src.spheremover.geometry.plane import Plane
from src.spheremover.geometry.sphere import Sphere

from .scene import Scene

logger = logging.getLogger(__name__)


def _vector_to_list(vector: Vector3) -> list[float]:
    return [vector.x, vector.y, vector.z]


def _vector_from_config(value: Any, name: str) -> Vector3:
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"'{name}' must be a list of 3 numbers, got {value!r}")
    try:
        return Vector3.from_iterable(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"'{name}' must be a list of 3 numbers: {e}") from e


def _require(entry: dict[str, Any], key: str, context: str) -> Any:
    if key not in entry:
        raise ValueError(f"{context} is missing required key '{key}'")
    return entry[key]


def _sphere_from_config(entry: dict[str, Any], context: str) -> Sphere:
    center = _vector_from_config(_require(entry, "center", context), f"{context}.center")
    radius = float(_require(entry, "radius", context))
    if radius < 0:
        raise ValueError(f"{context}.radius must be non-negative, got {radius}")
    return Sphere(center, radius)


def _plane_from_config(entry: dict[str, Any], context: str) -> Plane:
    point = _vector_from_config(_require(entry, "point", context), f"{context}.point")
    normal = _vector_from_config(_require(entry, "normal", context), f"{context}.normal")
    return Plane(point, normal)


def scene_to_dict(scene: Scene) -> dict[str, Any]:
    """Export a scene to a JSON-compatible dictionary.

    Args:
        scene: The scene to export.

    Returns:
        Dictionary with background, light, planes and spheres.
    """
    return {
        "background": _vector_to_list(scene.background),
        "light": {
            "center": _vector_to_list(scene.light.center),
            "radius": scene.light.radius,
        },
        "planes": [
            {"point": _vector_to_list(p.point), "normal": _vector_to_list(p.normal_vector)}
            for p in scene.planes
        ],
        "spheres": [
            {"center": _vector_to_list(s.center), "radius": s.radius}
            for s in scene.spheres
        ],
    }


def scene_from_dict(config: dict[str, Any]) -> Scene:
    """Build a scene from a configuration dictionary.

    Args:
        config: Dictionary in the layout produced by ``scene_to_dict``.

    Returns:
        The Scene described by ``config``.

    Raises:
        ValueError: If the light is missing, a vector does not have exactly
            three numbers, a required key is missing or a radius is negative.
    """
    if not isinstance(config, dict):
        raise ValueError(f"Scene config must be a dictionary, got {type(config).__name__}")

    light = _sphere_from_config(_require(config, "light", "scene"), "light")

    background = DARKGRAY
    if "background" in config:
        background = _vector_from_config(config["background"], "background")

    scene = Scene(light=light, background=background)
    for i, entry in enumerate(config.get("planes", [])):
        scene = scene.with_plane(_plane_from_config(entry, f"planes[{i}]"))
    for i, entry in enumerate(config.get("spheres", [])):
        scene = scene.with_sphere(_sphere_from_config(entry, f"spheres[{i}]"))

    return scene


def load_scene(path: str | Path) -> Scene:
    """Load a scene from a JSON file.

    Raises:
        ValueError: If the file is not valid JSON or describes an invalid scene.
        OSError: If the file cannot be read.
    """
    path = Path(path)
    try:
        config = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid scene file {path}: {e}") from e

    scene = scene_from_dict(config)
    logger.info(
        "Loaded scene from %s (%d spheres, %d planes)",
        path,
        scene.sphere_count,
        scene.plane_count,
    )
    return scene


def save_scene(scene: Scene, path: str | Path) -> Path:
    """Write a scene to a JSON file and return the path written."""
    path = Path(path)
    path.write_text(json.dumps(scene_to_dict(scene), indent=2) + "\n", encoding="utf-8")
    logger.info("Saved scene to %s", path)
    return path
