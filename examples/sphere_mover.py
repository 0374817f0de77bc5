#!/usr/bin/env python3
"""Interactive Sphere Mover.

This script opens a window showing three spheres in front of a back plane.
Pick a sphere and push it around with the keyboard; every move re-renders the
frame with a Taichi kernel.

Usage:
    python -m examples.sphere_mover [--scene SCENE] [--width W] [--height H]

Controls:
    - Tab / Space: select the next sphere
    - Arrow keys or w/a/s/d: move the selected sphere
    - i/j/k/l: move the light
    - p: export the current frame as PNG
    - q / Escape: quit
"""

from __future__ import annotations

import argparse
import platform
import sys
from pathlib import Path

# Ensure the project root is in the Python path for direct execution
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import taichi as ti  # noqa: E402


def initialize_taichi() -> str:
    """Initialize Taichi with the best available backend.

    Prefers CUDA and falls back to CPU. Both support double precision,
    which the frame kernel needs.

    Returns:
        Name of the backend being used.
    """
    if platform.system() != "Darwin":
        try:
            ti.init(arch=ti.cuda, default_fp=ti.f64)
            return "CUDA (GPU)"
        except Exception:
            pass

    ti.init(arch=ti.cpu, default_fp=ti.f64)
    return "CPU"


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Interactive Sphere Mover.")
    parser.add_argument("--width", type=int, default=495, help="Frame width (default: 495)")
    parser.add_argument("--height", type=int, default=270, help="Frame height (default: 270)")
    parser.add_argument("--scene", type=str, default=None, help="JSON scene file")
    parser.add_argument(
        "--window-scale",
        type=int,
        default=2,
        help="Window size as a multiple of the frame size (default: 2)",
    )
    return parser.parse_args()


def main() -> int:
    """Main entry point for the interactive Sphere Mover.

    Returns:
        Exit code (0 for success, non-zero for error).
    """
    args = parse_args()

    # Initialize Taichi first (before importing modules that use ti.kernel)
    backend = initialize_taichi()
    print(f"Taichi backend: {backend}")

    # Import after Taichi initialization
    from src.spheremover.logging_config import setup_logging
    from src.spheremover.preview.interactive import InteractivePreview
    from src.spheremover.scene.config import load_scene
    from src.spheremover.scene.presets import (
        SphereMoverParams,
        create_sphere_mover_scene,
        default_eye,
    )

    setup_logging()

    if not InteractivePreview.is_display_available():
        print("Error: No display available. Cannot run the Sphere Mover window.")
        print("Use examples/render_spheres.py to render to a file instead.")
        return 1

    try:
        if args.scene is not None:
            scene = load_scene(args.scene)
            eye = default_eye(args.width)
        else:
            scene, eye = create_sphere_mover_scene(
                SphereMoverParams(width=args.width, height=args.height)
            )

        preview = InteractivePreview(
            scene,
            eye,
            args.width,
            args.height,
            window_scale=args.window_scale,
        )
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("arrow keys and tab to move spheres around")
    print("i/j/k/l to move the light, p to export a PNG")
    print("esc or q to quit")

    try:
        preview.run()
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
    finally:
        preview.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
