#!/usr/bin/env python3
"""Render the Sphere Mover scene to an image file.

This script renders one frame of the Sphere Mover scene (or a scene loaded
from a JSON file) and writes it as a plain-text PPM or a PNG, depending on the
output extension.

Usage:
    python -m examples.render_spheres [options]

Options:
    --width WIDTH       Image width in pixels (default: 495)
    --height HEIGHT     Image height in pixels (default: 270)
    --output OUTPUT     Output file path, .ppm or .png (default: spheres.ppm)
    --scene SCENE       JSON scene file (default: the Sphere Mover scene)
    --reference         Render with the pure Python loop instead of Taichi
    --quiet             Suppress progress output
    --verbose           Enable debug logging

Example:
    python -m examples.render_spheres --output spheres.png
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

import taichi as ti


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the Sphere Mover scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=495,
        help="Image width in pixels (default: 495)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=270,
        help="Image height in pixels (default: 270)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="spheres.ppm",
        help="Output file path, .ppm or .png (default: spheres.ppm)",
    )
    parser.add_argument(
        "--scene",
        type=str,
        default=None,
        help="JSON scene file (default: the Sphere Mover scene)",
    )
    parser.add_argument(
        "--reference",
        action="store_true",
        help="Render with the pure Python loop instead of Taichi",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args()


def render_spheres(
    width: int = 495,
    height: int = 270,
    output_path: str = "spheres.ppm",
    scene_path: str | None = None,
    reference: bool = False,
    quiet: bool = False,
) -> Path:
    """Render one frame and save it to file.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        output_path: Output file path (.ppm or .png).
        scene_path: Optional JSON scene file. The Sphere Mover scene sized to
            the frame is used when None.
        reference: If True, render with ``render_reference``.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    # Lazy imports to allow Taichi initialization first
    from src.spheremover.core.renderer import FrameRenderer, render_reference
    from src.spheremover.preview.export import save_image
    from src.spheremover.scene.config import load_scene
    from src.spheremover.scene.presets import (
        SphereMoverParams,
        create_sphere_mover_scene,
        default_eye,
    )

    if scene_path is not None:
        scene = load_scene(scene_path)
        eye = default_eye(width)
    else:
        scene, eye = create_sphere_mover_scene(SphereMoverParams(width=width, height=height))

    if not quiet:
        print(f"Rendering {width}x{height} ({len(scene.spheres)} spheres)...")
        print(scene.describe(), end="")

    start_time = time.time()

    if reference:
        image = render_reference(scene, eye, width, height)
    else:
        renderer = FrameRenderer(width, height)
        renderer.render(scene, eye)
        image = renderer.get_image_numpy()

    output_file = save_image(image, output_path)

    total_time = time.time() - start_time
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.2f}s")

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    if args.verbose:
        from src.spheremover.logging_config import setup_logging

        setup_logging(logging.DEBUG)

    # Double precision keeps the kernel in step with Scene.color
    ti.init(arch=ti.cpu, default_fp=ti.f64)

    try:
        render_spheres(
            width=args.width,
            height=args.height,
            output_path=args.output,
            scene_path=args.scene,
            reference=args.reference,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
