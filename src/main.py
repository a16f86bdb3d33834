# main.py
"""Render one of the catalog scenes to an image file.

Usage:
    python src/main.py --scene cornell_box --width 300 --height 300 -s 200 -o cornell.png

The output format follows the file extension: ``.ppm`` is written as plain
text, anything else (png, jpg, ...) goes through Pillow.
"""
import argparse
import logging
import sys
from typing import List, Optional

from core.errors import ConfigError, WorkerFailure
from renderer.config import RenderConfig, default_threads
from renderer.image_io import save_image
from renderer.raytracer import render
from scenes.presets import SCENES, build_scene

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    defaults = RenderConfig(threads=1)
    parser = argparse.ArgumentParser(
        description="Monte Carlo path tracer.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--width", type=int, default=defaults.width,
                        help="Image width in pixels")
    parser.add_argument("--height", type=int, default=defaults.height,
                        help="Image height in pixels")
    parser.add_argument("-s", "--samples-per-pixel", type=int,
                        default=defaults.samples_per_pixel,
                        help="Number of samples per pixel")
    parser.add_argument("-d", "--max-depth", type=int, default=defaults.max_depth,
                        help="Maximum number of bounces per path")
    parser.add_argument("--scene", default="random_spheres", choices=sorted(SCENES),
                        help="Scene to render")
    parser.add_argument("--no-bvh", action="store_true",
                        help="Intersect the scene with a flat list instead of a BVH")
    parser.add_argument("--seed", type=int, default=defaults.seed,
                        help="Seed for scene layout and sampling")
    parser.add_argument("-t", "--threads", type=int, default=default_threads(),
                        help="Number of worker threads")
    parser.add_argument("--tile-size", type=int, default=defaults.tile_size,
                        help="Tile edge length in pixels")
    parser.add_argument("-o", "--out", default="out.ppm",
                        help="Output image path")
    parser.add_argument("--log-level", default="INFO", choices=LOG_LEVELS,
                        help="Logging verbosity")
    parser.add_argument("--texture", default=None,
                        help="Image used by the textured scenes (earth, final_scene)")
    return parser.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = RenderConfig(
        width=args.width,
        height=args.height,
        samples_per_pixel=args.samples_per_pixel,
        max_depth=args.max_depth,
        threads=args.threads,
        seed=args.seed,
        tile_size=args.tile_size,
        bvh=not args.no_bvh,
    )
    try:
        config.validate()
        scene = build_scene(args.scene, config.aspect_ratio, seed=config.seed,
                            use_bvh=config.bvh, texture_path=args.texture)
        image = render(scene, config)
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        return 2
    except WorkerFailure as e:
        logger.error("Render failed: %s", e)
        return 1

    save_image(image, args.out)
    logger.info("Saved %s", args.out)
    return 0

if __name__ == "__main__":
    sys.exit(main())
