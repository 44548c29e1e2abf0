# main.py
"""Render one of the demo scenes to an image file.

Usage:
    pathtracer --scene cornell_box --samples 50 --output cornell.png
"""
import argparse
import logging
import random
import sys
from typing import List, Optional

from pathtracer.config import DEFAULT_SCENE, QUALITY_LEVELS, SCENE_PRESETS, resolve_settings
from pathtracer.renderer.image_io import save_image
from pathtracer.renderer.raytracer import Renderer
from pathtracer.renderer.tone_mapping import TONE_MAPPERS
from pathtracer.scenes import build_scene

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Offline path tracer.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--scene", choices=sorted(SCENE_PRESETS), default=DEFAULT_SCENE,
                        help=f"Scene to render (default: {DEFAULT_SCENE})")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS),
                        help="Sample/bounce preset applied on top of the scene preset")
    parser.add_argument("--width", type=_positive_int, dest="image_width",
                        help="Image width in pixels (default: scene preset)")
    parser.add_argument("--samples", type=_positive_int, dest="samples_per_pixel",
                        help="Samples per pixel (default: scene preset)")
    parser.add_argument("--max-depth", type=_positive_int, dest="max_depth",
                        help="Maximum bounces per path (default: 50)")
    parser.add_argument("--output", help="Output image path (default: output.png)")
    parser.add_argument("--texture", help="Image used by image-mapped scenes (earth, final)")
    parser.add_argument("--tone-map", choices=sorted(TONE_MAPPERS), dest="tone_map",
                        help="Conversion from radiance to 8-bit color (default: gamma)")
    parser.add_argument("--seed", type=int, help="Random seed for a reproducible render")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log per-scanline progress")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    overrides = {
        'image_width': args.image_width,
        'samples_per_pixel': args.samples_per_pixel,
        'max_depth': args.max_depth,
        'output': args.output,
        'texture': args.texture,
        'tone_map': args.tone_map,
        'seed': args.seed,
    }
    settings = resolve_settings(args.scene, args.quality, overrides)
    rng = random.Random(settings['seed'])

    try:
        world, background, camera = build_scene(settings, rng)
    except (FileNotFoundError, ValueError) as e:
        logger.error("Could not build scene '%s': %s", args.scene, e)
        return 1

    logger.info("Building BVH for %d objects...", len(world))
    world.build_bvh(camera.time0, camera.time1, rng)

    renderer = Renderer(
        settings['image_width'],
        settings['image_height'],
        samples_per_pixel=settings['samples_per_pixel'],
        max_depth=settings['max_depth'],
        background=background,
        seed=rng.getrandbits(64),
    )
    renderer.render(world, camera)
    save_image(renderer.to_image(settings['tone_map']), settings['output'])
    return 0


if __name__ == "__main__":
    sys.exit(main())
