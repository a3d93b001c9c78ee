# main.py
import argparse
import logging
import random
import sys
from typing import List, Optional
from core.config import DEFAULT_ASPECT_RATIO, QUALITY_LEVELS, settings_for
from core.errors import SceneConstructionError
from core.logging_config import setup_logging
from renderer.image_io import save_image
from renderer.raytracer import Renderer
from renderer.scenes import SCENES, build_scene
from renderer.tone_mapping import TONE_MAPPERS

logger = logging.getLogger("main")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Monte-Carlo path tracer")
    parser.add_argument("--scene", choices=sorted(SCENES), default="random_spheres")
    parser.add_argument("--quality", choices=list(QUALITY_LEVELS), default="balanced",
                        help="preset for width, samples and depth")
    parser.add_argument("--width", type=int, help="image width in pixels")
    parser.add_argument("--aspect-ratio", type=float, help=f"default {DEFAULT_ASPECT_RATIO:.3f}")
    parser.add_argument("--samples", type=int, help="samples per pixel")
    parser.add_argument("--max-depth", type=int, help="maximum bounces per path")
    parser.add_argument("--workers", type=int, help="render processes (default 1)")
    parser.add_argument("--seed", type=int, help="seed for scene and sampling")
    parser.add_argument("--texture", help="image file for the textured globe")
    parser.add_argument("--tonemap", choices=sorted(TONE_MAPPERS), default="gamma")
    parser.add_argument("--output", "-o", default="image.ppm",
                        help="output file; .ppm is written as text, other extensions via Pillow")
    parser.add_argument("--preview", action="store_true", help="show the result in a window")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        settings = settings_for(args.quality, aspect_ratio=args.aspect_ratio, width=args.width,
                                samples_per_pixel=args.samples, max_depth=args.max_depth,
                                workers=args.workers, seed=args.seed)
    except ValueError as e:
        logger.error("Invalid render settings: %s", e)
        return 1

    try:
        scene = build_scene(args.scene, random.Random(settings.seed), args.texture)
    except (SceneConstructionError, FileNotFoundError, ValueError) as e:
        logger.error("Could not build scene %r: %s", args.scene, e)
        return 1
    if args.aspect_ratio is None and scene.aspect_ratio is not None:
        settings = settings.with_overrides(aspect_ratio=scene.aspect_ratio)

    camera = scene.camera(settings.aspect_ratio)
    image = Renderer(settings).render(camera, scene.world, scene.background)
    pixels = TONE_MAPPERS[args.tonemap](image)
    save_image(pixels, args.output)
    logger.info("Wrote %s", args.output)

    if args.preview:
        from renderer.preview import show_image
        show_image(pixels, title=f"{args.scene} ({settings.width}x{settings.height})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
