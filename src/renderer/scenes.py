# renderer/scenes.py
"""
Named demo scenes. Every builder takes a ``random.Random`` and returns a
Scene bundling the world with the camera placement and background that
suit it.
"""
import logging
import random
from dataclasses import dataclass
from typing import Callable, Dict, Optional
import numpy as np
from camera.camera import Camera
from core.vector import Color, Vector3
from geometry.box import Box
from geometry.bvh import build_bvh
from geometry.constant_medium import ConstantMedium
from geometry.hittable import Hittable
from geometry.rect import XYRect, XZRect, YZRect
from geometry.sphere import MovingSphere, Sphere
from geometry.transforms import FlipFace, RotateY, Translate
from geometry.world import HittableList
from materials.dielectric import Dielectric
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.presets import (ColorPresets, DielectricPresets, LightPresets, MetalPresets,
                               TexturePresets)
from materials.textures import ImageTexture, NoiseTexture
from materials.texture_loader import load_texture
from renderer.integrator import Background, sky_gradient

logger = logging.getLogger(__name__)

BLACK = Color(0, 0, 0)


@dataclass
class Scene:
    world: Hittable
    lookfrom: Vector3
    lookat: Vector3
    vfov: float = 20.0
    aperture: float = 0.0
    focus_dist: float = 10.0
    background: Background = sky_gradient
    time0: float = 0.0
    time1: float = 1.0
    # Preferred width/height ratio, None to use the render settings.
    aspect_ratio: Optional[float] = None

    def camera(self, aspect_ratio: float) -> Camera:
        return Camera(self.lookfrom, self.lookat, Vector3(0, 1, 0), self.vfov, aspect_ratio,
                      self.aperture, self.focus_dist, self.time0, self.time1)


def _numpy_rng(rng: random.Random) -> np.random.Generator:
    return np.random.default_rng(rng.getrandbits(64))


def _finish(name: str, objects: HittableList, rng: random.Random,
            time0: float = 0.0, time1: float = 1.0) -> Hittable:
    logger.info("Scene %r: %d top-level objects", name, len(objects))
    return build_bvh(objects, time0, time1, rng)


def random_spheres(rng: random.Random, texture_path: Optional[str] = None) -> Scene:
    """Checkered ground, a field of small random spheres (some bouncing) and three big ones."""
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(TexturePresets.checkerboard())))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                albedo = Color(rng.random(), rng.random(), rng.random()) * \
                    Color(rng.random(), rng.random(), rng.random())
                center2 = center + Vector3(0, rng.uniform(0, 0.5), 0)
                world.add(MovingSphere(center, center2, 0.0, 1.0, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                albedo = Color(rng.uniform(0.5, 1), rng.uniform(0.5, 1), rng.uniform(0.5, 1))
                world.add(Sphere(center, 0.2, Metal(albedo, rng.uniform(0, 0.5))))
            else:
                world.add(Sphere(center, 0.2, DielectricPresets.glass()))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, DielectricPresets.glass()))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, MetalPresets.mirror()))

    return Scene(_finish("random_spheres", world, rng), Vector3(13, 2, 3), Vector3(0, 0, 0),
                 vfov=20.0, aperture=0.1, background=Color(0.70, 0.80, 1.00))


def two_spheres(rng: random.Random, texture_path: Optional[str] = None) -> Scene:
    checker = TexturePresets.checkerboard()
    world = HittableList([
        Sphere(Vector3(0, -10, 0), 10, Lambertian(checker)),
        Sphere(Vector3(0, 10, 0), 10, Lambertian(checker)),
    ])
    return Scene(_finish("two_spheres", world, rng), Vector3(13, 2, 3), Vector3(0, 0, 0))


def two_perlin_spheres(rng: random.Random, texture_path: Optional[str] = None) -> Scene:
    marble = TexturePresets.marble(4.0, rng=_numpy_rng(rng))
    world = HittableList([
        Sphere(Vector3(0, -1000, 0), 1000, Lambertian(marble)),
        Sphere(Vector3(0, 2, 0), 2, Lambertian(marble)),
    ])
    return Scene(_finish("two_perlin_spheres", world, rng), Vector3(13, 2, 3), Vector3(0, 0, 0))


def earth(rng: random.Random, texture_path: Optional[str] = None) -> Scene:
    """A globe wrapped in an image; without an image the texture shows cyan."""
    texture = load_texture(texture_path) if texture_path else ImageTexture()
    world = HittableList([Sphere(Vector3(0, 0, 0), 2, Lambertian(texture))])
    return Scene(_finish("earth", world, rng), Vector3(13, 2, 3), Vector3(0, 0, 0))


def simple_light(rng: random.Random, texture_path: Optional[str] = None) -> Scene:
    marble = TexturePresets.marble(4.0, rng=_numpy_rng(rng))
    light = LightPresets.white_light(4.0)
    world = HittableList([
        Sphere(Vector3(0, -1000, 0), 1000, Lambertian(marble)),
        Sphere(Vector3(0, 2, 0), 2, Lambertian(marble)),
        Sphere(Vector3(0, 7, 0), 2, light),
        XYRect(3, 5, 1, 3, -2, light),
    ])
    return Scene(_finish("simple_light", world, rng), Vector3(26, 3, 6), Vector3(0, 2, 0),
                 background=BLACK)


def _cornell_walls(light: Hittable) -> HittableList:
    red = ColorPresets.matte(ColorPresets.RED)
    white = ColorPresets.matte(ColorPresets.WHITE)
    green = ColorPresets.matte(ColorPresets.GREEN)

    walls = HittableList()
    walls.add(FlipFace(YZRect(0, 555, 0, 555, 555, green)))
    walls.add(YZRect(0, 555, 0, 555, 0, red))
    walls.add(FlipFace(light))
    walls.add(FlipFace(XZRect(0, 555, 0, 555, 555, white)))
    walls.add(XZRect(0, 555, 0, 555, 0, white))
    walls.add(FlipFace(XYRect(0, 555, 0, 555, 555, white)))
    return walls


def _cornell_boxes():
    white = ColorPresets.matte(ColorPresets.WHITE)
    tall = Box(Vector3(0, 0, 0), Vector3(165, 330, 165), white)
    tall = Translate(RotateY(tall, 15), Vector3(265, 0, 295))
    short = Box(Vector3(0, 0, 0), Vector3(165, 165, 165), white)
    short = Translate(RotateY(short, -18), Vector3(130, 0, 65))
    return tall, short


def cornell_box(rng: random.Random, texture_path: Optional[str] = None) -> Scene:
    world = _cornell_walls(XZRect(213, 343, 227, 332, 554, LightPresets.white_light(15.0)))
    for box in _cornell_boxes():
        world.add(box)
    return Scene(_finish("cornell_box", world, rng), Vector3(278, 278, -800),
                 Vector3(278, 278, 0), vfov=40.0, background=BLACK, aspect_ratio=1.0)


def cornell_smoke(rng: random.Random, texture_path: Optional[str] = None) -> Scene:
    world = _cornell_walls(XZRect(113, 443, 127, 432, 554, LightPresets.white_light(7.0)))
    tall, short = _cornell_boxes()
    world.add(ConstantMedium(tall, 0.01, Color(0, 0, 0)))
    world.add(ConstantMedium(short, 0.01, Color(1, 1, 1)))
    return Scene(_finish("cornell_smoke", world, rng), Vector3(278, 278, -800),
                 Vector3(278, 278, 0), vfov=40.0, background=BLACK, aspect_ratio=1.0)


def final_scene(rng: random.Random, texture_path: Optional[str] = None) -> Scene:
    """Everything at once: instanced boxes, motion blur, glass, fog, noise and an image."""
    ground = ColorPresets.matte(ColorPresets.GROUND)
    boxes1 = HittableList()
    boxes_per_side = 20
    for i in range(boxes_per_side):
        for j in range(boxes_per_side):
            w = 100.0
            x0 = -1000.0 + i * w
            z0 = -1000.0 + j * w
            y1 = rng.uniform(1, 101)
            boxes1.add(Box(Vector3(x0, 0.0, z0), Vector3(x0 + w, y1, z0 + w), ground))

    world = HittableList()
    world.add(build_bvh(boxes1, 0, 1, rng))
    world.add(XZRect(123, 423, 147, 412, 554, LightPresets.white_light(7.0)))

    center1 = Vector3(400, 400, 200)
    center2 = center1 + Vector3(30, 0, 0)
    world.add(MovingSphere(center1, center2, 0, 1, 50, Lambertian(Color(0.7, 0.3, 0.1))))

    world.add(Sphere(Vector3(260, 150, 45), 50, Dielectric(1.5)))
    world.add(Sphere(Vector3(0, 150, 145), 50, MetalPresets.brushed()))

    boundary = Sphere(Vector3(360, 150, 145), 70, Dielectric(1.5))
    world.add(boundary)
    world.add(ConstantMedium(boundary, 0.2, Color(0.2, 0.4, 0.9)))
    mist = Sphere(Vector3(0, 0, 0), 5000, Dielectric(1.5))
    world.add(ConstantMedium(mist, 0.0001, Color(1, 1, 1)))

    texture = load_texture(texture_path) if texture_path else ImageTexture()
    world.add(Sphere(Vector3(400, 200, 400), 100, Lambertian(texture)))
    world.add(Sphere(Vector3(220, 280, 300), 80,
                     Lambertian(NoiseTexture(0.1, rng=_numpy_rng(rng)))))

    white = ColorPresets.matte(ColorPresets.WHITE)
    boxes2 = HittableList(
        Sphere(Vector3(rng.uniform(0, 165), rng.uniform(0, 165), rng.uniform(0, 165)), 10, white)
        for _ in range(1000))
    world.add(Translate(RotateY(build_bvh(boxes2, 0.0, 1.0, rng), 15), Vector3(-100, 270, 395)))

    return Scene(_finish("final_scene", world, rng), Vector3(478, 278, -600),
                 Vector3(278, 278, 0), vfov=40.0, background=BLACK, aspect_ratio=1.0)


SCENES: Dict[str, Callable[..., Scene]] = {
    "random_spheres": random_spheres,
    "two_spheres": two_spheres,
    "two_perlin_spheres": two_perlin_spheres,
    "earth": earth,
    "simple_light": simple_light,
    "cornell_box": cornell_box,
    "cornell_smoke": cornell_smoke,
    "final_scene": final_scene,
}


def build_scene(name: str, rng: random.Random, texture_path: Optional[str] = None) -> Scene:
    try:
        builder = SCENES[name]
    except KeyError:
        raise ValueError(f"Unknown scene {name!r}; choose from {', '.join(SCENES)}") from None
    return builder(rng, texture_path)
