# scenes.py
import logging
import random
from typing import Callable, Dict, Optional, Tuple
import numpy as np
from pathtracer.camera.camera import Camera
from pathtracer.core.utils import random_vector
from pathtracer.core.vector import Color, Vector3
from pathtracer.geometry.box import Box
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.hittable import Hittable
from pathtracer.geometry.medium import ConstantMedium
from pathtracer.geometry.rect import XYRect, XZRect, YZRect
from pathtracer.geometry.sphere import MovingSphere, Sphere
from pathtracer.geometry.transform import RotateY, Translate
from pathtracer.geometry.world import HittableList
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.perlin import Perlin
from pathtracer.materials.presets import ColorPresets, DielectricPresets, LightPresets, TexturePresets
from pathtracer.materials.texture_loader import load_texture
from pathtracer.materials.textures import ImageTexture, NoiseTexture, Texture

logger = logging.getLogger(__name__)


def _noise_rng(rng: random.Random) -> np.random.Generator:
    return np.random.default_rng(rng.getrandbits(64))


def _image_texture(texture_path: Optional[str]) -> Texture:
    if texture_path is None:
        logger.warning("No texture image given; image-mapped surfaces render cyan")
        return ImageTexture(None)
    return load_texture(texture_path)


def random_scene(rng: random.Random, texture_path: Optional[str] = None) -> HittableList:
    world = HittableList()

    ground_material = Lambertian(TexturePresets.checkerboard())
    world.add(Sphere(Vector3(0, -1000, 0), 1000, ground_material))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())

            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                # diffuse
                albedo = random_vector(rng) * random_vector(rng)
                center2 = center + Vector3(0, rng.uniform(0, 0.5), 0)
                world.add(MovingSphere(center, center2, 0.0, 1.0, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                # metal
                albedo = random_vector(rng, 0.5, 1)
                fuzz = rng.uniform(0, 0.5)
                world.add(Sphere(center, 0.2, Metal(albedo, fuzz)))
            else:
                # glass
                world.add(Sphere(center, 0.2, DielectricPresets.glass()))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, DielectricPresets.glass()))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))
    return world


def two_spheres(rng: random.Random, texture_path: Optional[str] = None) -> HittableList:
    checker = Lambertian(TexturePresets.checkerboard())
    return HittableList([
        Sphere(Vector3(0, -10, 0), 10, checker),
        Sphere(Vector3(0, 10, 0), 10, checker),
    ])


def two_perlin_spheres(rng: random.Random, texture_path: Optional[str] = None) -> HittableList:
    pertext = Lambertian(NoiseTexture(4, Perlin(_noise_rng(rng))))
    return HittableList([
        Sphere(Vector3(0, -1000, 0), 1000, pertext),
        Sphere(Vector3(0, 2, 0), 2, pertext),
    ])


def earth(rng: random.Random, texture_path: Optional[str] = None) -> HittableList:
    earth_surface = Lambertian(_image_texture(texture_path))
    return HittableList([Sphere(Vector3(0, 0, 0), 2, earth_surface)])


def simple_light(rng: random.Random, texture_path: Optional[str] = None) -> HittableList:
    objects = two_perlin_spheres(rng)
    difflight = LightPresets.white_light(4)
    objects.add(XYRect(3, 5, 1, 3, -2, difflight))
    return objects


def _cornell_walls() -> HittableList:
    objects = HittableList()
    red = ColorPresets.matte(ColorPresets.CORNELL_RED)
    white = ColorPresets.matte(ColorPresets.CORNELL_WHITE)
    green = ColorPresets.matte(ColorPresets.CORNELL_GREEN)
    light = LightPresets.white_light(15)

    objects.add(YZRect(0, 555, 0, 555, 555, green))
    objects.add(YZRect(0, 555, 0, 555, 0, red))
    objects.add(XZRect(213, 343, 227, 332, 554, light))
    objects.add(XZRect(0, 555, 0, 555, 0, white))
    objects.add(XZRect(0, 555, 0, 555, 555, white))
    objects.add(XYRect(0, 555, 0, 555, 555, white))
    return objects


def _cornell_blocks() -> Tuple[Hittable, Hittable]:
    white = ColorPresets.matte(ColorPresets.CORNELL_WHITE)

    box1 = Box(Vector3(0, 0, 0), Vector3(165, 330, 165), white)
    box1 = Translate(RotateY(box1, 15), Vector3(265, 0, 295))

    box2 = Box(Vector3(0, 0, 0), Vector3(165, 165, 165), white)
    box2 = Translate(RotateY(box2, -18), Vector3(130, 0, 65))
    return box1, box2


def cornell_box(rng: random.Random, texture_path: Optional[str] = None) -> HittableList:
    objects = _cornell_walls()
    for block in _cornell_blocks():
        objects.add(block)
    return objects


def cornell_smoke(rng: random.Random, texture_path: Optional[str] = None) -> HittableList:
    objects = _cornell_walls()
    box1, box2 = _cornell_blocks()
    objects.add(ConstantMedium(box1, 0.01, ColorPresets.BLACK))
    objects.add(ConstantMedium(box2, 0.01, ColorPresets.WHITE))
    return objects


def final_scene(rng: random.Random, texture_path: Optional[str] = None) -> HittableList:
    boxes1 = HittableList()
    ground = ColorPresets.matte(ColorPresets.GRASS)

    boxes_per_side = 20
    for i in range(boxes_per_side):
        for j in range(boxes_per_side):
            w = 100.0
            x0 = -1000.0 + i * w
            z0 = -1000.0 + j * w
            y0 = 0.0
            x1 = x0 + w
            y1 = rng.uniform(1, 101)
            z1 = z0 + w
            boxes1.add(Box(Vector3(x0, y0, z0), Vector3(x1, y1, z1), ground))

    objects = HittableList()
    objects.add(BVHNode.from_list(boxes1, 0, 1, rng))

    light = LightPresets.white_light(7)
    objects.add(XZRect(123, 423, 147, 412, 554, light))

    center1 = Vector3(400, 400, 200)
    center2 = center1 + Vector3(30, 0, 0)
    moving_sphere_material = Lambertian(Color(0.7, 0.3, 0.1))
    objects.add(MovingSphere(center1, center2, 0, 1, 50, moving_sphere_material))

    objects.add(Sphere(Vector3(260, 150, 45), 50, DielectricPresets.glass()))
    objects.add(Sphere(Vector3(0, 150, 145), 50, Metal(Color(0.8, 0.8, 0.9), 1.0)))

    # The glass sphere and the blue fog inside it share one boundary.
    boundary = Sphere(Vector3(360, 150, 145), 70, DielectricPresets.glass())
    objects.add(boundary)
    objects.add(ConstantMedium(boundary, 0.2, Color(0.2, 0.4, 0.9)))
    boundary = Sphere(Vector3(0, 0, 0), 5000, DielectricPresets.glass())
    objects.add(ConstantMedium(boundary, 0.0001, Color(1, 1, 1)))

    emat = Lambertian(_image_texture(texture_path))
    objects.add(Sphere(Vector3(400, 200, 400), 100, emat))
    pertext = NoiseTexture(0.1, Perlin(_noise_rng(rng)))
    objects.add(Sphere(Vector3(220, 280, 300), 80, Lambertian(pertext)))

    boxes2 = HittableList()
    white = ColorPresets.matte(ColorPresets.CORNELL_WHITE)
    for _ in range(1000):
        boxes2.add(Sphere(random_vector(rng, 0, 165), 10, white))

    objects.add(Translate(RotateY(BVHNode.from_list(boxes2, 0.0, 1.0, rng), 15),
                          Vector3(-100, 270, 395)))
    return objects


SCENES: Dict[str, Callable[..., HittableList]] = {
    'random': random_scene,
    'two_spheres': two_spheres,
    'two_perlin_spheres': two_perlin_spheres,
    'earth': earth,
    'simple_light': simple_light,
    'cornell_box': cornell_box,
    'cornell_smoke': cornell_smoke,
    'final': final_scene,
}


def make_camera(settings: dict) -> Camera:
    return Camera(
        look_from=Vector3(*settings['look_from']),
        look_at=Vector3(*settings['look_at']),
        vup=Vector3(*settings['vup']),
        vfov=settings['vfov'],
        aspect_ratio=settings['aspect_ratio'],
        aperture=settings['aperture'],
        focus_dist=settings['focus_dist'],
        time0=settings['time0'],
        time1=settings['time1'],
    )


def build_scene(settings: dict, rng: random.Random) -> Tuple[HittableList, Color, Camera]:
    """
    Build the world, background and camera described by resolved settings.
    """
    name = settings['scene']
    try:
        builder = SCENES[name]
    except KeyError:
        raise ValueError(f"Unknown scene: {name}") from None

    world = builder(rng, settings.get('texture'))
    logger.info("Built scene '%s' with %d top-level objects", name, len(world))
    return world, Color(*settings['background']), make_camera(settings)
