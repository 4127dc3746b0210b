import numpy as np
from ImLite import Image
from geometry import intersects
from materials import BLACK
from utils import vec, normalize

"""
Core implementation of the ray caster.
"""


class Ray:

    def __init__(self, origin, direction):
        """Create a ray with the given origin and direction.
        """
        self.origin = np.array(origin, np.float64)
        self.direction = np.array(direction, np.float64)


class Scene:

    def __init__(self, width, height, fov, sphere):
        """Create a scene viewed by a pinhole camera at the origin.

        Parameters:
          width : int -- image width in pixels, must exceed height
          height : int -- image height in pixels
          fov : float -- field of view in degrees
          sphere : Sphere -- the single object in the scene
        """
        assert width > height, f"scene width ({width}) must be greater than height ({height})"
        self.width = width
        self.height = height
        self.fov = fov
        self.sphere = sphere

    @property
    def aspect_ratio(self):
        return self.width / self.height


def sensor(index, size):
    """Map a pixel index to the center of its cell in (-1, 1)."""
    pixel_center = index + 0.5
    normalized = pixel_center / size
    return normalized * 2.0 - 1.0


def create_primary_ray(x, y, scene):
    """Compute the camera ray through the center of pixel (x, y).

    The eye sits at the origin looking down -z, with the image plane at
    z = -1. Row indices grow downward while world y grows upward.
    """
    assert scene.width > scene.height, "scene width must be greater than height"
    assert 0 <= x < scene.width and 0 <= y < scene.height, f"pixel ({x}, {y}) outside the image"

    fov_adjustment = np.tan(np.radians(scene.fov) / 2.0)
    sensor_x = sensor(x, scene.width) * fov_adjustment * scene.aspect_ratio
    sensor_y = -sensor(y, scene.height) * fov_adjustment

    return Ray(vec([0, 0, 0]), normalize(vec([sensor_x, sensor_y, -1.0])))


def render_image(scene, verbose=False):
    """
    Cast one ray per pixel and draw the sphere's flat color where it is hit.

    Returns an Image of size scene.width x scene.height.
    """
    image = Image.New(scene.width, scene.height)
    sphere = scene.sphere
    hit_color = sphere.color.to_rgba()

    for y in range(scene.height):
        if verbose:
            print(f"rendering row {y+1}/{scene.height}...")
        for x in range(scene.width):
            ray = create_primary_ray(x, y, scene)
            if intersects(ray, sphere):
                image.setPixel(x, y, hit_color)
            else:
                image.setPixel(x, y, BLACK)

    return image
