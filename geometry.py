import numpy as np
from utils import vec


class Sphere:

    def __init__(self, center, radius, color):
        """Create a sphere with the given center and radius.

        Parameters:
          center : (3,) -- a 3D point specifying the sphere's center
          radius : float -- a Python float specifying the sphere's radius
          color : Color -- the flat color drawn wherever the sphere is hit
        """
        self.center = vec(center)
        self.radius = radius
        self.color = color

    def intersect(self, ray):
        """Return True if the ray's line passes through this sphere."""
        return intersects(ray, self)


def intersects(ray, sphere):
    """Test whether a ray hits a sphere.

    Uses the closest approach of the ray's line to the sphere center, so no
    quadratic is solved and no hit distance is produced. There is no check
    that the hit lies in front of the ray origin: a sphere behind the origin
    on the same line also counts as a hit.

    Parameters:
      ray : Ray -- the ray, with a unit-length direction
      sphere : Sphere -- the sphere to test against
    Return:
      bool -- True if the squared distance from the center to the line is
      less than the squared radius; always False for a radius <= 0
    """
    if sphere.radius <= 0:
        return False
    # hypotenuse from the ray origin to the sphere center
    l = sphere.center - ray.origin
    adjacent = np.dot(l, ray.direction)
    d_squared = np.dot(l, l) - adjacent * adjacent
    return bool(d_squared < sphere.radius * sphere.radius)
