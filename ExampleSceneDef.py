import ray
from geometry import Sphere
from materials import Color
from utils import vec

DEFAULT_OUTPUT = "image.png"


class ExampleSceneDef(object):
    def __init__(self, scene):
        self.scene = scene;

    def render(self, output_path=None, verbose=False):
        im = ray.render_image(self.scene, verbose=verbose);
        if(output_path is not None):
            im.writeToFile(output_path);
        return im;


def DefaultSphereExample():
    # One green sphere five units in front of the camera
    green = Color(0.4, 1.0, 0.4)
    scene = ray.Scene(
        width=800,
        height=600,
        fov=90.0,
        sphere=Sphere(vec([0, 0, -5]), 1.0, green),
    )
    return ExampleSceneDef(scene=scene);
