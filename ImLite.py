from PIL import Image as PIM
import numpy as np


class Image(object):
    """Image

    Pixel buffer stored as a (height, width, channels) uint8 array.
    """

    def __init__(self, path=None, pixels=None, **kwargs):
        # You can do Image(pixels) or Image(path)
        self._samples = None;
        self.file_path = None;
        if (isinstance(path, np.ndarray) and (pixels is None)):
            # if the path looks like pixels and pixels are undefined, treat the path as pixels
            pixels = path;
        else:
            self.file_path = path;
        self.pixels = pixels;
        if (self.file_path is not None and pixels is None):
            self.loadImageData(self.file_path);

    @classmethod
    def New(cls, width, height, n_channels=3):
        """Blank (all zero) image. With 3 channels the alpha of written pixels is dropped."""
        return cls(pixels=np.zeros((height, width, n_channels), dtype=np.uint8));

    @property
    def pixels(self):
        return self._samples;

    @pixels.setter
    def pixels(self, data):
        self._samples = data;

    @property
    def n_color_channels(self):
        if (len(self.pixels.shape) < 3):
            return 1;
        else:
            return self.pixels.shape[2];

    @property
    def shape(self):
        return np.asarray(self.pixels.shape)[:];

    @property
    def width(self):
        return int(self.shape[1]);

    @property
    def height(self):
        return int(self.shape[0]);

    def setPixel(self, x, y, rgba):
        """Write an 8-bit (r, g, b, a) color at column x, row y."""
        if (x < 0 or y < 0):
            raise IndexError(f"pixel ({x}, {y}) is outside the image");
        self.pixels[y, x] = rgba[:self.n_color_channels];

    def getPixel(self, x, y):
        return tuple(int(c) for c in self.pixels[y, x]);

    def loadImageData(self, path=None):
        if (path):
            self.file_path = path;
        pim = PIM.open(fp=self.file_path);
        self._samples = np.array(pim);

    def PIL(self):
        return PIM.fromarray(np.uint8(self.pixels));

    def writeToFile(self, output_path=None, **kwargs):
        if (output_path is None):
            output_path = self.file_path;
        self.PIL().save(output_path, **kwargs);
        self.file_path = output_path;
