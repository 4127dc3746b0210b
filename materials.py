import numpy as np
from utils import gamma_encode, gamma_decode, to_rgba8, from_rgba8

# background written wherever no object is hit
BLACK = (0, 0, 0, 0)


class Color:

    def __init__(self, red, green, blue):
        """
        Create a flat color from linear light intensities.

        Parameters:
          red : float -- red channel, not limited to [0, 1] until clamped
          green : float -- green channel
          blue : float -- blue channel
        """
        self.red = red
        self.green = green
        self.blue = blue

    def __repr__(self):
        return f"Color({self.red}, {self.green}, {self.blue})"

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return (self.red, self.green, self.blue) == (other.red, other.green, other.blue)

    def as_array(self):
        return np.array([self.red, self.green, self.blue], dtype=np.float64)

    def clamp(self):
        """Return a copy with every channel clipped to [0, 1]."""
        r, g, b = np.clip(self.as_array(), 0.0, 1.0)
        return Color(float(r), float(g), float(b))

    def to_encoded(self):
        """Gamma-encode each channel, giving display-ready intensities."""
        r, g, b = gamma_encode(self.as_array())
        return Color(float(r), float(g), float(b))

    @classmethod
    def from_encoded(cls, encoded):
        r, g, b = gamma_decode(encoded.as_array())
        return cls(float(r), float(g), float(b))

    def to_rgba(self):
        """8-bit opaque pixel for this color (clamped, then gamma encoded)."""
        return to_rgba8(self.as_array())

    @classmethod
    def from_rgba(cls, rgba):
        r, g, b = from_rgba8(rgba)
        return cls(float(r), float(g), float(b))
