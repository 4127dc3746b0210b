import numpy as np

# display gamma used when converting linear color to 8-bit pixels
GAMMA = 2.2


def vec(list):
    """Handy shorthand to make a double-precision float array."""
    return np.array(list, dtype=np.float64)

def normalize(v):
    """Return a unit vector in the direction of the vector v."""
    return v / np.linalg.norm(v)


def gamma_encode(linear):
    return np.power(linear, 1.0 / GAMMA)

def gamma_decode(encoded):
    return np.power(encoded, GAMMA)

def to_rgba8(color):
    """Convert a linear (3,) color to an 8-bit (r, g, b, 255) tuple.

    Channels are clipped to [0, 1] before encoding and truncated, not rounded.
    """
    encoded = gamma_encode(np.clip(np.asarray(color, dtype=np.float64), 0, 1))
    r, g, b = (encoded * 255.0).astype(np.uint8)
    return (int(r), int(g), int(b), 255)

def from_rgba8(rgba):
    """Decode the color channels of an 8-bit pixel back to linear light.

    The alpha channel, if present, is ignored.
    """
    return gamma_decode(np.asarray(rgba[:3], dtype=np.float64) / 255.0)
