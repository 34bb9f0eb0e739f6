"""Color conversion helpers used to invert base16 themes."""

import numpy as np
from PIL import ImageColor

# BT.601 analog YUV, operating on RGB channels scaled to 0..1
RGB_TO_YUV = np.array(
    [
        [0.299, 0.587, 0.114],
        [-0.14713, -0.28886, 0.436],
        [0.615, -0.51499, -0.10001],
    ]
)

YUV_TO_RGB = np.array(
    [
        [1.0, 0.0, 1.13983],
        [1.0, -0.39465, -0.58060],
        [1.0, 2.03211, 0.0],
    ]
)


def parse_color(color):
    """Parse a CSS color string into an (r, g, b) tuple of 0-255 ints.

    Accepts hex (``#fff``, ``#ffffff``), ``rgb()``/``hsl()`` functions and
    named colors. Raises ValueError for anything Pillow cannot parse.
    """
    return ImageColor.getrgb(color)[:3]


def rgb_to_hex(r, g, b):
    r, g, b = (int(max(0, min(255, round(c)))) for c in (r, g, b))
    return f"#{r:02x}{g:02x}{b:02x}"


def rgb_to_yuv(rgb):
    """Convert 0-255 RGB to a (y, u, v) triple with luma in 0..1"""
    y, u, v = RGB_TO_YUV @ (np.asarray(rgb, dtype=float) / 255)
    return float(y), float(u), float(v)


def yuv_to_rgb(yuv):
    """Convert (y, u, v) back to 0-255 RGB, clamping out-of-gamut channels"""
    rgb = np.clip(YUV_TO_RGB @ np.asarray(yuv, dtype=float), 0, 1) * 255
    return tuple(float(c) for c in rgb)


def flip_luma(y):
    # A dark but not black background has to invert to something bright
    # enough, so the curve is shifted instead of being a plain 1 - y.
    if y < 0.25:
        return 1
    if y < 0.5:
        return 0.9 - y
    return 1.1 - y


def invert_color(color):
    """Invert a color's luma while keeping its chroma.

    Args:
        color: Any color string accepted by parse_color

    Returns:
        str: Lowercase ``#rrggbb`` hex string
    """
    y, u, v = rgb_to_yuv(parse_color(color))
    return rgb_to_hex(*yuv_to_rgb((flip_luma(y), u, v)))
