"""RGB to HSL / HSV conversions on unit floats.

Channels are floats in [0, 1]. Hue is returned in degrees in [0, 360);
saturation, lightness and value are fractions in [0, 1].

The hue is shared by both models. Achromatic colours (all channels equal)
have no hue and report 0, as do their saturations.

Example:
    >>> rgb_to_hsl(*unit_rgb(222, 250, 206))  # doctest: +ELLIPSIS
    (98.18..., 0.814..., 0.894...)
"""


def unit_rgb(red: int, green: int, blue: int) -> tuple[float, float, float]:
    """Scale 8-bit channels to [0, 1]."""
    return red / 255.0, green / 255.0, blue / 255.0


def rgb_to_hue(r: float, g: float, b: float) -> float:
    """Hue in degrees, 0 for achromatic input."""
    high = max(r, g, b)
    chroma = high - min(r, g, b)
    if chroma == 0:
        return 0.0

    # Ties resolve red first, then green.
    if r == high:
        raw = (g - b) / chroma
    elif g == high:
        raw = 2.0 + (b - r) / chroma
    else:
        raw = 4.0 + (r - g) / chroma

    # Python's % takes the sign of the divisor, so negative raw hues wrap into [0, 360].
    hue = (raw * 60.0) % 360.0
    # a tiny negative raw hue rounds up to exactly 360
    return 0.0 if hue == 360.0 else hue


def lightness(r: float, g: float, b: float) -> float:
    return (max(r, g, b) + min(r, g, b)) / 2.0


def saturation_l(r: float, g: float, b: float) -> float:
    """HSL saturation: chroma relative to lightness."""
    chroma = max(r, g, b) - min(r, g, b)
    if chroma == 0:
        return 0.0
    # rounding can land a few ulps above 1
    return min(1.0, chroma / (1.0 - abs(2.0 * lightness(r, g, b) - 1.0)))


def value(r: float, g: float, b: float) -> float:
    return max(r, g, b)


def saturation_v(r: float, g: float, b: float) -> float:
    """HSV saturation: chroma relative to value, 0 for black."""
    high = max(r, g, b)
    if high == 0:
        return 0.0
    return (high - min(r, g, b)) / high


def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    return rgb_to_hue(r, g, b), saturation_l(r, g, b), lightness(r, g, b)


def rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    return rgb_to_hue(r, g, b), saturation_v(r, g, b), value(r, g, b)
