"""Shared types for palettest: Color and Tone."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from palettest.core import colorsys
from palettest.core.hexcode import hex_to_rgb, rgb_to_hex


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA colour. Equal colours have equal channels, alpha included."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for channel, level in zip(('red', 'green', 'blue', 'alpha'), self.rgba):
            if isinstance(level, bool) or not isinstance(level, int):
                raise ValueError(f'Color {channel} must be an int, got {level!r}')
            if not 0 <= level <= 255:
                raise ValueError(f'Color {channel} must be in 0..255, got {level}')

    @classmethod
    def from_hex(cls, code: str, alpha: int = 255) -> Color:
        return cls(*hex_to_rgb(code), alpha=alpha)

    @classmethod
    def from_argb(cls, packed: int) -> Color:
        """Unpack a 32-bit 0xAARRGGBB integer."""
        return cls((packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF, (packed >> 24) & 0xFF)

    @property
    def rgb(self) -> tuple[int, int, int]:
        return self.red, self.green, self.blue

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return self.red, self.green, self.blue, self.alpha

    @property
    def argb(self) -> int:
        return (self.alpha << 24) | (self.red << 16) | (self.green << 8) | self.blue

    @property
    def hex(self) -> str:
        """'#rrggbb', alpha excluded."""
        return rgb_to_hex(*self.rgb)


@dataclass(frozen=True)
class Tone:
    """A named Color, readable as RGB, HSL or HSV, each with alpha.

    If no name is given one is derived from the RGB makeup, so pure red
    becomes '#ff0000'. Alpha is left out of derived names: two tones that
    differ only in alpha get the same name, which avoids any ARGB/RGBA
    ambiguity.

    Two tones are equal when their colours are equal, whatever they are
    called.

    See https://en.wikipedia.org/wiki/HSL_and_HSV
    """

    color: Color
    name: str | None = field(default=None, compare=False)
    hue: float = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.color, Color):
            raise ValueError(f'A Tone called {self.name!r} was created without a Color.')
        if self.name is not None and not isinstance(self.name, str):
            raise ValueError(f'A Tone name must be a str, got {self.name!r}')
        if self.name is None:
            object.__setattr__(self, 'name', self.color.hex)
        object.__setattr__(self, 'hue', colorsys.rgb_to_hue(*self._unit))

    @classmethod
    def from_hex(cls, code: str, name: str | None = None, alpha: int = 255) -> Tone:
        return cls(Color.from_hex(code, alpha=alpha), name=name)

    def __str__(self) -> str:
        return f'{self.name} ({self.color.hex})'

    @property
    def _unit(self) -> tuple[float, float, float]:
        return colorsys.unit_rgb(*self.color.rgb)

    @property
    def red(self) -> int:
        return self.color.red

    @property
    def green(self) -> int:
        return self.color.green

    @property
    def blue(self) -> int:
        return self.color.blue

    @property
    def alpha(self) -> int:
        return self.color.alpha

    @property
    def saturation_l(self) -> float:
        """HSL saturation in [0, 1]."""
        return colorsys.saturation_l(*self._unit)

    @property
    def saturation_v(self) -> float:
        """HSV saturation in [0, 1]."""
        return colorsys.saturation_v(*self._unit)

    @property
    def lightness(self) -> float:
        return colorsys.lightness(*self._unit)

    @property
    def value(self) -> float:
        return colorsys.value(*self._unit)

    @property
    def hsl(self) -> tuple[float, float, float]:
        return self.hue, self.saturation_l, self.lightness

    @property
    def hsla(self) -> tuple[float, float, float, float]:
        return (*self.hsl, self.alpha / 255.0)

    @property
    def hsv(self) -> tuple[float, float, float]:
        return self.hue, self.saturation_v, self.value

    @property
    def hsva(self) -> tuple[float, float, float, float]:
        return (*self.hsv, self.alpha / 255.0)

    def to_dict(self) -> dict[str, Any]:
        return {
            'name': self.name,
            'hex': self.color.hex,
            'rgba': list(self.color.rgba),
            'hsl': [round(x, 4) for x in self.hsl],
            'hsv': [round(x, 4) for x in self.hsv],
        }
