"""Tests for palettest.core.colorsys: RGB to HSL/HSV maths."""

import colorsys as std_colorsys

import pytest
from palettest.core import colorsys


class TestHue:
    def test_primaries(self) -> None:
        assert colorsys.rgb_to_hue(1, 0, 0) == 0
        assert colorsys.rgb_to_hue(0, 1, 0) == pytest.approx(120)
        assert colorsys.rgb_to_hue(0, 0, 1) == pytest.approx(240)

    def test_secondaries(self) -> None:
        assert colorsys.rgb_to_hue(1, 1, 0) == pytest.approx(60)
        assert colorsys.rgb_to_hue(0, 1, 1) == pytest.approx(180)
        assert colorsys.rgb_to_hue(1, 0, 1) == pytest.approx(300)

    def test_red_wins_ties(self) -> None:
        # red and green both max: red branch gives (g - b) / chroma = 1
        assert colorsys.rgb_to_hue(1, 1, 0.5) == pytest.approx(60)

    def test_negative_raw_wraps(self) -> None:
        assert colorsys.rgb_to_hue(1, 0, 0.5) == pytest.approx(330)

    def test_achromatic(self) -> None:
        assert colorsys.rgb_to_hue(0.3, 0.3, 0.3) == 0

    def test_tiny_negative_raw_hue_wraps_to_zero(self) -> None:
        hue = colorsys.rgb_to_hue(1.0, 0.0, 1e-20)
        assert 0 <= hue < 360
        assert hue == 0

    def test_scaling_preserves_hue(self) -> None:
        assert colorsys.rgb_to_hue(0.8, 0.4, 0.2) == pytest.approx(colorsys.rgb_to_hue(0.4, 0.2, 0.1))


class TestAgainstStdlib:
    """Hue, lightness and value agree with the standard library's colorsys."""

    SAMPLES = [(222, 250, 206), (255, 0, 128), (12, 34, 56), (200, 100, 50), (0, 0, 0), (255, 255, 255)]

    @pytest.mark.parametrize('rgb', SAMPLES)
    def test_hsl(self, rgb: tuple[int, int, int]) -> None:
        r, g, b = colorsys.unit_rgb(*rgb)
        h, s, lightness = colorsys.rgb_to_hsl(r, g, b)
        std_h, std_l, std_s = std_colorsys.rgb_to_hls(r, g, b)
        assert h == pytest.approx(std_h * 360, abs=1e-9)
        assert lightness == pytest.approx(std_l)
        assert s == pytest.approx(std_s)

    @pytest.mark.parametrize('rgb', SAMPLES)
    def test_hsv(self, rgb: tuple[int, int, int]) -> None:
        r, g, b = colorsys.unit_rgb(*rgb)
        assert colorsys.rgb_to_hsv(r, g, b) == pytest.approx(
            tuple(x * k for x, k in zip(std_colorsys.rgb_to_hsv(r, g, b), (360, 1, 1)))
        )


class TestSaturation:
    def test_black(self) -> None:
        assert colorsys.saturation_v(0, 0, 0) == 0
        assert colorsys.saturation_l(0, 0, 0) == 0

    def test_white(self) -> None:
        assert colorsys.saturation_l(1, 1, 1) == 0
        assert colorsys.lightness(1, 1, 1) == 1

    def test_pure_red(self) -> None:
        assert colorsys.saturation_l(1, 0, 0) == 1
        assert colorsys.saturation_v(1, 0, 0) == 1
        assert colorsys.lightness(1, 0, 0) == 0.5
        assert colorsys.value(1, 0, 0) == 1

    def test_saturation_l_never_exceeds_one(self) -> None:
        for high in range(1, 256):
            for low in range(high):
                r, g, b = colorsys.unit_rgb(high, low, low)
                assert 0 <= colorsys.saturation_l(r, g, b) <= 1
