"""Tests for palette_lab.core.info and palette_lab.core.luminance."""

import pytest
from palette_lab.core.color import Color
from palette_lab.core.info import get_color_info
from palette_lab.core.luminance import FALLBACK_RGB, get_luminance, hex_to_rgb


class TestHexToRgb:
    def test_long(self):
        assert hex_to_rgb('#CCCFDB') == (204, 207, 219)

    def test_short(self):
        assert hex_to_rgb('#fff') == (255, 255, 255)

    def test_no_hash(self):
        assert hex_to_rgb('ff0000') == (255, 0, 0)

    def test_invalid_falls_back_to_mid_grey(self):
        assert hex_to_rgb('#ff') == FALLBACK_RGB
        assert hex_to_rgb('#gggggg') == FALLBACK_RGB


class TestGetLuminance:
    def test_white(self):
        luminance, pct = get_luminance('#FFFFFF')
        assert luminance == pytest.approx(1.0)
        assert pct == pytest.approx(100.0)

    def test_black(self):
        assert get_luminance('#000000') == (0.0, 0.0)

    def test_mid_grey(self):
        luminance, _pct = get_luminance('#808080')
        assert luminance == pytest.approx(0.21586, abs=1e-5)

    def test_green_weighs_most(self):
        red, _ = get_luminance('#FF0000')
        green, _ = get_luminance('#00FF00')
        blue, _ = get_luminance('#0000FF')
        assert red == pytest.approx(0.2126)
        assert green == pytest.approx(0.7152)
        assert blue == pytest.approx(0.0722)


class TestGetColorInfo:
    def test_hex_is_upper_case(self):
        assert get_color_info('#ff5500').hex == '#FF5500'

    def test_rgb_from_hex_channels(self):
        assert get_color_info('#FF5500').rgb == 'rgb(255,85,0)'

    def test_lightness_two_decimals(self):
        info = get_color_info('#808080')
        assert float(info.lightness) == pytest.approx(53.59, abs=0.01)
        assert len(info.lightness.split('.')[1]) == 2

    def test_luminance_rounding(self):
        info = get_color_info('#FFFFFF')
        assert info.luminance == '1.00000'
        assert info.luminance_pct == '100.000'

    def test_representations(self):
        info = get_color_info('#FF5500')
        assert info.rgb2.startswith('rgb(')
        assert info.hsl.startswith('hsl(')
        assert info.hwb.startswith('hwb(')
        assert info.lab.startswith('lab(')
        assert info.lch.startswith('lch(')
        assert 'hsv' in info.hsv
        assert 'display-p3-linear' in info.p3_linear

    def test_representations_agree(self):
        info = get_color_info('hsl(240, 80%, 60%)')
        reference = Color(info.hex)
        for text in (info.rgb2, info.hsl, info.hwb, info.lab, info.lch, info.p3_linear):
            assert Color(text).delta_e(reference) < 0.5, text

    @pytest.mark.parametrize('color', ['#808080', '#BB8822', 'hsl(240, 80%, 60%)', 'rgb(10 200 30)', '#FF5500'])
    def test_hex_round_trip(self, color):
        first = get_color_info(color)
        assert get_color_info(first.hex).hex == first.hex

    def test_out_of_gamut_is_mapped(self):
        info = get_color_info('lch(60 150 30)')
        r, g, b = (int(c) for c in info.rgb[4:-1].split(','))
        assert all(0 <= c <= 255 for c in (r, g, b))
        assert Color(info.rgb2).in_gamut('srgb', tolerance=0.0001)

    def test_mix_amount(self):
        assert get_color_info('#FFFFFF', 'white 40%').mix_amount == 'white 40%'
        assert get_color_info('#FFFFFF').mix_amount is None

    def test_alpha_dropped_from_hex(self):
        info = get_color_info('#FF550080')
        assert info.hex == '#FF5500'
        assert info.rgb == 'rgb(255,85,0)'
        assert info.luminance == get_color_info('#FF5500').luminance

    def test_lab_values(self):
        lightness, a, b = get_color_info('#FFFFFF').lab_values
        assert lightness == pytest.approx(100, abs=0.01)
        assert a == pytest.approx(0, abs=0.01)
        assert b == pytest.approx(0, abs=0.01)

    def test_as_dict_keys(self):
        display = get_color_info('#808080', 'black 20%').as_dict()
        assert display['hex'] == '#808080'
        assert display['mixAmount'] == 'black 20%'
        assert display['Luminance (Y)'].endswith('%)')
        assert 'Perceived lightness (L*)' in display
        assert 'p3-linear' in display
