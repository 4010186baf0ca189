"""Tests for palette_lab.core.assembler — base resolution, tints/shades, per-colour records."""

import pytest
from palette_lab.core.assembler import build_palette, format_percentage, get_color_object
from palette_lab.core.config import DEFAULT_PALETTE, parse_palette
from palette_lab.core.info import get_color_info
from palette_lab.core.mixing import get_base_color, mix_colors, to_srgb_string
from palette_lab.core.types import ColorConfig, MixSpec, NormalizedLevels, Palette


@pytest.fixture(scope='module')
def palette() -> Palette:
    return parse_palette(DEFAULT_PALETTE)


class TestFormatPercentage:
    def test_whole(self):
        assert format_percentage(40.0) == '40'

    def test_fraction(self):
        assert format_percentage(100 / 12) == '8.33'


class TestGetBaseColor:
    def test_unmixed_is_srgb_string(self, palette):
        assert get_base_color('accent', palette) == to_srgb_string('#BB8822')

    def test_mixed_with_primary(self, palette):
        expected = mix_colors('#FF5500', 'hsl(240, 80%, 60%)', 80)
        result = get_base_color('secondary', palette)
        assert result == expected
        assert result != to_srgb_string('#FF5500')

    def test_self_reference_ignored(self):
        config = ColorConfig(
            name='gray',
            base='#808080',
            gradations=NormalizedLevels(5, 5),
            max=NormalizedLevels(100, 100),
            mix=MixSpec(target='gray', percentage=50),
        )
        assert get_base_color('gray', Palette({'gray': config})) == to_srgb_string('#808080')

    def test_both_paths_same_format(self, palette):
        mixed = get_base_color('secondary', palette)
        plain = get_base_color('accent', palette)
        assert mixed.startswith('rgb(') and plain.startswith('rgb(')


class TestGetColorObject:
    def test_grey_tints(self, palette):
        gray = get_color_object('tinted-gray', palette)
        assert gray.tints.levels == 5
        assert list(gray.tints.gradations) == [1, 2, 3, 4, 5]
        # max [100, 96] -> tints stop at 96% white, 19.2% per level
        assert gray.tints.max == 96
        assert gray.tints.gradations[1].mix_amount == 'white 19.2%'
        assert gray.tints.gradations[5].mix_amount == 'white 96%'
        base = get_base_color('tinted-gray', palette)
        assert gray.tints.gradations[5].hex == get_color_info(mix_colors(base, '#FFFFFF', 96)).hex
        assert gray.shades.gradations[5].hex == '#000000'

    def test_zero_max_has_no_adjustment(self):
        palette = parse_palette({'flat': {'base': '#808080', 'gradations': 3, 'max': 0}})
        flat = get_color_object('flat', palette)
        assert flat.tints.adjustment == 0.0
        assert flat.shades.adjustment == 0.0
        assert {info.hex for info in flat.tints.gradations.values()} == {'#808080'}

    def test_asymmetric_max(self, palette):
        secondary = get_color_object('secondary', palette)
        assert secondary.shades.max == 100
        assert secondary.tints.max == 96
        assert secondary.shades.gradations[12].mix_amount == 'black 100%'
        assert secondary.tints.gradations[12].mix_amount == 'white 96%'

    def test_asymmetric_levels(self, palette):
        accent = get_color_object('accent', palette)
        # gradations [3, 2] -> 3 shades, 2 tints
        assert len(accent.shades.gradations) == 3
        assert len(accent.tints.gradations) == 2
        assert accent.shades.max == 75
        assert accent.tints.max == 50

    def test_full_shade_ends_black(self, palette):
        primary = get_color_object('primary', palette)
        assert primary.shades.gradations[10].hex == '#000000'
        assert primary.tints.gradations[10].hex == '#FFFFFF'

    def test_base_info_is_mixed_colour(self, palette):
        secondary = get_color_object('secondary', palette)
        assert secondary.info.hex != '#FF5500'
        assert secondary.info.mix_amount is None

    def test_keeps_original_config(self, palette):
        secondary = get_color_object('secondary', palette)
        assert secondary.config.raw == DEFAULT_PALETTE['secondary']
        assert secondary.config.mix == MixSpec(target='primary', percentage=80)

    def test_adjustment_reported(self, palette):
        gray = get_color_object('tinted-gray', palette)
        assert gray.tints.adjustment is not None
        assert gray.shades.adjustment is not None

    def test_infeasible_ramp_still_generated(self):
        palette = parse_palette({'snow': {'base': '#FAFAFA', 'gradations': 4, 'max': 90}})
        snow = get_color_object('snow', palette)
        assert snow.tints.adjustment is None
        assert len(snow.tints.gradations) == 4

    def test_zero_levels(self):
        palette = parse_palette({'flat': {'base': '#BB8822', 'gradations': 0}})
        flat = get_color_object('flat', palette)
        assert flat.tints.gradations == {}
        assert flat.shades.gradations == {}

    def test_missing_levels_use_defaults(self):
        palette = parse_palette({'plain': {'base': '#BB8822'}})
        plain = get_color_object('plain', palette)
        assert plain.tints.levels == 5
        assert plain.shades.max == 100


class TestBuildPalette:
    def test_all_colours(self, palette):
        colors = build_palette(palette)
        assert list(colors) == list(DEFAULT_PALETTE)

    def test_only(self, palette):
        colors = build_palette(palette, only=['accent'])
        assert list(colors) == ['accent']

    def test_mix_target_outside_only_still_resolves(self, palette):
        colors = build_palette(palette, only=['secondary'])
        assert colors['secondary'].info.rgb2 == build_palette(palette)['secondary'].info.rgb2
