"""
Tests for central configuration: parameter table, slider mapping, presets.
"""

import pytest

from src.config import (
    BUILTIN_PRESETS,
    COLOR_KEYS,
    DEFAULT_PRESET_NAME,
    GRADIENT_PARAMS,
    GRADIENT_PARAMS_BY_KEY,
    MIRROR_MODE_LABELS,
    PALETTE_ORDER,
    PALETTES,
    PARAM_SECTIONS,
    clamp_value,
    format_value,
    quantize_value,
    slider_steps,
    slider_to_value,
    value_to_slider,
)


class TestParamTable:
    """GRADIENT_PARAMS is the single source for numeric controls."""

    EXPECTED_RANGES = {
        'seed': (0.0, 1000.0),
        'period': (0.1, 10.0),
        'roughness': (0.0, 1.0),
        'amplitude': (0.0, 1.0),
        'animationSpeed': (0.0, 0.5),
        'translateX': (-10.0, 10.0),
        'translateY': (-2.0, 2.0),
        'scaleX': (0.1, 3.0),
        'scaleY': (0.1, 3.0),
        'paperTexture': (0.0, 0.2),
    }

    def test_all_keys_present(self):
        assert set(GRADIENT_PARAMS_BY_KEY) == set(self.EXPECTED_RANGES)

    @pytest.mark.parametrize("key", sorted(EXPECTED_RANGES))
    def test_ranges(self, key):
        param = GRADIENT_PARAMS_BY_KEY[key]
        assert (param['min'], param['max']) == self.EXPECTED_RANGES[key]

    def test_defaults_inside_range(self):
        for param in GRADIENT_PARAMS:
            assert param['min'] <= param['default'] <= param['max'], param['key']

    def test_every_param_has_known_section(self):
        sections = {key for key, _ in PARAM_SECTIONS}
        for param in GRADIENT_PARAMS:
            assert param['section'] in sections

    def test_scale_never_zero(self):
        """Scale divides the coordinates, so its floor must be positive."""
        assert GRADIENT_PARAMS_BY_KEY['scaleX']['min'] > 0
        assert GRADIENT_PARAMS_BY_KEY['scaleY']['min'] > 0


class TestValueMapping:
    """Slider positions and number fields share one quantized value."""

    def test_clamp_below(self):
        assert clamp_value(0.0, GRADIENT_PARAMS_BY_KEY['scaleX']) == 0.1

    def test_clamp_above(self):
        assert clamp_value(99.0, GRADIENT_PARAMS_BY_KEY['amplitude']) == 1.0

    def test_clamp_nan_uses_default(self):
        param = GRADIENT_PARAMS_BY_KEY['period']
        assert clamp_value(float('nan'), param) == param['default']

    def test_quantize_rounds_to_two_places(self):
        assert quantize_value(0.123456, GRADIENT_PARAMS_BY_KEY['roughness']) == 0.12

    def test_seed_steps(self):
        assert slider_steps(GRADIENT_PARAMS_BY_KEY['seed']) == 100000

    @pytest.mark.parametrize("key,value", [
        ('seed', 793.24),
        ('translateX', -8.0),
        ('translateY', -0.5),
        ('scaleX', 0.1),
        ('paperTexture', 0.13),
        ('animationSpeed', 0.09),
    ])
    def test_slider_position_reproduces_value(self, key, value):
        param = GRADIENT_PARAMS_BY_KEY[key]
        assert slider_to_value(value_to_slider(value, param), param) == value

    def test_slider_position_out_of_range_is_clamped(self):
        param = GRADIENT_PARAMS_BY_KEY['roughness']
        assert slider_to_value(10 ** 6, param) == param['max']
        assert slider_to_value(-5, param) == param['min']

    def test_format_value(self):
        assert format_value(0.7, GRADIENT_PARAMS_BY_KEY['period']) == "0.70"


class TestPaletteData:

    def test_six_palettes_of_five(self):
        assert len(PALETTES) == 6
        for name in PALETTE_ORDER:
            assert len(PALETTES[name]) == len(COLOR_KEYS)

    def test_mirror_labels(self):
        assert MIRROR_MODE_LABELS == ["None", "X-axis", "Y-axis", "Both"]


class TestBuiltinPresetData:

    def test_names(self):
        names = [p['name'] for p in BUILTIN_PRESETS]
        assert names == ["Default", "Sunset Waves", "Ocean Deep", "Purple Haze"]
        assert DEFAULT_PRESET_NAME in names

    def test_settings_complete(self):
        keys = set(COLOR_KEYS) | set(GRADIENT_PARAMS_BY_KEY) | {'mirrorMode'}
        for preset in BUILTIN_PRESETS:
            assert set(preset['settings']) == keys, preset['name']
