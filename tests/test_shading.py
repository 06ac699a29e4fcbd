"""
Tests for the numpy shading pipeline.

The GLSL program cannot run headless, so these cover the same math through
src.render.shading, which the fragment shader mirrors.
"""

import numpy as np
import pytest

from src.model.shader_params import MirrorMode, ShaderParameters, hex_to_rgb
from src.render.shaders import FRAGMENT_SHADER
from src.render.shading import (
    build_uniforms,
    get_color,
    ramp_color,
    render_frame,
    sample_coords,
    snoise,
    transform_uv,
)

PALETTE = [hex_to_rgb(h) for h in ['#F14D7B', '#FEC677', '#FEF6EA', '#A5FEEE', '#556360']]


class TestSimplexNoise:

    def test_shape(self):
        points = np.random.default_rng(0).uniform(-50, 50, size=(8, 5, 3))
        assert snoise(points).shape == (8, 5)

    def test_range(self):
        points = np.random.default_rng(1).uniform(-100, 100, size=(4000, 3))
        values = snoise(points)
        assert values.min() >= -1.1
        assert values.max() <= 1.1

    def test_deterministic(self):
        point = np.array([[0.3, 1.7, 0.79]])
        assert snoise(point)[0] == snoise(point.copy())[0]

    def test_continuous(self):
        base = np.array([[1.234, 5.678, 0.5]])
        step = np.array([[1e-5, 0.0, 0.0]])
        assert abs(snoise(base + step)[0] - snoise(base)[0]) < 1e-3


class TestColourRamp:

    def test_endpoints(self):
        assert np.allclose(ramp_color(0.0, PALETTE), PALETTE[0])
        assert np.allclose(ramp_color(1.0, PALETTE), PALETTE[4])

    @pytest.mark.parametrize("index,boundary", [(1, 0.25), (2, 0.5), (3, 0.75)])
    def test_band_boundaries_hit_palette(self, index, boundary):
        assert np.allclose(ramp_color(boundary, PALETTE), PALETTE[index])

    @pytest.mark.parametrize("boundary", [0.25, 0.5, 0.75])
    def test_continuous_at_boundaries(self, boundary):
        eps = 1e-6
        below = ramp_color(boundary - eps, PALETTE)
        above = ramp_color(boundary + eps, PALETTE)
        assert np.allclose(below, above, atol=1e-4)

    def test_get_color_scales_by_two(self):
        assert np.allclose(get_color(0.25, PALETTE), ramp_color(0.5, PALETTE))
        assert np.allclose(get_color(0.8, PALETTE), PALETTE[4])
        assert np.allclose(get_color(-1.0, PALETTE), PALETTE[0])

    def test_vectorised(self):
        values = np.linspace(0, 1, 7)
        assert get_color(values, PALETTE).shape == (7, 3)


class TestCoordinatePipeline:

    def test_aspect_wide_stretches_x(self):
        params = ShaderParameters.default()
        params.apply_field('scaleX', 1.0)
        params.apply_field('scaleY', 1.0)
        params.apply_field('translateX', 0.5)
        params.apply_field('translateY', 0.5)
        out = transform_uv(np.array([1.0, 1.0]), (200, 100), params)
        assert out == pytest.approx([2.0, 1.0])

    def test_aspect_tall_stretches_y(self):
        params = ShaderParameters.default()
        params.apply_field('scaleX', 1.0)
        params.apply_field('scaleY', 1.0)
        params.apply_field('translateX', 0.5)
        params.apply_field('translateY', 0.5)
        out = transform_uv(np.array([1.0, 1.0]), (100, 200), params)
        assert out == pytest.approx([1.0, 2.0])

    def test_inverse_scale_around_centre(self):
        params = ShaderParameters.default()
        params.apply_field('scaleX', 2.0)
        params.apply_field('scaleY', 2.0)
        params.apply_field('translateX', 0.5)
        params.apply_field('translateY', 0.5)
        out = transform_uv(np.array([[0.5, 0.5], [1.0, 0.0]]), (100, 100), params)
        assert out[0] == pytest.approx([0.5, 0.5])
        assert out[1] == pytest.approx([0.75, 0.25])

    def test_mirror_both_is_symmetric(self):
        params = ShaderParameters.default()
        params.apply_field('mirrorMode', MirrorMode.MIRROR_BOTH)
        a = sample_coords(np.array([0.2, 0.3]), (100, 100), params, elapsed=3.0)
        b = sample_coords(np.array([0.8, 0.7]), (100, 100), params, elapsed=3.0)
        assert a == pytest.approx(b)

    def test_mirror_x_only_folds_x(self):
        params = ShaderParameters.default()
        params.apply_field('mirrorMode', MirrorMode.MIRROR_X)
        a = sample_coords(np.array([0.2, 0.3]), (100, 100), params)
        b = sample_coords(np.array([0.8, 0.3]), (100, 100), params)
        c = sample_coords(np.array([0.2, 0.7]), (100, 100), params)
        assert a == pytest.approx(b)
        assert a[1] != pytest.approx(c[1])

    def test_no_mirror_keeps_sides_distinct(self):
        params = ShaderParameters.default()
        a = sample_coords(np.array([0.2, 0.3]), (100, 100), params)
        b = sample_coords(np.array([0.8, 0.7]), (100, 100), params)
        assert a != pytest.approx(b)

    def test_animation_drift(self):
        params = ShaderParameters.default()
        uv = np.array([0.5, 0.5])
        start = sample_coords(uv, (100, 100), params, elapsed=0.0)
        later = sample_coords(uv, (100, 100), params, elapsed=10.0)
        speed = params.noise.animation_speed
        assert later[0] - start[0] == pytest.approx(10.0 * speed)
        assert later[1] - start[1] == pytest.approx(10.0 * speed * 0.5)
        assert later[2] == start[2] == pytest.approx(params.noise.seed / 1000.0)


class TestRenderFrame:

    def test_shape_and_range(self):
        image = render_frame(ShaderParameters.default(), 16, 9, elapsed=1.5)
        assert image.shape == (9, 16, 3)
        assert image.dtype == np.float32
        assert image.min() >= 0.0
        assert image.max() <= 1.0

    def test_seed_changes_image(self):
        a = ShaderParameters.default()
        b = ShaderParameters.default()
        b.apply_field('seed', 100.0)
        assert not np.allclose(render_frame(a, 8, 8), render_frame(b, 8, 8))

    def test_zero_amplitude_is_first_colour_plus_paper(self):
        params = ShaderParameters.default()
        params.apply_field('amplitude', 0.0)
        params.apply_field('paperTexture', 0.0)
        image = render_frame(params, 4, 4)
        assert np.allclose(image, np.asarray(params.palette[0], dtype=np.float32), atol=1e-6)


class TestUniforms:

    def test_all_uniforms_declared_in_shader(self):
        uniforms = build_uniforms(ShaderParameters.default(), 0.0, (640, 480))
        for name in uniforms:
            assert f" {name};" in FRAGMENT_SHADER

    def test_values(self):
        params = ShaderParameters.default()
        params.apply_field('mirrorMode', 2)
        uniforms = build_uniforms(params, 2.5, (640, 480))
        assert uniforms['uTime'] == 2.5
        assert uniforms['uResolution'] == (640.0, 480.0)
        assert uniforms['uSeed'] == 793.24
        assert uniforms['uTranslate'] == (-8.0, 0.0)
        assert uniforms['uScale'] == (0.1, 3.0)
        assert uniforms['uMirrorMode'] == 2
        assert isinstance(uniforms['uMirrorMode'], int)
        assert uniforms['uColor0'] == params.palette[0]
