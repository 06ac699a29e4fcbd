"""
Gradient shading math in numpy.

Mirrors the fragment shader in src/render/shaders.py step for step so the
pipeline can be tested and rendered offscreen without a GPU:

    aspect correction -> inverse scale around centre -> mirror fold
    -> translate -> 3D simplex noise (two octaves) -> colour ramp
    -> paper texture
"""

import numpy as np

from src.model.shader_params import ShaderParameters

ROUGHNESS_OCTAVE_SCALE = 2.0
PAPER_FREQUENCY = 1000.0
SEED_DEPTH_SCALE = 1000.0


# =============================================================================
# SIMPLEX NOISE
# =============================================================================

def _mod289(x):
    return x - np.floor(x / 289.0) * 289.0


def _permute(x):
    return _mod289(((x * 34.0) + 1.0) * x)


def snoise(v):
    """
    3D simplex noise, roughly in [-1, 1].

    Args:
        v: array of shape (..., 3)

    Returns:
        array of shape (...)
    """
    v = np.asarray(v, dtype=np.float64)
    shape = v.shape[:-1]
    vx, vy, vz = (v[..., k].ravel() for k in range(3))

    # First corner
    skew = (vx + vy + vz) / 3.0
    ix, iy, iz = np.floor(vx + skew), np.floor(vy + skew), np.floor(vz + skew)
    unskew = (ix + iy + iz) / 6.0
    x0x, x0y, x0z = vx - ix + unskew, vy - iy + unskew, vz - iz + unskew

    # Other corners
    gx = (x0x >= x0y).astype(np.float64)
    gy = (x0y >= x0z).astype(np.float64)
    gz = (x0z >= x0x).astype(np.float64)
    lx, ly, lz = 1.0 - gx, 1.0 - gy, 1.0 - gz
    i1x, i1y, i1z = np.minimum(gx, lz), np.minimum(gy, lx), np.minimum(gz, ly)
    i2x, i2y, i2z = np.maximum(gx, lz), np.maximum(gy, lx), np.maximum(gz, ly)

    one_sixth, one_third = 1.0 / 6.0, 1.0 / 3.0
    dx = np.stack([x0x, x0x - i1x + one_sixth, x0x - i2x + one_third, x0x - 0.5])
    dy = np.stack([x0y, x0y - i1y + one_sixth, x0y - i2y + one_third, x0y - 0.5])
    dz = np.stack([x0z, x0z - i1z + one_sixth, x0z - i2z + one_third, x0z - 0.5])

    # Permutations
    ix, iy, iz = _mod289(ix), _mod289(iy), _mod289(iz)
    zeros, ones = np.zeros_like(vx), np.ones_like(vx)
    ox = np.stack([zeros, i1x, i2x, ones])
    oy = np.stack([zeros, i1y, i2y, ones])
    oz = np.stack([zeros, i1z, i2z, ones])
    p = _permute(_permute(_permute(iz + oz) + iy + oy) + ix + ox)

    # Gradients: 7x7 points over a square, mapped onto an octahedron
    ns_x, ns_y, ns_z = 2.0 / 7.0, 0.5 / 7.0 - 1.0, 1.0 / 7.0
    j = p - 49.0 * np.floor(p * ns_z * ns_z)
    x_ = np.floor(j * ns_z)
    y_ = np.floor(j - 7.0 * x_)
    gxs = x_ * ns_x + ns_y
    gys = y_ * ns_x + ns_y
    h = 1.0 - np.abs(gxs) - np.abs(gys)

    sh = -(h <= 0.0).astype(np.float64)
    grad_x = gxs + (np.floor(gxs) * 2.0 + 1.0) * sh
    grad_y = gys + (np.floor(gys) * 2.0 + 1.0) * sh
    grad_z = h

    norm = 1.79284291400159 - 0.85373472095314 * (grad_x ** 2 + grad_y ** 2 + grad_z ** 2)
    grad_x, grad_y, grad_z = grad_x * norm, grad_y * norm, grad_z * norm

    # Mix contributions
    m = np.maximum(0.6 - (dx ** 2 + dy ** 2 + dz ** 2), 0.0)
    m = m * m
    dots = grad_x * dx + grad_y * dy + grad_z * dz
    return (42.0 * np.sum(m * m * dots, axis=0)).reshape(shape)


# =============================================================================
# COLOUR RAMP
# =============================================================================

def smoothstep(edge0, edge1, x):
    t = np.clip((x - edge0) / (edge1 - edge0), 0.0, 1.0)
    return t * t * (3.0 - 2.0 * t)


def ramp_color(value, palette):
    """
    Map a value in [0, 1] onto the 5-colour ramp.

    Four equal bands [0,.25), [.25,.5), [.5,.75), [.75,1], each a smoothstep
    blend between consecutive palette entries.
    """
    colors = np.asarray(palette, dtype=np.float64)
    v = np.clip(np.asarray(value, dtype=np.float64), 0.0, 1.0)
    band = np.minimum(np.floor(v * 4.0), 3.0).astype(np.int64)
    lo = band * 0.25
    t = smoothstep(lo, lo + 0.25, v)[..., None]
    return colors[band] + (colors[band + 1] - colors[band]) * t


def get_color(value, palette):
    """Noise value -> RGB. Scale-and-bias (x2, clamped) then ramp."""
    return ramp_color(np.clip(np.asarray(value, dtype=np.float64) * 2.0, 0.0, 1.0), palette)


# =============================================================================
# COORDINATE PIPELINE
# =============================================================================

def transform_uv(uv, resolution, params: ShaderParameters):
    """
    Texture coordinates -> transformed sampling coordinates.

    Args:
        uv: array (..., 2) in [0, 1]
        resolution: (width, height) in pixels
    """
    uv = np.array(uv, dtype=np.float64, copy=True)
    width, height = resolution
    aspect = width / height
    if aspect > 1.0:
        uv[..., 0] *= aspect
    else:
        uv[..., 1] /= aspect

    scale = np.asarray(params.transform.scale, dtype=np.float64)
    uv = (uv - 0.5) / scale + 0.5

    mode = params.effects.mirror_mode
    if mode.mirrors_x:
        uv[..., 0] = np.abs(uv[..., 0] - 0.5) + 0.5
    if mode.mirrors_y:
        uv[..., 1] = np.abs(uv[..., 1] - 0.5) + 0.5

    translate = np.asarray(params.transform.translate, dtype=np.float64)
    return uv + translate - 0.5


def noise_position(uv, elapsed, params: ShaderParameters):
    """Transformed uv (..., 2) -> animated 3D noise position (..., 3)."""
    uv = np.asarray(uv, dtype=np.float64)
    speed = params.noise.animation_speed
    depth = np.full(uv.shape[:-1], params.noise.seed / SEED_DEPTH_SCALE)
    return np.stack([
        uv[..., 0] + elapsed * speed,
        uv[..., 1] + elapsed * speed * 0.5,
        depth,
    ], axis=-1)


def sample_coords(uv, resolution, params: ShaderParameters, elapsed=0.0):
    """Full per-pixel pipeline up to the noise sample position."""
    return noise_position(transform_uv(uv, resolution, params), elapsed, params)


def noise_value(position, params: ShaderParameters):
    """Two-octave noise scaled by amplitude."""
    period = params.noise.period
    value = (snoise(position * period) + 1.0) * 0.5
    octave = (snoise(position * period * ROUGHNESS_OCTAVE_SCALE) + 1.0) * 0.5
    value = value + octave * params.noise.roughness * 0.5
    return value * params.noise.amplitude


def paper_texture(uv, params: ShaderParameters):
    uv = np.asarray(uv, dtype=np.float64)
    position = np.concatenate([uv * PAPER_FREQUENCY, np.zeros(uv.shape[:-1] + (1,))], axis=-1)
    return snoise(position) * params.effects.paper_texture


def shade(uv, resolution, params: ShaderParameters, elapsed=0.0):
    """Texture coordinates -> unclamped RGB (..., 3)."""
    transformed = transform_uv(uv, resolution, params)
    position = noise_position(transformed, elapsed, params)
    color = get_color(noise_value(position, params), params.palette)
    return color + paper_texture(transformed, params)[..., None]


def render_frame(params: ShaderParameters, width: int, height: int, elapsed: float = 0.0):
    """
    Render one frame on the CPU.

    Returns:
        float32 array (height, width, 3) in [0, 1], top row first
    """
    xs = (np.arange(width) + 0.5) / width
    ys = 1.0 - (np.arange(height) + 0.5) / height
    grid_x, grid_y = np.meshgrid(xs, ys)
    uv = np.stack([grid_x, grid_y], axis=-1)
    color = shade(uv, (width, height), params, elapsed)
    return np.clip(color, 0.0, 1.0).astype(np.float32)


# =============================================================================
# UNIFORMS
# =============================================================================

def build_uniforms(params: ShaderParameters, elapsed: float, resolution) -> dict:
    """Uniform name -> value for the fragment shader."""
    uniforms = {
        'uTime': float(elapsed),
        'uResolution': (float(resolution[0]), float(resolution[1])),
        'uSeed': float(params.noise.seed),
        'uPeriod': float(params.noise.period),
        'uRoughness': float(params.noise.roughness),
        'uAmplitude': float(params.noise.amplitude),
        'uAnimationSpeed': float(params.noise.animation_speed),
        'uTranslate': tuple(float(c) for c in params.transform.translate),
        'uScale': tuple(float(c) for c in params.transform.scale),
        'uPaperTexture': float(params.effects.paper_texture),
        'uMirrorMode': int(params.effects.mirror_mode),
    }
    for i, color in enumerate(params.palette):
        uniforms[f'uColor{i}'] = tuple(float(c) for c in color)
    return uniforms
