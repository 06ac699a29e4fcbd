"""
Central Configuration
All constants, mappings, and settings in one place
"""

import os

# === GRADIENT PARAMETERS ===
# Single source of truth for the numeric shader parameters.
# 'key' is the flat settings key used in presets and by ParameterStore.set().
# Order determines control order inside each panel section.
GRADIENT_PARAMS = [
    # Noise
    {
        'key': 'seed',
        'label': 'Seed',
        'section': 'noise',
        'min': 0.0,
        'max': 1000.0,
        'step': 0.1,
        'decimals': 2,
        'default': 793.24,
    },
    {
        'key': 'period',
        'label': 'Period',
        'section': 'noise',
        'min': 0.1,
        'max': 10.0,
        'step': 0.1,
        'decimals': 2,
        'default': 0.7,
    },
    {
        'key': 'roughness',
        'label': 'Roughness',
        'section': 'noise',
        'min': 0.0,
        'max': 1.0,
        'step': 0.01,
        'decimals': 2,
        'default': 0.56,
    },
    {
        'key': 'amplitude',
        'label': 'Amplitude',
        'section': 'noise',
        'min': 0.0,
        'max': 1.0,
        'step': 0.01,
        'decimals': 2,
        'default': 0.75,
    },
    {
        'key': 'animationSpeed',
        'label': 'Animation Speed',
        'section': 'noise',
        'min': 0.0,
        'max': 0.5,
        'step': 0.01,
        'decimals': 2,
        'default': 0.09,
    },
    # Transform
    {
        'key': 'translateX',
        'label': 'Translate X',
        'section': 'transform',
        'min': -10.0,
        'max': 10.0,
        'step': 0.01,
        'decimals': 2,
        'default': -8.0,
    },
    {
        'key': 'translateY',
        'label': 'Translate Y',
        'section': 'transform',
        'min': -2.0,
        'max': 2.0,
        'step': 0.01,
        'decimals': 2,
        'default': 0.0,
    },
    {
        'key': 'scaleX',
        'label': 'Scale X',
        'section': 'transform',
        'min': 0.1,      # Scale divides the UV, never 0
        'max': 3.0,
        'step': 0.01,
        'decimals': 2,
        'default': 0.1,
    },
    {
        'key': 'scaleY',
        'label': 'Scale Y',
        'section': 'transform',
        'min': 0.1,
        'max': 3.0,
        'step': 0.01,
        'decimals': 2,
        'default': 3.0,
    },
    # Effects
    {
        'key': 'paperTexture',
        'label': 'Paper Texture',
        'section': 'effects',
        'min': 0.0,
        'max': 0.2,
        'step': 0.01,
        'decimals': 2,
        'default': 0.13,
    },
]

# Build lookup dict for quick access
GRADIENT_PARAMS_BY_KEY = {p['key']: p for p in GRADIENT_PARAMS}

PARAM_SECTIONS = [
    ('noise', 'Noise Settings'),
    ('transform', 'Transform Settings'),
    ('effects', 'Effects'),
]

COLOR_KEYS = ['color0', 'color1', 'color2', 'color3', 'color4']
COLOR_LABELS = [
    'Color 1 (Pink/Magenta)',
    'Color 2 (Orange/Peach)',
    'Color 3 (Yellow/Gold)',
    'Color 4 (Cyan/Mint)',
    'Color 5 (Dark Gray)',
]

MIRROR_MODE_KEY = 'mirrorMode'
MIRROR_MODE_LABELS = ["None", "X-axis", "Y-axis", "Both"]


def clamp_value(value, param):
    """
    Clamp a real value into the param's declared [min, max].
    Out-of-range input is clamped, never rejected.
    """
    value = float(value)
    if value != value:  # NaN
        return float(param.get('default', param['min']))
    return max(param['min'], min(param['max'], value))


def quantize_value(value, param):
    """Clamp and round to the param's display precision."""
    return round(clamp_value(value, param), param.get('decimals', 2))


# Sliders resolve one unit of the last displayed decimal, so any value the
# number field can show is also an exact slider position.
def slider_resolution(param):
    return 10 ** param.get('decimals', 2)


def slider_steps(param):
    """Number of integer slider positions for a param."""
    return int(round((param['max'] - param['min']) * slider_resolution(param)))


def value_to_slider(value, param):
    """Map a real value to the nearest integer slider position."""
    value = quantize_value(value, param)
    return int(round((value - param['min']) * slider_resolution(param)))


def slider_to_value(position, param):
    """Map an integer slider position back to a real value."""
    position = max(0, min(slider_steps(param), int(position)))
    value = param['min'] + position / slider_resolution(param)
    return quantize_value(value, param)


def format_value(value, param):
    """
    Format a real value for display.
    """
    decimals = param.get('decimals', 2)
    return f"{value:.{decimals}f}"


# === PALETTES ===
# Swatch palettes from the control panel. Five hex colours each.
PALETTES = {
    'default': ['#F14D7B', '#FEC677', '#FEF6EA', '#A5FEEE', '#556360'],
    'sunset': ['#3A1C71', '#D76D77', '#FFAF7B', '#AA4465', '#462255'],
    'ocean': ['#005AA7', '#FFFDE4', '#4FACFE', '#00F2FE', '#003F75'],
    'purple': ['#667EEA', '#764BA2', '#6B8DD6', '#8E37D7', '#4B3993'],
    'greenblue': ['#11998E', '#38EF7D', '#0ED2F7', '#08AEEA', '#0B5E59'],
    'reddish': ['#FF416C', '#FF4B2B', '#F78CA0', '#F9748F', '#B82E4C'],
}
PALETTE_ORDER = list(PALETTES.keys())


# === BUILT-IN PRESETS ===
# Immutable. Flat settings layout, same as persisted user presets.
BUILTIN_PRESETS = [
    {
        'name': "Default",
        'settings': {
            'color0': '#F14D7B',
            'color1': '#FEC677',
            'color2': '#FEF6EA',
            'color3': '#A5FEEE',
            'color4': '#556360',
            'seed': 793.24,
            'period': 0.7,
            'roughness': 0.56,
            'amplitude': 0.75,
            'animationSpeed': 0.09,
            'translateX': -8.0,
            'translateY': 0.0,
            'scaleX': 0.1,
            'scaleY': 3.0,
            'paperTexture': 0.13,
            'mirrorMode': 0,
        },
    },
    {
        'name': "Sunset Waves",
        'settings': {
            'color0': '#3A1C71',
            'color1': '#D76D77',
            'color2': '#FFAF7B',
            'color3': '#AA4465',
            'color4': '#462255',
            'seed': 420.5,
            'period': 1.3,
            'roughness': 0.8,
            'amplitude': 0.65,
            'animationSpeed': 0.05,
            'translateX': -5.0,
            'translateY': 0.0,
            'scaleX': 0.2,
            'scaleY': 2.5,
            'paperTexture': 0.13,
            'mirrorMode': 2,
        },
    },
    {
        'name': "Ocean Deep",
        'settings': {
            'color0': '#005AA7',
            'color1': '#FFFDE4',
            'color2': '#4FACFE',
            'color3': '#00F2FE',
            'color4': '#003F75',
            'seed': 213.7,
            'period': 0.9,
            'roughness': 0.35,
            'amplitude': 0.9,
            'animationSpeed': 0.12,
            'translateX': -6.0,
            'translateY': -0.5,
            'scaleX': 0.15,
            'scaleY': 2.0,
            'paperTexture': 0.13,
            'mirrorMode': 1,
        },
    },
    {
        'name': "Purple Haze",
        'settings': {
            'color0': '#667EEA',
            'color1': '#764BA2',
            'color2': '#6B8DD6',
            'color3': '#8E37D7',
            'color4': '#4B3993',
            'seed': 567.8,
            'period': 1.5,
            'roughness': 0.6,
            'amplitude': 0.85,
            'animationSpeed': 0.07,
            'translateX': -4.0,
            'translateY': 0.5,
            'scaleX': 0.3,
            'scaleY': 2.2,
            'paperTexture': 0.13,
            'mirrorMode': 3,
        },
    },
]
DEFAULT_PRESET_NAME = "Default"

# === PERSISTENCE ===
USER_PRESETS_KEY = "gradientPresets"

# === INTERACTIVE MODULATION ===
POINTER_THROTTLE_MS = 50     # At most 20 pointer updates per second
TILT_RANGE_DEG = 45.0        # Tilt clamped to +/- this, then normalised
SEED_SCALE = 1000.0          # Normalised 0..1 -> seed 0..1000
AMPLITUDE_OFFSET = 0.15      # Variant: amplitude = round(y, 2) + offset
INTERACTIVE_DEFAULT = True

# === OSC INPUT ===
OSC_HOST = "127.0.0.1"
OSC_RECEIVE_PORT = int(os.environ.get("GE_OSC_PORT", "9000"))

OSC_PATHS = {
    'tilt': '/tilt',                  # gamma [beta] in degrees
    'music_playing': '/music/playing',  # 0 / 1
}

# === RENDERING ===
SNAPSHOT_DEFAULT_SIZE = (960, 540)
NOTIFICATION_MS = 2000

# === WIDGET SIZES ===
SIZES = {
    'panel_width': 320,
    'toggle_button': 36,
    'swatch': 30,
    'color_button': 24,
    'value_field_width': 70,
    'preset_list_height': 120,
}
