"""
Shader parameter model.

ShaderParameters is the single mutable entity behind the gradient: a
five-colour palette, noise shape, sampling transform and effects.

Presets and the local store use a flat "settings" dict with the keys below
(colours as #RRGGBB hex, mirrorMode as int):

    color0..color4, seed, period, roughness, amplitude, animationSpeed,
    translateX, translateY, scaleX, scaleY, paperTexture, mirrorMode
"""

import copy
import random
import re
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Tuple

from src.config import (
    BUILTIN_PRESETS,
    COLOR_KEYS,
    DEFAULT_PRESET_NAME,
    GRADIENT_PARAMS,
    GRADIENT_PARAMS_BY_KEY,
    MIRROR_MODE_KEY,
    PALETTES,
    clamp_value,
)

Color = Tuple[float, float, float]

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


class MirrorMode(IntEnum):
    """Coordinate folding around the 0.5 centre line."""
    NONE = 0
    MIRROR_X = 1
    MIRROR_Y = 2
    MIRROR_BOTH = 3

    @property
    def mirrors_x(self) -> bool:
        return self in (MirrorMode.MIRROR_X, MirrorMode.MIRROR_BOTH)

    @property
    def mirrors_y(self) -> bool:
        return self in (MirrorMode.MIRROR_Y, MirrorMode.MIRROR_BOTH)

    @classmethod
    def coerce(cls, value) -> "MirrorMode":
        """Accept a MirrorMode, int or numeric string. Raises ValueError."""
        if isinstance(value, cls):
            return value
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            raise ValueError(f"Invalid mirror mode: {value!r}")


def hex_to_rgb(hex_str: str) -> Color:
    """'#F14D7B' -> (0.945..., 0.301..., 0.482...). Raises ValueError."""
    match = _HEX_PATTERN.match(str(hex_str).strip())
    if not match:
        raise ValueError(f"Invalid hex colour: {hex_str!r}")
    return tuple(int(g, 16) / 255 for g in match.groups())


def rgb_to_hex(color: Color) -> str:
    """(r, g, b) in [0,1] -> '#RRGGBB'."""
    channels = [max(0, min(255, int(round(c * 255)))) for c in color]
    return "#{:02X}{:02X}{:02X}".format(*channels)


def random_palette(rng=random) -> List[str]:
    """Five random #RRGGBB colours."""
    return [f"#{rng.randint(0, 0xFFFFFF):06X}" for _ in COLOR_KEYS]


def coerce_color(value) -> Color:
    """
    Accept hex or an RGB triple and snap to 8-bit channels.

    Snapping keeps colours identical across a hex save/load cycle.
    """
    if isinstance(value, str):
        return hex_to_rgb(value)
    try:
        r, g, b = value
    except (TypeError, ValueError):
        raise ValueError(f"Invalid colour: {value!r}")
    return hex_to_rgb(rgb_to_hex((float(r), float(g), float(b))))


@dataclass
class NoiseSettings:
    seed: float = 793.24
    period: float = 0.7
    roughness: float = 0.56
    amplitude: float = 0.75
    animation_speed: float = 0.09


@dataclass
class TransformSettings:
    translate: Tuple[float, float] = (-8.0, 0.0)
    scale: Tuple[float, float] = (0.1, 3.0)


@dataclass
class EffectsSettings:
    paper_texture: float = 0.13
    mirror_mode: MirrorMode = MirrorMode.NONE


def _default_palette() -> List[Color]:
    return [hex_to_rgb(h) for h in PALETTES["default"]]


# Flat settings key -> (attribute group, attribute, tuple index or None)
_NUMERIC_FIELDS = {
    'seed': ('noise', 'seed', None),
    'period': ('noise', 'period', None),
    'roughness': ('noise', 'roughness', None),
    'amplitude': ('noise', 'amplitude', None),
    'animationSpeed': ('noise', 'animation_speed', None),
    'translateX': ('transform', 'translate', 0),
    'translateY': ('transform', 'translate', 1),
    'scaleX': ('transform', 'scale', 0),
    'scaleY': ('transform', 'scale', 1),
    'paperTexture': ('effects', 'paper_texture', None),
}

SETTINGS_KEYS = COLOR_KEYS + [p['key'] for p in GRADIENT_PARAMS] + [MIRROR_MODE_KEY]


@dataclass
class ShaderParameters:
    """Complete gradient state. Always valid: 5 colours, clamped numbers."""
    palette: List[Color] = field(default_factory=_default_palette)
    noise: NoiseSettings = field(default_factory=NoiseSettings)
    transform: TransformSettings = field(default_factory=TransformSettings)
    effects: EffectsSettings = field(default_factory=EffectsSettings)

    def copy(self) -> "ShaderParameters":
        return copy.deepcopy(self)

    # --- flat field access -------------------------------------------------

    def get_field(self, key: str) -> Any:
        """Read one flat settings field (hex for colours, int for mirrorMode)."""
        if key in COLOR_KEYS:
            return rgb_to_hex(self.palette[COLOR_KEYS.index(key)])
        if key == MIRROR_MODE_KEY:
            return int(self.effects.mirror_mode)
        try:
            group, attr, index = _NUMERIC_FIELDS[key]
        except KeyError:
            raise KeyError(f"Unknown parameter: {key}")
        value = getattr(getattr(self, group), attr)
        return value if index is None else value[index]

    def apply_field(self, key: str, value: Any) -> None:
        """
        Write one flat settings field in place.

        Numbers are clamped to the control range; colours accept hex or RGB;
        mirrorMode accepts MirrorMode or int.

        Raises:
            KeyError: unknown key
            ValueError: value cannot be interpreted for that key
        """
        if key in COLOR_KEYS:
            self.palette[COLOR_KEYS.index(key)] = coerce_color(value)
            return
        if key == MIRROR_MODE_KEY:
            self.effects.mirror_mode = MirrorMode.coerce(value)
            return
        try:
            group, attr, index = _NUMERIC_FIELDS[key]
        except KeyError:
            raise KeyError(f"Unknown parameter: {key}")
        try:
            number = float(value)
        except (TypeError, ValueError):
            raise ValueError(f"{key} must be a number, got {value!r}")
        number = clamp_value(number, GRADIENT_PARAMS_BY_KEY[key])

        target = getattr(self, group)
        if index is None:
            setattr(target, attr, number)
        else:
            pair = list(getattr(target, attr))
            pair[index] = number
            setattr(target, attr, tuple(pair))

    # --- serialisation -----------------------------------------------------

    def to_settings(self) -> Dict[str, Any]:
        return {key: self.get_field(key) for key in SETTINGS_KEYS}

    @classmethod
    def from_settings(cls, data: Dict[str, Any]) -> "ShaderParameters":
        """
        Build from a flat settings dict.

        Missing keys take the Default preset's values; unknown keys are
        ignored; a bad mirrorMode falls back to NONE.
        """
        params = cls.default()
        for key in SETTINGS_KEYS:
            if key not in data:
                continue
            try:
                params.apply_field(key, data[key])
            except ValueError:
                if key == MIRROR_MODE_KEY:
                    params.effects.mirror_mode = MirrorMode.NONE
                else:
                    raise
        return params

    @classmethod
    def default(cls) -> "ShaderParameters":
        """Parameters of the built-in Default preset."""
        params = cls()
        for preset in BUILTIN_PRESETS:
            if preset['name'] == DEFAULT_PRESET_NAME:
                for key, value in preset['settings'].items():
                    params.apply_field(key, value)
        return params


def validate_settings(data: dict) -> tuple:
    """
    Validate a flat settings dict.

    Colours and numeric fields must parse. An unknown mirrorMode is accepted.

    Returns:
        (is_valid, errors)
    """
    errors = []
    if not isinstance(data, dict):
        return False, ["settings must be an object"]

    for key in COLOR_KEYS:
        if key in data:
            try:
                coerce_color(data[key])
            except ValueError as e:
                errors.append(f"{key}: {e}")

    for param in GRADIENT_PARAMS:
        key = param['key']
        if key not in data:
            continue
        value = data[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            errors.append(f"{key} must be a number, got {value!r}")

    # mirrorMode is not checked; from_settings maps unknown values to NONE
    return len(errors) == 0, errors
