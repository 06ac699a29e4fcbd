"""
Presets module - built-in and user gradient presets.
"""

from .preset_schema import (
    Preset,
    validate_preset,
)

from .preset_manager import (
    PresetManager,
    PresetError,
    ValidationError,
    PersistenceError,
    format_preset_as_code,
)

__all__ = [
    "Preset",
    "validate_preset",
    "PresetManager",
    "PresetError",
    "ValidationError",
    "PersistenceError",
    "format_preset_as_code",
]
