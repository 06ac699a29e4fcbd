"""
Preset schema definition and validation.

A preset is a name plus a flat settings dict (see src.model.shader_params).
User presets are persisted as a JSON array of {"name", "settings"} objects
under a single store key. The array carries no version field; settings
missing from an older entry take the Default preset's values on load.
"""

from dataclasses import dataclass, field
from typing import Any, Dict
import json

from src.model.shader_params import ShaderParameters, validate_settings


@dataclass
class Preset:
    name: str
    params: ShaderParameters = field(default_factory=ShaderParameters.default)
    builtin: bool = False

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "settings": self.params.to_settings(),
        }

    @classmethod
    def from_dict(cls, data: dict, builtin: bool = False) -> "Preset":
        return cls(
            name=data["name"],
            params=ShaderParameters.from_settings(data.get("settings", {})),
            builtin=builtin,
        )

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, json_str: str) -> "Preset":
        return cls.from_dict(json.loads(json_str))


def validate_preset(data: Any) -> tuple:
    """
    Validate one stored preset entry.

    Returns:
        (is_valid, errors)
    """
    errors = []
    if not isinstance(data, dict):
        return False, [f"preset must be an object, got {type(data).__name__}"]

    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        errors.append("name must be a non-empty string")

    settings: Dict[str, Any] = data.get("settings", {})
    settings_ok, settings_errors = validate_settings(settings)
    if not settings_ok:
        errors.extend(f"settings.{e}" for e in settings_errors)

    return len(errors) == 0, errors
