"""
Tests for preset system.
"""

import ast
import json

import pytest

from src.config import USER_PRESETS_KEY
from src.model.shader_params import MirrorMode, ShaderParameters
from src.presets import (
    PersistenceError,
    Preset,
    PresetManager,
    ValidationError,
    format_preset_as_code,
    validate_preset,
)
from src.utils.local_store import StoreError


def _params(seed=100.0):
    params = ShaderParameters.default()
    params.apply_field('seed', seed)
    return params


class TestPreset:
    """Tests for the Preset dataclass."""

    def test_to_dict_layout(self):
        d = Preset("Mine", _params()).to_dict()
        assert set(d) == {"name", "settings"}
        assert d["settings"]["seed"] == 100.0
        assert d["settings"]["color0"] == "#F14D7B"

    def test_json_round_trip(self):
        preset = Preset("Mine", _params(42.5))
        restored = Preset.from_json(preset.to_json())
        assert restored.name == "Mine"
        assert restored.params == preset.params

    def test_validate_preset(self):
        ok, _ = validate_preset(Preset("Mine", _params()).to_dict())
        assert ok
        ok, errors = validate_preset({"name": "  ", "settings": {}})
        assert not ok
        assert "name" in errors[0]
        ok, _ = validate_preset("not a preset")
        assert not ok


class TestPresetManager:
    """Tests for built-in and user preset collections."""

    def test_builtins_present(self, preset_manager):
        assert preset_manager.builtin_names() == [
            "Default", "Sunset Waves", "Ocean Deep", "Purple Haze",
        ]
        assert all(p.builtin for p in preset_manager.builtin_presets())

    def test_starts_with_no_user_presets(self, preset_manager):
        assert preset_manager.user_presets() == []

    def test_save_persists_array(self, preset_manager, tmp_store):
        preset_manager.save("Mine", _params())
        stored = tmp_store.get_item(USER_PRESETS_KEY)
        assert isinstance(stored, list)
        assert stored[0]["name"] == "Mine"
        assert stored[0]["settings"]["seed"] == 100.0

    def test_save_strips_name(self, preset_manager):
        preset = preset_manager.save("  Mine  ", _params())
        assert preset.name == "Mine"
        assert preset_manager.user_names() == ["Mine"]

    def test_save_overwrites_same_name(self, preset_manager):
        preset_manager.save("Mine", _params(1.0))
        preset_manager.save("Mine", _params(2.0))
        assert preset_manager.user_names() == ["Mine"]
        assert preset_manager.find("Mine").params.noise.seed == 2.0

    def test_save_copies_params(self, preset_manager):
        params = _params(1.0)
        preset_manager.save("Mine", params)
        params.apply_field('seed', 500.0)
        assert preset_manager.find("Mine").params.noise.seed == 1.0

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_save_empty_name_rejected(self, preset_manager, name):
        with pytest.raises(ValidationError):
            preset_manager.save(name, _params())
        assert preset_manager.user_presets() == []

    def test_find_prefers_builtin(self, preset_manager):
        preset_manager.save("Default", _params(1.0))
        assert preset_manager.find("Default").builtin
        assert preset_manager.find("Default").params.noise.seed == 793.24

    def test_delete(self, preset_manager, tmp_store):
        preset_manager.save("Mine", _params())
        assert preset_manager.delete("Mine") is True
        assert preset_manager.user_names() == []
        assert tmp_store.get_item(USER_PRESETS_KEY) == []

    def test_delete_unknown_is_noop(self, preset_manager):
        assert preset_manager.delete("Nope") is False

    def test_delete_never_touches_builtins(self, preset_manager):
        assert preset_manager.delete("Default") is False
        assert "Default" in preset_manager.builtin_names()

    def test_reload_from_store(self, preset_manager, tmp_store):
        preset_manager.save("Mine", _params(3.0))
        fresh = PresetManager(tmp_store)
        assert fresh.user_names() == ["Mine"]
        assert fresh.find("Mine").params == preset_manager.find("Mine").params

    def test_corrupt_store_gives_empty_list(self, tmp_store):
        (tmp_store.store_dir / f"{USER_PRESETS_KEY}.json").write_text("[{oops", encoding="utf-8")
        assert PresetManager(tmp_store).user_presets() == []

    def test_undecodable_store_gives_empty_list(self, tmp_store):
        (tmp_store.store_dir / f"{USER_PRESETS_KEY}.json").write_bytes(b'[{"name": "\xff\xfe"}]')
        assert PresetManager(tmp_store).user_presets() == []

    def test_unknown_mirror_mode_keeps_preset(self, tmp_store):
        entry = Preset("Mine", ShaderParameters.default()).to_dict()
        entry["settings"]["mirrorMode"] = 7
        tmp_store.set_item(USER_PRESETS_KEY, [entry])
        preset = PresetManager(tmp_store).find("Mine")
        assert preset is not None
        assert preset.params.effects.mirror_mode is MirrorMode.NONE
        assert preset.params.noise.seed == 793.24

    def test_wrong_shape_gives_empty_list(self, tmp_store):
        tmp_store.set_item(USER_PRESETS_KEY, {"name": "Mine"})
        assert PresetManager(tmp_store).user_presets() == []

    def test_malformed_entries_skipped(self, tmp_store):
        good = Preset("Good", _params()).to_dict()
        tmp_store.set_item(USER_PRESETS_KEY, [good, {"settings": {}}, 7])
        assert PresetManager(tmp_store).user_names() == ["Good"]

    def test_missing_fields_take_defaults(self, tmp_store):
        tmp_store.set_item(USER_PRESETS_KEY, [{"name": "Old", "settings": {"seed": 5.0}}])
        preset = PresetManager(tmp_store).find("Old")
        assert preset.params.noise.seed == 5.0
        assert preset.params.noise.period == 0.7

    def test_write_failure_keeps_memory(self, preset_manager, monkeypatch):
        def failing_write(key, value):
            raise StoreError("disk full")

        monkeypatch.setattr(preset_manager.store, "set_item", failing_write)
        with pytest.raises(PersistenceError):
            preset_manager.save("Mine", _params())
        assert preset_manager.user_names() == ["Mine"]

    def test_clear(self, preset_manager, tmp_store):
        preset_manager.save("Mine", _params())
        preset_manager.clear()
        assert preset_manager.user_presets() == []
        assert tmp_store.get_item(USER_PRESETS_KEY) is None


class TestFormatPresetAsCode:

    def test_is_python_literal(self):
        line = format_preset_as_code(Preset("It's mine", _params(12.5)))
        assert line.endswith(",")
        data = ast.literal_eval(line[:-1])
        assert data["name"] == "It's mine"
        assert data["settings"]["seed"] == 12.5
        assert data["settings"]["mirrorMode"] == 0

    def test_literal_loads_back(self):
        preset = Preset("Mine", _params(12.5))
        data = ast.literal_eval(format_preset_as_code(preset)[:-1])
        assert Preset.from_dict(json.loads(json.dumps(data))).params == preset.params
