"""
Parameter Store
Single source of truth for the live ShaderParameters.

Writers: control panel edits (SOURCE_UI) and the interactive modulation
adapter (SOURCE_MODULATION). Reader: the renderer, once per frame.

UI writes apply immediately. Modulation writes are queued and applied by
commit_frame(), which the renderer calls right before taking its snapshot,
so within one frame modulation always lands after UI edits.
"""

from typing import Any, Dict, List, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from src.model.shader_params import SETTINGS_KEYS, ShaderParameters
from src.presets import PersistenceError, Preset, PresetManager
from src.utils.logger import logger

SOURCE_UI = "ui"
SOURCE_MODULATION = "modulation"


class ParameterStore(QObject):
    """
    Owns the live ShaderParameters and the preset operations on it.

    Emits signals so the panel can mirror the state without polling.
    """

    params_changed = pyqtSignal(list)       # changed settings keys
    preset_loaded = pyqtSignal(str)         # preset name
    user_presets_changed = pyqtSignal()

    def __init__(self, presets: PresetManager, params: Optional[ShaderParameters] = None,
                 parent=None):
        super().__init__(parent)
        self.presets = presets
        self._params = params.copy() if params is not None else ShaderParameters.default()
        self._pending_modulation: Dict[str, Any] = {}

    # --- state -------------------------------------------------------------

    def get(self) -> ShaderParameters:
        """Snapshot of the current parameters (a copy, safe to hold)."""
        return self._params.copy()

    def get_field(self, key: str) -> Any:
        return self._params.get_field(key)

    def set(self, partial: Optional[Dict[str, Any]] = None, *, source: str = SOURCE_UI,
            **fields) -> List[str]:
        """
        Merge flat settings fields into the current state.

        Numbers are clamped to their control range. The merge is atomic: if
        any field is rejected nothing changes.

        Returns:
            Keys actually applied now (empty for queued modulation writes)

        Raises:
            KeyError: unknown key
            ValueError: uninterpretable value
        """
        updates = dict(partial or {})
        updates.update(fields)
        if not updates:
            return []

        if source == SOURCE_MODULATION:
            for key in updates:
                if key not in SETTINGS_KEYS:
                    raise KeyError(f"Unknown parameter: {key}")
            self._pending_modulation.update(updates)
            return []

        return self._apply(updates)

    def set_field(self, key: str, value: Any, source: str = SOURCE_UI) -> List[str]:
        return self.set({key: value}, source=source)

    def _apply(self, updates: Dict[str, Any]) -> List[str]:
        candidate = self._params.copy()
        for key, value in updates.items():
            candidate.apply_field(key, value)

        changed = [key for key in updates
                   if candidate.get_field(key) != self._params.get_field(key)]
        self._params = candidate
        if changed:
            self.params_changed.emit(changed)
        return changed

    def has_pending(self) -> bool:
        return bool(self._pending_modulation)

    def commit_frame(self) -> List[str]:
        """Apply queued modulation writes. Called once per frame."""
        if not self._pending_modulation:
            return []
        pending, self._pending_modulation = self._pending_modulation, {}
        return self._apply(pending)

    def replace(self, params: ShaderParameters) -> None:
        """Full replace of the current state (no merge)."""
        self._params = params.copy()
        self._pending_modulation.clear()
        self.params_changed.emit(list(SETTINGS_KEYS))

    # --- presets -----------------------------------------------------------

    def save_preset(self, name: str) -> Preset:
        """
        Save current state as a user preset (insert or overwrite by name).

        Raises:
            ValidationError: empty name, nothing changes
            PersistenceError: write failed, in-memory list keeps the preset
        """
        try:
            preset = self.presets.save(name, self._params)
        except PersistenceError:
            self.user_presets_changed.emit()
            raise
        self.user_presets_changed.emit()
        return preset

    def load_preset(self, name: str) -> bool:
        """
        Replace current state with a preset's settings.

        Returns False (and changes nothing) for unknown names.
        """
        preset = self.presets.find(name)
        if preset is None:
            logger.debug(f"Load ignored, no preset named {name!r}", component="PRESET")
            return False
        self.replace(preset.params)
        logger.info(f"Preset loaded: {name}", component="PRESET")
        self.preset_loaded.emit(name)
        return True

    def delete_preset(self, name: str) -> bool:
        """
        Delete a user preset. Built-in names are a no-op.

        Raises:
            PersistenceError: write failed, in-memory list keeps the deletion
        """
        if self.presets.is_builtin(name) and name not in self.presets.user_names():
            logger.debug(f"Built-in preset {name!r} cannot be deleted", component="PRESET")
            return False
        try:
            deleted = self.presets.delete(name)
        except PersistenceError:
            self.user_presets_changed.emit()
            raise
        if deleted:
            self.user_presets_changed.emit()
        return deleted
