"""
Preset manager - built-in and user preset collections.

Built-in presets are bundled and immutable. User presets are created,
overwritten by exact name, deleted and enumerated; the whole collection is
written back to the local store after every change.
"""

from typing import List, Optional

from src.config import BUILTIN_PRESETS, USER_PRESETS_KEY
from src.model.shader_params import ShaderParameters
from src.utils.local_store import LocalStore, StoreError
from src.utils.logger import logger

from .preset_schema import Preset, validate_preset


class PresetError(Exception):
    """Raised when preset operations fail."""
    pass


class ValidationError(PresetError):
    """Raised when a preset request is rejected before any state changes."""
    pass


class PersistenceError(PresetError):
    """Raised when the user preset collection cannot be written."""
    pass


class PresetManager:
    """
    Owns the built-in list and the user preset collection.

    Usage:
        manager = PresetManager(LocalStore(tmp_dir))
        manager.save("Mine", params)          # insert or overwrite
        preset = manager.find("Mine")         # built-ins first
        manager.delete("Mine")                # user presets only
    """

    def __init__(self, store: Optional[LocalStore] = None, storage_key: str = USER_PRESETS_KEY):
        self.store = store if store is not None else LocalStore()
        self.storage_key = storage_key
        self._builtin: List[Preset] = [
            Preset.from_dict(data, builtin=True) for data in BUILTIN_PRESETS
        ]
        self._user: List[Preset] = self._read_user_presets()

    # --- reading -----------------------------------------------------------

    def _read_user_presets(self) -> List[Preset]:
        """Load user presets; any read problem yields an empty collection."""
        try:
            raw = self.store.get_item(self.storage_key, default=[])
        except StoreError as e:
            logger.warning("User presets unreadable, starting empty", component="PRESET", details=str(e))
            return []

        if not isinstance(raw, list):
            logger.warning(f"User presets must be a list, got {type(raw).__name__}", component="PRESET")
            return []

        presets = []
        for i, entry in enumerate(raw):
            is_valid, errors = validate_preset(entry)
            if not is_valid:
                logger.warning(f"Skipping user preset #{i}", component="PRESET", details="; ".join(errors))
                continue
            presets.append(Preset.from_dict(entry))
        logger.debug(f"Loaded {len(presets)} user presets", component="PRESET")
        return presets

    # --- enumeration -------------------------------------------------------

    def builtin_presets(self) -> List[Preset]:
        return list(self._builtin)

    def user_presets(self) -> List[Preset]:
        return list(self._user)

    def builtin_names(self) -> List[str]:
        return [p.name for p in self._builtin]

    def user_names(self) -> List[str]:
        return [p.name for p in self._user]

    def find(self, name: str) -> Optional[Preset]:
        """Look up by exact name, built-ins first, then user presets."""
        for preset in self._builtin:
            if preset.name == name:
                return preset
        for preset in self._user:
            if preset.name == name:
                return preset
        return None

    def is_builtin(self, name: str) -> bool:
        return any(p.name == name for p in self._builtin)

    # --- mutation ----------------------------------------------------------

    def save(self, name: str, params: ShaderParameters) -> Preset:
        """
        Insert or overwrite a user preset by exact name.

        The in-memory collection is updated before the write, and stays
        updated if the write fails.

        Raises:
            ValidationError: name empty or whitespace
            PersistenceError: store write failed
        """
        if name is None or not str(name).strip():
            raise ValidationError("Please enter a preset name")
        name = str(name).strip()

        preset = Preset(name=name, params=params.copy())
        for i, existing in enumerate(self._user):
            if existing.name == name:
                self._user[i] = preset
                logger.info(f"Updated preset: {name}", component="PRESET")
                break
        else:
            self._user.append(preset)
            logger.info(f"Saved preset: {name}", component="PRESET")

        self._persist()
        return preset

    def delete(self, name: str) -> bool:
        """
        Remove a user preset. Built-ins are never removed.

        Returns:
            True if a user preset was removed

        Raises:
            PersistenceError: store write failed
        """
        remaining = [p for p in self._user if p.name != name]
        if len(remaining) == len(self._user):
            logger.debug(f"Delete ignored, no user preset named {name!r}", component="PRESET")
            return False
        self._user = remaining
        logger.info(f"Deleted preset: {name}", component="PRESET")
        self._persist()
        return True

    def clear(self) -> None:
        """Drop every user preset and the stored key."""
        self._user = []
        try:
            self.store.remove_item(self.storage_key)
        except (StoreError, OSError) as e:
            raise PersistenceError(f"Failed to clear presets: {e}")

    def _persist(self) -> None:
        try:
            self.store.set_item(self.storage_key, [p.to_dict() for p in self._user])
        except StoreError as e:
            logger.error("Failed to save presets", component="PRESET", details=str(e))
            raise PersistenceError(f"Failed to save presets: {e}")


def format_preset_as_code(preset: Preset) -> str:
    """
    Render a preset as one Python literal line for the BUILTIN_PRESETS list.

    Example:
        {'name': "Mine", 'settings': {'color0': '#F14D7B', ..., 'mirrorMode': 0}},
    """
    settings = preset.params.to_settings()
    body = ", ".join(f"{key!r}: {value!r}" for key, value in settings.items())
    return f"{{'name': {preset.name!r}, 'settings': {{{body}}}}},"
