"""
Local key-value store.

Each key maps to one JSON file in the store directory. Values are any
JSON-serialisable object. Writes are atomic: serialise, write a temp file in
the same directory, then os.replace over the destination.

Usage:
    store = LocalStore()
    store.set_item("gradientPresets", [...])
    presets = store.get_item("gradientPresets", default=[])
"""

import json
import os
import re
import tempfile
from pathlib import Path
from typing import Any, Iterator, Optional

from src.utils.logger import logger


class StoreError(Exception):
    """Raised when the store cannot be read or written."""
    pass


_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class LocalStore:
    """Process-wide key-value store backed by a directory of JSON files."""

    SUFFIX = ".json"

    def __init__(self, store_dir: Optional[Path] = None):
        if store_dir is None:
            from src.utils.app_paths import get_local_store_dir
            store_dir = get_local_store_dir()
        self.store_dir = Path(store_dir)
        self.store_dir.mkdir(parents=True, exist_ok=True)

    def _path_for(self, key: str) -> Path:
        if not key or not _KEY_PATTERN.match(key):
            raise StoreError(f"Invalid store key: {key!r}")
        return self.store_dir / f"{key}{self.SUFFIX}"

    def get_item(self, key: str, default: Any = None) -> Any:
        """
        Read the value stored under key.

        Returns default when the key has never been written.

        Raises:
            StoreError: If the file exists but cannot be read or parsed
        """
        path = self._path_for(key)
        if not path.exists():
            return default
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise StoreError(f"Corrupted value for {key!r}: {e}")
        except OSError as e:
            raise StoreError(f"Failed to read {key!r}: {e}")

    def set_item(self, key: str, value: Any) -> None:
        """
        Write value under key atomically.

        Raises:
            StoreError: If serialisation or the write fails
        """
        path = self._path_for(key)
        try:
            json_str = json.dumps(value, indent=2)
        except (TypeError, ValueError) as e:
            raise StoreError(f"Value for {key!r} is not JSON serialisable: {e}")

        try:
            fd, temp_path = tempfile.mkstemp(
                suffix='.tmp',
                prefix='.store_',
                dir=self.store_dir
            )
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as f:
                    f.write(json_str)
                os.replace(temp_path, path)
            except Exception:
                try:
                    os.unlink(temp_path)
                except OSError:
                    pass
                raise
        except OSError as e:
            raise StoreError(f"Failed to write {key!r}: {e}")
        logger.debug(f"Wrote {key}", component="STORE")

    def remove_item(self, key: str) -> bool:
        """Remove key. Returns True if it existed."""
        path = self._path_for(key)
        if path.exists():
            path.unlink()
            return True
        return False

    def keys(self) -> Iterator[str]:
        for path in sorted(self.store_dir.glob(f"*{self.SUFFIX}")):
            yield path.stem

    def clear(self) -> None:
        """Remove every key."""
        for key in list(self.keys()):
            self.remove_item(key)
