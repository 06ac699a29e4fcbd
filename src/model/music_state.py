"""
Music State
One "music is playing" signal that any number of listeners subscribe to.
"""

from PyQt5.QtCore import QObject, pyqtSignal

from src.utils.logger import logger


class MusicState(QObject):
    """Emits playing_changed only when the value actually flips."""

    playing_changed = pyqtSignal(bool)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._playing = False

    @property
    def playing(self) -> bool:
        return self._playing

    def set_playing(self, playing: bool) -> bool:
        """Returns True if the state changed."""
        playing = bool(playing)
        if playing == self._playing:
            return False
        self._playing = playing
        logger.debug(f"Music {'playing' if playing else 'stopped'}", component="MUSIC")
        self.playing_changed.emit(playing)
        return True
