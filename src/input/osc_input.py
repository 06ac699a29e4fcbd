"""
OSC Input
Receives tilt readings and music state from external senders.

Messages:
- /tilt gamma [beta]     device tilt in degrees
- /music/playing i       0 = stopped, anything else = playing

The server runs on a daemon thread; handlers only emit Qt signals so the
receivers run on the GUI thread.
"""

import threading

from PyQt5.QtCore import QObject, pyqtSignal
from pythonosc.dispatcher import Dispatcher
from pythonosc.osc_server import ThreadingOSCUDPServer

from src.config import OSC_HOST, OSC_PATHS, OSC_RECEIVE_PORT
from src.utils.logger import logger


class OscInputListener(QObject):
    """UDP OSC receiver for tilt and music messages."""

    tilt_received = pyqtSignal(float, object)       # gamma, beta or None
    music_playing_received = pyqtSignal(bool)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.server = None
        self.server_thread = None

    @property
    def running(self) -> bool:
        return self.server is not None

    def _build_dispatcher(self) -> Dispatcher:
        dispatcher = Dispatcher()
        dispatcher.map(OSC_PATHS['tilt'], self._handle_tilt)
        dispatcher.map(OSC_PATHS['music_playing'], self._handle_music)
        dispatcher.set_default_handler(self._default_handler)
        return dispatcher

    def start(self, host: str = OSC_HOST, port: int = OSC_RECEIVE_PORT) -> bool:
        """Start listening. Returns False if the port could not be bound."""
        if self.running:
            return True
        try:
            self.server = ThreadingOSCUDPServer((host, port), self._build_dispatcher())
        except OSError as e:
            logger.warning(f"Could not start OSC input on {host}:{port}",
                           component="OSC", details=str(e))
            self.server = None
            return False

        self.server_thread = threading.Thread(target=self.server.serve_forever)
        self.server_thread.daemon = True
        self.server_thread.start()
        logger.info(f"Listening for OSC input on {host}:{port}", component="OSC")
        return True

    def stop(self):
        if self.server is None:
            return
        self.server.shutdown()
        self.server.server_close()
        self.server = None
        self.server_thread = None
        logger.info("OSC input stopped", component="OSC")

    def _handle_tilt(self, address, *args):
        """Handle /tilt gamma [beta]."""
        try:
            gamma = float(args[0])
            beta = float(args[1]) if len(args) > 1 else None
        except (IndexError, TypeError, ValueError):
            logger.warning(f"Ignoring malformed {address} message", component="OSC",
                           details=repr(args))
            return
        self.tilt_received.emit(gamma, beta)

    def _handle_music(self, address, *args):
        """Handle /music/playing i."""
        try:
            playing = bool(int(args[0]))
        except (IndexError, TypeError, ValueError):
            logger.warning(f"Ignoring malformed {address} message", component="OSC",
                           details=repr(args))
            return
        self.music_playing_received.emit(playing)

    def _default_handler(self, address, *args):
        logger.osc(f"Unhandled message {address}", details=repr(args))
