"""
Main Frame - Combines all components

The gradient fills the window. The control panel lives in a dock that
starts hidden and is toggled from the toolbar ("G"); "I" toggles
interactive mode.
"""

import time

from PyQt5.QtWidgets import QDockWidget, QLabel, QMainWindow, QMessageBox, QToolBar
from PyQt5.QtCore import QEvent, Qt
from PyQt5.QtGui import QKeySequence

from src.config import NOTIFICATION_MS, OSC_RECEIVE_PORT, SIZES
from src.gui.control_panel import GradientControlPanel
from src.gui.gradient_view import GradientView
from src.gui.theme import indicator_style
from src.input.osc_input import OscInputListener
from src.model.modulation import ModulationAdapter, OrientationPermissionGate
from src.model.music_state import MusicState
from src.model.parameter_store import ParameterStore
from src.utils.logger import logger


class MainFrame(QMainWindow):
    """Main application window."""

    def __init__(self, store: ParameterStore, osc_port: int = OSC_RECEIVE_PORT):
        super().__init__()

        self.setWindowTitle("Gradient Engine")
        self.setMinimumSize(480, 320)
        self.setGeometry(100, 50, 1280, 760)

        self.store = store
        self.osc_port = osc_port
        self.music_state = MusicState(self)
        self.modulation = ModulationAdapter(store)
        self.orientation_gate = OrientationPermissionGate(
            self._request_orientation_permission,
            self._attach_tilt_input,
        )
        self.osc = OscInputListener(self)
        self.osc.music_playing_received.connect(self.music_state.set_playing)

        self.setup_ui()
        self.osc.start(port=self.osc_port)
        logger.info("Gradient Engine started", component="APP")

    def setup_ui(self):
        """Create the main interface layout."""
        self.view = GradientView(self.store)
        self.view.init_failed.connect(self._on_render_failed)
        self.view.installEventFilter(self)
        self.setCentralWidget(self.view)

        self.panel = GradientControlPanel(self.store)
        self.panel.notification.connect(self.show_notification)

        self.panel_dock = QDockWidget("Gradient Controls", self)
        self.panel_dock.setObjectName("gradient_controls_dock")
        self.panel_dock.setWidget(self.panel)
        self.panel_dock.setAllowedAreas(Qt.LeftDockWidgetArea | Qt.RightDockWidgetArea)
        self.panel_dock.setMinimumWidth(SIZES['panel_width'])
        self.addDockWidget(Qt.RightDockWidgetArea, self.panel_dock)
        self.panel_dock.hide()

        toolbar = QToolBar("Main")
        toolbar.setMovable(False)
        self.addToolBar(Qt.TopToolBarArea, toolbar)

        self.panel_action = toolbar.addAction("G")
        self.panel_action.setToolTip("Toggle gradient controls (G)")
        self.panel_action.setCheckable(True)
        self.panel_action.setShortcut(QKeySequence("G"))
        self.panel_action.toggled.connect(self.panel_dock.setVisible)
        self.panel_dock.visibilityChanged.connect(self._sync_panel_action)

        self.interactive_action = toolbar.addAction("I")
        self.interactive_action.setToolTip("Toggle interactive mode (I)")
        self.interactive_action.setCheckable(True)
        self.interactive_action.setChecked(self.modulation.enabled)
        self.interactive_action.setShortcut(QKeySequence("I"))
        self.interactive_action.toggled.connect(self.modulation.set_enabled)

        self.music_label = QLabel("MUSIC")
        self.music_label.setStyleSheet(indicator_style(False))
        self.statusBar().addPermanentWidget(self.music_label)
        self.music_state.playing_changed.connect(self._on_music_changed)

        logger.signal_emitter.log_message.connect(self._on_log_message)

    # --- panel / status ----------------------------------------------------

    def toggle_panel(self):
        self.panel_action.toggle()

    def _sync_panel_action(self, visible):
        self.panel_action.blockSignals(True)
        self.panel_action.setChecked(visible)
        self.panel_action.blockSignals(False)

    def show_notification(self, message):
        self.statusBar().showMessage(message, NOTIFICATION_MS)

    def _on_log_message(self, message, level, timestamp):
        self.statusBar().showMessage(message, NOTIFICATION_MS)

    def _on_music_changed(self, playing):
        self.music_label.setStyleSheet(indicator_style(playing))

    def _on_render_failed(self, message):
        self.statusBar().showMessage(f"Rendering unavailable: {message}")

    # --- input -------------------------------------------------------------

    def eventFilter(self, obj, event):
        if obj is self.view:
            if event.type() == QEvent.MouseMove:
                pos = event.pos()
                self.modulation.on_pointer_move(
                    pos.x(), self.view.width(), time.monotonic() * 1000.0,
                    pos.y(), self.view.height(),
                )
            elif event.type() == QEvent.MouseButtonPress:
                self.orientation_gate.on_user_interaction()
        return super().eventFilter(obj, event)

    def _request_orientation_permission(self):
        answer = QMessageBox.question(
            self,
            "Device tilt",
            f"Use device tilt received over OSC (port {self.osc_port}) "
            "to drive the gradient?",
            QMessageBox.Yes | QMessageBox.No,
            QMessageBox.No,
        )
        return answer == QMessageBox.Yes

    def _attach_tilt_input(self):
        self.osc.tilt_received.connect(self.modulation.on_tilt)

    # --- shutdown ----------------------------------------------------------

    def closeEvent(self, event):
        self.osc.stop()
        self.view.release()
        logger.info("Gradient Engine closed", component="APP")
        super().closeEvent(event)
