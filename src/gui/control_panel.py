"""
Gradient Control Panel
Sliders, colour pickers and preset lists bound to a ParameterStore.

Every user edit makes exactly one store write. Store changes are mirrored
back into the widgets with their signals blocked, so refreshes never turn
into new writes.
"""

from PyQt5.QtWidgets import (
    QApplication, QComboBox, QGridLayout, QHBoxLayout, QLabel, QLineEdit,
    QMessageBox, QPushButton, QScrollArea, QVBoxLayout, QWidget,
)
from PyQt5.QtCore import Qt, pyqtSignal

from src.config import (
    COLOR_KEYS,
    COLOR_LABELS,
    GRADIENT_PARAMS,
    MIRROR_MODE_KEY,
    MIRROR_MODE_LABELS,
    PALETTE_ORDER,
    PALETTES,
    PARAM_SECTIONS,
    SIZES,
)
from src.model.parameter_store import ParameterStore
from src.model.shader_params import random_palette
from src.presets import PersistenceError, Preset, ValidationError, format_preset_as_code
from src.utils.logger import logger
from .theme import button_style, panel_style
from .widgets import CollapsibleSection, ColorButton, PaletteSwatch, ParamSliderRow


class PresetRow(QWidget):
    """Name + Load / Copy [/ Delete] buttons for one preset."""

    def __init__(self, name, deletable, parent=None):
        super().__init__(parent)
        self.name = name
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        self.label = QLabel(name)
        layout.addWidget(self.label, stretch=1)

        self.load_btn = QPushButton("Load")
        self.load_btn.setStyleSheet(button_style('enabled'))
        layout.addWidget(self.load_btn)

        self.copy_btn = QPushButton("Copy")
        self.copy_btn.setToolTip("Copy preset as code")
        self.copy_btn.setStyleSheet(button_style())
        layout.addWidget(self.copy_btn)

        self.delete_btn = None
        if deletable:
            self.delete_btn = QPushButton("Delete")
            self.delete_btn.setStyleSheet(button_style('warning'))
            layout.addWidget(self.delete_btn)


class GradientControlPanel(QWidget):
    """
    Collapsible control sections for the gradient.

    notify(title, message) reports errors to the user; it defaults to a
    warning QMessageBox. Short confirmations go out on the notification
    signal for the status bar.
    """

    notification = pyqtSignal(str)

    def __init__(self, store: ParameterStore, notify=None, parent=None):
        super().__init__(parent)
        self.store = store
        self._notify = notify or self._show_warning

        self.param_rows = {}
        self.color_buttons = {}
        self.palette_swatches = {}
        self.builtin_rows = {}
        self.user_rows = {}

        self.setObjectName("gradient_control_panel")
        self.setStyleSheet(panel_style())
        self.setMinimumWidth(SIZES['panel_width'])
        self._setup_ui()
        self.refresh()

        self.store.params_changed.connect(self._on_params_changed)
        self.store.user_presets_changed.connect(self._rebuild_user_presets)

    # --- construction ------------------------------------------------------

    def _setup_ui(self):
        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        outer.addWidget(scroll)

        body = QWidget()
        self.body_layout = QVBoxLayout(body)
        self.body_layout.setContentsMargins(8, 8, 8, 8)
        self.body_layout.setSpacing(8)
        scroll.setWidget(body)

        self.body_layout.addWidget(self._build_palette_section())
        for section_key, title in PARAM_SECTIONS:
            self.body_layout.addWidget(self._build_param_section(section_key, title))
        self.body_layout.addWidget(self._build_preset_section())
        self.body_layout.addStretch()

    def _build_palette_section(self):
        section = CollapsibleSection("Color Palette")

        grid = QGridLayout()
        grid.setSpacing(4)
        for row, (key, label) in enumerate(zip(COLOR_KEYS, COLOR_LABELS)):
            button = ColorButton(self.store.get_field(key))
            button.setObjectName(f"color_button_{key}")
            button.colorChanged.connect(lambda hex_color, k=key: self._on_color_changed(k, hex_color))
            self.color_buttons[key] = button
            grid.addWidget(QLabel(label), row, 0)
            grid.addWidget(button, row, 1)
        section.add_layout(grid)

        self.random_btn = QPushButton("Generate Random Colors")
        self.random_btn.setStyleSheet(button_style('enabled'))
        self.random_btn.clicked.connect(self.generate_random_colors)
        section.add_widget(self.random_btn)

        swatches = QHBoxLayout()
        swatches.setSpacing(6)
        for name in PALETTE_ORDER:
            swatch = PaletteSwatch(name, PALETTES[name])
            swatch.paletteSelected.connect(self.apply_palette)
            self.palette_swatches[name] = swatch
            swatches.addWidget(swatch)
        swatches.addStretch()
        section.add_layout(swatches)
        return section

    def _build_param_section(self, section_key, title):
        section = CollapsibleSection(title)
        for param in GRADIENT_PARAMS:
            if param['section'] != section_key:
                continue
            row = ParamSliderRow(param)
            row.valueChanged.connect(self._on_param_changed)
            self.param_rows[param['key']] = row
            section.add_widget(row)

        if section_key == 'effects':
            mirror_row = QHBoxLayout()
            mirror_row.addWidget(QLabel("Mirror Mode"))
            self.mirror_combo = QComboBox()
            self.mirror_combo.setObjectName("mirror_mode_combo")
            self.mirror_combo.addItems(MIRROR_MODE_LABELS)
            self.mirror_combo.currentIndexChanged.connect(self._on_mirror_changed)
            mirror_row.addWidget(self.mirror_combo, stretch=1)
            section.add_layout(mirror_row)
        return section

    def _build_preset_section(self):
        section = CollapsibleSection("Gradient Presets")

        section.add_widget(QLabel("Built-in"))
        builtin_box = QWidget()
        builtin_layout = QVBoxLayout(builtin_box)
        builtin_layout.setContentsMargins(0, 0, 0, 0)
        builtin_layout.setSpacing(2)
        for preset in self.store.presets.builtin_presets():
            row = self._make_preset_row(preset, deletable=False)
            self.builtin_rows[preset.name] = row
            builtin_layout.addWidget(row)
        section.add_widget(builtin_box)

        section.add_widget(QLabel("Saved"))
        self.user_box = QWidget()
        self.user_layout = QVBoxLayout(self.user_box)
        self.user_layout.setContentsMargins(0, 0, 0, 0)
        self.user_layout.setSpacing(2)
        section.add_widget(self.user_box)
        self._rebuild_user_presets()

        save_row = QHBoxLayout()
        self.name_edit = QLineEdit()
        self.name_edit.setObjectName("preset_name_edit")
        self.name_edit.setPlaceholderText("Preset name")
        self.name_edit.returnPressed.connect(self.save_current)
        save_row.addWidget(self.name_edit, stretch=1)
        self.save_btn = QPushButton("Save")
        self.save_btn.setStyleSheet(button_style('enabled'))
        self.save_btn.clicked.connect(self.save_current)
        save_row.addWidget(self.save_btn)
        section.add_layout(save_row)

        self.copy_current_btn = QPushButton("Copy Current Settings as Code")
        self.copy_current_btn.setStyleSheet(button_style())
        self.copy_current_btn.clicked.connect(self.copy_current_as_code)
        section.add_widget(self.copy_current_btn)
        return section

    def _make_preset_row(self, preset: Preset, deletable):
        row = PresetRow(preset.name, deletable)
        row.load_btn.clicked.connect(lambda _=False, n=preset.name: self.store.load_preset(n))
        row.copy_btn.clicked.connect(lambda _=False, p=preset: self.copy_preset_as_code(p))
        if row.delete_btn is not None:
            row.delete_btn.clicked.connect(lambda _=False, n=preset.name: self.delete_preset(n))
        return row

    def _rebuild_user_presets(self):
        for row in self.user_rows.values():
            self.user_layout.removeWidget(row)
            row.deleteLater()
        self.user_rows = {}
        for preset in self.store.presets.user_presets():
            row = self._make_preset_row(preset, deletable=True)
            self.user_rows[preset.name] = row
            self.user_layout.addWidget(row)

    # --- store -> widgets --------------------------------------------------

    def refresh(self, keys=None):
        """Mirror store values into the widgets without emitting edits."""
        params = self.store.get()
        for key, row in self.param_rows.items():
            if keys is None or key in keys:
                row.set_value(params.get_field(key))
        for key, button in self.color_buttons.items():
            if keys is None or key in keys:
                button.set_color(params.get_field(key))
        if keys is None or MIRROR_MODE_KEY in keys:
            self.mirror_combo.blockSignals(True)
            self.mirror_combo.setCurrentIndex(params.get_field(MIRROR_MODE_KEY))
            self.mirror_combo.blockSignals(False)

    def _on_params_changed(self, keys):
        self.refresh(keys)

    # --- widgets -> store --------------------------------------------------

    def _on_param_changed(self, key, value):
        self.store.set_field(key, value)

    def _on_color_changed(self, key, hex_color):
        self.store.set_field(key, hex_color)

    def _on_mirror_changed(self, index):
        self.store.set_field(MIRROR_MODE_KEY, index)

    def apply_palette(self, name):
        self.store.set(dict(zip(COLOR_KEYS, PALETTES[name])))
        logger.debug(f"Palette applied: {name}", component="UI")

    def generate_random_colors(self):
        self.store.set(dict(zip(COLOR_KEYS, random_palette())))

    # --- presets -----------------------------------------------------------

    def save_current(self):
        name = self.name_edit.text()
        existed = name.strip() in self.store.presets.user_names()
        try:
            preset = self.store.save_preset(name)
        except ValidationError as e:
            self._notify("Invalid preset", str(e))
            return
        except PersistenceError as e:
            logger.error("Preset not written to disk", component="PRESET", details=str(e))
            self._notify("Preset not saved to disk", str(e))
            return
        self.name_edit.clear()
        verb = "Updated" if existed else "Saved"
        self.notification.emit(f"{verb} preset: {preset.name}")

    def delete_preset(self, name):
        try:
            deleted = self.store.delete_preset(name)
        except PersistenceError as e:
            logger.error("Preset deletion not written to disk", component="PRESET", details=str(e))
            self._notify("Preset not deleted on disk", str(e))
            return
        if deleted:
            self.notification.emit(f"Deleted preset: {name}")

    def copy_preset_as_code(self, preset: Preset):
        QApplication.clipboard().setText(format_preset_as_code(preset))
        self.notification.emit(f'Preset "{preset.name}" copied to clipboard as code')

    def copy_current_as_code(self):
        name = self.name_edit.text().strip() or "Custom Preset"
        QApplication.clipboard().setText(format_preset_as_code(Preset(name, self.store.get())))
        self.notification.emit("Settings copied to clipboard as code")

    def _show_warning(self, title, message):
        QMessageBox.warning(self, title, message)
