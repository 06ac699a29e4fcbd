"""
Reusable UI Widgets
Atomic components with no business logic - just behavior
"""

from PyQt5.QtWidgets import (
    QColorDialog, QDoubleSpinBox, QHBoxLayout, QLabel, QPushButton,
    QSizePolicy, QSlider, QToolButton, QVBoxLayout, QWidget,
)
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QColor, QFont

from src.config import (
    SIZES,
    format_value,
    quantize_value,
    slider_steps,
    slider_to_value,
    value_to_slider,
)
from .theme import FONT_SIZES, MONO_FONT, section_header_style, slider_style, swatch_style


class ParamSliderRow(QWidget):
    """
    Label + slider + number field for one numeric parameter.

    Slider and number field always show the same quantized value: editing
    either one updates the other and emits valueChanged once.
    """

    # Signal emits (param key, real value)
    valueChanged = pyqtSignal(str, float)

    def __init__(self, param, parent=None):
        super().__init__(parent)
        self.param = param
        self.key = param['key']
        self.setObjectName(f"param_row_{self.key}")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        self.label = QLabel(param['label'])
        self.label.setMinimumWidth(90)
        layout.addWidget(self.label)

        self.slider = QSlider(Qt.Horizontal)
        self.slider.setObjectName(f"slider_{self.key}")
        self.slider.setStyleSheet(slider_style())
        self.slider.setRange(0, slider_steps(param))
        self.slider.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
        layout.addWidget(self.slider, stretch=1)

        self.spin = QDoubleSpinBox()
        self.spin.setObjectName(f"spin_{self.key}")
        self.spin.setFont(QFont(MONO_FONT, FONT_SIZES['small']))
        self.spin.setDecimals(param.get('decimals', 2))
        self.spin.setRange(param['min'], param['max'])
        self.spin.setSingleStep(param.get('step', 0.01))
        self.spin.setKeyboardTracking(False)
        self.spin.setFixedWidth(SIZES['value_field_width'])
        layout.addWidget(self.spin)

        self._value = quantize_value(param['default'], param)
        self._sync_controls()

        self.slider.valueChanged.connect(self._on_slider_moved)
        self.spin.valueChanged.connect(self._on_spin_edited)

    def value(self) -> float:
        return self._value

    def slider_value(self) -> float:
        """Real value the slider position represents."""
        return slider_to_value(self.slider.value(), self.param)

    def set_value(self, value):
        """Set from the model. Does not emit valueChanged."""
        self._value = quantize_value(value, self.param)
        self._sync_controls()

    def _sync_controls(self):
        self.slider.blockSignals(True)
        self.spin.blockSignals(True)
        self.slider.setValue(value_to_slider(self._value, self.param))
        self.spin.setValue(self._value)
        self.slider.blockSignals(False)
        self.spin.blockSignals(False)
        self.slider.setToolTip(format_value(self._value, self.param))

    def _on_slider_moved(self, position):
        self._commit(slider_to_value(position, self.param))

    def _on_spin_edited(self, value):
        self._commit(quantize_value(value, self.param))

    def _commit(self, value):
        changed = value != self._value
        self._value = value
        self._sync_controls()
        if changed:
            self.valueChanged.emit(self.key, value)


class ColorButton(QPushButton):
    """Colour chip that opens a colour picker. Emits '#RRGGBB'."""

    colorChanged = pyqtSignal(str)

    def __init__(self, hex_color='#000000', parent=None):
        super().__init__(parent)
        size = SIZES['color_button']
        self.setFixedSize(size * 2, size)
        self.setCursor(Qt.PointingHandCursor)
        self._color = None
        self.set_color(hex_color)
        self.clicked.connect(self._pick)

    def color(self) -> str:
        return self._color

    def set_color(self, hex_color):
        """Set from the model. Does not emit colorChanged."""
        self._color = QColor(hex_color).name().upper()
        self.setStyleSheet(swatch_style(self._color))
        self.setToolTip(self._color)

    def _pick(self):
        chosen = QColorDialog.getColor(QColor(self._color), self, "Pick colour")
        if chosen.isValid():
            self.choose(chosen.name())

    def choose(self, hex_color):
        """Apply a user choice and emit if it differs."""
        before = self._color
        self.set_color(hex_color)
        if self._color != before:
            self.colorChanged.emit(self._color)


class PaletteSwatch(QWidget):
    """Row of five colour chips; clicking anywhere selects the palette."""

    paletteSelected = pyqtSignal(str)

    def __init__(self, name, colors, parent=None):
        super().__init__(parent)
        self.name = name
        self.colors = list(colors)
        self.setObjectName(f"swatch_{name}")
        self.setToolTip(name.title())

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        size = SIZES['swatch']
        for hex_color in self.colors:
            chip = QPushButton()
            chip.setFixedSize(size // 2, size)
            chip.setStyleSheet(swatch_style(hex_color))
            chip.setCursor(Qt.PointingHandCursor)
            chip.clicked.connect(lambda _=False: self.paletteSelected.emit(self.name))
            layout.addWidget(chip)


class CollapsibleSection(QWidget):
    """Header button that shows/hides a content area."""

    def __init__(self, title, expanded=True, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        self.header = QToolButton()
        self.header.setText(title)
        self.header.setCheckable(True)
        self.header.setChecked(expanded)
        self.header.setToolButtonStyle(Qt.ToolButtonTextBesideIcon)
        self.header.setStyleSheet(section_header_style())
        self.header.toggled.connect(self._on_toggled)
        layout.addWidget(self.header)

        self.content = QWidget()
        self.content_layout = QVBoxLayout(self.content)
        self.content_layout.setContentsMargins(6, 0, 0, 6)
        self.content_layout.setSpacing(4)
        layout.addWidget(self.content)
        self._on_toggled(expanded)

    def add_widget(self, widget):
        self.content_layout.addWidget(widget)

    def add_layout(self, child_layout):
        self.content_layout.addLayout(child_layout)

    def is_expanded(self) -> bool:
        return self.header.isChecked()

    def _on_toggled(self, expanded):
        self.header.setArrowType(Qt.DownArrow if expanded else Qt.RightArrow)
        self.content.setVisible(expanded)
