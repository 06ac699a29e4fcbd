"""
Theme - Centralized color and style definitions
All UI components reference this for consistent styling

Loads from active skin in src/gui/skins/
"""
from .skins import active as skin

# =============================================================================
# SKIN ACCESS
# =============================================================================

def get(key, default='#ff00ff'):
    """Get value from active skin. Magenta = missing key."""
    return skin.SKIN.get(key, default)


FONT_FAMILY = get('font_family')
MONO_FONT = get('font_mono')

FONT_SIZES = {
    'title': get('font_size_title'),
    'section': get('font_size_section'),
    'label': get('font_size_label'),
    'small': get('font_size_small'),
}

COLORS = {
    # States
    'enabled': get('state_enabled_bg'),
    'enabled_text': get('state_enabled_text'),
    'enabled_hover': get('state_enabled_hover'),
    'disabled': get('state_disabled_bg'),
    'disabled_text': get('state_disabled_text'),
    'warning': get('state_warning_bg'),
    'warning_text': get('state_warning_text'),
    'warning_hover': get('state_warning_hover'),

    # UI elements
    'background': get('bg_mid'),
    'background_dark': get('bg_dark'),
    'background_light': get('bg_light'),
    'background_highlight': get('bg_highlight'),
    'border': get('border_dark'),
    'border_light': get('border_light'),
    'text': get('text_mid'),
    'text_bright': get('text_bright'),
    'text_dim': get('text_dim'),
    'accent': get('accent_panel'),
    'accent_dim': get('accent_panel_dim'),

    # Indicators
    'music_on': get('led_music_on'),
    'music_off': get('led_music_off'),

    # Sliders
    'slider_groove': get('slider_groove'),
    'slider_handle': get('slider_handle'),
    'slider_handle_hover': get('slider_handle_hover'),
}


# =============================================================================
# STYLE FUNCTIONS
# =============================================================================

def button_style(state='disabled'):
    """Get button stylesheet for state: enabled, disabled, warning."""
    if state == 'enabled':
        return f"""
            QPushButton {{
                background-color: {COLORS['enabled']};
                color: {COLORS['enabled_text']};
                border-radius: 3px;
                padding: 2px 6px;
            }}
            QPushButton:hover {{
                background-color: {COLORS['enabled_hover']};
            }}
        """
    elif state == 'warning':
        return f"""
            QPushButton {{
                background-color: {COLORS['warning']};
                color: {COLORS['warning_text']};
                border-radius: 3px;
                padding: 2px 6px;
            }}
            QPushButton:hover {{
                background-color: {COLORS['warning_hover']};
            }}
        """
    else:
        return f"""
            QPushButton {{
                background-color: {COLORS['disabled']};
                color: {COLORS['disabled_text']};
                border-radius: 3px;
                padding: 2px 6px;
            }}
            QPushButton:hover {{
                color: {COLORS['text_bright']};
            }}
        """


def slider_style():
    """Horizontal slider stylesheet for parameter rows."""
    return f"""
        QSlider {{
            border: none;
            background: transparent;
        }}
        QSlider::groove:horizontal {{
            border: 1px solid {get('slider_groove_border')};
            height: 6px;
            background: {COLORS['slider_groove']};
            border-radius: 3px;
        }}
        QSlider::handle:horizontal {{
            background: {COLORS['slider_handle']};
            border: 1px solid {get('slider_handle_border')};
            width: 12px;
            margin: -4px 0;
            border-radius: 6px;
        }}
        QSlider::handle:horizontal:hover {{
            background: {COLORS['slider_handle_hover']};
        }}
    """


def swatch_style(hex_color):
    """Flat colour chip used by palette swatches and colour buttons."""
    return f"""
        QPushButton {{
            background-color: {hex_color};
            border: 1px solid {get('swatch_border')};
            border-radius: 3px;
        }}
        QPushButton:hover {{
            border: 1px solid {get('swatch_border_hover')};
        }}
    """


def indicator_style(active=False):
    color = COLORS['music_on'] if active else COLORS['music_off']
    return f"""
        QLabel {{
            color: {color};
            font-size: {FONT_SIZES['small']}px;
            font-weight: bold;
        }}
    """


# =============================================================================
# PANEL STYLES
# =============================================================================

def panel_style():
    """Control panel background, labels and inputs."""
    return f"""
        QWidget {{
            background-color: {COLORS['background']};
            color: {COLORS['text_bright']};
            font-family: {FONT_FAMILY};
            font-size: {FONT_SIZES['label']}px;
        }}
        QLabel {{
            border: none;
            background: transparent;
        }}
        QLineEdit, QDoubleSpinBox, QComboBox {{
            background-color: {COLORS['background_dark']};
            border: 1px solid {COLORS['border_light']};
            border-radius: 3px;
            padding: 1px 3px;
        }}
    """


def section_header_style():
    return f"""
        QToolButton {{
            background: transparent;
            border: none;
            color: {COLORS['accent']};
            font-size: {FONT_SIZES['section']}px;
            font-weight: bold;
        }}
    """
