"""
Default Skin - Dark Glass

Dark control panel over the full-window gradient.
"""
import platform

SKIN = {
    # ==========================================================================
    # PALETTE - Base colours everything derives from
    # ==========================================================================

    # Backgrounds (darkest to lightest)
    'bg_dark': '#0d0d0d',
    'bg_mid': '#1a1a1a',
    'bg_light': '#242424',
    'bg_highlight': '#2e2e2e',

    # Borders
    'border_dark': '#2a2a2a',
    'border_mid': '#3a3a3a',
    'border_light': '#4a4a4a',

    # Text (dimmest to brightest)
    'text_dim': '#606060',
    'text_mid': '#909090',
    'text_bright': '#d0d0d0',
    'text_white': '#f0f0f0',

    # Panel section accent
    'accent_panel': '#aa88ff',
    'accent_panel_dim': '#6644aa',

    # ==========================================================================
    # STATES - Interactive element states
    # ==========================================================================

    # Enabled/Active (green)
    'state_enabled_bg': '#0a2a15',
    'state_enabled_text': '#00ff66',
    'state_enabled_border': '#00aa44',
    'state_enabled_hover': '#0d3a1d',

    # Disabled/Off
    'state_disabled_bg': '#1a1a1a',
    'state_disabled_text': '#808080',
    'state_disabled_border': '#2a2a2a',

    # Warning (red) - delete buttons
    'state_warning_bg': '#2a0a0a',
    'state_warning_text': '#ff6666',
    'state_warning_hover': '#3a1515',

    # ==========================================================================
    # INDICATORS
    # ==========================================================================

    'led_music_on': '#00ff66',
    'led_music_off': '#303030',

    # ==========================================================================
    # CONTROLS
    # ==========================================================================

    'slider_groove': '#1a1a1a',
    'slider_groove_border': '#3a3a3a',
    'slider_handle': '#808080',
    'slider_handle_hover': '#a0a0a0',
    'slider_handle_border': '#4a4a4a',

    'swatch_border': '#4a4a4a',
    'swatch_border_hover': '#d0d0d0',

    # ==========================================================================
    # FONTS
    # ==========================================================================

    'font_family': 'Helvetica',
    'font_mono': 'Menlo' if platform.system() == 'Darwin' else 'Consolas',

    'font_size_title': 14,
    'font_size_section': 12,
    'font_size_label': 10,
    'font_size_small': 9,
}
