"""
Gradient Engine Skins

Skin modules define the visual appearance of the UI.
Each skin is a Python module with a SKIN dict.
"""

from . import default

# Active skin - change this to switch skins
active = default
