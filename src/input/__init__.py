"""
Input - external OSC sources for tilt and music state.
"""
