"""
Render - GLSL program, moderngl renderer and the numpy reference pipeline.
"""
