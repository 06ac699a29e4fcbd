"""
Gradient Renderer
Draws the gradient as one full-screen quad through moderngl.

The renderer holds no parameter state of its own; each render() call takes
a ShaderParameters snapshot and pushes it as uniforms.
"""

import struct

import moderngl

from src.model.shader_params import ShaderParameters
from src.render.shaders import FRAGMENT_SHADER, VERTEX_SHADER
from src.render.shading import build_uniforms
from src.utils.logger import logger

# x, y, u, v per vertex, drawn as a triangle strip
QUAD_VERTICES = (
    -1.0, -1.0, 0.0, 0.0,
    1.0, -1.0, 1.0, 0.0,
    -1.0, 1.0, 0.0, 1.0,
    1.0, 1.0, 1.0, 1.0,
)


class InitializationError(RuntimeError):
    """Graphics context or shader program could not be set up."""


class GradientRenderer:
    """Owns the shader program and quad geometry on one GL context."""

    def __init__(self, ctx: moderngl.Context):
        self.ctx = ctx
        try:
            self.program = ctx.program(
                vertex_shader=VERTEX_SHADER,
                fragment_shader=FRAGMENT_SHADER,
            )
        except moderngl.Error as e:
            raise InitializationError(f"Shader compilation failed: {e}") from e

        data = struct.pack(f"{len(QUAD_VERTICES)}f", *QUAD_VERTICES)
        self.vbo = ctx.buffer(data)
        self.vao = ctx.vertex_array(
            self.program,
            [(self.vbo, '2f 2f', 'in_position', 'in_uv')],
        )
        self.size = (1, 1)
        logger.render("Gradient program ready", details=f"GL {ctx.version_code}")

    @classmethod
    def from_current_context(cls) -> "GradientRenderer":
        """
        Attach to the GL context current on this thread.

        Raises:
            InitializationError: no usable context
        """
        try:
            ctx = moderngl.create_context()
        except Exception as e:
            raise InitializationError(f"No OpenGL context: {e}") from e
        return cls(ctx)

    def resize(self, width: int, height: int) -> None:
        self.size = (max(1, int(width)), max(1, int(height)))
        self.ctx.viewport = (0, 0, self.size[0], self.size[1])

    def _set_uniform(self, name, value):
        # The GLSL compiler drops uniforms it can prove unused
        member = self.program.get(name, None)
        if member is not None:
            member.value = value

    def render(self, params: ShaderParameters, elapsed: float, framebuffer=None) -> None:
        """Draw one frame into framebuffer (or the bound one)."""
        if framebuffer is not None:
            framebuffer.use()
        self.ctx.viewport = (0, 0, self.size[0], self.size[1])
        self.ctx.clear(0.0, 0.0, 0.0, 1.0)
        for name, value in build_uniforms(params, elapsed, self.size).items():
            self._set_uniform(name, value)
        self.vao.render(moderngl.TRIANGLE_STRIP)

    def release(self) -> None:
        self.vao.release()
        self.vbo.release()
        self.program.release()
