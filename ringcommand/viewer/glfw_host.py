"""GLFW window that hosts a ring command and draws it with legacy OpenGL."""

from __future__ import annotations

import glfw
import OpenGL.GL as gl

from ringcommand import log
from ringcommand.config import RingConfig
from ringcommand.controller import RingCommandController
from ringcommand.effects import SoundKind
from ringcommand.frame import ReferenceFrame
from ringcommand.viewer.scene import ViewerScene


def _ensure_glfw():
    if not glfw.init():
        raise RuntimeError("Failed to initialize GLFW")


class RingViewer:
    """
    Demo host.

    Keys:
        Space   - toggle the ring
        A / D   - rotate left / right
        Enter   - press (spawn selected item), releasing closes the ring
        Escape  - quit
    """

    def __init__(self, config: RingConfig, width: int = 800, height: int = 800, title: str = "Ring Command"):
        _ensure_glfw()
        self._window = glfw.create_window(width, height, title, None, None)
        if not self._window:
            glfw.terminate()
            raise RuntimeError("Failed to create GLFW window")
        glfw.make_context_current(self._window)
        glfw.swap_interval(1)

        self.config = config
        self.scene = ViewerScene(config.item_count)
        sounds = {kind: kind.value for kind in SoundKind}
        self.controller = RingCommandController(config, self.scene, sounds=sounds)
        self.controller.viewer = ReferenceFrame()

        self._bindings = {
            glfw.KEY_SPACE: self.controller.toggle,
            glfw.KEY_A: lambda: self.controller.nudge(-1),
            glfw.KEY_D: lambda: self.controller.nudge(1),
            glfw.KEY_ENTER: self.controller.press,
        }
        glfw.set_key_callback(self._window, self._on_key)

    def _on_key(self, _win, key, scancode, action, mods):
        if action == glfw.PRESS:
            if key == glfw.KEY_ESCAPE:
                glfw.set_window_should_close(self._window, True)
                return
            handler = self._bindings.get(key)
            if handler is not None:
                handler()
        elif action == glfw.RELEASE and key == glfw.KEY_ENTER:
            self.controller.release()

    def _draw(self) -> None:
        width, height = glfw.get_framebuffer_size(self._window)
        gl.glViewport(0, 0, width, height)
        gl.glClearColor(0.02, 0.02, 0.1, 1.0)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT)

        extent = self.config.normal_radius * 2.5
        aspect = width / height if height > 0 else 1.0
        gl.glMatrixMode(gl.GL_PROJECTION)
        gl.glLoadIdentity()
        gl.glOrtho(-extent * aspect, extent * aspect, -extent, extent, -1, 1)
        gl.glMatrixMode(gl.GL_MODELVIEW)
        gl.glLoadIdentity()

        gl.glEnable(gl.GL_BLEND)
        gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)
        gl.glBegin(gl.GL_QUADS)
        for quad in self.scene.quads(self.config.normal_radius):
            r, g, b = quad.color
            gl.glColor4f(r, g, b, quad.alpha)
            s = quad.half_size
            gl.glVertex2f(quad.x - s, quad.y - s)
            gl.glVertex2f(quad.x + s, quad.y - s)
            gl.glVertex2f(quad.x + s, quad.y + s)
            gl.glVertex2f(quad.x - s, quad.y + s)
        gl.glEnd()
        gl.glDisable(gl.GL_BLEND)

    def run(self) -> None:
        log.info("[RingViewer] Space: toggle, A/D: rotate, Enter: spawn, Esc: quit")
        last = glfw.get_time()
        try:
            while not glfw.window_should_close(self._window):
                glfw.poll_events()
                now = glfw.get_time()
                dt, last = now - last, now

                self.controller.tick(dt)
                self.scene.step(dt)
                self._draw()
                glfw.swap_buffers(self._window)
        finally:
            glfw.destroy_window(self._window)
            glfw.terminate()
