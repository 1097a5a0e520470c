"""
Demo viewer for the ring command.

ViewerScene has no window dependency; RingViewer (glfw_host) needs GLFW
and PyOpenGL and is imported lazily.
"""

from ringcommand.viewer.scene import ViewerScene, IconView, SpawnedItem, Quad

__all__ = ["ViewerScene", "IconView", "SpawnedItem", "Quad"]
