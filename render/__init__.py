"""
Kakurasu Rules Engine - Render Package
Plain-text board rendering.
"""
from .text_render import BoardTextRenderer, render_board

__all__ = ['BoardTextRenderer', 'render_board']
