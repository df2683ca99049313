"""
Utility modules for the GLSL linter.
"""

from .ranges import line_range

__all__ = ["line_range"]
