"""
Core module for the GLSL linter.

This module contains the enums, data structures and exceptions shared by the
classifier and the validator output parser.
"""

from .enums import Severity, ShaderStage
from .data_structures import (
    EMPTY_RANGE,
    Diagnostic,
    FallbackRange,
    Position,
    Range,
    ShaderFilenameTokens,
    ShaderRecord,
    point_range,
)
from .exceptions import GlslLinterError, MissingFilePath, UnrecognizedShaderExtension

__all__ = [
    "Severity",
    "ShaderStage",
    "EMPTY_RANGE",
    "Diagnostic",
    "FallbackRange",
    "Position",
    "Range",
    "ShaderFilenameTokens",
    "ShaderRecord",
    "point_range",
    "GlslLinterError",
    "MissingFilePath",
    "UnrecognizedShaderExtension",
]
