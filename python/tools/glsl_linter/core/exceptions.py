"""
Exception types for the GLSL linter.
"""

from typing import Any, Dict


class GlslLinterError(Exception):
    """Base exception for all linter errors, with optional context."""

    def __init__(self, message: str, **context: Any):
        super().__init__(message)
        self.message = message
        self.context = context

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to structured dictionary."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
        }


class UnrecognizedShaderExtension(GlslLinterError, ValueError):
    """Raised when a filename matches none of the shader naming conventions."""

    def __init__(self, filename: str):
        super().__init__(f"Unknown shader type: {filename}", filename=filename)
        self.filename = filename


class MissingFilePath(GlslLinterError):
    """Raised when the path of the file being linted cannot be determined."""

    def __init__(self, message: str = "Could not determine the shader file path"):
        super().__init__(message)
