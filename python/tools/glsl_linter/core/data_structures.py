"""
Data structures for the GLSL linter.

This module contains the records passed between the shader classifier, the
validator output parser and their callers.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple, TypeAlias, Union

from .enums import Severity, ShaderStage

Position: TypeAlias = Tuple[int, int]
Range: TypeAlias = Tuple[Position, Position]

EMPTY_RANGE: Range = ((0, 0), (0, 0))


def point_range(line: int, column: int) -> Range:
    """Build a zero-width range from one-based validator coordinates."""
    position = (line - 1 if line > 0 else 0, column - 1 if column > 0 else 0)
    return (position, position)


@dataclass(frozen=True)
class ShaderFilenameTokens:
    """Pieces of a shader filename as recognised by the classifier."""

    base_name: str
    directory: str
    stage: ShaderStage
    canonical_output_name: str
    original_full_path: str


@dataclass(frozen=True)
class ShaderRecord:
    """A shader submitted to glslangValidator in a single lint pass."""

    canonical_name: str
    stage: ShaderStage
    source_text: str = ""
    original_full_path: Optional[str] = None

    def __post_init__(self):
        # An empty name would match every line as a section header
        if not self.canonical_name:
            raise ValueError("ShaderRecord.canonical_name must not be empty")

    @classmethod
    def from_tokens(
        cls, tokens: ShaderFilenameTokens, source_text: str
    ) -> "ShaderRecord":
        """Create a record for a classified shader file."""
        return cls(
            canonical_name=tokens.canonical_output_name,
            stage=tokens.stage,
            source_text=source_text,
            original_full_path=tokens.original_full_path,
        )


@dataclass(frozen=True)
class Diagnostic:
    """A single finding reported by the validator."""

    severity: Severity
    message: str
    range: Range
    file: Optional[str] = None

    @property
    def line(self) -> int:
        """Zero-based start line."""
        return self.range[0][0]

    @property
    def column(self) -> int:
        """Zero-based start column."""
        return self.range[0][1]

    def to_dict(self) -> Dict[str, Any]:
        """Convert the Diagnostic to a dictionary."""
        result: Dict[str, Any] = {
            "severity": self.severity.value,
            "message": self.message,
            "range": [list(self.range[0]), list(self.range[1])],
        }
        if self.file is not None:
            result["file"] = self.file
        return result


# A fixed range, or one computed for each shader
FallbackRange: TypeAlias = Union[Range, Callable[[ShaderRecord], Range]]
