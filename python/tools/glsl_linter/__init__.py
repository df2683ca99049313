"""
GLSL Linter

This module classifies GLSL shader files by pipeline stage and converts the
text output of glslangValidator into structured diagnostics. It is the pure
core of an editor lint integration: locating and running the validator, and
showing the results, are left to the caller.

Features:
- Stage detection for the .vert/.frag/..., .vs/.fs/..., .vsh/.fsh and
  .v.glsl/.vs.glsl naming conventions
- Canonical output filenames matching glslangValidator's stage extensions
- Compile and link diagnostic parsing for single files and batches
- Validator path settings and a Typer command-line interface
"""

from typing import Any, Dict, List, Union
from pathlib import Path

from .core import (
    EMPTY_RANGE,
    Diagnostic,
    GlslLinterError,
    MissingFilePath,
    Range,
    Severity,
    ShaderFilenameTokens,
    ShaderRecord,
    ShaderStage,
    UnrecognizedShaderExtension,
)
from .classifier import NAMING_CONVENTIONS, ShaderTypeClassifier, classify
from .parsers import DiagnosticParser, GlslangOutputParser, parse_validator_output
from .api import build_shader_record, lint_output
from .config import DEFAULT_VALIDATOR_PATH, LinterSettings
from .utils import line_range


def lint_shader_output(
    shader_path: Union[str, Path], source_text: str, output: str
) -> List[Dict[str, Any]]:
    """
    Lint a single shader from already-captured validator output.

    Args:
        shader_path: Path of the shader file that was validated
        source_text: Contents of the shader as submitted
        output: Captured standard output of glslangValidator

    Returns:
        List of diagnostics as dictionaries
    """
    record = build_shader_record(shader_path, source_text)
    return [d.to_dict() for d in lint_output([record], output)]


__all__ = [
    "EMPTY_RANGE",
    "Diagnostic",
    "GlslLinterError",
    "MissingFilePath",
    "Range",
    "Severity",
    "ShaderFilenameTokens",
    "ShaderRecord",
    "ShaderStage",
    "UnrecognizedShaderExtension",
    "NAMING_CONVENTIONS",
    "ShaderTypeClassifier",
    "classify",
    "DiagnosticParser",
    "GlslangOutputParser",
    "parse_validator_output",
    "build_shader_record",
    "lint_output",
    "DEFAULT_VALIDATOR_PATH",
    "LinterSettings",
    "line_range",
    "lint_shader_output",
]
