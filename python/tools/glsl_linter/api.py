"""
High-level helpers tying classification and output parsing together.

A lint pass builds one ShaderRecord per file, hands the records to an external
runner that invokes glslangValidator, and feeds the captured output back into
``lint_output``.
"""

from pathlib import Path
from typing import List, Optional, Sequence, Union

from loguru import logger

from .classifier import classify
from .core.data_structures import Diagnostic, FallbackRange, Range, ShaderRecord
from .core.exceptions import MissingFilePath
from .parsers.base import ValidatorOutputParser
from .parsers.glslang import GlslangOutputParser
from .utils.ranges import line_range


def build_shader_record(
    path: Optional[Union[str, Path]], source_text: Optional[str] = None
) -> ShaderRecord:
    """
    Classify a shader file and build the record submitted for validation.

    Args:
        path: Path of the shader file
        source_text: Current contents; read from ``path`` when omitted

    Returns:
        The shader record

    Raises:
        MissingFilePath: If no path was given
        UnrecognizedShaderExtension: If the filename is not a known shader type
    """
    if not path:
        raise MissingFilePath()

    tokens = classify(path)
    if source_text is None:
        logger.debug(f"Reading shader source from {path}")
        source_text = Path(path).read_text(encoding="utf-8")

    return ShaderRecord.from_tokens(tokens, source_text)


def lint_output(
    shaders: Sequence[ShaderRecord],
    output: str,
    fallback_range: Optional[FallbackRange] = None,
    parser: Optional[ValidatorOutputParser] = None,
) -> List[Diagnostic]:
    """
    Parse validator output for a batch of shaders.

    When no fallback range is given, each shader's link diagnostics are
    placed on that shader's own first line.
    """
    if fallback_range is None:
        fallback_range = _first_line_range
    parser = parser or GlslangOutputParser()
    return parser.parse(shaders, output, fallback_range)


def _first_line_range(shader: ShaderRecord) -> Range:
    return line_range(shader.source_text)
