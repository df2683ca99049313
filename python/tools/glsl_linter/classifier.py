"""
Shader type classifier.

This module works out which pipeline stage a shader file belongs to from its
name, and the canonical filename glslangValidator expects for that stage.
"""

import re
from pathlib import Path
from typing import Callable, List, NamedTuple, Optional, Union

from loguru import logger

from .core.enums import ShaderStage
from .core.data_structures import ShaderFilenameTokens
from .core.exceptions import UnrecognizedShaderExtension


class NamingConvention(NamedTuple):
    """A filename pattern and the lookup used to resolve its stage code."""

    name: str
    pattern: re.Pattern
    lookup: Callable[[str], Optional[ShaderStage]]


# Tried in order, first match wins. Group 1 is the base name including its
# trailing separator, group 2 the stage code.
NAMING_CONVENTIONS: List[NamingConvention] = [
    NamingConvention(
        "single-letter .glsl",
        re.compile(r"^(.*[._])(v|g|f)\.glsl$", re.ASCII),
        ShaderStage.by_single_letter,
    ),
    NamingConvention(
        "two-letter .glsl",
        re.compile(r"^(.*[._])(vs|tc|te|gs|fs|cs)\.glsl$", re.ASCII),
        ShaderStage.by_two_letter,
    ),
    NamingConvention(
        "single-letter sh",
        re.compile(r"^(.*\.)(v|g|f)sh$", re.ASCII),
        ShaderStage.by_single_letter,
    ),
    NamingConvention(
        "two-letter",
        re.compile(r"^(.*\.)(vs|tc|te|gs|fs|cs)$", re.ASCII),
        ShaderStage.by_two_letter,
    ),
    NamingConvention(
        "four-letter",
        re.compile(r"^(.*\.)(vert|frag|geom|tesc|tese|comp)$", re.ASCII),
        ShaderStage.by_four_letter,
    ),
]


def canonical_output_name(base_name: str, stage: ShaderStage) -> str:
    """Join a base name and the stage extension with exactly one dot."""
    if not base_name.endswith("."):
        base_name += "."
    return base_name + stage.four_letter_code


class ShaderTypeClassifier:
    """Classifier mapping shader filenames to pipeline stages."""

    def __init__(self, conventions: Optional[List[NamingConvention]] = None):
        self.conventions = (
            conventions if conventions is not None else NAMING_CONVENTIONS
        )

    def classify(self, filename: Union[str, Path]) -> ShaderFilenameTokens:
        """
        Classify a shader file by its name.

        Args:
            filename: Path or bare name of the shader file

        Returns:
            The recognised filename tokens

        Raises:
            UnrecognizedShaderExtension: If no naming convention matches
        """
        full_path = str(filename)
        path = Path(full_path)

        for convention in self.conventions:
            match = convention.pattern.fullmatch(path.name)
            if not match:
                continue
            stage = convention.lookup(match.group(2))
            if stage is None:
                continue

            base_name = match.group(1)
            tokens = ShaderFilenameTokens(
                base_name=base_name,
                directory=str(path.parent),
                stage=stage,
                canonical_output_name=canonical_output_name(base_name, stage),
                original_full_path=full_path,
            )
            logger.debug(
                f"Classified {full_path} as {stage.display_name} "
                f"({convention.name}) -> {tokens.canonical_output_name}"
            )
            return tokens

        raise UnrecognizedShaderExtension(full_path)


_default_classifier = ShaderTypeClassifier()


def classify(filename: Union[str, Path]) -> ShaderFilenameTokens:
    """Classify a shader filename using the built-in naming conventions."""
    return _default_classifier.classify(filename)
