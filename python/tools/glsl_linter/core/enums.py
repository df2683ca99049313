"""
Enums for the GLSL linter.

This module contains the shader pipeline stages understood by glslangValidator
and the severity levels attached to parsed diagnostics.
"""

from enum import Enum, StrEnum
from typing import Dict, Optional


class Severity(StrEnum):
    """Enumeration of diagnostic severity levels."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @classmethod
    def from_string(cls, severity: str) -> "Severity":
        """Convert a validator severity word to an enum value."""
        normalized = severity.lower()
        if normalized in cls._value2member_map_:
            return cls(normalized)
        # glslangValidator also prints words like "INTERNAL ERROR" or "NOTE"
        return cls.WARNING


class ShaderStage(Enum):
    """
    The six shader pipeline stages.

    Each member carries the codes used by the different file naming
    conventions. ``four_letter_code`` is the extension glslangValidator uses
    to infer the stage, ``display_name`` is the word it prints in link
    diagnostics ("Linking fragment stage: ...").
    """

    VERTEX = ("v", "vs", "vert", "vertex")
    FRAGMENT = ("f", "fs", "frag", "fragment")
    GEOMETRY = ("g", "gs", "geom", "geometry")
    TESS_EVALUATION = (None, "te", "tese", "tessellation evaluation")
    TESS_CONTROL = (None, "tc", "tesc", "tessellation control")
    COMPUTE = (None, "cs", "comp", "compute")

    def __init__(
        self,
        single_letter_code: Optional[str],
        two_letter_code: str,
        four_letter_code: str,
        display_name: str,
    ):
        self.single_letter_code = single_letter_code
        self.two_letter_code = two_letter_code
        self.four_letter_code = four_letter_code
        self.display_name = display_name

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def by_single_letter(cls, code: str) -> Optional["ShaderStage"]:
        """Look up a stage by its one-character alias."""
        return _BY_SINGLE_LETTER.get(code)

    @classmethod
    def by_two_letter(cls, code: str) -> Optional["ShaderStage"]:
        """Look up a stage by its two-character alias."""
        return _BY_TWO_LETTER.get(code)

    @classmethod
    def by_four_letter(cls, code: str) -> Optional["ShaderStage"]:
        """Look up a stage by its canonical extension."""
        return _BY_FOUR_LETTER.get(code)


# Built once; member order makes the first stage win should codes ever collide
_BY_SINGLE_LETTER: Dict[str, ShaderStage] = {}
_BY_TWO_LETTER: Dict[str, ShaderStage] = {}
_BY_FOUR_LETTER: Dict[str, ShaderStage] = {}

for _stage in ShaderStage:
    if _stage.single_letter_code:
        _BY_SINGLE_LETTER.setdefault(_stage.single_letter_code, _stage)
    _BY_TWO_LETTER.setdefault(_stage.two_letter_code, _stage)
    _BY_FOUR_LETTER.setdefault(_stage.four_letter_code, _stage)

del _stage
