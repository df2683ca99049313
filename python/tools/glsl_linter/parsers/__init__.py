"""
Parser modules for shader validator output.
"""

from .base import ValidatorOutputParser
from .glslang import GlslangOutputParser, ScanState, parse_validator_output

DiagnosticParser = GlslangOutputParser

__all__ = [
    "ValidatorOutputParser",
    "GlslangOutputParser",
    "DiagnosticParser",
    "ScanState",
    "parse_validator_output",
]
