"""
Base parser interface.

This module defines the protocol that validator output parsers implement.
"""

from typing import List, Protocol, Sequence

from ..core.data_structures import Diagnostic, FallbackRange, ShaderRecord


class ValidatorOutputParser(Protocol):
    """Protocol defining interface for validator output parsers."""

    def parse(
        self,
        shaders: Sequence[ShaderRecord],
        output: str,
        fallback_range: FallbackRange,
    ) -> List[Diagnostic]:
        """Parse raw validator output into diagnostics for the given shaders."""
        ...
