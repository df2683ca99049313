"""
glslangValidator output parser.

glslangValidator echoes each input filename on its own line before the
diagnostics for that file, so output for several shaders validated together
looks like::

    /tmp/lint/water.vert
    ERROR: 0:12: 'foo' : undeclared identifier
    /tmp/lint/water.frag
    WARNING: 0:3: 'bar' : unused
    ERROR: Linking fragment stage: Missing entry point

Compile diagnostics are read as ``SEVERITY: <a>:<b>: message``, with ``<b>``
taken as the line and ``<a>`` as the column. Link diagnostics carry no
location and are reported at a caller-supplied fallback range.
"""

import re
from enum import Enum, auto
from typing import List, Optional, Sequence

from loguru import logger

from ..core.enums import Severity
from ..core.data_structures import (
    Diagnostic,
    FallbackRange,
    Range,
    ShaderRecord,
    point_range,
)

COMPILE_PATTERN = re.compile(r"^([\w \-]+): (\d+):(\d+): (.*)$", re.ASCII)
LINK_PATTERN_TEMPLATE = r"^([\w \-]+): Linking {stage} stage: (.*)$"


class ScanState(Enum):
    """Whether the scan is inside a shader's compile section."""

    IDLE = auto()
    IN_SECTION = auto()


class GlslangOutputParser:
    """Parser for glslangValidator output."""

    def __init__(self):
        self.compile_pattern = COMPILE_PATTERN

    @staticmethod
    def link_pattern(shader: ShaderRecord) -> re.Pattern:
        """Build the link diagnostic pattern for a shader's stage."""
        return re.compile(
            LINK_PATTERN_TEMPLATE.format(stage=re.escape(shader.stage.display_name)),
            re.ASCII,
        )

    def parse(
        self,
        shaders: Sequence[ShaderRecord],
        output: str,
        fallback_range: FallbackRange,
    ) -> List[Diagnostic]:
        """
        Parse glslangValidator output.

        Args:
            shaders: Shaders submitted to the validator, in submission order
            output: Captured standard output of the validator
            fallback_range: Location used for link diagnostics, or a callable
                returning it for a given shader

        Returns:
            Diagnostics in shader order, then line order
        """
        lines = output.splitlines()
        diagnostics: List[Diagnostic] = []

        for shader in shaders:
            shader_range = (
                fallback_range(shader) if callable(fallback_range) else fallback_range
            )
            diagnostics.extend(
                self._parse_shader(shader, lines, shader_range, len(shaders) == 1)
            )

        logger.debug(
            f"Parsed {len(diagnostics)} diagnostics for {len(shaders)} shader(s)"
        )
        return diagnostics

    def _parse_shader(
        self,
        shader: ShaderRecord,
        lines: List[str],
        fallback_range: Range,
        single_shader: bool,
    ) -> List[Diagnostic]:
        state = ScanState.IDLE
        link_pattern = self.link_pattern(shader)
        diagnostics: List[Diagnostic] = []

        for line in lines:
            if line.endswith(shader.canonical_name):
                logger.debug(f"Compile section started for {shader.canonical_name}")
                state = ScanState.IN_SECTION
            # With a single shader there are no headers to rely on, every
            # line is treated as part of its section.
            elif state is ScanState.IN_SECTION or single_shader:
                diagnostic = self._match_compile(shader, line)
                if diagnostic is not None:
                    diagnostics.append(diagnostic)
                else:
                    state = ScanState.IDLE

            if link_match := link_pattern.match(line):
                diagnostics.append(
                    Diagnostic(
                        severity=Severity.from_string(link_match.group(1)),
                        message=link_match.group(2).strip(),
                        range=fallback_range,
                        file=shader.original_full_path,
                    )
                )

        return diagnostics

    def _match_compile(self, shader: ShaderRecord, line: str) -> Optional[Diagnostic]:
        match = self.compile_pattern.match(line)
        if not match:
            return None

        column = int(match.group(2))
        line_number = int(match.group(3))
        return Diagnostic(
            severity=Severity.from_string(match.group(1)),
            message=match.group(4).strip(),
            range=point_range(line_number, column),
            file=shader.original_full_path,
        )


def parse_validator_output(
    shaders: Sequence[ShaderRecord], output: str, fallback_range: FallbackRange
) -> List[Diagnostic]:
    """Parse glslangValidator output with a default parser."""
    return GlslangOutputParser().parse(shaders, output, fallback_range)
