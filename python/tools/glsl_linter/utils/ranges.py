"""
Range helpers.

Link diagnostics have no source location, so callers attach them to a whole
line of the shader, conventionally the first one.
"""

from ..core.data_structures import Range


def line_range(source_text: str, line: int = 0) -> Range:
    """
    Range covering a line from its first non-whitespace character to its end.

    Args:
        source_text: Shader source
        line: Zero-based line number

    Returns:
        The range, or a zero-width range at the start of ``line`` if the
        source has no such line
    """
    lines = source_text.splitlines()
    if line < 0 or line >= len(lines):
        return ((max(line, 0), 0), (max(line, 0), 0))

    text = lines[line]
    start = len(text) - len(text.lstrip())
    return ((line, start), (line, len(text)))
