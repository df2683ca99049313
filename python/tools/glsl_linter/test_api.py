from pathlib import Path

import pytest

from . import lint_shader_output
from .api import build_shader_record, lint_output
from .core.data_structures import EMPTY_RANGE
from .core.enums import Severity, ShaderStage
from .core.exceptions import MissingFilePath, UnrecognizedShaderExtension
from .utils.ranges import line_range

SOURCE = "  #version 450\nvoid main() {}\n"


# --- Tests for line_range ---


def test_line_range_skips_leading_whitespace():
    assert line_range(SOURCE) == ((0, 2), (0, 14))


def test_line_range_other_line():
    assert line_range(SOURCE, 1) == ((1, 0), (1, 14))


@pytest.mark.parametrize("source, line", [("", 0), (SOURCE, 5), (SOURCE, -1)])
def test_line_range_out_of_bounds(source, line):
    start, end = line_range(source, line)
    assert start == end
    assert start[1] == 0
    assert start[0] >= 0


# --- Tests for build_shader_record ---


@pytest.mark.parametrize("path", [None, ""])
def test_build_shader_record_missing_path(path):
    with pytest.raises(MissingFilePath):
        build_shader_record(path, SOURCE)


def test_build_shader_record_with_source():
    record = build_shader_record("/project/sky.fsh", SOURCE)
    assert record.canonical_name == "sky.frag"
    assert record.stage is ShaderStage.FRAGMENT
    assert record.original_full_path == "/project/sky.fsh"
    assert record.source_text == SOURCE


def test_build_shader_record_reads_file(tmp_path: Path):
    shader_file = tmp_path / "particles.cs.glsl"
    shader_file.write_text(SOURCE, encoding="utf-8")

    record = build_shader_record(shader_file)
    assert record.canonical_name == "particles.comp"
    assert record.stage is ShaderStage.COMPUTE
    assert record.source_text == SOURCE


def test_build_shader_record_unrecognized():
    with pytest.raises(UnrecognizedShaderExtension):
        build_shader_record("notes.md", "")


# --- Tests for lint_output ---


def test_lint_output_default_fallback_is_first_line():
    record = build_shader_record("sky.frag", SOURCE)
    result = lint_output([record], "ERROR: Linking fragment stage: No main")
    assert result[0].range == line_range(SOURCE)


def test_lint_output_explicit_fallback():
    record = build_shader_record("sky.frag", SOURCE)
    result = lint_output([record], "ERROR: Linking fragment stage: No main", EMPTY_RANGE)
    assert result[0].range == EMPTY_RANGE


def test_lint_output_without_shaders():
    assert lint_output([], "ERROR: 1:1: orphan") == []


def test_lint_shader_output():
    result = lint_shader_output("/project/sky.frag", SOURCE, "ERROR: 2:1: oops")
    assert result == [
        {
            "severity": Severity.ERROR.value,
            "message": "oops",
            "range": [[0, 1], [0, 1]],
            "file": "/project/sky.frag",
        }
    ]


def test_lint_output_custom_parser():
    class RecordingParser:
        def __init__(self):
            self.calls = []

        def parse(self, shaders, output, fallback_range):
            self.calls.append((list(shaders), output, fallback_range))
            return []

    record = build_shader_record("sky.frag", SOURCE)
    parser = RecordingParser()
    assert lint_output([record], "raw", parser=parser) == []
    [(shaders, output, fallback)] = parser.calls
    assert shaders == [record]
    assert output == "raw"
    assert fallback(record) == line_range(SOURCE)


def test_lint_output_fallback_uses_each_shaders_first_line():
    first = build_shader_record("/p/a.vert", "        uniform float time; // long first line\n")
    second = build_shader_record("/p/b.frag", "x\n")

    result = lint_output([first, second], "ERROR: Linking fragment stage: boom")
    assert [(d.file, d.range) for d in result] == [("/p/b.frag", ((0, 0), (0, 1)))]
