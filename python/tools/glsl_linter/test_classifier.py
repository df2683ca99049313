import re
from pathlib import Path

import pytest

from .classifier import (
    NAMING_CONVENTIONS,
    NamingConvention,
    ShaderTypeClassifier,
    canonical_output_name,
    classify,
)
from .core.enums import ShaderStage
from .core.exceptions import GlslLinterError, UnrecognizedShaderExtension


@pytest.mark.parametrize(
    "filename, stage, canonical",
    [
        ("shader.vert", ShaderStage.VERTEX, "shader.vert"),
        ("shader.tese", ShaderStage.TESS_EVALUATION, "shader.tese"),
        ("foo.fs.glsl", ShaderStage.FRAGMENT, "foo.frag"),
        ("foo.tc.glsl", ShaderStage.TESS_CONTROL, "foo.tesc"),
        ("foo.v.glsl", ShaderStage.VERTEX, "foo.vert"),
        ("foo.vsh", ShaderStage.VERTEX, "foo.vert"),
        ("foo.gsh", ShaderStage.GEOMETRY, "foo.geom"),
        ("blur.cs", ShaderStage.COMPUTE, "blur.comp"),
        ("blur.te", ShaderStage.TESS_EVALUATION, "blur.tese"),
        ("water_f.glsl", ShaderStage.FRAGMENT, "water_.frag"),
        ("water_gs.glsl", ShaderStage.GEOMETRY, "water_.geom"),
        ("my.post.fx.frag", ShaderStage.FRAGMENT, "my.post.fx.frag"),
    ],
)
def test_classify_naming_conventions(filename, stage, canonical):
    tokens = classify(filename)
    assert tokens.stage is stage
    assert tokens.canonical_output_name == canonical


def test_classify_keeps_path_parts():
    tokens = classify("assets/shaders/light.fs.glsl")
    assert tokens.base_name == "light."
    assert tokens.directory == "assets/shaders"
    assert tokens.original_full_path == "assets/shaders/light.fs.glsl"


def test_classify_bare_name_directory():
    assert classify("shader.vert").directory == "."


def test_classify_accepts_path_objects():
    tokens = classify(Path("shaders") / "sky.vs")
    assert tokens.stage is ShaderStage.VERTEX
    assert tokens.canonical_output_name == "sky.vert"


@pytest.mark.parametrize(
    "filename",
    ["readme.txt", "shader.glsl", "shader.VERT", "vert", "foo.vs.txt", "foo.tcsh"],
)
def test_classify_unrecognized(filename):
    with pytest.raises(UnrecognizedShaderExtension) as exc_info:
        classify(filename)
    assert exc_info.value.filename == filename
    assert isinstance(exc_info.value, GlslLinterError)
    assert isinstance(exc_info.value, ValueError)


def test_naming_convention_order():
    assert [c.name for c in NAMING_CONVENTIONS] == [
        "single-letter .glsl",
        "two-letter .glsl",
        "single-letter sh",
        "two-letter",
        "four-letter",
    ]


def test_first_matching_convention_wins():
    # "a.fs.vert" satisfies both a loosened two-letter pattern and the
    # four-letter convention; whichever comes first decides the stage.
    loose = NamingConvention(
        "loose", re.compile(r"^(.*\.)(fs)[\w.]*$"), ShaderStage.by_two_letter
    )

    loose_first = ShaderTypeClassifier([loose, *NAMING_CONVENTIONS])
    assert loose_first.classify("a.fs.vert").stage is ShaderStage.FRAGMENT

    loose_last = ShaderTypeClassifier([*NAMING_CONVENTIONS, loose])
    assert loose_last.classify("a.fs.vert").stage is ShaderStage.VERTEX


def test_canonical_output_name_adds_single_dot():
    assert canonical_output_name("foo.", ShaderStage.COMPUTE) == "foo.comp"
    assert canonical_output_name("foo_", ShaderStage.COMPUTE) == "foo_.comp"


def test_classify_rejects_trailing_newline():
    with pytest.raises(UnrecognizedShaderExtension):
        classify("foo.vert\n")


def test_empty_convention_list_is_kept():
    classifier = ShaderTypeClassifier([])
    assert classifier.conventions == []
    with pytest.raises(UnrecognizedShaderExtension):
        classifier.classify("shader.vert")
