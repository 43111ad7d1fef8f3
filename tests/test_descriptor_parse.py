from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from contract.descriptor import NONAME
from contract.errors import ParseIssue
from model.artifacts import ArtifactKind
from model.project import Project
from parse.descriptor import fold_lines, parse_descriptor, parse_text, step

if TYPE_CHECKING:
    from pathlib import Path

_FULL_DESCRIPTOR = """\
name:          demo
version:       0.3.1
cabal-version: >= 1.10
build-type:    Simple

library
  hs-source-dirs:   src
  exposed-modules:  Demo
  build-depends:    base

executable demo-cli
  main-is:          Main.hs
  build-depends:    base
                  , demo

executable

test-suite demo-spec
  type:             exitcode-stdio-1.0
  main-is:          Spec.hs
"""


def test_scenario_sentinel_names_resolve_to_project_name() -> None:
    result = parse_text("name: demo\nversion: 1.2\nlibrary\nexecutable\n")

    project = result.project
    assert result.ok
    assert project.name == "demo"
    assert project.version == "1.2"
    assert project.library is not None
    assert project.library.name == "demo"
    assert [exe.name for exe in project.executables] == ["demo"]
    assert not project.is_empty()


def test_full_descriptor_discovers_artifacts_in_order() -> None:
    project = parse_text(_FULL_DESCRIPTOR).project

    assert project.package_id == "demo-0.3.1"
    assert [(a.kind, a.name) for a in project.artifacts()] == [
        (ArtifactKind.LIBRARY, "demo"),
        (ArtifactKind.EXECUTABLE, "demo-cli"),
        (ArtifactKind.EXECUTABLE, "demo"),
        (ArtifactKind.TEST_SUITE, "demo-spec"),
    ]


def test_artifact_fields_are_not_read_back() -> None:
    project = parse_text(_FULL_DESCRIPTOR).project

    assert project.library is not None
    assert project.library.source_directories == ()
    assert project.library.exposed_modules == ()
    assert project.executables[0].build_dependencies == ()
    assert project.executables[0].main_is == "Main.hs"
    assert project.test_suites[0].main_is == "Spec.hs"


def test_last_name_and_version_win() -> None:
    project = parse_text(
        "name: first\nversion: 1\nname: second\nversion: 2\nlibrary\n"
    ).project

    assert project.package_id == "second-2"


def test_second_library_line_overwrites_slot() -> None:
    project = parse_text("name: demo\nversion: 1\nlibrary\nlibrary\n").project

    assert project.library is not None
    assert project.artifacts() == [project.library]


def test_cabal_version_line_is_not_a_version() -> None:
    result = parse_text("name: demo\ncabal-version: >= 1.10\nlibrary\n")

    assert result.issues == [ParseIssue.MISSING_PROJECT_VERSION]


@pytest.mark.parametrize(
    "line",
    [
        "executables",
        "library foo",
        "name: two tokens",
        "-- executable app",
        "  build-depends:    base",
    ],
)
def test_unrecognised_lines_are_ignored(line: str) -> None:
    assert step(Project.empty(), line) == Project.empty()


def test_whitespace_around_headers_is_tolerated() -> None:
    project = fold_lines(["  name:demo  ", "\tversion:\t1.0", "test-suite   spec  "])

    assert project.name == "demo"
    assert project.version == "1.0"
    assert [s.name for s in project.test_suites] == ["spec"]


def test_fold_lines_leaves_names_unresolved() -> None:
    project = fold_lines(["name: demo", "executable"])

    assert project.executables[0].name == NONAME


def test_missing_name_reported(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR):
        result = parse_text("version: 1.0\nlibrary\n")

    assert result.issues == [ParseIssue.MISSING_PROJECT_NAME]
    assert result.project == Project.empty()
    assert result.project.is_empty()
    assert "No project name specified." in caplog.text


def test_missing_version_reported(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR):
        result = parse_text("name: demo\nexecutable app\n")

    assert result.issues == [ParseIssue.MISSING_PROJECT_VERSION]
    assert result.project.is_empty()
    assert "No project version specified." in caplog.text


def test_header_only_descriptor_parses_but_is_empty() -> None:
    result = parse_text("name: demo\nversion: 1.0\n")

    assert result.ok
    assert result.project.is_empty()


def test_parse_descriptor_reads_single_file(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    (tmp_path / "demo.cabal").write_text(_FULL_DESCRIPTOR, encoding="utf-8")
    (tmp_path / "README.md").write_text("name: other\n", encoding="utf-8")

    with caplog.at_level(logging.INFO):
        result = parse_descriptor(tmp_path)

    assert result.ok
    assert result.project.name == "demo"
    assert "Found 'demo.cabal'" in caplog.text


def test_parse_descriptor_without_file(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.ERROR):
        result = parse_descriptor(tmp_path)

    assert result.issues == [ParseIssue.DESCRIPTOR_NOT_FOUND]
    assert result.project.is_empty()
    assert "No cabal file found" in caplog.text


def test_parse_descriptor_with_ambiguous_files(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    for name in ("b.cabal", "a.cabal"):
        (tmp_path / name).write_text("name: x\nversion: 1\nlibrary\n", encoding="utf-8")

    with caplog.at_level(logging.ERROR):
        result = parse_descriptor(tmp_path)

    assert result.issues == [ParseIssue.DESCRIPTOR_NOT_FOUND]
    assert result.project.is_empty()
    assert "a.cabal, b.cabal" in caplog.text


def test_parse_descriptor_with_undecodable_file(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    (tmp_path / "demo.cabal").write_bytes(
        b"name: demo\nversion: 1.0\nlibrary\n-- caf\xe9\n"
    )

    with caplog.at_level(logging.ERROR):
        result = parse_descriptor(tmp_path)

    assert result.issues == [ParseIssue.DESCRIPTOR_UNREADABLE]
    assert result.project.is_empty()
    assert "Cannot read" in caplog.text
    assert "demo.cabal" in caplog.text
