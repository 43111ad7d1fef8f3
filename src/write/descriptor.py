"""Descriptor text generation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from contract.descriptor import (
    BUILD_TYPE,
    CABAL_VERSION_CONSTRAINT,
    CONTINUATION_PREFIX,
    FIELD_INDENT,
    FIELD_LABEL_WIDTH,
    HEADER_LABEL_WIDTH,
)
from contract.errors import InvalidProjectForWrite

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from model.artifacts import Artifact
    from model.project import Project

logger = logging.getLogger(__name__)


def _header(label: str, value: str) -> str:
    return f"{label + ':':<{HEADER_LABEL_WIDTH}}{value}"


def _field(label: str, value: str) -> str:
    return f"{FIELD_INDENT}{label + ':':<{FIELD_LABEL_WIDTH}}{value}"


def _list_field(label: str, values: Sequence[str]) -> list[str]:
    """Render a comma-continuation directive.

    An empty sequence still yields the bare directive line.
    """
    first, *rest = values or ("",)
    return [_field(label, first), *(CONTINUATION_PREFIX + value for value in rest)]


def render_artifact(artifact: Artifact) -> list[str]:
    """Render the body lines of one artifact stanza."""
    lines = [
        *_list_field("hs-source-dirs", artifact.source_directories),
        *_list_field("exposed-modules", artifact.exposed_modules),
        *_list_field("build-depends", artifact.build_dependencies),
        *_list_field("maven-depends", artifact.maven_dependencies),
    ]
    if artifact.main_is is not None:
        lines.append(_field("main-is", artifact.main_is))
    lines.append(_field("ghc-options", " ".join(artifact.ghc_options)))
    lines.append(_field("default-language", artifact.default_language))
    return lines


def render_project(project: Project) -> list[str]:
    """Render a full descriptor.

    Raises:
        InvalidProjectForWrite: if the project is empty or invalid.
    """
    if project.is_empty():
        msg = "The Eta project is not properly configured."
        raise InvalidProjectForWrite(msg)

    lines = [
        _header("name", project.name),
        _header("version", project.version),
        _header("cabal-version", CABAL_VERSION_CONSTRAINT),
        _header("build-type", BUILD_TYPE),
    ]

    if project.library is not None:
        lines += ["", "library", *render_artifact(project.library)]

    for artifact in project.executables:
        lines += [
            "",
            f"executable {artifact.name}",
            *render_artifact(artifact.with_library_dependency(project.library)),
        ]

    for artifact in project.test_suites:
        lines += [
            "",
            f"test-suite {artifact.name}",
            *render_artifact(artifact.with_library_dependency(project.library)),
        ]

    return lines


def render_text(project: Project) -> str:
    return "".join(line + "\n" for line in render_project(project))


def write_descriptor(cwd: Path, project: Project) -> Path:
    """Write ``<cwd>/<name>.cabal`` and return its path.

    The project is rendered before the file is opened, so an invalid project
    never creates or truncates the target.
    """
    text = render_text(project)
    path = cwd / project.descriptor_filename
    path.write_text(text, encoding="utf-8")
    logger.info("Wrote '%s'.", path)
    return path


__all__ = ["render_artifact", "render_project", "render_text", "write_descriptor"]
