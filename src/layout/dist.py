"""Build output layout of the eta/etlas toolchain.

The directory structure is owned by the external build tool; this module is
the only place that knows it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from model.artifacts import ArtifactKind, all_

if TYPE_CHECKING:
    from pathlib import Path

    from model.artifacts import Artifact, ArtifactFilter
    from model.project import Project

DEFAULT_TOOL_PREFIX = "eta"


def package_build_dir(
    project: Project,
    dist: Path,
    tool_version: str,
    *,
    tool_prefix: str = DEFAULT_TOOL_PREFIX,
) -> Path:
    """``<dist>/build/<prefix>-<version>/<packageId>``"""
    return dist / "build" / f"{tool_prefix}-{tool_version}" / project.package_id


def _artifact_jar(build_path: Path, project: Project, artifact: Artifact) -> Path:
    if artifact.kind is ArtifactKind.LIBRARY:
        return build_path / "build" / f"{project.package_id}-inplace.jar"
    unit_dir = "x" if artifact.kind is ArtifactKind.EXECUTABLE else "t"
    name = artifact.name
    return build_path / unit_dir / name / "build" / name / f"{name}.jar"


def artifact_jar_candidates(
    project: Project,
    dist: Path,
    tool_version: str,
    predicate: ArtifactFilter = all_,
    *,
    tool_prefix: str = DEFAULT_TOOL_PREFIX,
) -> list[Path]:
    """Expected archive path of every selected artifact, in project order."""
    build_path = package_build_dir(
        project, dist, tool_version, tool_prefix=tool_prefix
    )
    return [
        _artifact_jar(build_path, project, artifact)
        for artifact in project.filter_artifacts(predicate)
    ]


def artifact_jars(
    project: Project,
    dist: Path,
    tool_version: str,
    predicate: ArtifactFilter = all_,
    *,
    tool_prefix: str = DEFAULT_TOOL_PREFIX,
) -> list[Path]:
    """Archive paths of the selected artifacts that exist on disk.

    Missing archives are dropped, so the result may be shorter than the
    selection.
    """
    return [
        jar
        for jar in artifact_jar_candidates(
            project, dist, tool_version, predicate, tool_prefix=tool_prefix
        )
        if jar.exists()
    ]


__all__ = [
    "DEFAULT_TOOL_PREFIX",
    "artifact_jar_candidates",
    "artifact_jars",
    "package_build_dir",
]
