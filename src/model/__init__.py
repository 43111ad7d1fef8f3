"""Descriptor data model: artifacts and the project that declares them."""

from model.artifacts import (
    Artifact,
    ArtifactFilter,
    ArtifactKind,
    all_,
    and_,
    executable,
    is_executable,
    is_library,
    is_test_suite,
    library,
    not_,
    or_,
    test_suite,
)
from model.project import Project

__all__ = [
    "Artifact",
    "ArtifactFilter",
    "ArtifactKind",
    "Project",
    "all_",
    "and_",
    "executable",
    "is_executable",
    "is_library",
    "is_test_suite",
    "library",
    "not_",
    "or_",
    "test_suite",
]
