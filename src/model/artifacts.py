"""Artifact models for the buildable units of a descriptor.

An artifact is a single tagged model: ``kind`` selects library, executable or
test-suite behaviour, and every transformation returns the same kind.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from contract.descriptor import (
    DEFAULT_EXECUTABLE_MAIN,
    DEFAULT_TEST_SUITE_MAIN,
    HASKELL98,
    HASKELL2010,
)

Language = Literal["Haskell98", "Haskell2010"]


class ArtifactKind(StrEnum):
    """Closed set of artifact variants."""

    LIBRARY = "library"
    EXECUTABLE = "executable"
    TEST_SUITE = "test-suite"


_DEPENDENCY_PREFIX: dict[ArtifactKind, str] = {
    ArtifactKind.LIBRARY: "lib",
    ArtifactKind.EXECUTABLE: "exe",
    ArtifactKind.TEST_SUITE: "test",
}

# Position of each kind in the fixed project ordering.
KIND_ORDER: dict[ArtifactKind, int] = {
    ArtifactKind.LIBRARY: 0,
    ArtifactKind.EXECUTABLE: 1,
    ArtifactKind.TEST_SUITE: 2,
}


class Artifact(BaseModel):
    """One buildable unit declared by a project."""

    model_config = ConfigDict(frozen=True)

    kind: ArtifactKind
    name: str = Field(min_length=1)
    source_directories: tuple[str, ...] = ()
    exposed_modules: tuple[str, ...] = ()
    build_dependencies: tuple[str, ...] = ()
    maven_dependencies: tuple[str, ...] = ()
    main_is: str | None = None
    ghc_options: tuple[str, ...] = ()
    default_language: Language = HASKELL2010

    @model_validator(mode="after")
    def _library_has_no_main(self) -> Artifact:
        if self.kind is ArtifactKind.LIBRARY and self.main_is is not None:
            msg = "a library artifact cannot declare main-is"
            raise ValueError(msg)
        return self

    @property
    def dependency_tag(self) -> str:
        """Identifier used when another unit of the same project depends on this one."""
        return f"{_DEPENDENCY_PREFIX[self.kind]}:{self.name}"

    def with_source_directories(self, dirs: tuple[str, ...] | list[str]) -> Artifact:
        return self.model_copy(update={"source_directories": tuple(dirs)})

    def with_library_dependency(self, library: Artifact | None) -> Artifact:
        """Prepend the project library to build dependencies.

        Libraries are returned unchanged, as is every artifact when there is no
        library to depend on.
        """
        if self.kind is ArtifactKind.LIBRARY or library is None:
            return self
        return self.model_copy(
            update={"build_dependencies": (library.name, *self.build_dependencies)}
        )


def library(name: str) -> Artifact:
    return Artifact(kind=ArtifactKind.LIBRARY, name=name)


def executable(name: str) -> Artifact:
    return Artifact(
        kind=ArtifactKind.EXECUTABLE, name=name, main_is=DEFAULT_EXECUTABLE_MAIN
    )


def test_suite(name: str) -> Artifact:
    return Artifact(
        kind=ArtifactKind.TEST_SUITE, name=name, main_is=DEFAULT_TEST_SUITE_MAIN
    )


# ---------------------------------------------------------------------------
# Artifact predicates
# ---------------------------------------------------------------------------

ArtifactFilter = Callable[[Artifact], bool]


def all_(artifact: Artifact) -> bool:
    return True


def is_library(artifact: Artifact) -> bool:
    return artifact.kind is ArtifactKind.LIBRARY


def is_executable(artifact: Artifact) -> bool:
    return artifact.kind is ArtifactKind.EXECUTABLE


def is_test_suite(artifact: Artifact) -> bool:
    return artifact.kind is ArtifactKind.TEST_SUITE


def not_(predicate: ArtifactFilter) -> ArtifactFilter:
    return lambda artifact: not predicate(artifact)


def and_(first: ArtifactFilter, second: ArtifactFilter) -> ArtifactFilter:
    return lambda artifact: first(artifact) and second(artifact)


def or_(first: ArtifactFilter, second: ArtifactFilter) -> ArtifactFilter:
    return lambda artifact: first(artifact) or second(artifact)


KIND_FILTERS: dict[str, ArtifactFilter] = {
    ArtifactKind.LIBRARY.value: is_library,
    ArtifactKind.EXECUTABLE.value: is_executable,
    ArtifactKind.TEST_SUITE.value: is_test_suite,
}


__all__ = [
    "HASKELL2010",
    "HASKELL98",
    "KIND_FILTERS",
    "KIND_ORDER",
    "Artifact",
    "ArtifactFilter",
    "ArtifactKind",
    "Language",
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
