"""Project model aggregating the artifacts of one descriptor."""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, model_validator

from contract.descriptor import DESCRIPTOR_SUFFIX, ETA_MAIN_CLASS, NONAME, NOVERSION
from model.artifacts import KIND_ORDER, Artifact, ArtifactFilter, ArtifactKind


class Project(BaseModel):
    """In-memory representation of a parsed descriptor.

    ``Project.empty()`` is the starting point of a parse and the value returned
    for any parse failure; callers check ``is_empty()`` before using a result.
    """

    model_config = ConfigDict(frozen=True)

    name: str = NONAME
    version: str = NOVERSION
    library: Artifact | None = None
    executables: tuple[Artifact, ...] = ()
    test_suites: tuple[Artifact, ...] = ()

    @model_validator(mode="after")
    def _slots_hold_matching_kinds(self) -> Project:
        if self.library is not None and self.library.kind is not ArtifactKind.LIBRARY:
            msg = f"library slot holds a {self.library.kind} artifact"
            raise ValueError(msg)
        for slot, expected in (
            (self.executables, ArtifactKind.EXECUTABLE),
            (self.test_suites, ArtifactKind.TEST_SUITE),
        ):
            for artifact in slot:
                if artifact.kind is not expected:
                    msg = f"{expected} slot holds a {artifact.kind} artifact"
                    raise ValueError(msg)
        return self

    @classmethod
    def empty(cls) -> Project:
        return cls()

    @property
    def package_id(self) -> str:
        return f"{self.name}-{self.version}"

    @property
    def descriptor_filename(self) -> str:
        return self.name + DESCRIPTOR_SUFFIX

    @property
    def main_class(self) -> str | None:
        if self.has_executable():
            return ETA_MAIN_CLASS
        return None

    def artifacts(self) -> list[Artifact]:
        """Return library, executables, then test suites."""
        declared = [self.library] if self.library is not None else []
        return [*declared, *self.executables, *self.test_suites]

    def filter_artifacts(self, predicate: ArtifactFilter) -> list[Artifact]:
        selected = [artifact for artifact in self.artifacts() if predicate(artifact)]
        # Stable sort: declaration order is kept within each kind.
        return sorted(selected, key=lambda artifact: KIND_ORDER[artifact.kind])

    def has_library(self) -> bool:
        return self.library is not None

    def has_executable(self) -> bool:
        return bool(self.executables)

    def has_test_suite(self) -> bool:
        return bool(self.test_suites)

    def map_artifacts(self, transform: Callable[[Artifact], Artifact]) -> Project:
        """Return a copy with `transform` applied to every artifact in place."""
        return self.model_copy(
            update={
                "library": (
                    transform(self.library) if self.library is not None else None
                ),
                "executables": tuple(transform(a) for a in self.executables),
                "test_suites": tuple(transform(a) for a in self.test_suites),
            }
        )

    def resolve_names(self) -> Project:
        """Give the project name to every artifact still holding the sentinel."""

        def _resolve(artifact: Artifact) -> Artifact:
            if artifact.name == NONAME:
                return artifact.model_copy(update={"name": self.name})
            return artifact

        return self.map_artifacts(_resolve)

    def is_empty(self) -> bool:
        return (
            self.name == NONAME
            or self.version == NOVERSION
            or not self.artifacts()
        )


__all__ = ["Project"]
