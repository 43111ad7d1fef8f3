"""Stable descriptor contract surface.

Format constants and error types shared by the parser, the serializer and
callers. The model types are re-exported lazily to avoid an import cycle with
``model``, which depends on the constants defined here.
"""

from contract.descriptor import (
    DESCRIPTOR_SUFFIX,
    HASKELL98,
    HASKELL2010,
    NONAME,
    NOVERSION,
)
from contract.errors import DescriptorError, InvalidProjectForWrite, ParseIssue


def __getattr__(name: str) -> object:
    if name in {"Artifact", "ArtifactKind", "Project"}:
        from model import Artifact, ArtifactKind, Project

        return {
            "Artifact": Artifact,
            "ArtifactKind": ArtifactKind,
            "Project": Project,
        }[name]

    if name in {"ParseResult", "parse_descriptor"}:
        from parse.descriptor import ParseResult, parse_descriptor

        return {
            "ParseResult": ParseResult,
            "parse_descriptor": parse_descriptor,
        }[name]

    msg = f"module 'contract' has no attribute {name!r}"
    raise AttributeError(msg)


__all__ = [
    "DESCRIPTOR_SUFFIX",
    "HASKELL2010",
    "HASKELL98",
    "NONAME",
    "NOVERSION",
    "Artifact",
    "ArtifactKind",
    "DescriptorError",
    "InvalidProjectForWrite",
    "ParseIssue",
    "ParseResult",
    "Project",
    "parse_descriptor",
]
