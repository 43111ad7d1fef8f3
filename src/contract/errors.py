"""Error types and non-fatal parse conditions."""

from __future__ import annotations

from enum import StrEnum


class ParseIssue(StrEnum):
    """Conditions reported by the parser instead of raising."""

    DESCRIPTOR_NOT_FOUND = "descriptor_not_found"
    DESCRIPTOR_UNREADABLE = "descriptor_unreadable"
    MISSING_PROJECT_NAME = "missing_project_name"
    MISSING_PROJECT_VERSION = "missing_project_version"


class DescriptorError(Exception):
    """Base class for descriptor handling failures."""


class InvalidProjectForWrite(DescriptorError):
    """Raised when an empty or invalid project is about to be serialized."""


__all__ = ["DescriptorError", "InvalidProjectForWrite", "ParseIssue"]
