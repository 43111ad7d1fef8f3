"""Build output layout."""

from layout.dist import (
    DEFAULT_TOOL_PREFIX,
    artifact_jar_candidates,
    artifact_jars,
    package_build_dir,
)

__all__ = [
    "DEFAULT_TOOL_PREFIX",
    "artifact_jar_candidates",
    "artifact_jars",
    "package_build_dir",
]
