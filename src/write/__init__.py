"""Descriptor serialization."""

from write.descriptor import (
    render_artifact,
    render_project,
    render_text,
    write_descriptor,
)

__all__ = ["render_artifact", "render_project", "render_text", "write_descriptor"]
