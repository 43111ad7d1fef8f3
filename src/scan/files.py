"""Descriptor file lookup."""

from __future__ import annotations

from typing import TYPE_CHECKING

from contract.descriptor import DESCRIPTOR_SUFFIX

if TYPE_CHECKING:
    from pathlib import Path


def find_descriptor_candidates(
    directory: Path, *, suffix: str = DESCRIPTOR_SUFFIX
) -> list[Path]:
    """Return the files directly inside ``directory`` whose name ends in ``suffix``.

    The listing is not recursive and is sorted by file name so that callers
    reporting ambiguity get a deterministic message.
    """
    if not directory.is_dir():
        return []

    candidates = [
        path
        for path in directory.iterdir()
        if path.name.endswith(suffix) and path.is_file()
    ]
    return sorted(candidates, key=lambda p: p.name)


def find_descriptor_file(
    directory: Path, *, suffix: str = DESCRIPTOR_SUFFIX
) -> Path | None:
    """Return the unique descriptor in ``directory``, or None if there is not exactly one."""
    candidates = find_descriptor_candidates(directory, suffix=suffix)
    if len(candidates) != 1:
        return None
    return candidates[0]


__all__ = ["find_descriptor_candidates", "find_descriptor_file"]
