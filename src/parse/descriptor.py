"""Line-oriented descriptor parsing.

Only project identity (name, version) and the set of declared artifacts are
recovered. Per-artifact fields such as ``hs-source-dirs`` or ``build-depends``
are not read back from text.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from functools import reduce
from typing import TYPE_CHECKING

from contract.descriptor import NONAME, NOVERSION
from contract.errors import ParseIssue
from model.artifacts import executable, library, test_suite
from model.project import Project
from scan.files import find_descriptor_candidates

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

# Whole-line shapes. Order is priority: the first matching shape wins.
_NAME = re.compile(r"\s*name:\s*(\S+)\s*")
_VERSION = re.compile(r"\s*version:\s*(\S+)\s*")
_LIBRARY = re.compile(r"\s*library\s*")
_EXECUTABLE_WITH_NAME = re.compile(r"\s*executable\s+(\S+)\s*")
_EXECUTABLE_WITHOUT_NAME = re.compile(r"\s*executable\s*")
_TEST_SUITE_WITH_NAME = re.compile(r"\s*test-suite\s+(\S+)\s*")
_TEST_SUITE_WITHOUT_NAME = re.compile(r"\s*test-suite\s*")


def _set_name(project: Project, match: re.Match[str]) -> Project:
    return project.model_copy(update={"name": match.group(1)})


def _set_version(project: Project, match: re.Match[str]) -> Project:
    return project.model_copy(update={"version": match.group(1)})


def _set_library(project: Project, match: re.Match[str]) -> Project:
    # Single optional slot: a repeated ``library`` line replaces the previous one.
    return project.model_copy(update={"library": library(NONAME)})


def _add_executable(project: Project, match: re.Match[str]) -> Project:
    name = match.group(1) if match.groups() else NONAME
    return project.model_copy(
        update={"executables": (*project.executables, executable(name))}
    )


def _add_test_suite(project: Project, match: re.Match[str]) -> Project:
    name = match.group(1) if match.groups() else NONAME
    return project.model_copy(
        update={"test_suites": (*project.test_suites, test_suite(name))}
    )


_LineAction = Callable[[Project, re.Match[str]], Project]

_LINE_RULES: tuple[tuple[re.Pattern[str], _LineAction], ...] = (
    (_NAME, _set_name),
    (_VERSION, _set_version),
    (_LIBRARY, _set_library),
    (_EXECUTABLE_WITH_NAME, _add_executable),
    (_EXECUTABLE_WITHOUT_NAME, _add_executable),
    (_TEST_SUITE_WITH_NAME, _add_test_suite),
    (_TEST_SUITE_WITHOUT_NAME, _add_test_suite),
)


def step(project: Project, line: str) -> Project:
    """Fold one descriptor line into ``project``; unrecognised lines are ignored."""
    for pattern, apply in _LINE_RULES:
        match = pattern.fullmatch(line)
        if match is not None:
            return apply(project, match)
    return project


def fold_lines(lines: Iterable[str], initial: Project | None = None) -> Project:
    """Reduce descriptor lines into a project without resolving names."""
    start = initial if initial is not None else Project.empty()
    return reduce(step, lines, start)


@dataclass
class ParseResult:
    project: Project = field(default_factory=Project.empty)
    issues: list[ParseIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues


def _fail(issue: ParseIssue, message: str, *args: object) -> ParseResult:
    logger.error(message, *args)
    return ParseResult(project=Project.empty(), issues=[issue])


def parse_lines(lines: Iterable[str]) -> ParseResult:
    """Parse descriptor lines into a resolved project.

    Missing name or version is reported through the result and the empty
    project is returned in place of the partial one.
    """
    project = fold_lines(lines).resolve_names()

    if project.name == NONAME:
        return _fail(ParseIssue.MISSING_PROJECT_NAME, "No project name specified.")
    if project.version == NOVERSION:
        return _fail(
            ParseIssue.MISSING_PROJECT_VERSION, "No project version specified."
        )

    logger.info(
        "Parsed %s with %d artifact(s).", project.package_id, len(project.artifacts())
    )
    return ParseResult(project=project)


def parse_text(text: str) -> ParseResult:
    return parse_lines(text.splitlines())


def parse_descriptor(cwd: Path) -> ParseResult:
    """Locate the single descriptor in ``cwd`` and parse it."""
    directory = cwd.resolve()
    candidates = find_descriptor_candidates(directory)

    if not candidates:
        return _fail(
            ParseIssue.DESCRIPTOR_NOT_FOUND,
            "No cabal file found in '%s'.",
            directory,
        )
    if len(candidates) > 1:
        return _fail(
            ParseIssue.DESCRIPTOR_NOT_FOUND,
            "Multiple cabal files found in '%s': %s",
            directory,
            ", ".join(path.name for path in candidates),
        )

    descriptor = candidates[0]
    logger.info("Found '%s' in '%s'.", descriptor.name, directory)
    try:
        text = descriptor.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return _fail(
            ParseIssue.DESCRIPTOR_UNREADABLE,
            "Cannot read '%s': %s",
            descriptor,
            exc,
        )
    return parse_text(text)


__all__ = [
    "ParseResult",
    "fold_lines",
    "parse_descriptor",
    "parse_lines",
    "parse_text",
    "step",
]
