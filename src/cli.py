"""Command-line interface for etacabal."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import orjson

from contract.errors import InvalidProjectForWrite
from layout.dist import artifact_jars
from model.artifacts import KIND_FILTERS, all_, and_, not_
from parse.descriptor import ParseResult, parse_descriptor
from settings.config import ConfigError, load_config, resolve_dist_dir
from write.descriptor import render_text, write_descriptor

_KINDS = sorted(KIND_FILTERS)


def _add_common_paths(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Project root containing the .cabal file (default: .)",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="etacabal")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log informational messages"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    show_parser = subparsers.add_parser("show", help="Print the parsed project")
    _add_common_paths(show_parser)

    render_parser = subparsers.add_parser(
        "render", help="Regenerate the descriptor from the parsed project"
    )
    _add_common_paths(render_parser)
    render_parser.add_argument(
        "--source-dir",
        action="append",
        default=None,
        dest="source_dirs",
        help="Source directory for every artifact (repeatable; default: config)",
    )
    render_parser.add_argument(
        "--write",
        action="store_true",
        help="Write <root>/<name>.cabal instead of printing",
    )

    jars_parser = subparsers.add_parser(
        "jars", help="List built archives of the project artifacts"
    )
    _add_common_paths(jars_parser)
    jars_parser.add_argument(
        "--dist-dir",
        default=None,
        help="Build output root (default: config dist_dir)",
    )
    jars_parser.add_argument(
        "--eta-version",
        default=None,
        help="Eta compiler version (default: config eta_version)",
    )
    jars_parser.add_argument(
        "--only", choices=_KINDS, default=None, help="Select a single artifact kind"
    )
    jars_parser.add_argument(
        "--exclude",
        choices=_KINDS,
        action="append",
        default=[],
        help="Skip an artifact kind (repeatable)",
    )

    return parser


def _report_empty(root: Path, result: ParseResult) -> None:
    for issue in result.issues:
        sys.stderr.write(f"{root}: {issue}\n")
    if not result.issues:
        sys.stderr.write(f"{root}: project declares no artifacts\n")


def _handle_show(root: Path) -> int:
    result = parse_descriptor(root)
    if result.project.is_empty():
        _report_empty(root, result)
        return 1
    payload = result.project.model_dump(mode="json")
    sys.stdout.write(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode())
    sys.stdout.write("\n")
    return 0


def _handle_render(root: Path, source_dirs: list[str] | None, write: bool) -> int:
    config = load_config(root)
    project = parse_descriptor(root).project
    dirs = source_dirs if source_dirs is not None else config.source_directories
    if dirs:
        project = project.map_artifacts(
            lambda artifact: artifact.with_source_directories(dirs)
        )
    try:
        if write:
            path = write_descriptor(root, project)
            sys.stdout.write(f"{path}\n")
        else:
            sys.stdout.write(render_text(project))
    except InvalidProjectForWrite as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1
    return 0


def _handle_jars(
    root: Path,
    dist_dir: str | None,
    eta_version: str | None,
    only: str | None,
    exclude: list[str],
) -> int:
    config = load_config(root)
    version = eta_version or config.eta_version
    if version is None:
        sys.stderr.write("error: no eta version given (--eta-version or config)\n")
        return 2

    if dist_dir is None:
        dist = resolve_dist_dir(root, config.dist_dir)
    else:
        dist = Path(dist_dir).expanduser().resolve()

    predicate = KIND_FILTERS[only] if only is not None else all_
    for kind in exclude:
        predicate = and_(predicate, not_(KIND_FILTERS[kind]))

    result = parse_descriptor(root)
    if result.project.is_empty():
        _report_empty(root, result)
        return 1

    for jar in artifact_jars(
        result.project, dist, version, predicate, tool_prefix=config.tool_prefix
    ):
        sys.stdout.write(f"{jar}\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    root = Path(args.root).expanduser().resolve()

    try:
        if args.command == "show":
            return _handle_show(root)

        if args.command == "render":
            return _handle_render(root, args.source_dirs, args.write)

        if args.command == "jars":
            return _handle_jars(
                root, args.dist_dir, args.eta_version, args.only, args.exclude
            )
    except ConfigError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2

    raise AssertionError


if __name__ == "__main__":
    raise SystemExit(main())
