"""Descriptor parsing."""

from parse.descriptor import (
    ParseResult,
    fold_lines,
    parse_descriptor,
    parse_lines,
    parse_text,
    step,
)

__all__ = [
    "ParseResult",
    "fold_lines",
    "parse_descriptor",
    "parse_lines",
    "parse_text",
    "step",
]
