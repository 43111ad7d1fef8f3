"""Descriptor format constants.

Reserved sentinels and the fixed text layout shared by the parser and the
serializer live here so both sides agree on a single definition.
"""

from __future__ import annotations

# Reserved sentinels. Never valid as real project data.
NONAME = "<--noname-->"
NOVERSION = "<--noversion-->"

DESCRIPTOR_SUFFIX = ".cabal"

HASKELL98 = "Haskell98"
HASKELL2010 = "Haskell2010"

DEFAULT_EXECUTABLE_MAIN = "Main.hs"
DEFAULT_TEST_SUITE_MAIN = "Spec.hs"

CABAL_VERSION_CONSTRAINT = ">= 1.10"
BUILD_TYPE = "Simple"

# ---------------------------------------------------------------------------
# Serializer layout
# ---------------------------------------------------------------------------
# Header:   "name:          demo"        (label + colon padded to 15 columns)
# Field:    "  hs-source-dirs:   src"    (2-space indent, label padded to 18)
# Continue: "                  , app"    (18 spaces, then ", ")

HEADER_LABEL_WIDTH = 15
FIELD_INDENT = "  "
FIELD_LABEL_WIDTH = 18
CONTINUATION_PREFIX = " " * FIELD_LABEL_WIDTH + ", "

# Main class used by eta-compiled executables.
ETA_MAIN_CLASS = "eta.main"

__all__ = [
    "BUILD_TYPE",
    "CABAL_VERSION_CONSTRAINT",
    "CONTINUATION_PREFIX",
    "DEFAULT_EXECUTABLE_MAIN",
    "DEFAULT_TEST_SUITE_MAIN",
    "DESCRIPTOR_SUFFIX",
    "ETA_MAIN_CLASS",
    "FIELD_INDENT",
    "FIELD_LABEL_WIDTH",
    "HASKELL2010",
    "HASKELL98",
    "HEADER_LABEL_WIDTH",
    "NONAME",
    "NOVERSION",
]
