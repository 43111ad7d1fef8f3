from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import tomllib
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from layout.dist import DEFAULT_TOOL_PREFIX

CONFIG_FILENAME = "etacabal.toml"

_VERSION_PATTERN = re.compile(r"\d+(\.\d+)*")


class EtaCabalConfig(BaseModel):
    """Configuration for descriptor rendering and build output lookup."""

    model_config = ConfigDict(extra="forbid")

    dist_dir: str = Field(
        default="dist",
        description="Build output root, relative to the project root",
    )
    eta_version: str | None = Field(
        default=None,
        description="Version of the eta compiler that produced the build output",
    )
    tool_prefix: str = Field(
        default=DEFAULT_TOOL_PREFIX,
        description="Compiler directory prefix inside <dist>/build",
    )
    source_directories: list[str] = Field(
        default_factory=list,
        description="Source directories applied to every artifact when rendering",
    )

    @field_validator("eta_version")
    @classmethod
    def validate_eta_version(cls, v: str | None) -> str | None:
        if v is not None and not _VERSION_PATTERN.fullmatch(v):
            msg = f"eta_version must be a dotted numeric version, got '{v}'"
            raise ValueError(msg)
        return v

    @field_validator("tool_prefix")
    @classmethod
    def validate_tool_prefix(cls, v: str) -> str:
        if not v or "/" in v or "\\" in v:
            msg = "tool_prefix must be a non-empty single path segment"
            raise ValueError(msg)
        return v

    @field_validator("source_directories", mode="before")
    @classmethod
    def validate_source_directories(cls, v: Any) -> Any:
        """Reject absolute source directories.

        Note: runs in `mode="before"` to report the raw TOML value.
        """
        if v is None:
            return []
        if not isinstance(v, list):
            msg = "source_directories must be a list of relative paths"
            raise ValueError(msg)
        for entry in v:
            if not isinstance(entry, str) or not entry:
                msg = "source_directories entries must be non-empty strings"
                raise ValueError(msg)
            if Path(entry).is_absolute():
                msg = f"source directory '{entry}' must be relative"
                raise ValueError(msg)
        return v


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


def resolve_dist_dir(root: Path, dist_dir: str) -> Path:
    """Resolve the build output root named by ``dist_dir``.

    The eta toolchain writes its archives beneath the project, so the
    directory is given relative to ``root`` and may not leave it.
    """
    candidate = Path(dist_dir)
    if not dist_dir or dist_dir.startswith("~") or candidate.is_absolute():
        msg = (
            f"dist_dir '{dist_dir}' must name a build directory "
            "relative to the project root"
        )
        raise ConfigError(msg)

    try:
        project_root = root.resolve()
        dist = (project_root / candidate).resolve()
    except OSError as exc:
        msg = f"Cannot resolve build directory '{dist_dir}': {exc}"
        raise ConfigError(msg) from exc

    if not dist.is_relative_to(project_root):
        msg = f"dist_dir '{dist_dir}' points outside the project at {dist}"
        raise ConfigError(msg)

    return dist


def load_config(root: Path) -> EtaCabalConfig:
    """Read etacabal.toml from the project root; defaults apply when it is absent."""
    config_path = root / CONFIG_FILENAME

    if not config_path.is_file():
        return EtaCabalConfig()

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        msg = f"Cannot read {CONFIG_FILENAME} in {root}: {exc}"
        raise ConfigError(msg) from exc

    try:
        return EtaCabalConfig.model_validate(data)
    except ValidationError as exc:
        msg = f"Rejected {CONFIG_FILENAME} in {root}: {exc}"
        raise ConfigError(msg) from exc
