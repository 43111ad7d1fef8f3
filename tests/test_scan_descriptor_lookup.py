from __future__ import annotations

from typing import TYPE_CHECKING

from scan.files import find_descriptor_candidates, find_descriptor_file

if TYPE_CHECKING:
    from pathlib import Path


def test_finds_single_descriptor(tmp_path: Path) -> None:
    (tmp_path / "demo.cabal").write_text("", encoding="utf-8")
    (tmp_path / "cabal.project").write_text("", encoding="utf-8")
    (tmp_path / "Setup.hs").write_text("", encoding="utf-8")

    assert find_descriptor_file(tmp_path) == tmp_path / "demo.cabal"


def test_ignores_directories_and_nested_files(tmp_path: Path) -> None:
    (tmp_path / "pkg.cabal").mkdir()
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "nested.cabal").write_text("", encoding="utf-8")

    assert find_descriptor_candidates(tmp_path) == []
    assert find_descriptor_file(tmp_path) is None


def test_multiple_candidates_are_not_picked(tmp_path: Path) -> None:
    for name in ("zeta.cabal", "alpha.cabal"):
        (tmp_path / name).write_text("", encoding="utf-8")

    assert [p.name for p in find_descriptor_candidates(tmp_path)] == [
        "alpha.cabal",
        "zeta.cabal",
    ]
    assert find_descriptor_file(tmp_path) is None


def test_missing_directory_has_no_candidates(tmp_path: Path) -> None:
    assert find_descriptor_candidates(tmp_path / "missing") == []
