"""Tests for schema document location and repo-root discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from packages.readdo_contracts import (
    DirectorySchemaSource,
    RepoRootNotFound,
    RepoSchemaSource,
    SchemaName,
    find_repo_root,
)

_MARKER = "docs/contracts/schemas"


def _make_repo(root: Path) -> Path:
    """Create a fake repo with a schema folder and a nested module directory."""
    (root / _MARKER).mkdir(parents=True)
    nested = root / "packages" / "readdo_contracts"
    nested.mkdir(parents=True)
    return nested


def test_find_repo_root_walks_upward_to_marker_directory(tmp_path: Path) -> None:
    """The nearest ancestor holding the schema folder is the repo root."""
    nested = _make_repo(tmp_path)

    assert find_repo_root(nested) == tmp_path.resolve()


def test_find_repo_root_raises_when_filesystem_root_reached(tmp_path: Path) -> None:
    """A missing marker anywhere up the tree is a deployment defect."""
    with pytest.raises(RepoRootNotFound) as exc_info:
        find_repo_root(tmp_path, marker_dir="readdo-absent-marker/schemas")

    assert exc_info.value.start_dir == tmp_path
    assert "Unable to locate repo root" in str(exc_info.value)


def test_repo_schema_source_resolves_schema_paths(tmp_path: Path) -> None:
    """Schema names map to ``<name>.schema.json`` under the discovered folder."""
    nested = _make_repo(tmp_path)
    source = RepoSchemaSource(start_dir=nested)

    assert source.path_for(SchemaName.ITEM) == tmp_path.resolve() / _MARKER / "item.schema.json"
    assert (
        source.path_for(SchemaName.ARTIFACT_ENVELOPE).name
        == "artifact-envelope.schema.json"
    )


def test_repo_schema_source_walks_only_once(tmp_path: Path) -> None:
    """The resolved directory is remembered even if the tree changes later."""
    nested = _make_repo(tmp_path)
    source = RepoSchemaSource(start_dir=nested)
    first = source.directory

    (tmp_path / _MARKER).rmdir()

    assert source.directory == first
    assert source.path_for(SchemaName.SCORE) == first / "score.schema.json"


def test_default_repo_schema_source_finds_shipped_schemas() -> None:
    """Walking up from the installed package reaches the shipped documents."""
    source = RepoSchemaSource()

    for name in SchemaName:
        assert source.path_for(name).is_file(), name


def test_directory_schema_source_uses_fixed_directory(tmp_path: Path) -> None:
    """An injected directory is used verbatim with no filesystem walk."""
    source = DirectorySchemaSource(tmp_path / "schemas")

    assert source.directory == tmp_path / "schemas"
    assert source.path_for(SchemaName.TODOS) == tmp_path / "schemas" / "todos.schema.json"
