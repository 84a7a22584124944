"""Schema sources: resolve a logical schema name to its JSON document path.

Two sources are provided. ``RepoSchemaSource`` walks upward from a start
directory until it finds the schema storage folder, and remembers the result
for its lifetime. ``DirectorySchemaSource`` reads from a fixed directory and is
what tests and explicit deployments inject.
"""

from __future__ import annotations

from pathlib import Path
from threading import Lock
from typing import Protocol

from packages.readdo_shared.config import DEFAULT_SCHEMA_MARKER_DIR
from packages.readdo_shared.logging import get_logger, log_context
from packages.readdo_shared.logging import fields

from .errors import RepoRootNotFound
from .names import SchemaName

_LOGGER = get_logger(__name__)


class SchemaSource(Protocol):
    """Locate the schema document for one logical schema name."""

    def path_for(self, name: SchemaName) -> Path:
        """Return the filesystem path of the schema document for ``name``."""


def find_repo_root(start_dir: Path, *, marker_dir: str = DEFAULT_SCHEMA_MARKER_DIR) -> Path:
    """Return the nearest ancestor of ``start_dir`` containing ``marker_dir``.

    Raises ``RepoRootNotFound`` when the filesystem root is reached first.
    """
    current = start_dir.resolve()
    while True:
        if (current / marker_dir).is_dir():
            return current
        parent = current.parent
        if parent == current:
            raise RepoRootNotFound(
                message=f"Unable to locate repo root from: {start_dir}",
                start_dir=start_dir,
            )
        current = parent


class DirectorySchemaSource:
    """Schema source bound to one explicit directory."""

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        """Return the directory schema documents are read from."""
        return self._directory

    def path_for(self, name: SchemaName) -> Path:
        """Return ``<directory>/<name>.schema.json``."""
        return self._directory / name.filename


class RepoSchemaSource:
    """Schema source discovered by walking upward from a start directory."""

    def __init__(
        self,
        *,
        start_dir: str | Path | None = None,
        marker_dir: str = DEFAULT_SCHEMA_MARKER_DIR,
    ) -> None:
        self._start_dir = Path(start_dir) if start_dir is not None else Path(__file__).parent
        self._marker_dir = marker_dir
        self._directory: Path | None = None
        self._lock = Lock()

    @property
    def directory(self) -> Path:
        """Return the resolved schema directory, walking upward on first use."""
        if self._directory is None:
            with self._lock:
                if self._directory is None:
                    root = find_repo_root(self._start_dir, marker_dir=self._marker_dir)
                    self._directory = root / self._marker_dir
                    with log_context(
                        {
                            fields.EVENT: fields.SCHEMA_DIR_RESOLVED_EVENT,
                            fields.SCHEMA_DIR: self._directory,
                        }
                    ):
                        _LOGGER.debug("Resolved schema directory")
        return self._directory

    def path_for(self, name: SchemaName) -> Path:
        """Return the schema document path under the discovered directory."""
        return self.directory / name.filename
