"""Filesystem root used for stub mappings and response body files."""

from dataclasses import dataclass
from pathlib import Path

from mock_server.bootstrap.config import FILES_ROOT, MAPPINGS_ROOT


@dataclass(frozen=True)
class SingleRootFileSource:
    """A directory tree anchored at a single root path."""

    root: str

    @property
    def path(self) -> Path:
        return Path(self.root)

    def child(self, name: str) -> "SingleRootFileSource":
        """Return a file source rooted at a subdirectory of this one."""
        return SingleRootFileSource((self.path / name).as_posix())

    @property
    def mappings(self) -> "SingleRootFileSource":
        return self.child(MAPPINGS_ROOT)

    @property
    def files(self) -> "SingleRootFileSource":
        return self.child(FILES_ROOT)

    def __str__(self) -> str:
        return self.root
