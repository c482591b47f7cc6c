"""Local working directory for generated documentation artifacts.

This module provides the ArtifactStore class that holds transient OpenAPI JSON
inputs and the durable rendered HTML pages in a single directory. Presence of
a file is the only freshness signal used by callers.
"""

import shutil
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

import structlog

# Get logger for this module
logger = structlog.get_logger(__name__)


@dataclass
class ArtifactStore:
    """File-based artifact store rooted at one working directory."""

    workdir: str

    @property
    def root(self) -> Path:
        return Path(self.workdir)

    def ensure_dir(self) -> Path:
        """Create the working directory if it doesn't exist yet."""
        if not self.root.exists():
            self.root.mkdir(parents=True, exist_ok=True)
            logger.info("OPENAPI_WORKDIR_CREATED", workdir=self.workdir)
        return self.root

    def path(self, file_name: str) -> Path:
        return self.root / file_name

    def exists(self, file_name: str) -> bool:
        return self.path(file_name).is_file()

    def store(self, file_name: str, content: str) -> Path:
        """Write content to a file, replacing any existing file of that name.

        Args:
            file_name: Name of the file inside the working directory.
            content: Text content to write.

        Returns:
            Path of the written file.
        """
        self.ensure_dir()
        target = self.path(file_name)
        target.write_text(content, encoding="utf-8")
        logger.debug("ARTIFACT_STORED", file=file_name, size=len(content))
        return target

    def move(self, source: Path, file_name: str) -> Path:
        """Move a file into the store under a new name, overwriting the target."""
        target = self.path(file_name)
        source.replace(target)
        return target

    def remove(self, path: Path) -> bool:
        """Delete a file, logging rather than raising on failure.

        Returns:
            True if a file was deleted.
        """
        if not path.exists():
            return False
        try:
            path.unlink()
        except OSError as e:
            logger.warning("ARTIFACT_DELETE_FAILED", file=path.name, error=str(e))
            return False
        logger.info("ARTIFACT_DELETED", file=path.name)
        return True

    @contextmanager
    def scratch(self, name: str) -> Iterator[Path]:
        """Provide an empty output directory that is removed afterwards.

        Each artifact key gets its own scratch directory, so renderer outputs
        with fixed names never collide between keys.
        """
        scratch_dir = self.path(f".{name}")
        if scratch_dir.exists():
            shutil.rmtree(scratch_dir, ignore_errors=True)
        scratch_dir.mkdir(parents=True)
        try:
            yield scratch_dir
        finally:
            try:
                shutil.rmtree(scratch_dir)
            except OSError as e:
                logger.warning(
                    "SCRATCH_DIR_DELETE_FAILED",
                    directory=str(scratch_dir),
                    error=str(e),
                )
