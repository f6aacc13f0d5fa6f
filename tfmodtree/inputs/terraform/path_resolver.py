"""Terraform module path resolution service.

This module resolves the `source` of a module call against the directory of
the calling module. Resolution is best effort: a path that cannot be
canonicalized is still returned, in its joined form.
"""

from pathlib import Path

from tfmodtree.utils.logging import get_logger

logger = get_logger(__name__)


class ModulePathResolver:
    """Resolves module call sources to module directories.

    Stateless service. Terraform already validated the sources when it
    planned, so a failure here only reflects local filesystem drift and must
    not stop the tree from being built.
    """

    @staticmethod
    def join(caller_dir: Path, source: str) -> Path:
        """Join a declared source onto the caller directory without touching disk."""
        return Path(caller_dir) / source

    @staticmethod
    def resolve(caller_dir: Path, source: str) -> Path:
        """Resolve a module source to its canonical directory.

        Args:
            caller_dir: Directory of the calling module
            source: Source path as declared in the module block

        Returns:
            The canonical path if it exists on disk, otherwise the joined path
        """
        joined = ModulePathResolver.join(caller_dir, source)
        try:
            return joined.resolve(strict=True)
        except (OSError, RuntimeError, ValueError) as e:
            logger.debug(f"Could not canonicalize {joined}, using it as is: {e}")
            return joined

    @staticmethod
    def relative_to_project(path: Path, project_dir: Path) -> Path | None:
        """Path relative to the project directory, or None if it lies outside."""
        try:
            return path.relative_to(project_dir)
        except ValueError:
            return None
