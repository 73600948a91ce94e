"""Cleanup deletion operator.

Deletes the findings of a completed scan. Order matters: orphaned
folders first (recursive), then orphaned files, then empty folders in
reverse discovery order, so that paths already removed together with a
parent are skipped instead of failing.
"""

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

from vidsweep.library.models import Category, CleanupResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CleanupActionResult:
    """Result of a single deletion.

    Attributes:
        path: Path that was operated on.
        category: Category the path was classified as.
        success: Whether the operation completed successfully.
        error: Error message if the operation failed, None otherwise.
    """

    path: str
    category: Category
    success: bool
    error: str | None = None

    @property
    def failed(self) -> bool:
        return not self.success


class CleanupOperator:
    """Deletes orphaned folders, orphaned files and empty folders.

    Structure warnings are never touched.
    """

    def execute(self, result: CleanupResult) -> list[CleanupActionResult]:
        """Delete every deletable finding of a scan result.

        Failures are isolated per path; a failed deletion never stops
        the remaining ones.

        Args:
            result: Completed scan result.

        Returns:
            One CleanupActionResult per attempted path. Files and empty
            folders that no longer exist are skipped without a result.
        """
        results: list[CleanupActionResult] = []

        for folder in result.orphaned_folders:
            results.append(self._remove_tree(folder))

        for file in result.orphaned_files:
            if not _exists(file):
                logger.debug("Already gone, skipping: %s", file)
                continue
            results.append(self._remove_file(file))

        for folder in reversed(result.empty_folders):
            if not _exists(folder):
                logger.debug("Already gone, skipping: %s", folder)
                continue
            results.append(self._remove_empty_dir(folder))

        return results

    def _remove_tree(self, path: str) -> CleanupActionResult:
        """Recursively delete an orphaned title folder."""
        category = Category.ORPHANED_FOLDER
        if not Path(path).is_dir():
            return self._failure(path, category, f"Path does not exist: {path}")

        try:
            shutil.rmtree(path)
        except OSError as e:
            return self._failure(path, category, str(e))
        return self._success(path, category)

    def _remove_file(self, path: str) -> CleanupActionResult:
        """Delete an orphaned off-level file."""
        category = Category.ORPHANED_FILE
        try:
            Path(path).unlink()
        except OSError as e:
            return self._failure(path, category, str(e))
        return self._success(path, category)

    def _remove_empty_dir(self, path: str) -> CleanupActionResult:
        """Delete an empty folder (fails if it gained entries since the scan)."""
        category = Category.EMPTY_FOLDER
        try:
            Path(path).rmdir()
        except OSError as e:
            return self._failure(path, category, str(e))
        return self._success(path, category)

    @staticmethod
    def _success(path: str, category: Category) -> CleanupActionResult:
        logger.info("Deleted %s", path)
        return CleanupActionResult(path=path, category=category, success=True)

    @staticmethod
    def _failure(path: str, category: Category, error: str) -> CleanupActionResult:
        logger.warning("Failed to delete %s: %s", path, error)
        return CleanupActionResult(path=path, category=category, success=False, error=error)


def _exists(path: str) -> bool:
    target = Path(path)
    return target.exists() or target.is_symlink()
