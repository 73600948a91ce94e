"""Library scanner for orphaned and empty media folders.

Walks the fixed library/studio/title layout. Studio folders of one
library root are processed in parallel by a pool of worker threads
draining a shared queue; title folders inside a studio are processed
sequentially by the worker that owns the studio. All findings go into
a single shared CleanupResult.
"""

import logging
import os
import queue
import stat
import threading
from collections.abc import Iterable
from pathlib import Path

from vidsweep.library.classifier import (
    check_off_level_files,
    is_directory,
    is_metadata_subdir,
    is_video_file,
    read_entries,
)
from vidsweep.library.models import CleanupResult, ScanLevel

logger = logging.getLogger(__name__)

DEFAULT_WORKERS: int = 10

# Queued once per worker to signal that no more studios follow
_STOP = None


def process_title_folder(title_path: str, result: CleanupResult) -> None:
    """Classify a single title folder.

    An empty folder is recorded as empty. A folder without any video
    file is recorded as orphaned as a whole, whatever else it contains.
    Subdirectories that are not recognized metadata subdirectories are
    reported as structure warnings, one per subdirectory.

    Args:
        title_path: Path of the title folder.
        result: Shared result to record findings into.
    """
    try:
        entries = read_entries(title_path)
    except OSError as e:
        result.add_warning(f"Cannot read title directory: {title_path} ({e})")
        return

    if not entries:
        result.add_empty_folder(title_path)
        return

    has_video = False
    unexpected_subdirs: list[str] = []

    for entry in entries:
        if is_directory(entry):
            if not is_metadata_subdir(entry.name):
                unexpected_subdirs.append(entry.name)
            continue

        if is_video_file(entry.name):
            has_video = True

    for subdir in unexpected_subdirs:
        result.add_warning(
            f"Unexpected subdirectory in title folder: {os.path.join(title_path, subdir)}"
        )

    if not has_video:
        result.add_orphaned_folder(title_path)


def process_studio(studio_path: str, result: CleanupResult) -> None:
    """Check a studio's off-level files, then classify each title folder.

    Args:
        studio_path: Path of the studio folder.
        result: Shared result to record findings into.
    """
    check_off_level_files(studio_path, ScanLevel.STUDIO, result)

    try:
        entries = read_entries(studio_path)
    except OSError as e:
        result.add_warning(f"Cannot read studio directory: {studio_path} ({e})")
        return

    for entry in entries:
        # Files at studio level were handled by the off-level check
        if not is_directory(entry):
            continue
        process_title_folder(os.path.join(studio_path, entry.name), result)


def is_dir_empty(path: str) -> bool:
    """Check whether a directory has no entries.

    Raises:
        OSError: If the directory cannot be listed.
    """
    with os.scandir(path) as it:
        return next(it, None) is None


class LibraryScanner:
    """Scans library roots for cleanup candidates.

    One scanner may scan several roots in sequence; every root writes
    into the same shared result. Path validation failures are collected
    in :attr:`errors` and logged instead of being raised.

    Args:
        result: Shared result that all findings are recorded into.
        workers: Number of worker threads per library root. Zero means
            no studio folder is processed; negative values count as zero.
    """

    def __init__(self, result: CleanupResult, *, workers: int = DEFAULT_WORKERS) -> None:
        self._result = result
        self._workers = max(workers, 0)
        self.errors: list[str] = []

    @property
    def result(self) -> CleanupResult:
        return self._result

    @property
    def workers(self) -> int:
        return self._workers

    def scan(self, library_path: str | Path) -> bool:
        """Scan one library root.

        Checks off-level files at the root, processes all studio folders
        in parallel, waits for every worker, then records studio folders
        that have no entries as empty.

        Args:
            library_path: Library root directory.

        Returns:
            True if the root was scanned, False if it failed validation.
        """
        root = os.fspath(library_path)

        error = self._validate_root(root)
        if error is not None:
            logger.debug("Skipping library: %s", error)
            self.errors.append(error)
            return False

        logger.info("Scanning library %s with %d worker(s)", root, self._workers)

        check_off_level_files(root, ScanLevel.LIBRARY, self._result)

        try:
            entries = read_entries(root)
        except OSError as e:
            error = f"Error reading library directory {root}: {e}"
            logger.debug("Skipping library: %s", error)
            self.errors.append(error)
            return False

        studio_dirs = [os.path.join(root, entry.name) for entry in entries if is_directory(entry)]
        logger.debug("Dispatching %d studio folder(s) from %s", len(studio_dirs), root)

        self._run_workers(studio_dirs)

        # Runs only after every worker has joined
        for studio_path in studio_dirs:
            try:
                empty = is_dir_empty(studio_path)
            except OSError:
                continue
            if empty:
                self._result.add_empty_folder(studio_path)

        logger.info("Finished library %s: %s", root, self._format_counts())
        return True

    def _run_workers(self, studio_dirs: list[str]) -> None:
        """Process studio folders on a fixed pool of worker threads.

        The queue is filled and terminated with one stop marker per
        worker before waiting, so a pool of zero workers returns at once.

        Args:
            studio_dirs: Studio folder paths to process.
        """
        work: queue.Queue[str | None] = queue.Queue()
        for studio_path in studio_dirs:
            work.put(studio_path)
        for _ in range(self._workers):
            work.put(_STOP)

        threads = [
            threading.Thread(
                target=self._worker,
                args=(work,),
                name=f"vidsweep-worker-{i}",
                daemon=True,
            )
            for i in range(self._workers)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

    def _worker(self, work: queue.Queue[str | None]) -> None:
        """Pull studio folders from the queue until a stop marker arrives."""
        while True:
            studio_path = work.get()
            if studio_path is _STOP:
                return
            process_studio(studio_path, self._result)

    @staticmethod
    def _validate_root(root: str) -> str | None:
        """Validate that a library root exists and is a directory.

        Returns:
            An error message, or None if the root is usable.
        """
        try:
            info = os.stat(root)
        except OSError as e:
            return f"Error accessing library path {root}: {e}"

        if not stat.S_ISDIR(info.st_mode):
            return f"Library path is not a directory: {root}"
        return None

    def _format_counts(self) -> str:
        counts = self._result.counts()
        return ", ".join(f"{category.value}={count}" for category, count in counts.items())


def scan_libraries(
    library_paths: Iterable[str | Path],
    result: CleanupResult,
    *,
    workers: int = DEFAULT_WORKERS,
) -> LibraryScanner:
    """Scan several library roots in sequence into one shared result.

    Args:
        library_paths: Library roots to scan, in order.
        result: Shared result that all findings are recorded into.
        workers: Worker threads per library root.

    Returns:
        The scanner used, whose ``errors`` list holds validation failures.
    """
    scanner = LibraryScanner(result, workers=workers)
    for path in library_paths:
        scanner.scan(path)
    return scanner
