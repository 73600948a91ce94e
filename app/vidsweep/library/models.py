"""Library domain models for cleanup classification.

This module defines the fixed classification constants, the category
and level enums, and the shared result aggregator that scan workers
write into concurrently.
"""

import threading
from enum import Enum
from typing import Any

# Lowercased extensions that identify a video file
VIDEO_EXTENSIONS: frozenset[str] = frozenset({".mkv", ".mp4", ".avi", ".m4v"})

# Lowercased directory-name suffixes expected alongside a video in a title folder
METADATA_SUBDIR_SUFFIXES: tuple[str, ...] = (".trickplay",)


class Category(str, Enum):
    """Classification category of a finding.

    Attributes:
        ORPHANED_FOLDER: Title folder with metadata but no video file.
        ORPHANED_FILE: Off-level metadata file with no matching video.
        EMPTY_FOLDER: Title or studio folder without any entries.
        STRUCTURE_WARNING: Layout deviation that is reported but never deleted.
    """

    ORPHANED_FOLDER = "orphaned_folder"
    ORPHANED_FILE = "orphaned_file"
    EMPTY_FOLDER = "empty_folder"
    STRUCTURE_WARNING = "structure_warning"


class ScanLevel(str, Enum):
    """Directory level above the title folders.

    Only used for message text; the off-level rule is identical for both.
    """

    LIBRARY = "library"
    STUDIO = "studio"


class CleanupResult:
    """Shared accumulator for classification findings.

    Holds four append-only sequences guarded by a single lock. Workers
    call the ``add_*`` methods concurrently; the lock is held only for
    the append itself. Readers must wait until every scan has finished,
    after which the read properties return consistent snapshots.

    Order within each sequence reflects arrival order from concurrent
    workers and is not deterministic. Use :meth:`sorted` for a stable view.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._orphaned_folders: list[str] = []
        self._orphaned_files: list[str] = []
        self._empty_folders: list[str] = []
        self._structure_warnings: list[str] = []

    def add_orphaned_folder(self, path: str) -> None:
        """Record a title folder that has no video file."""
        with self._lock:
            self._orphaned_folders.append(path)

    def add_orphaned_file(self, path: str) -> None:
        """Record an off-level metadata file without a matching video."""
        with self._lock:
            self._orphaned_files.append(path)

    def add_empty_folder(self, path: str) -> None:
        """Record a folder with no entries."""
        with self._lock:
            self._empty_folders.append(path)

    def add_warning(self, message: str) -> None:
        """Record a structure warning message."""
        with self._lock:
            self._structure_warnings.append(message)

    @property
    def orphaned_folders(self) -> list[str]:
        with self._lock:
            return list(self._orphaned_folders)

    @property
    def orphaned_files(self) -> list[str]:
        with self._lock:
            return list(self._orphaned_files)

    @property
    def empty_folders(self) -> list[str]:
        with self._lock:
            return list(self._empty_folders)

    @property
    def structure_warnings(self) -> list[str]:
        with self._lock:
            return list(self._structure_warnings)

    def counts(self) -> dict[Category, int]:
        """Return the number of entries per category."""
        with self._lock:
            return {
                Category.ORPHANED_FOLDER: len(self._orphaned_folders),
                Category.ORPHANED_FILE: len(self._orphaned_files),
                Category.EMPTY_FOLDER: len(self._empty_folders),
                Category.STRUCTURE_WARNING: len(self._structure_warnings),
            }

    @property
    def deletable_count(self) -> int:
        """Number of findings eligible for deletion (warnings excluded)."""
        counts = self.counts()
        return (
            counts[Category.ORPHANED_FOLDER]
            + counts[Category.ORPHANED_FILE]
            + counts[Category.EMPTY_FOLDER]
        )

    @property
    def is_clean(self) -> bool:
        """True when the scan produced no findings at all."""
        return not any(self.counts().values())

    def sorted(self) -> "CleanupResult":
        """Return a new result with every sequence sorted lexically."""
        snapshot = CleanupResult()
        with self._lock:
            snapshot._orphaned_folders = sorted(self._orphaned_folders)
            snapshot._orphaned_files = sorted(self._orphaned_files)
            snapshot._empty_folders = sorted(self._empty_folders)
            snapshot._structure_warnings = sorted(self._structure_warnings)
        return snapshot

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        with self._lock:
            return {
                Category.ORPHANED_FOLDER.value: list(self._orphaned_folders),
                Category.ORPHANED_FILE.value: list(self._orphaned_files),
                Category.EMPTY_FOLDER.value: list(self._empty_folders),
                Category.STRUCTURE_WARNING.value: list(self._structure_warnings),
            }
