"""Media library scanning and cleanup module.

This module provides the classification rules, the concurrent library
scanner, the shared result aggregator, and deletion operations for
the library domain.
"""

from vidsweep.library.classifier import (
    check_off_level_files,
    has_matching_video,
    is_metadata_subdir,
    is_video_file,
)
from vidsweep.library.models import (
    METADATA_SUBDIR_SUFFIXES,
    VIDEO_EXTENSIONS,
    Category,
    CleanupResult,
    ScanLevel,
)
from vidsweep.library.operator import CleanupActionResult, CleanupOperator
from vidsweep.library.scanner import (
    DEFAULT_WORKERS,
    LibraryScanner,
    process_studio,
    process_title_folder,
    scan_libraries,
)

__all__ = [
    "DEFAULT_WORKERS",
    "METADATA_SUBDIR_SUFFIXES",
    "VIDEO_EXTENSIONS",
    "Category",
    "CleanupActionResult",
    "CleanupOperator",
    "CleanupResult",
    "LibraryScanner",
    "ScanLevel",
    "check_off_level_files",
    "has_matching_video",
    "is_metadata_subdir",
    "is_video_file",
    "process_studio",
    "process_title_folder",
    "scan_libraries",
]
