"""Classification rules for library entries.

Pure predicates that decide whether a name is a video, a metadata
subdirectory, or metadata that belongs to a video, plus the off-level
rule applied to files found directly inside a library or studio folder.
"""

import logging
import os
from collections.abc import Iterable

from vidsweep.library.models import (
    METADATA_SUBDIR_SUFFIXES,
    VIDEO_EXTENSIONS,
    CleanupResult,
    ScanLevel,
)

logger = logging.getLogger(__name__)


def read_entries(path: str) -> list[os.DirEntry[str]]:
    """Read the entries of a directory, sorted by name.

    Entries are read fresh on every call.

    Raises:
        OSError: If the directory cannot be listed.
    """
    with os.scandir(path) as it:
        return sorted(it, key=lambda entry: entry.name)


def is_directory(entry: os.DirEntry[str]) -> bool:
    """Check whether an entry is a real directory (symlinks are not followed)."""
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def split_extension(name: str) -> tuple[str, str]:
    """Split a filename at its last dot.

    Unlike ``os.path.splitext``, a leading dot starts the extension, so
    ``".nfo"`` splits into ``("", ".nfo")``.

    Args:
        name: Filename without directory components.

    Returns:
        Tuple of (basename, extension). The extension keeps its dot and
        is empty when the name contains no dot.
    """
    idx = name.rfind(".")
    if idx == -1:
        return name, ""
    return name[:idx], name[idx:]


def is_video_file(name: str) -> bool:
    """Check if a filename has a recognized video extension (case-insensitive)."""
    return split_extension(name)[1].lower() in VIDEO_EXTENSIONS


def is_metadata_subdir(name: str) -> bool:
    """Check if a directory name ends with a recognized metadata suffix."""
    lowered = name.lower()
    return any(lowered.endswith(suffix) for suffix in METADATA_SUBDIR_SUFFIXES)


def video_basename(name: str) -> str:
    """Lowercased filename with its trailing extension removed."""
    return split_extension(name)[0].lower()


def has_matching_video(name: str, video_basenames: Iterable[str]) -> bool:
    """Check if a non-video file belongs to any video at the same level.

    A file matches when its lowercased basename starts with a video
    basename, so ``movie-poster.jpg`` and ``movie.nfo`` both match
    ``movie.mkv``. The prefix rule also matches ``movie2.nfo``.

    Args:
        name: Filename of the non-video file.
        video_basenames: Lowercased basenames of the videos at that level.

    Returns:
        True if any video basename is a prefix of the file's basename.
    """
    basename = video_basename(name)
    return any(basename.startswith(video) for video in video_basenames)


def check_off_level_files(dir_path: str, level: ScanLevel, result: CleanupResult) -> None:
    """Classify files found directly inside a library or studio folder.

    Video files and metadata with a matching video are reported as
    structure warnings. Metadata without a matching video is reported
    as an orphaned file. Subdirectories are ignored; they are walked
    separately. A directory that cannot be read is skipped silently.

    Args:
        dir_path: Library root or studio directory to inspect.
        level: Level label used in warning messages.
        result: Shared result to record findings into.
    """
    try:
        entries = read_entries(dir_path)
    except OSError as e:
        logger.debug("Skipping off-level check for %s: %s", dir_path, e)
        return

    files = [entry for entry in entries if not is_directory(entry)]
    video_basenames = {video_basename(entry.name) for entry in files if is_video_file(entry.name)}

    for entry in files:
        file_path = os.path.join(dir_path, entry.name)

        if is_video_file(entry.name):
            result.add_warning(
                f"Video file at {level.value} level (should be in title folder): {file_path}"
            )
        elif has_matching_video(entry.name, video_basenames):
            result.add_warning(
                f"Metadata file at {level.value} level (should be in title folder): {file_path}"
            )
        else:
            result.add_orphaned_file(file_path)
