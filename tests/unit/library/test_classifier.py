"""Unit tests for classification rules.

Tests for video/metadata predicates, the prefix matching rule and the
off-level check applied at library and studio level.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from vidsweep.library.classifier import (
    check_off_level_files,
    has_matching_video,
    is_directory,
    is_metadata_subdir,
    is_video_file,
    read_entries,
    split_extension,
    video_basename,
)
from vidsweep.library.models import CleanupResult, ScanLevel


class TestSplitExtension:
    """Tests for split_extension."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("movie.mkv", ("movie", ".mkv")),
            ("movie.part1.mkv", ("movie.part1", ".mkv")),
            ("README", ("README", "")),
            (".nfo", ("", ".nfo")),
            ("trailing.", ("trailing", ".")),
        ],
    )
    def test_splits_at_last_dot(self, name: str, expected: tuple[str, str]) -> None:
        """The extension starts at the last dot, including a leading one."""
        assert split_extension(name) == expected


class TestIsVideoFile:
    """Tests for is_video_file."""

    @pytest.mark.parametrize("name", ["a.mkv", "a.mp4", "a.avi", "a.m4v", "A.MKV", "b.Mp4"])
    def test_recognized_extensions(self, name: str) -> None:
        """All four video extensions match in any letter case."""
        assert is_video_file(name) is True

    @pytest.mark.parametrize("name", ["a.nfo", "a.jpg", "a.srt", "a.mov", "mkv", "a.mkv.part"])
    def test_other_extensions(self, name: str) -> None:
        """Anything else is not a video."""
        assert is_video_file(name) is False


class TestIsMetadataSubdir:
    """Tests for is_metadata_subdir."""

    def test_trickplay_suffix(self) -> None:
        """Names ending in .trickplay are metadata subdirectories."""
        assert is_metadata_subdir("movie.trickplay") is True
        assert is_metadata_subdir("Movie.TRICKPLAY") is True

    def test_other_names(self) -> None:
        """Other directory names are not metadata subdirectories."""
        assert is_metadata_subdir("extras") is False
        assert is_metadata_subdir("trickplay.old") is False


class TestHasMatchingVideo:
    """Tests for the basename prefix rule."""

    def test_exact_basename(self) -> None:
        """A sidecar with the same basename matches."""
        assert has_matching_video("movie.nfo", {"movie"}) is True

    def test_prefix_with_suffix(self) -> None:
        """A sidecar whose basename extends the video basename matches."""
        assert has_matching_video("movie-poster.jpg", {"movie"}) is True

    def test_case_insensitive(self) -> None:
        """Basenames are compared lowercased."""
        assert has_matching_video("MOVIE.NFO", {video_basename("Movie.mkv")}) is True

    def test_unrelated_name(self) -> None:
        """A sidecar for another title does not match."""
        assert has_matching_video("other.nfo", {"movie"}) is False

    def test_no_videos(self) -> None:
        """Nothing matches when there are no videos."""
        assert has_matching_video("movie.nfo", set()) is False

    def test_numbered_sibling_matches(self) -> None:
        """movie2.nfo matches movie.mkv because the rule is a plain prefix test."""
        assert has_matching_video("movie2.nfo", {"movie"}) is True

    def test_dotfile_has_empty_basename(self) -> None:
        """A dotfile has an empty basename, which only matches an empty video basename."""
        assert has_matching_video(".nfo", {"movie"}) is False
        assert has_matching_video(".nfo", {""}) is True


class TestReadEntries:
    """Tests for read_entries and is_directory."""

    def test_sorted_by_name(self, tmp_path: Path) -> None:
        """Entries are returned sorted by name."""
        for name in ["c", "a", "b"]:
            (tmp_path / name).write_text("")

        assert [e.name for e in read_entries(str(tmp_path))] == ["a", "b", "c"]

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        """A directory that cannot be listed raises OSError."""
        with pytest.raises(OSError):
            read_entries(str(tmp_path / "missing"))

    def test_symlink_to_directory_is_not_a_directory(self, tmp_path: Path) -> None:
        """Symlinks are never followed."""
        real = tmp_path / "real"
        real.mkdir()
        (tmp_path / "link").symlink_to(real, target_is_directory=True)

        entries = {e.name: e for e in read_entries(str(tmp_path))}

        assert is_directory(entries["real"]) is True
        assert is_directory(entries["link"]) is False


class TestCheckOffLevelFiles:
    """Tests for check_off_level_files."""

    def test_video_at_studio_level_is_warning(self, tmp_path: Path) -> None:
        """A video file outside a title folder is a structure warning."""
        (tmp_path / "movie.mkv").write_text("video")
        result = CleanupResult()

        check_off_level_files(str(tmp_path), ScanLevel.STUDIO, result)

        expected = os.path.join(str(tmp_path), "movie.mkv")
        assert result.structure_warnings == [
            f"Video file at studio level (should be in title folder): {expected}"
        ]
        assert result.orphaned_files == []

    def test_matching_metadata_is_warning(self, tmp_path: Path) -> None:
        """Metadata next to its video is misplaced, not orphaned."""
        (tmp_path / "movie.mkv").write_text("video")
        (tmp_path / "movie-poster.jpg").write_text("img")
        result = CleanupResult()

        check_off_level_files(str(tmp_path), ScanLevel.LIBRARY, result)

        expected = os.path.join(str(tmp_path), "movie-poster.jpg")
        assert (
            f"Metadata file at library level (should be in title folder): {expected}"
            in result.structure_warnings
        )
        assert len(result.structure_warnings) == 2
        assert result.orphaned_files == []

    def test_mixed_sidecars_and_unmatched_file(self, tmp_path: Path) -> None:
        """All sidecars of a video are misplaced; only deleted.nfo is orphaned."""
        for name in ["movie.mkv", "movie.nfo", "movie-poster.jpg", "Movie.NFO", "deleted.nfo"]:
            (tmp_path / name).write_text("")
        result = CleanupResult()

        check_off_level_files(str(tmp_path), ScanLevel.STUDIO, result)

        assert result.orphaned_files == [os.path.join(str(tmp_path), "deleted.nfo")]
        metadata_warnings = [
            w for w in result.structure_warnings if w.startswith("Metadata file at studio level")
        ]
        assert sorted(w.rsplit(os.sep, 1)[-1] for w in metadata_warnings) == [
            "Movie.NFO",
            "movie-poster.jpg",
            "movie.nfo",
        ]
        assert len(result.structure_warnings) == 4

    def test_unmatched_metadata_is_orphaned(self, tmp_path: Path) -> None:
        """Metadata without any matching video is an orphaned file."""
        (tmp_path / "leftover.nfo").write_text("<movie/>")
        result = CleanupResult()

        check_off_level_files(str(tmp_path), ScanLevel.STUDIO, result)

        assert result.orphaned_files == [os.path.join(str(tmp_path), "leftover.nfo")]
        assert result.structure_warnings == []

    def test_subdirectories_are_ignored(self, tmp_path: Path) -> None:
        """Directories are left to the studio and title passes."""
        (tmp_path / "Some Title").mkdir()
        result = CleanupResult()

        check_off_level_files(str(tmp_path), ScanLevel.STUDIO, result)

        assert result.is_clean

    def test_unreadable_directory_is_skipped(self, tmp_path: Path) -> None:
        """A read failure records nothing."""
        result = CleanupResult()

        with patch(
            "vidsweep.library.classifier.read_entries",
            side_effect=PermissionError("denied"),
        ):
            check_off_level_files(str(tmp_path), ScanLevel.LIBRARY, result)

        assert result.is_clean
