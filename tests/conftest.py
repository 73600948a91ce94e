"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

# Maps a path relative to the library root to its content.
# Entries ending in "/" are created as directories.
LibraryLayout = dict[str, str]


def build_tree(root: Path, layout: LibraryLayout) -> Path:
    """Create files and directories below root from a layout mapping."""
    root.mkdir(parents=True, exist_ok=True)
    for rel_path, content in layout.items():
        target = root / rel_path
        if rel_path.endswith("/"):
            target.mkdir(parents=True, exist_ok=True)
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content)
    return root


@pytest.fixture
def make_library(tmp_path: Path) -> Callable[..., Path]:
    """Factory building a library tree below tmp_path.

    Usage: ``make_library({"Studio/Title/movie.mkv": ""})``
    """

    def _make(layout: LibraryLayout, name: str = "library") -> Path:
        return build_tree(tmp_path / name, layout)

    return _make


@pytest.fixture
def healthy_layout() -> LibraryLayout:
    """A library where every title folder holds a video."""
    return {
        "Studio A/Movie One/movie one.mkv": "video",
        "Studio A/Movie One/movie one.nfo": "<movie/>",
        "Studio A/Movie One/movie one.trickplay/": "",
        "Studio B/Movie Two/movie two.MP4": "video",
        "Studio B/Movie Two/poster.jpg": "img",
    }


@pytest.fixture
def messy_layout() -> LibraryLayout:
    """A library with one finding of every category."""
    return {
        # orphaned folder: metadata only
        "Studio A/Deleted Movie/movie.nfo": "<movie/>",
        "Studio A/Deleted Movie/fanart.jpg": "img",
        # empty title folder
        "Studio A/Empty Title/": "",
        # healthy title with an unexpected subdirectory
        "Studio A/Good Movie/good.mkv": "video",
        "Studio A/Good Movie/extras/": "",
        # off-level files at studio level
        "Studio A/stray.mkv": "video",
        "Studio A/stray.nfo": "<movie/>",
        "Studio A/leftover.nfo": "<movie/>",
        # empty studio
        "Empty Studio/": "",
        # off-level orphan at library level
        "library.nfo": "<library/>",
    }
