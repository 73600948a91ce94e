"""vidsweep - Find and remove leftovers of deleted videos in media libraries."""

__version__ = "0.1.0"
