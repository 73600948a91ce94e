"""Bundled data files for vidsweep."""
