"""Bundled data files for archsetup."""
