"""Bundled data files for tagmeta."""
