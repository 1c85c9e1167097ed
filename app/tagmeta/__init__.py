"""tagmeta - Read image keywords and create shortcuts from shell paths."""

__version__ = "0.1.0"
