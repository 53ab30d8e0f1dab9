"""Tools for reading LTSV (Labeled Tab-Separated Values) data."""

__version__ = "0.1.0"
