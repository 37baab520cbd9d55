"""featuregen: IDE single file generator for feature files."""

__version__ = "0.1.0"
