"""Downloads file server — list, hash, serve and delete downloaded files."""

__version__ = "0.1.0"
