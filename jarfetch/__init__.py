"""Resolve Java build artifacts from a remote repository into a local one."""

__version__ = "0.1.0"
