"""Reclaim disk space held by build and dependency directories."""

__version__ = "0.1.0"
