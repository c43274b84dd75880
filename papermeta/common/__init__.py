"""Common utilities for papermeta document processing."""

from . import regex_patterns

__all__ = ["regex_patterns"]
