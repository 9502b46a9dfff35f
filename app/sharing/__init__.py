"""
HR Dashboard - Sharing
Persistence for the shared-with-HR relation.
"""

from .store import ShareStore

__all__ = ["ShareStore"]
