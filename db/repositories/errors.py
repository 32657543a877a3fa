"""
Repository-layer exceptions.
"""

from __future__ import annotations


class RepositoryError(Exception):
    """Base exception for repository failures."""


class EntityNotFoundError(RepositoryError):
    """Raised when a required row does not exist."""
