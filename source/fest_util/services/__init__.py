"""This module initializes the services package.

It re-exports the services to provide a flatter import structure.
"""

from fest_util.services.collection import CollectionService

__all__ = [
    "CollectionService",
]
