"""Runtime layer: the flat translation backend and its supporting pieces.

Exports:
    FlatBackend: Per-locale flat translation store with alias-aware lookups
    FlattenConfig: Immutable backend configuration
    RWLock: Readers-writer lock used when thread_safe=True

Python 3.13+.
"""

from .backend import FlatBackend
from .config import FlattenConfig
from .rwlock import RWLock

__all__ = ["FlatBackend", "FlattenConfig", "RWLock"]
