"""Runtime support shared by the localization package.

Python 3.13+.
"""

from .rwlock import RWLock

__all__ = ["RWLock"]
