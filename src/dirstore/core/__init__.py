"""dirstore core package."""

from .store import DirStore

__all__ = ["DirStore"]
