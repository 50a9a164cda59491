# ABOUTME: Driver interfaces package exports
# ABOUTME: Exports the abstract contracts implemented by settings objects

from .freezable import AbstractFreezable

__all__ = [
    "AbstractFreezable",
]
