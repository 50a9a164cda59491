# ABOUTME: Abstract freeze contract shared by settings objects and nested setting values
# ABOUTME: Defines the one-way mutable-to-immutable transition that parents apply to nested values

from abc import ABC, abstractmethod
from typing import Self


class AbstractFreezable(ABC):
    """
    [L0] Abstract base class for values that can be frozen into immutable snapshots.

    A freezable value starts out mutable, is configured by a single owner, and is
    then frozen exactly once. After freezing it behaves as a value type: it never
    changes, hashes consistently, and may be shared freely between threads.

    Settings objects rely on this contract when freezing: any field value that is
    an `AbstractFreezable` is replaced by its `frozen_copy()` so that a frozen
    settings object never transitively references mutable state.
    """

    @property
    @abstractmethod
    def is_frozen(self) -> bool:
        """
        Whether the value has been frozen.

        The flag is monotonic: once True it never becomes False again.
        """
        pass

    @abstractmethod
    def freeze(self) -> Self:
        """
        Freeze this value in place.

        Freezing an already frozen value is a no-op.

        Returns:
            Self: This same instance, now frozen.
        """
        pass

    @abstractmethod
    def frozen_copy(self) -> Self:
        """
        Return a frozen equivalent of this value without freezing it.

        Returns:
            Self: This instance if already frozen, otherwise a frozen clone.
        """
        pass

    @abstractmethod
    def clone(self) -> Self:
        """
        Return a new, unfrozen copy of this value.

        Returns:
            Self: A mutable copy that shares no frozen state with the original.
        """
        pass
