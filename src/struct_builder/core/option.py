"""Python optional wrapper used by materialized builders.

``Option[T]`` is either ``Some(value)`` or the ``NOTHING`` singleton. The
wrapper's empty value is ``NOTHING``; builders start optional storage there.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Option(ABC, Generic[T]):
    __slots__ = ()

    @abstractmethod
    def is_some(self) -> bool: ...

    def is_nothing(self) -> bool:
        return not self.is_some()

    @abstractmethod
    def unwrap_or(self, default: T) -> T: ...


@dataclass(frozen=True)
class Some(Option[T]):
    value: T

    def is_some(self) -> bool:
        return True

    def unwrap_or(self, default: T) -> T:
        return self.value


class _Nothing(Option[Any]):
    __slots__ = ()
    _instance: "_Nothing | None" = None

    def __new__(cls) -> "_Nothing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_some(self) -> bool:
        return False

    def unwrap_or(self, default: T) -> T:
        return default

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOTHING"

    def __reduce__(self) -> str:
        return "NOTHING"


NOTHING = _Nothing()
