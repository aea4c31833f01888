"""Base classes for all collectors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar

T = TypeVar("T")
M = TypeVar("M")


class BaseCollector(ABC, Generic[M]):
    """A probe that builds one immutable snapshot model.

    Every field goes through :meth:`_field`, so a failing source only
    degrades that field to its sentinel; :meth:`collect` itself never raises
    (except for ``MemoryError``).
    """

    name: str = "base"

    def __init__(self) -> None:
        self.errors: list[str] = []

    @abstractmethod
    def _collect(self) -> M:
        """Implement in subclass to return the populated model."""
        ...

    def collect(self) -> M:
        self.errors = []
        return self._collect()

    def _field(self, label: str, getter: Callable[[], T], default: T) -> T:
        """Return ``getter()``, or *default* if it raises or yields ``None``."""
        try:
            value = getter()
        except MemoryError:
            raise
        except Exception as exc:  # noqa: BLE001
            self.errors.append(f"{self.name}.{label}: {exc}")
            return default
        if value is None:
            self.errors.append(f"{self.name}.{label}: unavailable")
            return default
        return value
