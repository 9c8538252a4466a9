"""
shop_orders.domain.repositories.base

Generic persistence contract shared by all aggregate repositories.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class RepositoryInterface(ABC, Generic[T]):
    @abstractmethod
    async def create(self, entity: T) -> None:
        """Persist a new aggregate."""

    @abstractmethod
    async def update(self, entity: T) -> None:
        """Overwrite the stored scalar fields of an existing aggregate."""

    @abstractmethod
    async def find(self, id: str) -> T:
        """Load an aggregate by id; raise a `NotFoundError` subclass when absent."""

    @abstractmethod
    async def find_all(self) -> list[T]:
        """Load every stored aggregate (empty list when none)."""


# --- Module Notes -----------------------------------------------------------
# Implementations receive their session from the caller and never commit.
