"""List value datatype shared by list and dropdown modules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ItemList(Generic[T]):
    """Ordered items with one current-index cursor.

    ``items`` is always a tuple so old and new values never share mutable
    storage.
    """

    items: tuple[T, ...]
    current_index: int = 0
    is_circular: bool = False


__all__ = [
    "ItemList",
    "T",
]
