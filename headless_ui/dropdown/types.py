"""Dropdown value datatype."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic

from ..list_model.types import ItemList, T


@dataclass(frozen=True)
class Dropdown(Generic[T]):
    """Open/closed flag plus a committed selection layered over an ``ItemList``.

    The list cursor is the active (highlighted) item; ``selected_index`` is the
    committed choice. The two move independently.
    """

    item_list: ItemList[T]
    selected_index: int = 0
    is_open: bool = False


__all__ = ["Dropdown"]
