"""Pure queries and transitions over ``ItemList`` values.

Edge predicates compare by item equality rather than by index, so a list with
repeated values treats every copy of the last item as "last".
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from ..errors import BoundaryError, InvalidIndexError
from .types import ItemList, T


def initialize_list(items: Iterable[T], is_circular: bool = False) -> ItemList[T]:
    """Create a list with the cursor on the first item."""
    if items is None:
        raise TypeError("initialize_list() requires an items sequence")
    return ItemList(items=tuple(items), current_index=0, is_circular=bool(is_circular))


def get_list_items(item_list: ItemList[T]) -> tuple[T, ...]:
    return item_list.items


def get_list_length(item_list: ItemList[T]) -> int:
    return len(item_list.items)


def has_list_index(item_list: ItemList[T], index: int) -> bool:
    """Return whether ``index`` resolves to an existing item."""
    return 0 <= index < get_list_length(item_list)


def get_list_item(item_list: ItemList[T], index: int) -> T | None:
    """Return item at ``index`` or ``None`` when out of range (negative included)."""
    if not has_list_index(item_list, index):
        return None
    return item_list.items[index]


def get_first_list_item(item_list: ItemList[T]) -> T | None:
    return get_list_item(item_list, 0)


def get_last_list_item(item_list: ItemList[T]) -> T | None:
    return get_list_item(item_list, get_list_length(item_list) - 1)


def get_current_list_index(item_list: ItemList[T]) -> int:
    return item_list.current_index


def get_current_list_item(item_list: ItemList[T]) -> T | None:
    return get_list_item(item_list, get_current_list_index(item_list))


def is_first_list_item(item_list: ItemList[T], item: T) -> bool:
    return get_first_list_item(item_list) == item


def is_last_list_item(item_list: ItemList[T], item: T) -> bool:
    return get_last_list_item(item_list) == item


def is_current_list_item(item_list: ItemList[T], item: T) -> bool:
    return get_current_list_item(item_list) == item


def is_circular_list(item_list: ItemList[T]) -> bool:
    return item_list.is_circular


def set_current(item_list: ItemList[T], index: int) -> ItemList[T]:
    """Move the cursor to ``index``.

    Raises ``InvalidIndexError`` when ``index`` has no item. Returns
    ``item_list`` itself when the target item already equals the current one.
    """
    if not has_list_index(item_list, index):
        raise InvalidIndexError(index, get_list_length(item_list))
    if get_list_item(item_list, index) == get_current_list_item(item_list):
        return item_list
    return replace(item_list, current_index=index)


def next_list_item(item_list: ItemList[T]) -> ItemList[T]:
    """Advance the cursor, wrapping to the start only for circular lists."""
    if not item_list.items:
        raise BoundaryError("next")
    at_last = is_last_list_item(item_list, get_current_list_item(item_list))
    if at_last and not item_list.is_circular:
        raise BoundaryError("next")
    return replace(
        item_list,
        current_index=0 if at_last else get_current_list_index(item_list) + 1,
    )


def previous_list_item(item_list: ItemList[T]) -> ItemList[T]:
    """Rewind the cursor, wrapping to the end only for circular lists."""
    if not item_list.items:
        raise BoundaryError("previous")
    at_first = is_first_list_item(item_list, get_current_list_item(item_list))
    if at_first and not item_list.is_circular:
        raise BoundaryError("previous")
    return replace(
        item_list,
        current_index=(get_list_length(item_list) if at_first else get_current_list_index(item_list)) - 1,
    )
