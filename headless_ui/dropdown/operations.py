"""Pure queries and transitions over ``Dropdown`` values.

Every transition touches exactly one axis: visibility (toggle/open/close),
highlight (set_active/next/previous) or commitment (set_selected).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from ..errors import InvalidIndexError
from ..list_model import (
    get_current_list_index,
    get_current_list_item,
    get_list_item,
    get_list_items,
    get_list_length,
    has_list_index,
    initialize_list,
    next_list_item,
    previous_list_item,
    set_current,
)
from ..list_model.types import ItemList, T
from .types import Dropdown


def initialize_dropdown(
    options: Iterable[T],
    default_selected: T | None = None,
    is_circular: bool = False,
) -> Dropdown[T]:
    """Create a closed dropdown over ``options``.

    The selection starts on the first occurrence of ``default_selected`` and
    falls back to index 0 when it is omitted or not among the options.
    """
    item_list = initialize_list(options, is_circular)
    selected_index = 0
    if default_selected is not None:
        try:
            selected_index = get_list_items(item_list).index(default_selected)
        except ValueError:
            selected_index = 0
    return Dropdown(item_list=item_list, selected_index=selected_index, is_open=False)


def is_open(dropdown: Dropdown[T]) -> bool:
    return dropdown.is_open


def dropdown_items(dropdown: Dropdown[T]) -> tuple[T, ...]:
    return get_list_items(dropdown.item_list)


def dropdown_item(dropdown: Dropdown[T], index: int) -> T | None:
    """Return the option at ``index``, or ``None`` when out of range."""
    return get_list_item(dropdown.item_list, index)


def active_index(dropdown: Dropdown[T]) -> int:
    return get_current_list_index(dropdown.item_list)


def active(dropdown: Dropdown[T]) -> T | None:
    """Return the highlighted item."""
    return get_current_list_item(dropdown.item_list)


def selected_index(dropdown: Dropdown[T]) -> int:
    return dropdown.selected_index


def selected(dropdown: Dropdown[T]) -> T | None:
    """Return the committed item."""
    return dropdown_item(dropdown, dropdown.selected_index)


def is_active(dropdown: Dropdown[T], item: T) -> bool:
    return active(dropdown) == item


def is_selected(dropdown: Dropdown[T], item: T) -> bool:
    return selected(dropdown) == item


def toggle_dropdown(dropdown: Dropdown[T]) -> Dropdown[T]:
    return replace(dropdown, is_open=not dropdown.is_open)


def open_dropdown(dropdown: Dropdown[T]) -> Dropdown[T]:
    return dropdown if is_open(dropdown) else toggle_dropdown(dropdown)


def close_dropdown(dropdown: Dropdown[T]) -> Dropdown[T]:
    return toggle_dropdown(dropdown) if is_open(dropdown) else dropdown


def _with_list(dropdown: Dropdown[T], item_list: ItemList[T]) -> Dropdown[T]:
    if item_list is dropdown.item_list:
        return dropdown
    return replace(dropdown, item_list=item_list)


def set_active(dropdown: Dropdown[T], index: int) -> Dropdown[T]:
    """Highlight ``index`` without committing it; raises ``InvalidIndexError``."""
    return _with_list(dropdown, set_current(dropdown.item_list, index))


def next_dropdown_item(dropdown: Dropdown[T]) -> Dropdown[T]:
    return _with_list(dropdown, next_list_item(dropdown.item_list))


def previous_dropdown_item(dropdown: Dropdown[T]) -> Dropdown[T]:
    return _with_list(dropdown, previous_list_item(dropdown.item_list))


def set_selected(dropdown: Dropdown[T], index: int) -> Dropdown[T]:
    """Commit ``index`` as the selection.

    Raises ``InvalidIndexError`` for an index with no item. When the item at
    ``index`` already equals the selected item the same dropdown is returned.
    """
    if not has_list_index(dropdown.item_list, index):
        raise InvalidIndexError(index, get_list_length(dropdown.item_list))
    if dropdown_item(dropdown, index) == selected(dropdown):
        return dropdown
    return replace(dropdown, selected_index=index)


def select_active_dropdown_item(dropdown: Dropdown[T]) -> Dropdown[T]:
    """Commit whatever item is currently highlighted."""
    return set_selected(dropdown, active_index(dropdown))
