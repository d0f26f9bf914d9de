"""Immutable ordered list with a single current-item cursor."""

from .operations import (
    get_current_list_index,
    get_current_list_item,
    get_first_list_item,
    get_last_list_item,
    get_list_item,
    get_list_items,
    get_list_length,
    has_list_index,
    initialize_list,
    is_circular_list,
    is_current_list_item,
    is_first_list_item,
    is_last_list_item,
    next_list_item,
    previous_list_item,
    set_current,
)
from .types import ItemList

__all__ = [
    "ItemList",
    "get_current_list_index",
    "get_current_list_item",
    "get_first_list_item",
    "get_last_list_item",
    "get_list_item",
    "get_list_items",
    "get_list_length",
    "has_list_index",
    "initialize_list",
    "is_circular_list",
    "is_current_list_item",
    "is_first_list_item",
    "is_last_list_item",
    "next_list_item",
    "previous_list_item",
    "set_current",
]
