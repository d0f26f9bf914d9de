"""Dropdown state model: visibility and committed selection over a list."""

from .operations import (
    active,
    active_index,
    close_dropdown,
    dropdown_item,
    dropdown_items,
    initialize_dropdown,
    is_active,
    is_open,
    is_selected,
    next_dropdown_item,
    open_dropdown,
    previous_dropdown_item,
    select_active_dropdown_item,
    selected,
    selected_index,
    set_active,
    set_selected,
    toggle_dropdown,
)
from .types import Dropdown

__all__ = [
    "Dropdown",
    "active",
    "active_index",
    "close_dropdown",
    "dropdown_item",
    "dropdown_items",
    "initialize_dropdown",
    "is_active",
    "is_open",
    "is_selected",
    "next_dropdown_item",
    "open_dropdown",
    "previous_dropdown_item",
    "select_active_dropdown_item",
    "selected",
    "selected_index",
    "set_active",
    "set_selected",
    "toggle_dropdown",
]
