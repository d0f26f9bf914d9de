"""Public package surface for headless_ui.

Immutable list and dropdown state models plus the intent layer that drives
them. Every transition returns a new value and never mutates its input.
"""

from __future__ import annotations

from .dropdown import (
    Dropdown,
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
from .errors import BoundaryError, HeadlessUIError, InvalidIndexError, UnknownIntentError
from .intents import DropdownSession, IntentBinding, IntentRegistry, default_intent_registry
from .list_model import (
    ItemList,
    get_current_list_index,
    get_current_list_item,
    get_first_list_item,
    get_last_list_item,
    get_list_item,
    get_list_items,
    get_list_length,
    initialize_list,
    is_circular_list,
    is_current_list_item,
    is_first_list_item,
    is_last_list_item,
    next_list_item,
    previous_list_item,
    set_current,
)


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "BoundaryError",
    "Dropdown",
    "DropdownSession",
    "HeadlessUIError",
    "IntentBinding",
    "IntentRegistry",
    "InvalidIndexError",
    "ItemList",
    "UnknownIntentError",
    "active",
    "active_index",
    "close_dropdown",
    "default_intent_registry",
    "dropdown_item",
    "dropdown_items",
    "get_current_list_index",
    "get_current_list_item",
    "get_first_list_item",
    "get_last_list_item",
    "get_list_item",
    "get_list_items",
    "get_list_length",
    "initialize_dropdown",
    "initialize_list",
    "is_active",
    "is_circular_list",
    "is_current_list_item",
    "is_first_list_item",
    "is_last_list_item",
    "is_open",
    "is_selected",
    "main",
    "next_dropdown_item",
    "next_list_item",
    "open_dropdown",
    "previous_dropdown_item",
    "previous_list_item",
    "select_active_dropdown_item",
    "selected",
    "selected_index",
    "set_active",
    "set_current",
    "set_selected",
    "toggle_dropdown",
]
