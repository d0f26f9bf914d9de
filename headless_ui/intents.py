"""Intent dispatch: semantic action names mapped onto dropdown transitions.

A host translates raw input (keys, clicks, hovers) into intent names and lets
``DropdownSession`` swap its held value for the transition result.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic

from .dropdown import (
    Dropdown,
    close_dropdown,
    next_dropdown_item,
    open_dropdown,
    previous_dropdown_item,
    select_active_dropdown_item,
    set_active,
    set_selected,
    toggle_dropdown,
)
from .errors import BoundaryError, UnknownIntentError
from .list_model.types import T

logger = logging.getLogger(__name__)

Transition = Callable[..., Dropdown]


def normalize_intent_name(name: str) -> str:
    """Fold case, whitespace and dashes so ``Select-Active`` matches ``select_active``."""
    return name.strip().lower().replace("-", "_")


@dataclass(frozen=True)
class IntentBinding:
    """Mapping from one or more intent names to a single transition.

    ``arity`` is the number of integer arguments the transition takes after
    the dropdown itself.
    """

    names: tuple[str, ...]
    transition: Transition
    arity: int = 0


class IntentRegistry:
    """Small intent-dispatch table with optional name normalization."""

    def __init__(self, normalize: Callable[[str], str] | None = None) -> None:
        self._normalize = normalize if normalize is not None else normalize_intent_name
        self._bindings: dict[str, IntentBinding] = {}

    def register_binding(self, binding: IntentBinding) -> IntentRegistry:
        """Register one binding, overwriting existing bindings for same names."""
        for name in binding.names:
            self._bindings[self._normalize(name)] = binding
        return self

    def register_bindings(self, *bindings: IntentBinding) -> IntentRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def lookup(self, name: str) -> IntentBinding | None:
        """Return binding registered for normalized ``name``, if any."""
        return self._bindings.get(self._normalize(name))

    def names(self) -> list[str]:
        """Return registered (normalized) intent names in sorted order."""
        return sorted(self._bindings)

    def dispatch(self, name: str, dropdown: Dropdown[T], *args: int) -> Dropdown[T] | None:
        """Apply transition bound to ``name``; ``None`` when nothing is bound.

        Raises ``UnknownIntentError`` when argument count does not match.
        """
        binding = self.lookup(name)
        if binding is None:
            return None
        if len(args) != binding.arity:
            raise UnknownIntentError(
                f"Intent {name!r} takes {binding.arity} argument(s), got {len(args)}"
            )
        return binding.transition(dropdown, *args)


DEFAULT_BINDINGS = (
    IntentBinding(("toggle",), toggle_dropdown),
    IntentBinding(("open",), open_dropdown),
    IntentBinding(("close", "escape"), close_dropdown),
    IntentBinding(("next", "down", "tab"), next_dropdown_item),
    IntentBinding(("previous", "prev", "up", "shift_tab"), previous_dropdown_item),
    IntentBinding(("activate", "hover"), set_active, arity=1),
    IntentBinding(("select", "click"), set_selected, arity=1),
    IntentBinding(("select_active", "enter"), select_active_dropdown_item),
)


def default_intent_registry(
    aliases: dict[str, str] | None = None,
    strict: bool = True,
) -> IntentRegistry:
    """Build registry with standard intents plus ``alias -> intent`` extras.

    An alias whose target is not a standard intent raises
    ``UnknownIntentError`` when ``strict``; otherwise it is logged and skipped.
    """
    registry = IntentRegistry().register_bindings(*DEFAULT_BINDINGS)
    for alias, target in (aliases or {}).items():
        binding = registry.lookup(target)
        if binding is None:
            if not strict:
                logger.debug("Skipping alias %r: unknown intent %r", alias, target)
                continue
            raise UnknownIntentError(f"Alias {alias!r} points at unknown intent {target!r}")
        registry.register_binding(IntentBinding((alias,), binding.transition, binding.arity))
    return registry


def parse_intent(text: str) -> tuple[str, tuple[int, ...]]:
    """Split ``name[:arg,...]`` into intent name and integer arguments."""
    name, sep, raw_args = text.partition(":")
    name = name.strip()
    if not name:
        raise UnknownIntentError(f"Empty intent: {text!r}")
    if not sep:
        return name, ()
    args: list[int] = []
    for part in raw_args.split(","):
        try:
            args.append(int(part.strip()))
        except ValueError as exc:
            raise UnknownIntentError(f"Invalid intent argument in {text!r}") from exc
    return name, tuple(args)


class DropdownSession(Generic[T]):
    """Mutable holder that replaces its dropdown value on every intent.

    Boundary hits are treated as ignored intents; invalid indexes propagate.
    """

    def __init__(self, dropdown: Dropdown[T], registry: IntentRegistry | None = None) -> None:
        self.dropdown = dropdown
        self.registry = registry if registry is not None else default_intent_registry()

    def dispatch(self, name: str, *args: int) -> bool:
        """Apply intent ``name`` and return whether the held value changed."""
        try:
            updated = self.registry.dispatch(name, self.dropdown, *args)
        except BoundaryError as exc:
            logger.debug("Ignoring %s intent: %s", name, exc)
            return False
        if updated is None:
            raise UnknownIntentError(f"Unknown intent: {name!r}")
        if updated == self.dropdown:
            return False
        self.dropdown = updated
        return True

    def dispatch_text(self, text: str) -> bool:
        """Parse ``name[:arg,...]`` and dispatch it like ``dispatch``."""
        name, args = parse_intent(text)
        return self.dispatch(name, *args)
