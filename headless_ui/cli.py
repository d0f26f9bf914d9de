"""Command-line front door for headless_ui.

Builds a dropdown from items, replays intents through a ``DropdownSession``
and prints the resulting state as plain text.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .config import load_circular_default, load_intent_aliases, save_circular_default
from .dropdown import Dropdown, dropdown_items, initialize_dropdown, is_active, is_open, is_selected
from .errors import InvalidIndexError, UnknownIntentError
from .intents import DropdownSession, default_intent_registry


def format_dropdown(dropdown: Dropdown[str]) -> str:
    """Render a state summary: open flag, then one marked row per item.

    ``>`` marks the active item and ``*`` the selected one.
    """
    lines = ["open" if is_open(dropdown) else "closed"]
    for item in dropdown_items(dropdown):
        active_marker = ">" if is_active(dropdown, item) else " "
        selected_marker = "*" if is_selected(dropdown, item) else " "
        lines.append(f"{active_marker}{selected_marker} {item}")
    return "\n".join(lines) + "\n"


def _read_stdin_items() -> list[str]:
    return [line.strip() for line in sys.stdin.read().splitlines() if line.strip()]


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, replay intents and print the final dropdown state."""
    parser = argparse.ArgumentParser(
        description="Replay dropdown intents over a list of items and print the resulting state."
    )
    parser.add_argument("items", nargs="*", help="Dropdown options. Read from stdin lines when omitted.")
    parser.add_argument("--default", default=None, help="Item selected initially.")
    parser.add_argument(
        "--circular",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Wrap navigation at the ends (default from config).",
    )
    parser.add_argument(
        "-i",
        "--intent",
        action="append",
        default=[],
        metavar="INTENT",
        help="Intent to apply, e.g. next, toggle, select:2. Repeatable.",
    )
    parser.add_argument("--save-circular", action="store_true", help="Persist --circular as the default.")
    parser.add_argument("--verbose", action="store_true", help="Log ignored intents to stderr.")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    items = args.items or _read_stdin_items()
    if not items:
        raise SystemExit("No items given.")

    circular = args.circular if args.circular is not None else load_circular_default()
    if args.save_circular:
        save_circular_default(circular)

    try:
        registry = default_intent_registry(load_intent_aliases(), strict=False)
        session = DropdownSession(
            initialize_dropdown(items, args.default, is_circular=circular),
            registry,
        )
        for intent in args.intent:
            session.dispatch_text(intent)
    except (InvalidIndexError, UnknownIntentError) as exc:
        raise SystemExit(str(exc)) from exc

    sys.stdout.write(format_dropdown(session.dropdown))


if __name__ == "__main__":
    main()
