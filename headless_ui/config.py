"""Persistent user preferences for the headless-ui command line.

The JSON object holds two keys: ``circular`` (bool, default wrap behavior for
new dropdowns) and ``intent_aliases`` (``{alias: intent}`` extra names for the
intent registry). A missing or broken file reads as no preferences at all.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "headless-ui"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Read the preferences object, or ``{}`` when it cannot be used.

    Unreadable files, invalid JSON, and top-level values other than an object
    all count as "no preferences".
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Write the preferences object, creating the config directory on demand.

    A read-only or missing config location leaves preferences unsaved.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        return


def load_circular_default() -> bool:
    """Return whether new dropdowns should wrap at the ends.

    Only an explicit JSON boolean under ``circular`` counts; anything else is
    ``False``.
    """
    value = load_config().get("circular")
    return value if isinstance(value, bool) else False


def save_circular_default(circular: bool) -> None:
    """Store ``circular`` while keeping other preference keys intact."""
    config = load_config()
    config["circular"] = bool(circular)
    save_config(config)


def load_intent_aliases() -> dict[str, str]:
    """Load ``intent_aliases``, dropping entries that are not non-empty strings.

    Targets are not checked here; the intent registry skips aliases whose
    target it does not know.
    """
    raw = load_config().get("intent_aliases")
    if not isinstance(raw, dict):
        return {}
    aliases: dict[str, str] = {}
    for alias, target in raw.items():
        if isinstance(alias, str) and isinstance(target, str) and alias and target:
            aliases[alias] = target
    return aliases


def save_intent_aliases(aliases: dict[str, str]) -> None:
    """Store aliases sorted by name while keeping other preference keys intact."""
    config = load_config()
    config["intent_aliases"] = dict(sorted(aliases.items()))
    save_config(config)
