"""Tests for intent registry dispatch and the dropdown session holder."""

from __future__ import annotations

import unittest

from headless_ui.dropdown import active, initialize_dropdown, is_open, selected
from headless_ui.errors import InvalidIndexError, UnknownIntentError
from headless_ui.intents import (
    DropdownSession,
    IntentBinding,
    IntentRegistry,
    default_intent_registry,
    normalize_intent_name,
    parse_intent,
)


class IntentRegistryTests(unittest.TestCase):
    def test_dispatch_unknown_name_returns_none(self) -> None:
        registry = IntentRegistry()

        self.assertIsNone(registry.dispatch("next", initialize_dropdown(["a"])))

    def test_names_are_normalized(self) -> None:
        registry = default_intent_registry()
        dropdown = initialize_dropdown(["a", "b"])

        self.assertEqual(normalize_intent_name("  Select-Active "), "select_active")
        self.assertTrue(is_open(registry.dispatch("TOGGLE", dropdown)))

    def test_later_binding_overrides_earlier(self) -> None:
        registry = IntentRegistry().register_bindings(
            IntentBinding(("go",), lambda dropdown: dropdown),
            IntentBinding(("go",), lambda dropdown: None),
        )

        self.assertIsNone(registry.dispatch("go", initialize_dropdown(["a"])))
        self.assertEqual(registry.names(), ["go"])

    def test_argument_count_is_checked(self) -> None:
        registry = default_intent_registry()
        dropdown = initialize_dropdown(["a", "b"])

        with self.assertRaises(UnknownIntentError):
            registry.dispatch("select", dropdown)
        with self.assertRaises(UnknownIntentError):
            registry.dispatch("next", dropdown, 1)

    def test_aliases_reuse_target_transition(self) -> None:
        registry = default_intent_registry({"j": "next", "pick": "select"})
        dropdown = initialize_dropdown(["a", "b", "c"])

        self.assertEqual(active(registry.dispatch("j", dropdown)), "b")
        self.assertEqual(selected(registry.dispatch("pick", dropdown, 2)), "c")

    def test_alias_to_unknown_intent_raises(self) -> None:
        with self.assertRaises(UnknownIntentError):
            default_intent_registry({"x": "explode"})

    def test_non_strict_registry_skips_alias_to_unknown_intent(self) -> None:
        with self.assertLogs("headless_ui.intents", level="DEBUG") as logs:
            registry = default_intent_registry({"x": "explode", "j": "next"}, strict=False)

        self.assertIsNone(registry.lookup("x"))
        self.assertIsNotNone(registry.lookup("j"))
        self.assertIn("Skipping alias 'x'", logs.output[0])

    def test_tab_and_shift_tab_move_highlight(self) -> None:
        registry = default_intent_registry()
        dropdown = registry.dispatch("tab", initialize_dropdown(["a", "b", "c"]))

        self.assertEqual(active(dropdown), "b")
        self.assertEqual(active(registry.dispatch("Shift-Tab", dropdown)), "a")


class ParseIntentTests(unittest.TestCase):
    def test_plain_and_argument_forms(self) -> None:
        self.assertEqual(parse_intent("next"), ("next", ()))
        self.assertEqual(parse_intent("select:2"), ("select", (2,)))

    def test_invalid_forms_raise(self) -> None:
        with self.assertRaises(UnknownIntentError):
            parse_intent("select:two")
        with self.assertRaises(UnknownIntentError):
            parse_intent(":1")


class DropdownSessionTests(unittest.TestCase):
    def test_dispatch_replaces_held_value(self) -> None:
        session = DropdownSession(initialize_dropdown(["a", "b", "c"]))
        before = session.dropdown

        self.assertTrue(session.dispatch("open"))
        self.assertTrue(session.dispatch("next"))
        self.assertTrue(session.dispatch("select_active"))

        self.assertTrue(is_open(session.dropdown))
        self.assertEqual(selected(session.dropdown), "b")
        self.assertFalse(is_open(before))

    def test_boundary_error_is_ignored(self) -> None:
        session = DropdownSession(initialize_dropdown(["a", "b"]))
        before = session.dropdown

        with self.assertLogs("headless_ui.intents", level="DEBUG") as logs:
            self.assertFalse(session.dispatch("previous"))

        self.assertIs(session.dropdown, before)
        self.assertIn("Ignoring previous intent", logs.output[0])

    def test_no_op_transition_reports_unchanged(self) -> None:
        session = DropdownSession(initialize_dropdown(["a", "b"]))

        self.assertFalse(session.dispatch("close"))
        self.assertFalse(session.dispatch("select", 0))

    def test_invalid_index_propagates(self) -> None:
        session = DropdownSession(initialize_dropdown(["a", "b"]))

        with self.assertRaises(InvalidIndexError):
            session.dispatch("activate", 9)

    def test_unknown_intent_raises(self) -> None:
        session = DropdownSession(initialize_dropdown(["a"]))

        with self.assertRaises(UnknownIntentError):
            session.dispatch("explode")

    def test_dispatch_text_parses_arguments(self) -> None:
        session = DropdownSession(initialize_dropdown(["a", "b", "c"]))

        self.assertTrue(session.dispatch_text("hover:2"))
        self.assertEqual(active(session.dropdown), "c")


if __name__ == "__main__":
    unittest.main()
