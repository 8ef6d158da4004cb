import logging
import unittest
from unittest import mock

from console_observer import Library, Reader
from menu import SubscriptionMenu
from observer import Magazine


class ScriptedInput:
    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


class SubscriptionMenuTest(unittest.TestCase):
    def setUp(self):
        self.magazines = {"1": Magazine("Tech Weekly"), "2": Magazine("Cooking Today")}
        self.subscribers = {"1": Reader("John"), "2": Reader("Alice"), "3": Library("City Library")}
        self.lines = []

    def make_menu(self, answers):
        self.input = ScriptedInput(answers)
        return SubscriptionMenu(self.magazines, self.subscribers,
                                input_func=self.input, output=self.lines.append)

    def output(self):
        return "\n".join(self.lines)

    def test_subscribe_and_unsubscribe(self):
        menu = self.make_menu(["1", "1", "1", "1", "2", "1", "2", "1", "1", "6"])
        menu.run()
        self.assertEqual(self.magazines["1"].names(), ["Alice"])
        self.assertIn("✅ John subscribed to Tech Weekly", self.output())
        self.assertIn("❌ John unsubscribed from Tech Weekly", self.output())
        self.assertIn("👋 Goodbye!", self.output())

    def test_duplicate_and_absent_are_reported(self):
        menu = self.make_menu(["1", "1", "1", "1", "1", "1", "2", "3", "2", "6"])
        menu.run()
        self.assertEqual(self.magazines["1"].count(), 1)
        self.assertIn("John is already subscribed to Tech Weekly", self.output())
        self.assertIn("City Library is not subscribed to Cooking Today", self.output())

    def test_invalid_choices_reprompt(self):
        menu = self.make_menu(["9", "1", "7", "1", "1", "5", "6"])
        menu.run()
        self.assertIn("❌ Invalid choice. Please select 1-6.", self.output())
        self.assertIn("❌ Invalid choice. Please select 1-3.", self.output())
        self.assertIn("❌ Invalid choice. Please select 1-2.", self.output())
        self.assertEqual(self.magazines["1"].count(), 0)

    def test_publish_issue(self):
        self.magazines["1"].register(self.subscribers["1"])
        menu = self.make_menu(["3", "1", "  Issue 1  ", "6"])
        with mock.patch("builtins.print") as printed:
            menu.run()
        printed.assert_called_once_with('📧 John received notification: Tech Weekly - "Issue 1"')
        self.assertIn('📢 Tech Weekly published: "Issue 1"', self.output())
        self.assertIn("Notified 1/1 subscribers", self.output())

    def test_publish_blank_title_keeps_running(self):
        menu = self.make_menu(["3", "1", "   ", "5", "6"])
        menu.run()
        self.assertIn("❌ Publishing failed: Issue title cannot be empty", self.output())
        self.assertIn("📖 Tech Weekly: 0 subscribers", self.output())

    def test_show_all_subscribers(self):
        self.magazines["2"].register(self.subscribers["3"])
        menu = self.make_menu(["4", "6"])
        menu.run()
        self.assertIn("📖 Tech Weekly:\n   No subscribers yet", self.output())
        self.assertIn("📖 Cooking Today:\n   - City Library", self.output())

    def test_end_of_input_leaves_loop(self):
        menu = self.make_menu(["5"])
        with self.assertLogs("menu", level="INFO"):
            menu.run()
        self.assertIn("📖 Cooking Today: 0 subscribers", self.output())

    def test_status_lines_not_repeated_by_registry_logs(self):
        menu = self.make_menu(["1", "1", "1", "3", "1", "Issue 1", "6"])
        with mock.patch("builtins.print"), self.assertLogs("observer", level="DEBUG") as logs:
            menu.run()
        self.assertEqual(self.lines.count("✅ John subscribed to Tech Weekly"), 1)
        self.assertEqual({record.levelno for record in logs.records}, {logging.DEBUG})

    def test_handle_choice_exit(self):
        menu = self.make_menu([])
        self.assertFalse(menu.handle_choice(" 6 "))
        self.assertTrue(menu.handle_choice("x"))

    def test_requires_magazines(self):
        with self.assertRaises(ValueError):
            SubscriptionMenu({}, self.subscribers)


if __name__ == "__main__":
    unittest.main()
