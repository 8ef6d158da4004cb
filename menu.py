# menu.py - numbered console menu over injected magazines and subscribers
import logging
from typing import Callable, Dict

from observer import Magazine, Subscriber, ValidationError, describe_status

logger = logging.getLogger(__name__)

MAIN_OPTIONS = [
    ("1", "Subscribe someone to a magazine"),
    ("2", "Unsubscribe someone from a magazine"),
    ("3", "Publish new magazine issue"),
    ("4", "Show all subscribers"),
    ("5", "Show subscriber counts"),
    ("6", "Exit"),
]


class SubscriptionMenu:
    def __init__(self, magazines: Dict[str, Magazine], subscribers: Dict[str, Subscriber],
                 input_func: Callable[[str], str] = input, output: Callable[[str], None] = print):
        if not magazines:
            raise ValueError("SubscriptionMenu needs at least one magazine")
        self.magazines = magazines
        self.subscribers = subscribers
        self.input = input_func
        self.output = output

    def _range_hint(self, options) -> str:
        keys = list(options)
        return f"{keys[0]}-{keys[-1]}" if len(keys) > 1 else keys[0]

    def _choose(self, options: dict, prompt: str):
        """Ask for a key of options; returns None on an invalid answer."""
        choice = self.input(f"{prompt} ({self._range_hint(options)}): ").strip()
        if choice not in options:
            self.output(f"❌ Invalid choice. Please select {self._range_hint(options)}.")
            return None
        return options[choice]

    def show_main_menu(self):
        self.output("\n" + "=" * 50)
        self.output("🎯 MAGAZINE SUBSCRIPTION SYSTEM")
        self.output("=" * 50)
        for key, label in MAIN_OPTIONS:
            self.output(f"{key}. {label}")
        self.output("=" * 50)

    def handle_choice(self, choice: str) -> bool:
        """Process one main menu choice. Returns False when the session ends."""
        choice = choice.strip()

        if choice == "1":
            self.change_subscription("subscribe")
        elif choice == "2":
            self.change_subscription("unsubscribe")
        elif choice == "3":
            self.publish_issue()
        elif choice == "4":
            self.show_all_subscribers()
        elif choice == "5":
            self.show_subscriber_counts()
        elif choice == "6":
            self.output("\n👋 Goodbye!")
            return False
        else:
            self.output(f"❌ Invalid choice. Please select 1-{len(MAIN_OPTIONS)}.")
        return True

    def change_subscription(self, action: str):
        if not self.subscribers:
            self.output("❌ No subscribers available.")
            return

        self.output(f"\n--- WHO DO YOU WANT TO {action.upper()}? ---")
        for key, subscriber in self.subscribers.items():
            self.output(f"{key}. {subscriber.name}")
        subscriber = self._choose(self.subscribers, "Choose subscriber")
        if subscriber is None:
            return

        self.output(f"\n--- CHOOSE MAGAZINE TO {action.upper()} ---")
        for key, magazine in self.magazines.items():
            self.output(f"{key}. {magazine.name}")
        magazine = self._choose(self.magazines, "Choose magazine")
        if magazine is None:
            return

        if action == "subscribe":
            status = magazine.register(subscriber)
        else:
            status = magazine.unregister(subscriber)

        self.output(describe_status(status, subscriber.name, magazine.name))

    def publish_issue(self):
        self.output("\n--- WHICH MAGAZINE WANTS TO PUBLISH? ---")
        for key, magazine in self.magazines.items():
            self.output(f"{key}. {magazine.name} ({magazine.count()} subscribers)")
        magazine = self._choose(self.magazines, "Choose magazine")
        if magazine is None:
            return

        title = self.input("Enter the issue title: ")
        try:
            report = magazine.publish(title)
        except ValidationError as e:
            self.output(f"❌ Publishing failed: {e}")
            return

        self.output(f"\n📢 {magazine.name} published: \"{report.issue}\"")
        self.output(f"Notified {len(report.delivered)}/{report.attempted} subscribers")
        for name, error in report.failed:
            self.output(f"❌ Failed to notify {name}: {error}")

    def show_all_subscribers(self):
        self.output("\n" + "=" * 40)
        self.output("📋 ALL CURRENT SUBSCRIPTIONS")
        self.output("=" * 40)
        for magazine in self.magazines.values():
            self.output(f"\n📖 {magazine.name}:")
            names = magazine.names()
            if not names:
                self.output("   No subscribers yet")
            for name in names:
                self.output(f"   - {name}")

    def show_subscriber_counts(self):
        self.output("\n" + "=" * 40)
        self.output("📊 SUBSCRIBER STATISTICS")
        self.output("=" * 40)
        for magazine in self.magazines.values():
            self.output(f"📖 {magazine.name}: {magazine.count()} subscribers")

    def run(self):
        self.output("🎯 Welcome to the Observer Pattern Magazine System!")
        while True:
            self.show_main_menu()
            try:
                choice = self.input(f"Choose an option (1-{len(MAIN_OPTIONS)}): ")
                if not self.handle_choice(choice):
                    break
            except EOFError:
                logger.info("Input closed, leaving menu")
                break
