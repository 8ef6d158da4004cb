from observer import Subscriber, require_notification


class ConsoleSubscriber(Subscriber):
    """Subscriber that prints its notifications to the console."""

    def format_notification(self, magazine_name: str, issue: str) -> str:
        raise NotImplementedError

    def notify(self, magazine_name: str, issue: str) -> str:
        magazine_name, issue = require_notification(magazine_name, issue)
        message = self.format_notification(magazine_name, issue)
        print(message)
        return message


class Reader(ConsoleSubscriber):
    kind = "Reader"

    def format_notification(self, magazine_name, issue):
        return f"📧 {self.name} received notification: {magazine_name} - \"{issue}\""


class Library(ConsoleSubscriber):
    """Institutional subscriber ordering issues for its members."""

    kind = "Library"

    def format_notification(self, magazine_name, issue):
        return f"📚 {self.name} ordered: {magazine_name} - \"{issue}\" for public access"
