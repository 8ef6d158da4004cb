# observer.py
import logging
import threading
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)


class ValidationError(ValueError):
    """Raised when a required name or title is missing or blank."""


class DeliveryError(Exception):
    """Raised by a subscriber that could not deliver a notification."""


def require_text(value, what: str) -> str:
    """Return value trimmed, or raise ValidationError if it is empty."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{what} cannot be empty")
    return value.strip()


def require_notification(magazine_name, issue) -> Tuple[str, str]:
    """Validate the arguments every Subscriber.notify receives."""
    if not isinstance(magazine_name, str) or not magazine_name.strip() \
            or not isinstance(issue, str) or not issue.strip():
        raise ValidationError("Magazine name and issue cannot be empty")
    return magazine_name.strip(), issue.strip()


class SubscriptionStatus(Enum):
    SUBSCRIBED = "subscribed"
    ALREADY_SUBSCRIBED = "already subscribed"
    UNSUBSCRIBED = "unsubscribed"
    NOT_SUBSCRIBED = "not subscribed"


def describe_status(status: SubscriptionStatus, subscriber_name: str, magazine_name: str) -> str:
    """One-line, human readable outcome of register/unregister."""
    if status is SubscriptionStatus.SUBSCRIBED:
        return f"✅ {subscriber_name} subscribed to {magazine_name}"
    if status is SubscriptionStatus.UNSUBSCRIBED:
        return f"❌ {subscriber_name} unsubscribed from {magazine_name}"
    return f"⚠️  {subscriber_name} is {status.value} to {magazine_name}"


class Subscriber:
    """Subscriber interface."""

    kind = "Subscriber"

    def __init__(self, name: str):
        self._name = require_text(name, f"{self.kind} name")
        self._subscriber_id = uuid.uuid4().hex

    @property
    def name(self) -> str:
        return self._name

    @property
    def subscriber_id(self) -> str:
        return self._subscriber_id

    def notify(self, magazine_name: str, issue: str):
        raise NotImplementedError("Subscriber subclasses must implement 'notify' method.")

    def __repr__(self):
        return f"{type(self).__name__}({self._name!r})"


@dataclass
class DeliveryReport:
    magazine: str
    issue: str
    delivered: List[str] = field(default_factory=list)
    failed: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return len(self.delivered) + len(self.failed)

    @property
    def ok(self) -> bool:
        return not self.failed


class Magazine:
    """Publisher holding an ordered registry of subscribers."""

    def __init__(self, name: str):
        self._name = require_text(name, "Magazine name")
        self._subscribers: List[Subscriber] = []
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    def _index_of(self, subscriber: Subscriber) -> Optional[int]:
        for index, current in enumerate(self._subscribers):
            if current.subscriber_id == subscriber.subscriber_id:
                return index
        return None

    @staticmethod
    def _check_subscriber(subscriber):
        if subscriber is None:
            raise ValidationError("Subscriber cannot be None")
        if not isinstance(subscriber, Subscriber):
            raise TypeError(f"Expected a Subscriber, got {type(subscriber).__name__}")

    def register(self, subscriber: Subscriber) -> SubscriptionStatus:
        self._check_subscriber(subscriber)
        with self._lock:
            if self._index_of(subscriber) is not None:
                status = SubscriptionStatus.ALREADY_SUBSCRIBED
            else:
                self._subscribers.append(subscriber)
                status = SubscriptionStatus.SUBSCRIBED

        logger.debug(describe_status(status, subscriber.name, self._name))
        return status

    def unregister(self, subscriber: Subscriber) -> SubscriptionStatus:
        self._check_subscriber(subscriber)
        with self._lock:
            index = self._index_of(subscriber)
            if index is None:
                status = SubscriptionStatus.NOT_SUBSCRIBED
            else:
                del self._subscribers[index]
                status = SubscriptionStatus.UNSUBSCRIBED

        logger.debug(describe_status(status, subscriber.name, self._name))
        return status

    def is_subscribed(self, subscriber: Subscriber) -> bool:
        if not isinstance(subscriber, Subscriber):
            return False
        with self._lock:
            return self._index_of(subscriber) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def names(self) -> List[str]:
        with self._lock:
            return [subscriber.name for subscriber in self._subscribers]

    def publish(self, issue_title: str) -> DeliveryReport:
        """
        Deliver an issue to every subscriber registered at call time.

        Subscribers are notified in registration order. A subscriber that
        raises is logged and skipped; the error never reaches the caller.
        """
        issue = require_text(issue_title, "Issue title")

        with self._lock:
            snapshot = list(self._subscribers)

        logger.debug(f"📢 {self._name} published: \"{issue}\" - notifying {len(snapshot)} subscribers")
        report = DeliveryReport(magazine=self._name, issue=issue)

        for subscriber in snapshot:
            try:
                subscriber.notify(self._name, issue)
            except Exception as e:
                logger.error(f"❌ Failed to notify {subscriber.name}: {e}")
                report.failed.append((subscriber.name, str(e)))
            else:
                report.delivered.append(subscriber.name)

        return report

    def __repr__(self):
        return f"Magazine({self._name!r}, subscribers={self.count()})"
