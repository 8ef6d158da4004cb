import html
import logging

import requests

from config import config
from observer import DeliveryError, Subscriber, ValidationError, require_notification

logger = logging.getLogger(__name__)


class TelegramSubscriber(Subscriber):
    """Forwards issue notifications to a Telegram chat through the Bot API."""

    kind = "Telegram subscriber"

    def __init__(self, name: str, token: str = None, chat_id: str = None, timeout: int = None):
        super().__init__(name)
        self.token = token if token is not None else config.TELEGRAM_BOT_TOKEN
        self.chat_id = chat_id if chat_id is not None else config.TELEGRAM_CHAT_ID
        self.timeout = timeout if timeout is not None else config.TELEGRAM_TIMEOUT

        if not str(self.token).strip() or not str(self.chat_id).strip():
            raise ValidationError("Telegram token and chat id cannot be empty")

        self.base_url = f"https://api.telegram.org/bot{self.token}"

    def send_message(self, text: str) -> dict:
        payload = {
            'chat_id': self.chat_id,
            'text': text,
            'parse_mode': 'HTML'
        }

        try:
            response = requests.post(f"{self.base_url}/sendMessage", json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise DeliveryError(f"Telegram send failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise DeliveryError(f"Telegram send failed with status {response.status_code}: {response.text}")

        logger.info(f"Telegram message sent to chat {self.chat_id}")
        return payload

    def notify(self, magazine_name: str, issue: str) -> str:
        magazine_name, issue = require_notification(magazine_name, issue)
        message = (
            f"📰 <b>NEW ISSUE - {html.escape(magazine_name)}</b>\n"
            f"Title: <b>{html.escape(issue)}</b>\n"
            f"Subscriber: {html.escape(self.name)}"
        )
        self.send_message(message)
        return message
