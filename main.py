#!/usr/bin/env python3
import argparse
import logging
import sys
from typing import Dict, Tuple

from config import AppConfig, config
from console_observer import Library, Reader
from demo import run_demo
from menu import SubscriptionMenu
from observer import Magazine, Subscriber
from telegram_observer import TelegramSubscriber

logger = logging.getLogger(__name__)


def build_catalog(cfg: AppConfig, telegram: bool = False) -> Tuple[Dict[str, Magazine], Dict[str, Subscriber]]:
    """Build the numbered magazines and subscribers offered by the menu."""
    magazines = {str(i): Magazine(name) for i, name in enumerate(cfg.MAGAZINES, start=1)}

    people = [Reader(name) for name in cfg.READERS] + [Library(name) for name in cfg.LIBRARIES]
    if telegram or cfg.TELEGRAM_ENABLED:
        if cfg.telegram_configured:
            people.append(TelegramSubscriber(
                f"Telegram chat {cfg.TELEGRAM_CHAT_ID}",
                token=cfg.TELEGRAM_BOT_TOKEN,
                chat_id=cfg.TELEGRAM_CHAT_ID,
                timeout=cfg.TELEGRAM_TIMEOUT,
            ))
        else:
            logger.warning("Telegram subscriber disabled - check token and chat_id")

    subscribers = {str(i): subscriber for i, subscriber in enumerate(people, start=1)}
    return magazines, subscribers


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Magazine subscription system (observer pattern)')
    parser.add_argument('--demo', action='store_true', help='Run the scripted demo instead of the menu')
    parser.add_argument('--telegram', action='store_true',
                        help='Add a Telegram chat subscriber (needs TELEGRAM_BOT_TOKEN and TELEGRAM_CHAT_ID)')
    parser.add_argument('--log-level', type=str, default=None, help='Override NEWSSTAND_LOG_LEVEL')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.log_level:
        config.LOG_LEVEL = args.log_level.upper()

    try:
        config.validate()
        logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

        if args.demo:
            run_demo()
        else:
            magazines, subscribers = build_catalog(config, telegram=args.telegram)
            SubscriptionMenu(magazines, subscribers).run()
    except KeyboardInterrupt:
        print("\n👋 Interrupted")
        return 130
    except Exception:
        logger.exception("💥 Uncaught error, shutting down")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
