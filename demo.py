#!/usr/bin/env python3
"""
Scripted walkthrough of the magazine subscription flow.
"""

import logging

from config import config
from console_observer import Library, Reader
from observer import Magazine, describe_status


def subscribe(magazine, subscriber):
    print(describe_status(magazine.register(subscriber), subscriber.name, magazine.name))


def unsubscribe(magazine, subscriber):
    print(describe_status(magazine.unregister(subscriber), subscriber.name, magazine.name))


def publish(magazine, issue):
    print(f"\n📢 {magazine.name} published: \"{issue.strip()}\"")
    print(f"Notifying {magazine.count()} subscribers...")
    report = magazine.publish(issue)
    for name, error in report.failed:
        print(f"❌ Failed to notify {name}: {error}")
    return report


def run_demo():
    print("🎯 Observer Pattern Demo\n")

    tech_magazine = Magazine("Tech Weekly")
    cooking_magazine = Magazine("Cooking Today")

    john = Reader("John")
    alice = Reader("Alice")
    city_library = Library("City Library")

    print("--- Subscribing to magazines ---")
    subscribe(tech_magazine, john)
    subscribe(tech_magazine, city_library)
    subscribe(cooking_magazine, alice)
    subscribe(cooking_magazine, city_library)

    print("\n--- Publishing new issues ---")
    publish(tech_magazine, "Best AI Tools 2024")
    publish(cooking_magazine, "Quick Dinner Recipes")

    print("\n--- Alice unsubscribes from cooking ---")
    unsubscribe(cooking_magazine, alice)

    print("\n--- Publishing again ---")
    publish(cooking_magazine, "Healthy Smoothies")

    print("\n--- Final counts ---")
    print(f"{tech_magazine.name}: {tech_magazine.count()} subscribers")
    print(f"{cooking_magazine.name}: {cooking_magazine.count()} subscribers")

    print("\n✅ Observer pattern working perfectly!")
    return tech_magazine, cooking_magazine


if __name__ == "__main__":
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format=config.LOG_FORMAT,
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    run_demo()
