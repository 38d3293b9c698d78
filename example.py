"""Example usage of the deep comparer."""

import json
import logging
from datetime import datetime

from deepcompare import create_comparator, UnsupportedValueError

# Prior version of a customer record
prior = {
    "id": "CUS-001",
    "name": "Ada Lovelace",
    "updatedAt": "2025-02-02T11:00:00Z",  # Will be ignored
    "lastLogin": datetime(2025, 2, 1, 9, 30),
    "contacts": [
        {"type": "email", "value": "ada@example.com", "token": "secret-1"},
        {"type": "phone", "value": "+44 20 0000 0000"},
    ],
    "address": {"city": "London", "zip": "W1"},
    "legacyCode": "LC-9",
}

# Latest version of the same record
latest = {
    "id": "CUS-001",
    "name": "Ada King",
    "updatedAt": "2025-03-03T08:00:00Z",
    "lastLogin": datetime(2025, 3, 1, 18, 5),
    "contacts": [
        {"type": "email", "value": "ada@example.org", "token": "secret-2"},
        {"type": "phone", "value": "+44 20 0000 0000"},
        {"type": "fax", "value": "+44 20 1111 1111", "token": "secret-3"},
    ],
    "address": "Unknown",
    "tags": ["vip"],
}


def main():
    print("=" * 60)
    print("Deep Comparer - Example")
    print("=" * 60)

    compare = create_comparator(
        keys_to_ignore=["updatedAt"],
        keys_to_filter=["token"],
    )

    changelog = compare(prior, latest)

    print(f"\nChanges: {len(changelog)}")
    for entry in changelog:
        print(f"  - [{entry.note.value}] {entry.path}")
        if entry.has_old_val:
            print(f"    Old: {entry.old_val}")
        if entry.has_new_val:
            print(f"    New: {entry.new_val}")

    print("\n" + "-" * 60)
    print("Full JSON Changelog:")
    print(json.dumps([entry.to_dict() for entry in changelog], indent=2, default=str))


def example_with_root_label():
    """Example reporting paths under a custom root."""
    print("\n" + "=" * 60)
    print("Example with Root Label")
    print("=" * 60)

    compare = create_comparator()
    for entry in compare([1, 2, 3], [1, 2, 3, 6], "scores"):
        print(f"  - [{entry.note.value}] {entry.path}: {entry.new_val}")


def example_with_diagnostics():
    """Example logging the execution time of each comparison."""
    print("\n" + "=" * 60)
    print("Example with Diagnostics")
    print("=" * 60)

    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    compare = create_comparator(diagnostics=True)
    compare(prior, latest)


def example_with_function():
    """Example of a value that cannot be compared."""
    print("\n" + "=" * 60)
    print("Example with Function Value")
    print("=" * 60)

    compare = create_comparator()
    try:
        compare({"hook": [print]}, {"hook": ["print"]})
    except UnsupportedValueError as e:
        print(f"\nError: {e}")
        print(f"Path: {e.path}")


if __name__ == "__main__":
    main()
    example_with_root_label()
    example_with_diagnostics()
    example_with_function()
