"""
Seed the sample characters into an account with an empty collection.

Usage:
    python -m scripts.data.seed_sample_characters --email you@example.com
"""

from __future__ import annotations

import argparse
import sys

from core import accounts, flashcards
from core.logging_setup import configure_logging


def main():
    parser = argparse.ArgumentParser(description="Seed sample characters for a user")
    parser.add_argument("--email", required=True, help="Email of the account to seed")
    args = parser.parse_args()

    configure_logging()
    flashcards.init_db()

    user = accounts.get_user_by_email(args.email)
    if user is None:
        print(f"No account found for {args.email}")
        sys.exit(1)

    inserted = flashcards.initialize_sample_data(user.id)
    if inserted:
        print(f"✓ Inserted {inserted} sample characters")
    else:
        print("Collection is not empty; nothing inserted")


if __name__ == "__main__":
    main()
