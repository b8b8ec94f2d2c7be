"""
Assign characters without an owner to an account.

Characters created before accounts existed have no user_id and are
invisible to everyone. This hands them to one user.

Usage:
    python -m scripts.maintenance.migrate_orphaned_characters --email you@example.com
"""

from __future__ import annotations

import argparse
import sys

from sqlalchemy import func

from core import accounts, flashcards
from core.flashcards.database import get_session
from core.flashcards.models import Character as CharacterModel
from core.logging_setup import configure_logging


def count_orphans() -> int:
    session = get_session()
    try:
        return session.query(func.count(CharacterModel.id)).filter(
            CharacterModel.user_id.is_(None)
        ).scalar() or 0
    finally:
        session.close()


def main():
    parser = argparse.ArgumentParser(description="Assign orphaned characters to a user")
    parser.add_argument("--email", required=True, help="Email of the receiving account")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show how many characters would move without changing anything"
    )
    args = parser.parse_args()

    configure_logging()
    flashcards.init_db()

    user = accounts.get_user_by_email(args.email)
    if user is None:
        print(f"No account found for {args.email}")
        sys.exit(1)

    orphans = count_orphans()
    print(f"Orphaned characters: {orphans}")
    if args.dry_run or orphans == 0:
        return

    migrated = flashcards.migrate_orphaned_characters(user.id)
    print(f"✓ Migrated {migrated} characters to {args.email}")


if __name__ == "__main__":
    main()
