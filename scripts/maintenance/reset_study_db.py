"""
Reset the flashcard database.

DANGEROUS: This deletes every account and character!
Only use when you want to start fresh for testing.

Usage:
    python -m scripts.maintenance.reset_study_db
"""

from core import flashcards
from core.config import is_test_mode
from core.logging_setup import configure_logging


def main():
    configure_logging()

    print("=" * 60)
    print("WARNING: Reset Flashcard Database")
    print("=" * 60)
    print()
    print(f"Target: {'test_shynese (TEST_MODE)' if is_test_mode() else 'shynese (production)'}")
    print("This will DELETE:")
    print("  - All user accounts")
    print("  - All characters and their scores")
    print()

    response = input("Are you sure you want to reset? (type 'yes' to confirm): ")

    if response.lower() == "yes":
        print("\nResetting database...")
        flashcards.reset_db()
        print("✓ Database reset complete!")
        print("\nThe database now has empty tables.")
    else:
        print("\nCancelled. No changes made.")


if __name__ == "__main__":
    main()
