"""
Exception types raised by the flashcard core and its persistence layer.
"""


class FlashcardError(Exception):
    """Base class for flashcard errors."""


class SessionCompleteError(FlashcardError, RuntimeError):
    """Raised when answering a session that has no cards left."""


class StorageError(FlashcardError):
    """Raised when a database read or write fails."""


class CharacterNotFoundError(StorageError):
    """Raised when a character id does not exist for the requesting user."""

    def __init__(self, character_id: str):
        super().__init__(f"Character not found: {character_id}")
        self.character_id = character_id
