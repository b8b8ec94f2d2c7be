"""
Flashcard Constants

Session sizing, the category sentinel and starter content in one place.
"""

from typing import Final


# ---- Category Filtering ----

ALL_CATEGORIES: Final[str] = "all"  # Sentinel meaning "no category filter"
ALL_CATEGORIES_LABEL: Final[str] = "All Categories"


# ---- Session Sizing ----

# Unfiltered sessions are truncated to this many characters.
# Category sessions are unbounded.
UNFILTERED_SESSION_LIMIT: Final[int] = 10


# ---- Starter Content ----
# Inserted when a user's collection is empty

SAMPLE_CHARACTERS: Final[list[dict[str, str]]] = [
    {"chinese": "你好", "pinyin": "nǐ hǎo", "english": "hello", "category": "Greetings"},
    {"chinese": "谢谢", "pinyin": "xiè xiè", "english": "thank you", "category": "Greetings"},
    {"chinese": "水", "pinyin": "shuǐ", "english": "water", "category": "Nature"},
    {"chinese": "火", "pinyin": "huǒ", "english": "fire", "category": "Nature"},
    {"chinese": "一", "pinyin": "yī", "english": "one", "category": "Numbers"},
    {"chinese": "二", "pinyin": "èr", "english": "two", "category": "Numbers"},
    {"chinese": "三", "pinyin": "sān", "english": "three", "category": "Numbers"},
]
