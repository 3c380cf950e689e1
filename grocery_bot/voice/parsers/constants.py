"""
Voice Parser Constants.

Word lists and compiled patterns used by the deterministic voice command
compiler. Everything here is immutable so the compiler stays free of shared
mutable state.
"""

import re

# =============================================================================
# Number Mapping
# =============================================================================

WORD_TO_NUM = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
}

# Alternation used inside the adjust patterns: digits or one..ten
QUANTITY_TOKEN = r"\d+|" + "|".join(WORD_TO_NUM)

# =============================================================================
# Token Classes
# =============================================================================

# Unit words swallowed when they come right after a quantity ("2 cans tuna")
UNIT_WORDS = frozenset({
    "can", "cans",
    "lb", "lbs", "pound", "pounds",
    "oz", "ounces",
    "bag", "bags",
    "dozen",
    "pack", "packs",
})

# Dropped anywhere in an add segment without affecting grouping
FILLER_WORDS = frozenset({
    "and", "also", "please", "hey", "can", "you", "to", "the",
    "a", "an",
})

# Removed from item names on every path ("some milk", "a bag of rice")
NAME_STOP_WORDS = ("of", "some")

# =============================================================================
# Intent Patterns
# =============================================================================

REMOVE_PATTERN = re.compile(r"^(?:remove|delete|drop|take\s+off)\b")

INCREASE_PATTERN = re.compile(
    rf"^(?:increase|plus)\s+({QUANTITY_TOKEN})\s+(.*)$"
)

DECREASE_PATTERN = re.compile(
    rf"^(?:decrease|subtract|minus)\s+({QUANTITY_TOKEN})\s+(.*)$"
)

# Leading softeners stripped from add utterances; longer phrases first
ADD_SOFTENER_PATTERN = re.compile(
    r"^(?:please\s+add|can\s+you\s+add|i\s+need|i\s+want|add|put|insert|get)\b\s*"
)

# Verbs that start a new command; seeing one mid-utterance means the user
# mixed intents, which is not split
COMMAND_VERB_PATTERN = re.compile(
    r"^(?:remove|delete|drop|take\s+off|increase|decrease|subtract|minus)\b"
)

# =============================================================================
# Segmenting and Name Cleanup
# =============================================================================

SEGMENT_DELIMITER_PATTERN = re.compile(r"\s*,\s*|\s+and\s+|\s+plus\s+")

# First parenthesised note; the closing paren may be missing in transcripts
NOTE_PATTERN = re.compile(r"\(([^)]*)\)?")

NAME_STOP_WORD_PATTERN = re.compile(
    r"\b(?:" + "|".join(NAME_STOP_WORDS) + r")\b\s*"
)

NAME_EDGE_PUNCTUATION = " .,!?;:"
