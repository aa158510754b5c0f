"""Title Casing: pure rewrite and check functions for post titles.

Invariants:
    - title_case preserves word order and whitespace runs exactly
    - A word is a maximal run of non-whitespace characters
    - Input is NFC-normalized first; combining marks never start a new segment
    - is_title_case checks only the first character of each word (digits and punctuation pass)

Design Decisions:
    - Letters directly after an apostrophe stay lowercase ("o'neil" -> "O'neil")
    - Hyphen, slash and bracket start a new segment ("state-of-the-art" -> "State-Of-The-Art")
    - MINOR_WORDS only apply under TitleCasePolicy.CONVENTIONAL, and never to the first or last word
"""

import re
import string
import unicodedata

from app.core.domain_types import TitleCasePolicy


MINOR_WORDS: frozenset[str] = frozenset({
    "a", "an", "and", "as", "at", "but", "by", "for", "in", "nor", "of",
    "off", "on", "or", "per", "so", "the", "to", "up", "via", "yet",
})

_WHITESPACE = re.compile(r"(\s+)")
_APOSTROPHES = frozenset("'’`")


def title_case(
    text: str, policy: TitleCasePolicy = TitleCasePolicy.EVERY_WORD,
) -> str:
    """Rewrite text so each word starts with an uppercase letter."""
    parts = _WHITESPACE.split(unicodedata.normalize("NFC", text))
    word_indexes = [i for i, part in enumerate(parts) if part and not part.isspace()]
    last = len(word_indexes) - 1

    for position, index in enumerate(word_indexes):
        word = parts[index].lower()
        if (
            policy == TitleCasePolicy.CONVENTIONAL
            and 0 < position < last
            and _bare(word) in MINOR_WORDS
        ):
            parts[index] = word
        else:
            parts[index] = _capitalize_segments(word)
    return "".join(parts)


def find_lowercase_words(title: str) -> list[str]:
    """Words whose first character is not already uppercase."""
    return [word for word in title.split() if word[0].upper() != word[0]]


def is_title_case(title: str) -> bool:
    return not find_lowercase_words(title)


def _capitalize_segments(word: str) -> str:
    """Uppercase each letter that is not preceded by a word character or an apostrophe.

    Combining marks belong to the character before them.
    """
    chars = list(word)
    previous = ""
    for index, char in enumerate(word):
        if unicodedata.category(char).startswith("M"):
            continue
        if char.isalpha() and not _continues_word(previous):
            chars[index] = char.upper()
        previous = char
    return "".join(chars)


def _continues_word(previous: str) -> bool:
    return previous.isalnum() or previous == "_" or previous in _APOSTROPHES


def _bare(word: str) -> str:
    return word.strip(string.punctuation)
