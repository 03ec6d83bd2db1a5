"""
Word extraction for whole-word completion.

A word is an ASCII letter or underscore followed by one or more ASCII
letters, digits or underscores. Single characters are never words.
"""

import re

WORD_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]+")


def tokenize(text: str) -> set[str]:
    """
    Return the distinct words found in text.

    Case is preserved, so "Foo" and "foo" are different words.
    An empty or punctuation-only text yields an empty set.
    """
    return set(WORD_PATTERN.findall(text))
