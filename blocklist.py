#! /usr/bin/env python3

"""Forbidden words that generated IDs must avoid.

Words are matched against lowercased IDs.  Short words (or short IDs) only
block on an exact match; words carrying a digit only block as a prefix or
suffix, e.g. a slur followed by a numeral; everything else blocks as a
substring.
"""

import string

MIN_WORD_LENGTH = 3

# IDs or words this short only collide on exact match:
EXACT_MATCH_LENGTH = 3

def prepare(words, alphabet):
    """Filter raw WORDS down to those that could ever match an ID drawn
    from ALPHABET (a str).
    Returns: new set of lowercase words
    """
    symbols = set(alphabet.lower())
    blocklist = set()
    for word in words:
        if len(word) < MIN_WORD_LENGTH:
            continue
        word = word.lower()
        if set(word) <= symbols:
            blocklist.add(word)

    return blocklist

def is_blocked(blocklist, identifier):
    """Returns True when IDENTIFIER collides with any word of BLOCKLIST"""
    lowered = identifier.lower()
    for word in blocklist:
        if len(word) > len(identifier):
            continue
        if len(identifier) <= EXACT_MATCH_LENGTH or len(word) <= EXACT_MATCH_LENGTH:
            if identifier == word:
                return True
        elif any(char in string.digits for char in word):
            if lowered.startswith(word) or lowered.endswith(word):
                return True
        elif word in lowered:
            return True

    return False
