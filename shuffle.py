#! /usr/bin/env python3

"""Deterministic in-place permutation of an alphabet.

No seed and no randomness: the permutation is a function of the symbol
values alone, so encoder and decoder always agree.
"""

def shuffle(alphabet):
    """Permute ALPHABET (a bytearray) in place.  Returns ALPHABET."""
    length = len(alphabet)
    i = 0
    j = length - 1
    while j > 0:
        # Swap target depends on the partially shuffled state
        r = (i * j + alphabet[i] + alphabet[j]) % length
        alphabet[i], alphabet[r] = alphabet[r], alphabet[i]
        i += 1
        j -= 1

    return alphabet
