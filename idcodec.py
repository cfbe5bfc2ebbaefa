#! /usr/bin/env python3

"""Encode a sequence of non-negative integers as a short ID, and decode it.

An ID is a prefix symbol, which records the rotation of the alphabet used,
followed by one numeral per number joined by separator symbols.  Each
numeral after the first is written against a freshly shuffled alphabet, so
equal numbers do not produce repeating patterns.  IDs may be padded to a
minimum length, and IDs colliding with a blocklist are regenerated with a
perturbed rotation.

This is obfuscation, not encryption: anyone knowing the alphabet decodes.
"""

from blocklist import is_blocked, prepare as prepare_blocklist
import numeral
from shuffle import shuffle

DEFAULT_ALPHABET = ('abcdefghijklmnopqrstuvwxyz'
                    'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
                    '0123456789')

MIN_ALPHABET_LENGTH = 3

# Numbers are 64-bit unsigned integers for compatibility with other
# implementations of this format:
MAX_NUMBER = 2**64 - 1

class AttemptsExhausted(RuntimeError):
    """Every rotation of the alphabet produced a blocked ID"""

def check_alphabet(alphabet):
    """Raises ValueError unless ALPHABET is usable for encoding.
    Returns: ALPHABET as a bytearray working copy
    """
    if len(alphabet) < MIN_ALPHABET_LENGTH:
        raise ValueError('Alphabet must contain at least {} symbols'
                         .format(MIN_ALPHABET_LENGTH))
    if not alphabet.isascii():
        raise ValueError('Alphabet must contain single-byte symbols only')
    if len(set(alphabet)) != len(alphabet):
        raise ValueError('Alphabet must not contain repeated symbols')

    return bytearray(alphabet, 'ascii')

class Options:

    __slots__ = ('alphabet', 'min_length', 'blocklist')

    def __init__(self, alphabet=DEFAULT_ALPHABET, min_length=0, blocklist=()):
        check_alphabet(alphabet)
        if (not isinstance(min_length, int) or isinstance(min_length, bool)
                or min_length < 0):
            raise ValueError('Minimum length must be a non-negative integer')

        self.alphabet = alphabet
        self.min_length = min_length
        # Only words which could ever match an ID over this alphabet:
        self.blocklist = prepare_blocklist(blocklist, alphabet)

def encode(numbers, options=None):
    """Returns NUMBERS encoded as an ID string; empty for no numbers.
    May raise ValueError or AttemptsExhausted
    """
    if options is None:
        options = Options()
    numbers = list(numbers)
    for number in numbers:
        if (not isinstance(number, int) or isinstance(number, bool)
                or not 0 <= number <= MAX_NUMBER):
            raise ValueError('Number must be an integer between 0 and {}'
                             .format(MAX_NUMBER))
    if not numbers:
        return ''

    alphabet = shuffle(check_alphabet(options.alphabet))
    # Retries restart from the same shuffled alphabet that decode rebuilds
    for increment in range(len(alphabet) + 1):
        identifier = encode_numbers(numbers, bytearray(alphabet), increment,
                                    options.min_length)
        if not is_blocked(options.blocklist, identifier):
            return identifier

    raise AttemptsExhausted('No unblocked ID for {} within {} attempts'
                            .format(numbers, len(alphabet) + 1))

def encode_numbers(numbers, alphabet, increment, min_length=0):
    """Generate one candidate ID for NUMBERS.
    SIDE-EFFECTS: rotates, reverses and reshuffles ALPHABET in place.
    Returns: ID as string
    """
    length = len(alphabet)

    # Semi-random offset tied to the content and to the retry counter:
    offset = len(numbers)
    for i, number in enumerate(numbers):
        offset += i + alphabet[number % length]
    offset = (offset % length + increment) % length

    alphabet[:] = alphabet[offset:] + alphabet[:offset]
    prefix = alphabet[0]
    alphabet.reverse()

    result = bytearray([prefix])
    last = len(numbers) - 1
    for i, number in enumerate(numbers):
        # First symbol is reserved as separator:
        result += numeral.encode(number, alphabet[1:])
        if i < last:
            result.append(alphabet[0])
            shuffle(alphabet)

    if len(result) < min_length:
        result.append(alphabet[0])
        while len(result) < min_length:
            shuffle(alphabet)
            needed = min(min_length - len(result), length)
            result += alphabet[:needed]

    return result.decode('ascii')

def decode(identifier, alphabet=DEFAULT_ALPHABET):
    """Returns list of numbers encoded within IDENTIFIER.
    Malformed IDs yield an empty list rather than an error.
    May raise ValueError for an unusable ALPHABET
    """
    working = shuffle(check_alphabet(alphabet))
    if not identifier:
        return []

    try:
        remaining = identifier.encode('ascii')
    except UnicodeEncodeError:
        return []
    inverted = numeral.index(working)
    if any(symbol not in inverted for symbol in remaining):
        return []

    offset = inverted[remaining[0]]
    working[:] = working[offset:] + working[:offset]
    working.reverse()
    remaining = remaining[1:]

    numbers = []
    while remaining:
        separator = bytes(working[:1])
        chunk, _separator, remaining = remaining.partition(separator)
        if not chunk:
            # Rest is padding from minimum length enforcement
            break
        number = numeral.decode(chunk, working[1:])
        if number > MAX_NUMBER:
            return []
        numbers.append(number)
        if remaining:
            shuffle(working)

    return numbers
