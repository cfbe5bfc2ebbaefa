#! /usr/bin/env python3

"""Convert an integer to symbols of an arbitrary alphabet, and back.

Radix is the length of the alphabet; the symbol at position k stands for
digit value k.  Alphabets here are bytes-like sequences of single-byte
symbols.
"""

def index(alphabet):
    """Returns mapping of symbol value to its position within ALPHABET"""
    return {symbol: position for (position, symbol) in enumerate(alphabet)}

def encode(integer, alphabet):
    """Returns INTEGER as bytes of ALPHABET, most significant first"""
    length = len(alphabet)
    digits = bytearray()
    while True:
        integer, remainder = divmod(integer, length)
        digits.append(alphabet[remainder])
        if integer == 0:
            break

    digits.reverse()
    return bytes(digits)

def decode(symbols, alphabet):
    """Returns SYMBOLS of ALPHABET as an integer.
    Symbols absent from ALPHABET contribute no digit and are skipped.
    """
    inverted = index(alphabet)
    length = len(alphabet)
    integer = 0
    for symbol in symbols:
        position = inverted.get(symbol)
        if position is not None:
            integer = integer * length + position

    return integer
