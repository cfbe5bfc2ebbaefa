#! /usr/bin/env python3

"""ID Codec

Command-line interface for encoding numbers as short IDs and decoding
them again, mostly useful for inspecting what a given alphabet, minimum
length and blocklist produce.

"""

import argparse
import sys

import idcodec

STATUS_UNKNOWN = 'UNKNOWN'
STATUS_ENCODED = 'ENCODED'
STATUS_DECODED = 'DECODED'
STATUS_INVALID = 'INVALID'
STATUS_EXHAUSTED = 'EXHAUSTED'
STATUS_REJECTED = 'REJECTED'

class IdCodec:

    __slots__ = ('alphabet', 'min_length', 'blocklist_pathname',
                 'decoding', 'arguments')

    def __init__(self):
        # See also .configure() when changing these values:
        self.alphabet = idcodec.DEFAULT_ALPHABET
        self.min_length = 0
        self.blocklist_pathname = None
        self.decoding = False
        self.arguments = []     # numbers to encode, or a single ID

    def main(self, argv=None):
        """Run once according to command-line ARGV.
        Returns: process exit status
        """
        self.configure(argv)
        try:
            options = idcodec.Options(alphabet=self.alphabet,
                                      min_length=self.min_length,
                                      blocklist=self.read_blocklist())
            if self.decoding:
                status, result = self.decode(options)
            else:
                status, result = self.encode(options)
        except ValueError as error:
            print("status={} error={}".format(STATUS_REJECTED, error),
                  file=sys.stderr)
            return 2

        if result is not None:
            print(result)
        return 0 if status in (STATUS_ENCODED, STATUS_DECODED) else 1

    def configure(self, argv=None):
        args = self.parse_args(argv)
        # See also .__init__() when changing these values:
        self.alphabet = args.alphabet
        self.min_length = args.min_length
        self.blocklist_pathname = args.blocklist_pathname
        self.decoding = args.decoding
        self.arguments = args.numbers_or_id

    def parse_args(self, argv=None):
        parser = argparse.ArgumentParser(
            description="Encode numbers as a short ID, or decode an ID",
            epilog='Example: id-codec.py 1 2 3; id-codec.py -d 86Rf07')
        parser.add_argument('-a', '--alphabet', dest='alphabet',
                            default=self.alphabet,
                            help='Unique single-byte symbols making up IDs')
        parser.add_argument('-m', '--min-length', dest='min_length',
                            type=int, default=self.min_length,
                            help='Pad IDs to at least this many symbols')
        parser.add_argument('-b', '--blocklist', dest='blocklist_pathname',
                            default=self.blocklist_pathname,
                            help='File of words, one per line,'
                            ' which IDs must avoid')
        parser.add_argument('-d', '--decode', dest='decoding',
                            action='store_true',
                            help='Decode the given ID instead of encoding')
        parser.add_argument('numbers_or_id', nargs='+',
                            help='Non-negative integers to be encoded'
                            ' or one ID to be decoded')
        args = parser.parse_args(argv)
        if args.decoding and len(args.numbers_or_id) != 1:
            parser.error("decoding takes exactly one ID")
        return args

    def read_blocklist(self):
        """Returns: list of words within blocklist file, if any"""
        words = []
        if self.blocklist_pathname:
            with open(self.blocklist_pathname, encoding='utf-8') as file:
                for line in file:
                    word = line.strip()
                    if word:
                        words.append(word)
        return words

    def encode(self, options):
        """Returns: tuple containing status and ID.
        May raise ValueError for arguments which are not numbers.
        """
        status = STATUS_UNKNOWN
        identifier = None
        numbers = [int(argument) for argument in self.arguments]
        try:
            identifier = idcodec.encode(numbers, options)
            status = STATUS_ENCODED
        except idcodec.AttemptsExhausted:
            status = STATUS_EXHAUSTED

        print("status={} id={} numbers={}"
              .format(status, identifier, numbers), file=sys.stderr)
        return (status, identifier)

    def decode(self, options):
        """Returns: tuple containing status and numbers as text"""
        status = STATUS_INVALID
        identifier = self.arguments[0]
        numbers = idcodec.decode(identifier, options.alphabet)
        if numbers:
            status = STATUS_DECODED

        print("status={} id={} numbers={}"
              .format(status, identifier, numbers), file=sys.stderr)
        if status is STATUS_INVALID:
            return (status, None)
        return (status, ' '.join(str(number) for number in numbers))

if __name__ == '__main__':
    id_codec = IdCodec()
    sys.exit(id_codec.main())
