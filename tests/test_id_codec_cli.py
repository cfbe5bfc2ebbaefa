#! /usr/bin/env python3

import contextlib
import importlib.util
import io
import itertools
import os
import tempfile
import unittest

PATHNAME = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
                        'id-codec.py')
spec = importlib.util.spec_from_file_location('id_codec', PATHNAME)
id_codec = importlib.util.module_from_spec(spec)
spec.loader.exec_module(id_codec)

class TestIdCodecCli(unittest.TestCase):

    def run_main(self, *argv):
        stdout = io.StringIO()
        stderr = io.StringIO()
        with contextlib.redirect_stdout(stdout), \
             contextlib.redirect_stderr(stderr):
            status = id_codec.IdCodec().main(list(argv))
        return status, stdout.getvalue(), stderr.getvalue()

    def write_blocklist(self, words):
        handle, pathname = tempfile.mkstemp(suffix='.txt')
        with os.fdopen(handle, 'w', encoding='utf-8') as file:
            file.write('\n'.join(words) + '\n\n')
        self.addCleanup(os.remove, pathname)
        return pathname

    def test_encode(self):
        status, stdout, stderr = self.run_main('1', '2', '3')
        self.assertEqual(status, 0)
        self.assertEqual(stdout, '86Rf07\n')
        self.assertIn('status=ENCODED', stderr)

    def test_decode(self):
        status, stdout, stderr = self.run_main('-d', '86Rf07')
        self.assertEqual(status, 0)
        self.assertEqual(stdout, '1 2 3\n')
        self.assertIn('status=DECODED', stderr)

    def test_options(self):
        status, stdout, _stderr = self.run_main('-a', '0123456789abcdef',
                                                '-m', '10', '1', '2', '3')
        self.assertEqual(status, 0)
        identifier = stdout.strip()
        self.assertGreaterEqual(len(identifier), 10)
        self.assertTrue(identifier.startswith('489158'))

    def test_invalid_id(self):
        status, stdout, stderr = self.run_main('--decode', 'bM!')
        self.assertEqual(status, 1)
        self.assertEqual(stdout, '')
        self.assertIn('status=INVALID', stderr)

    def test_rejected(self):
        status, stdout, stderr = self.run_main('-a', 'ab', '1')
        self.assertEqual(status, 2)
        self.assertEqual(stdout, '')
        self.assertIn('status=REJECTED', stderr)

        status, _stdout, stderr = self.run_main('--', '-5')
        self.assertEqual(status, 2)
        self.assertIn('status=REJECTED', stderr)

    def test_decode_single_id(self):
        stderr = io.StringIO()
        with contextlib.redirect_stderr(stderr):
            with self.assertRaises(SystemExit) as context:
                id_codec.IdCodec().main(['-d', '86Rf07', 'bM'])
        self.assertEqual(context.exception.code, 2)
        self.assertIn('exactly one ID', stderr.getvalue())

    def test_blocklist(self):
        pathname = self.write_blocklist(['86rf07'])
        status, stdout, _stderr = self.run_main('-b', pathname, '1', '2', '3')
        self.assertEqual(status, 0)
        self.assertNotEqual(stdout, '86Rf07\n')

    def test_exhausted(self):
        words = [''.join(word) for word in itertools.product('abc', repeat=3)]
        pathname = self.write_blocklist(words)
        status, stdout, stderr = self.run_main('-a', 'abc', '-m', '3',
                                               '-b', pathname, '0')
        self.assertEqual(status, 1)
        self.assertEqual(stdout, '')
        self.assertIn('status=EXHAUSTED', stderr)

if __name__ == '__main__':
    unittest.main()
