import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

from lineforth import __main__ as main


class TestMain(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)

    def write(self, name, text):
        path = os.path.join(self.tmpdir.name, name)
        with open(path, 'w') as f:
            f.write(text)
        return path

    def call(self, *args, stdin=''):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            with mock.patch('sys.stdin', io.StringIO(stdin)):
                status = main.main(list(args))
        return status, out.getvalue(), err.getvalue()

    def test_reads_stdin_by_default(self):
        status, out, err = self.call(stdin='3 4 + .\n')
        self.assertEqual((status, out, err), (0, '7\n', ''))

    def test_reads_file(self):
        path = self.write('prog.fth', '5 dup * .\n')
        status, out, err = self.call(path)
        self.assertEqual((status, out), (0, '25\n'))

    def test_verbose_flag(self):
        status, out, err = self.call('-v', stdin='1\n')
        self.assertEqual(out.splitlines(), ['[1:1] 1  <1> 1', 'Finished processing.'])

    def test_missing_file(self):
        status, out, err = self.call(os.path.join(self.tmpdir.name, 'nope.fth'))
        self.assertEqual(status, 1)
        self.assertIn('cannot open', err)

    def test_line_too_long_exits_nonzero(self):
        path = self.write('long.fth', '1 ' * 200 + '\n')
        status, out, err = self.call(path)
        self.assertEqual(status, 1)
        self.assertIn('Line too long (line 1)', err)

    def test_undecodable_file(self):
        path = os.path.join(self.tmpdir.name, 'bad.fth')
        with open(path, 'wb') as f:
            f.write(b'1 2 \xff\xfe .\n')
        status, out, err = self.call(path)
        self.assertEqual(status, 1)
        self.assertIn('cannot decode input', err)

    def test_bad_flag(self):
        with self.assertRaises(SystemExit) as cm:
            self.call('--bogus')
        self.assertEqual(cm.exception.code, 2)

    def test_help(self):
        out = io.StringIO()
        with redirect_stdout(out):
            with self.assertRaises(SystemExit) as cm:
                main.main(['-h'])
        self.assertEqual(cm.exception.code, 0)
        self.assertIn('Usage:', out.getvalue())


if __name__ == '__main__':
    unittest.main()
