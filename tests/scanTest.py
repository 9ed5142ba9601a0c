import io
import os
import runpy
import shutil
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest import mock

from modmsgcheck import base, message_diff, scan
from modmsgcheck.constants import project_to_absolute_path, MESSAGE_METADATA_KEY
from modmsgcheck.errors import UnparseableFileError, InternalConsistencyError, DecodeError
from modmsgcheck.message_diff import MessageDiff

CHECK_MESSAGES_TOOL = project_to_absolute_path('tools/checkMessages.py')


class FakeModule:
    """
    Stands in for libopenmpt: a "module" is the magic FAKE followed by the message
    """
    def __init__(self, file_handle):
        data = file_handle.read()
        if not data.startswith(b'FAKE'):
            raise UnparseableFileError("unknown module format")
        self.metadata = {MESSAGE_METADATA_KEY: data[4:]}
        self.closed = False

    def get_metadata(self, key):
        return self.metadata.get(key, b'')

    def close(self):
        self.closed = True


class ScanTestCase(unittest.TestCase):
    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()
        self.out = io.StringIO()
        self.err = io.StringIO()

    def tearDown(self):
        shutil.rmtree(self.tmp_dir)

    def make_file(self, name, content):
        filename = os.path.join(self.tmp_dir, name)
        with open(filename, 'wb') as f:
            f.write(content)
        return filename

    def check(self, filenames, **kwargs):
        return scan.check_files(filenames, open_module=FakeModule, out=self.out, err=self.err, **kwargs)

    def test_no_message(self):
        fn = self.make_file('empty.mod', b'FAKE')
        result = scan.check_file(fn, open_module=FakeModule, out=self.out, err=self.err)
        self.assertEqual(result, base.CheckResult(fn, base.NO_MESSAGE, None))
        self.assertEqual(self.out.getvalue(), '')
        self.assertEqual(self.err.getvalue(), '')

    def test_identical_message(self):
        fn = self.make_file('plain.xm', b'FAKEjust ascii\nhere')
        self.assertEqual(self.check([fn])[0].status, base.IDENTICAL)
        self.assertEqual(self.out.getvalue(), '')

    def test_reported_message(self):
        fn = self.make_file('dos.it', 'FAKE\u00c9\u00cd\u00bb'.encode('utf-8'))
        self.assertEqual(self.check([fn])[0].status, base.REPORTED)
        self.assertEqual(self.out.getvalue(),
                         'Difference in %s:\n\n' % fn + 'ÉÍ»' + ' ' * 77 + ' | ╔═╗\n\n')

    def test_failures_do_not_stop_the_run(self):
        bad = self.make_file('bad.bin', b'RIFF....')
        garbled = self.make_file('garbled.s3m', b'FAKEbad \xff utf-8')
        missing = os.path.join(self.tmp_dir, 'missing.mod')
        good = self.make_file('good.it', 'FAKEgr\u0081n'.encode('utf-8'))

        results = self.check([bad, garbled, missing, good])

        self.assertEqual([r.status for r in results], [base.FAILED, base.FAILED, base.FAILED, base.REPORTED])
        self.assertIsInstance(results[0].error, UnparseableFileError)
        self.assertIsInstance(results[1].error, DecodeError)
        self.assertIsInstance(results[2].error, FileNotFoundError)

        err_lines = self.err.getvalue().splitlines()
        self.assertEqual(len(err_lines), 3)
        self.assertEqual(err_lines[0], "can't open %s: unknown module format" % bad)
        self.assertTrue(err_lines[1].startswith("can't open %s: " % garbled))
        self.assertTrue(err_lines[2].startswith("can't open %s: " % missing))
        self.assertIn('Difference in %s:' % good, self.out.getvalue())

    def test_narrow_output_stream_does_not_stop_the_run(self):
        first = self.make_file('box.it', 'FAKE\u00c9\u00cd\u00bb'.encode('utf-8'))
        second = self.make_file('note.it', 'FAKE\u000e'.encode('utf-8'))
        out = io.TextIOWrapper(io.BytesIO(), encoding='cp1252', newline='\n')

        results = scan.check_files([first, second], open_module=FakeModule, out=out, err=self.err)
        out.flush()

        self.assertEqual([r.status for r in results], [base.REPORTED, base.REPORTED])
        report = out.buffer.getvalue().decode('utf-8')
        self.assertIn(' | ╔═╗\n', report)
        self.assertIn(' | ♫\n', report)
        self.assertEqual(self.err.getvalue(), '')

    def test_module_is_closed(self):
        fn = self.make_file('close.mod', b'FAKEmessage')
        opened = []

        def open_module(f):
            opened.append(FakeModule(f))
            return opened[-1]

        scan.check_file(fn, open_module=open_module, out=self.out, err=self.err)
        self.assertTrue(opened[0].closed)

    def test_internal_error_is_not_caught(self):
        fn = self.make_file('broken.it', b'FAKEone\ntwo')
        with mock.patch.object(message_diff, 'convert_message', return_value=b'one\ntwo\nthree'):
            with self.assertRaises(InternalConsistencyError):
                self.check([fn])

    def test_differ_options(self):
        fn = self.make_file('two.it', 'FAKEsame\ndiff\u0081'.encode('utf-8'))
        self.check([fn], differ=MessageDiff(diff_only=False))
        self.assertIn('same' + ' ' * 76 + ' | same', self.out.getvalue())

    def test_check_messages_tool(self):
        fn = self.make_file('tool.it', b'FAKEhello')
        with mock.patch.object(scan, 'check_files') as check_files, \
                mock.patch.object(sys, 'argv', ['checkMessages.py', '--all', fn]):
            runpy.run_path(CHECK_MESSAGES_TOOL, run_name='__main__')
        filenames, differ = check_files.call_args[0]
        self.assertEqual(filenames, [fn])
        self.assertFalse(differ.diff_only)

    def test_check_messages_tool_no_files(self):
        out = io.StringIO()
        with mock.patch.object(sys, 'argv', ['checkMessages.py']), redirect_stdout(out):
            runpy.run_path(CHECK_MESSAGES_TOOL, run_name='__main__')
        self.assertEqual(out.getvalue(), '')


if __name__ == '__main__':
    unittest.main(failfast=False)
