#!/usr/bin/env python3
# coding: utf-8
import unittest
import os
import sys
from subprocess import PIPE, Popen

import pdfdata

project_root = os.path.abspath(os.path.join(pdfdata.tests_root, '..'))
script = os.path.join(project_root, 'examples', 'pdf-check.py')


class ExamplesTests(unittest.TestCase):
    def run_check(self, *fnames):
        cmd = [sys.executable, script] + list(fnames)
        env = dict(os.environ, PYTHONPATH=project_root)
        process = Popen(cmd, stdout=PIPE, stderr=PIPE, cwd=pdfdata.fixtures_dir, env=env)
        stdout, stderr = process.communicate()
        assert process.returncode == 0, stderr
        return stdout.decode('utf-8').splitlines()

    def test_pdf_check(self):
        lines = self.run_check()
        assert lines == [
            'Is pdf.pdf protected? False',
            'Is pdf-encrypted.pdf protected? True',
        ]

    def test_pdf_check_missing(self):
        lines = self.run_check('no-such-file.pdf')
        assert lines[0] == 'Is no-such-file.pdf protected? False'
        assert lines[1].startswith('    cannot read file:')

    def test_pdf_check_malformed(self):
        lines = self.run_check(os.path.join(pdfdata.tests_root, 'run_tests.py'))
        assert lines[0].endswith('protected? False')
        assert lines[1] == '    cannot read trailer: MissingEofMarker: PDF end of file marker (%%EOF) not found'


if __name__ == '__main__':
    unittest.main()
