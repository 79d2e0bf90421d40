import io
import os
import sys
from subprocess import Popen, PIPE
from tempfile import NamedTemporaryFile

import pexpect
import pytest

BASEDIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, BASEDIR)

from wc import Wc


class Mixin:

    def setup_class(cls):
        cls.ifile_name = NamedTemporaryFile().name
        cls.ifile2_name = NamedTemporaryFile().name
        with open(cls.ifile_name, 'wb') as f:
            f.write(b'foo bar\nbaz')
        with open(cls.ifile2_name, 'wb') as f:
            f.write('  héllo\twörld \n\n   \n'.encode('utf-8'))

    def teardown_class(cls):
        os.unlink(cls.ifile_name)
        os.unlink(cls.ifile2_name)

    def setup_method(self):
        self.ofile_name = NamedTemporaryFile().name
        self.efile = io.StringIO()

    def teardown_method(self):
        if os.path.exists(self.ofile_name):
            os.unlink(self.ofile_name)

    def wc(self, *args):
        ofile = open(self.ofile_name, 'wb')
        app = Wc(output_file=ofile, error_file=self.efile)
        status = app.run(list(args))
        assert status == 0
        with open(self.ofile_name, encoding='utf-8') as f:
            return f.read()


class TestWc(Mixin):

    def test_default_counts(self):
        read_data = self.wc(self.ifile_name)
        assert read_data == '       2       3      11 %s\n' % self.ifile_name

    def test_lines_only(self):
        read_data = self.wc('-l', self.ifile_name)
        assert read_data == '       2 %s\n' % self.ifile_name

    def test_words_and_lines_order(self):
        read_data = self.wc('-w', '-l', self.ifile_name)
        assert read_data == '       2       3 %s\n' % self.ifile_name

    def test_chars_differ_from_bytes(self):
        chars = self.wc('-m', self.ifile2_name)
        bytes_ = self.wc('-c', self.ifile2_name)
        assert chars == '      20 %s\n' % self.ifile2_name
        assert bytes_ == '      22 %s\n' % self.ifile2_name

    def test_whitespace_words(self):
        read_data = self.wc('-lw', self.ifile2_name)
        assert read_data == '       3       2 %s\n' % self.ifile2_name

    def test_bytes_and_chars_conflict(self):
        app = Wc(output_file=io.BytesIO())
        with pytest.raises(SystemExit):
            app.run(['-c', '-m', self.ifile_name])

    def test_repeatable(self):
        first = self.wc(self.ifile_name, self.ifile2_name)
        second = self.wc(self.ifile_name, self.ifile2_name)
        assert first == second


class TestWcTotal(Mixin):

    def test_total(self):
        read_data = self.wc(self.ifile_name, self.ifile2_name)
        correct_data = ('       2       3      11 %s\n' % self.ifile_name +
                        '       3       2      22 %s\n' % self.ifile2_name +
                        '       5       5      33 total\n')
        assert read_data == correct_data

    def test_missing_file(self):
        missing = NamedTemporaryFile().name
        read_data = self.wc('-l', self.ifile_name, missing, self.ifile_name)
        correct_data = ('       2 %s\n' % self.ifile_name +
                        '       2 %s\n' % self.ifile_name +
                        '       4 total\n')
        assert read_data == correct_data
        assert self.efile.getvalue() == (
            '%s: No such file or directory\n' % missing)

    def test_single_file_has_no_total(self):
        read_data = self.wc('-c', self.ifile_name)
        assert 'total' not in read_data


class TestWcPipe(Mixin):

    def setup_method(self):
        super(TestWcPipe, self).setup_method()
        self.pipe = Popen(['cat', self.ifile_name], stdout=PIPE)
        self.orig_stdin = sys.stdin
        sys.stdin = self.pipe.stdout

    def teardown_method(self):
        sys.stdin = self.orig_stdin
        self.pipe.stdout.close()
        self.pipe.wait()
        super(TestWcPipe, self).teardown_method()

    def test_stdin_has_no_name(self):
        assert self.wc() == '       2       3      11\n'

    def test_dash_with_file(self):
        read_data = self.wc('-l', '-', self.ifile_name)
        correct_data = ('       2\n' +
                        '       2 %s\n' % self.ifile_name +
                        '       4 total\n')
        assert read_data == correct_data


class TestWcTerminal:

    def test_count_stdin(self):
        script = os.path.join(BASEDIR, 'wc.py')
        c = pexpect.spawn(sys.executable, [script], echo=False)
        c.send('one two\n')
        c.send('three\n')
        c.sendeof()
        c.expect(pexpect.EOF)
        read_data = c.before.replace(b'\r\n', b'\n').decode()
        assert read_data == '       2       3      14\n'
