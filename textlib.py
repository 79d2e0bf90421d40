import sys
import os
import re
from collections import namedtuple


DisplayConfig = namedtuple('DisplayConfig', ['number', 'number_nonblank',
                                             'show_ends', 'show_tabs',
                                             'show_nonprinting',
                                             'squeeze_blank'])
HeadConfig = namedtuple('HeadConfig', ['lines', 'bytes'])
CountConfig = namedtuple('CountConfig', ['lines', 'words', 'bytes', 'chars'])
EchoConfig = namedtuple('EchoConfig', ['text', 'omit_newline'])

Source = namedtuple('Source', ['name', 'file', 'error'])

COUNT_KINDS = ('lines', 'words', 'bytes', 'chars')


def human_size_to_byte(number):
    """
    Convert a size with an optional unit suffix to bytes, ignore case:

    b   : 512
    kB  : 1000          K   : 1024
    MB  : 1000**2       M   : 1024**2
    ...
    YB  : 1000**8       Y   : 1024**8

    number is of one of these forms:
    123, 123b, 123K, 1MB
    """
    m = re.match(r'^([0-9]+)([a-zA-Z]*)$', number)
    assert m, "invalid number of bytes: %s" % number
    digits, unit = m.groups()
    if not unit:
        return int(digits)

    unit = unit.lower()
    if unit == 'b':
        return int(digits) * 512
    powers = 'kmgtpezy'
    assert (unit[0] in powers and len(unit) <= 2
            and unit[1:] in ('', 'b')), "invalid unit %s" % unit
    base = 1000 if unit.endswith('b') else 1024
    return int(digits) * base ** (powers.index(unit[0]) + 1)


def open_file(name):
    if name == '-':
        return os.fdopen(sys.stdin.fileno(), 'rb', closefd=False)
    else:
        return open(name, 'rb')


def resolve_sources(names, efile=None):
    """Open each name in turn, yield a Source for every one of them.
    A name that can not be opened is reported to efile right away and
    yielded with the error set, so the caller can skip it.
    """
    efile = efile or sys.stderr
    for name in names:
        try:
            ifile = open_file(name)
        except OSError as e:
            print('%s: %s' % (name, e.strerror or e), file=efile)
            yield Source(name, None, e)
        else:
            yield Source(name, ifile, None)


def read_lines(ifile):
    """Yield lines with their terminators until a zero-length read"""
    while True:
        line = ifile.readline()
        if not line:
            break
        yield line


def decode(data):
    return data.decode('utf-8', 'replace')


def strip_newline(line):
    if line.endswith(b'\r\n'):
        return line[:-2]
    elif line.endswith(b'\n'):
        return line[:-1]
    return line


# caret notation for 0x00-0x7F, tab and line feed are left alone
CARET_TABLE = tuple(
    '^?' if code == 0x7f else
    '^' + chr(code + 0x40) if code < 0x20 and code not in (0x09, 0x0a) else
    chr(code)
    for code in range(0x80)
)


def caret_encode(char):
    code = ord(char)
    if code < 0x80:
        return CARET_TABLE[code]
    return char


def show_nonprinting(line):
    return ''.join(caret_encode(c) for c in line)


class Counts:

    def __init__(self, lines=0, words=0, bytes=0, chars=0):
        self.lines = lines
        self.words = words
        self.bytes = bytes
        self.chars = chars

    def __iadd__(self, other):
        self.lines += other.lines
        self.words += other.words
        self.bytes += other.bytes
        self.chars += other.chars
        return self

    def __eq__(self, other):
        return (isinstance(other, Counts) and
                all(getattr(self, k) == getattr(other, k)
                    for k in COUNT_KINDS))

    def __repr__(self):
        return 'Counts(lines=%d, words=%d, bytes=%d, chars=%d)' % (
            self.lines, self.words, self.bytes, self.chars)


class RunState:

    """Mutable state of one engine run. The blank line flag survives
    source boundaries, the line counter does not.
    """

    def __init__(self):
        self.last_blank = False
        self.line_number = 1
        self.total = Counts()

    def start_source(self):
        self.line_number = 1


def format_counts(counts, config, name):
    """Render the active kinds in the fixed order, 8 columns each"""
    fields = ['%8d' % getattr(counts, kind)
              for kind in COUNT_KINDS if getattr(config, kind)]
    if name != '-':
        fields.append(' %s' % name)
    return ''.join(fields) + '\n'


class Worker:

    """Pull one line at a time from ifile until end of stream, hand
    it to action(). Output is flushed after every write.
    """

    def __init__(self, ifile, ofile, bs=None):
        self.ifile = ifile
        self.ofile = ofile
        self.bs = bs or 8192

    def read(self):
        return self.ifile.readline()

    def write(self, data):
        self.ofile.write(data)
        self.ofile.flush()

    def action(self, data):
        self.write(data)

    def run(self):
        while True:
            data = self.read()
            if not data:
                break
            self.action(data)


class RawWorker(Worker):

    """Copy the input unchanged, one chunk at a time. Every chunk is
    continued up to the end of its line. A terminal is read line by
    line.
    """

    def __init__(self, ifile, ofile, bs=None):
        super(RawWorker, self).__init__(ifile, ofile, bs)
        if ifile.isatty():
            self.read = self.read_tty

    def read_tty(self):
        return self.ifile.readline()

    def read(self):
        res = self.ifile.read(self.bs)
        res += self.ifile.readline()
        return res


class DisplayWorker(Worker):

    def __init__(self, ifile, ofile, config, state, bs=None):
        super(DisplayWorker, self).__init__(ifile, ofile, bs)
        self.config = config
        self.state = state

    def transform(self, line):
        """Return the text to print for line, or None when the line
        is squeezed away.
        """
        config = self.config
        state = self.state

        if config.show_tabs:
            line = line.replace('\t', '^I')
        if config.show_nonprinting:
            line = show_nonprinting(line)

        blank = not line
        squeezed = config.squeeze_blank and blank and state.last_blank
        state.last_blank = blank
        if squeezed:
            return None

        if config.number or (config.number_nonblank and not blank):
            line = '%6d\t%s' % (state.line_number, line)
            state.line_number += 1

        if config.show_ends:
            line += '$'
        return line

    def action(self, data):
        line = self.transform(decode(strip_newline(data)))
        if line is not None:
            self.write((line + '\n').encode('utf-8'))


class HeadWorkerLines(Worker):

    """Write the first 'amount' lines, terminators preserved"""

    def __init__(self, ifile, ofile, amount, bs=None):
        super(HeadWorkerLines, self).__init__(ifile, ofile, bs)
        self.amount = amount

    def run(self):
        while self.amount:
            data = self.read()
            if not data:
                break
            self.action(data)
            self.amount -= 1


class HeadWorkerBytes(Worker):

    """Write the first 'amount' bytes, read in chunks of at most
    'bs' bytes and decoded once at the end.
    """

    def __init__(self, ifile, ofile, amount, bs=None):
        super(HeadWorkerBytes, self).__init__(ifile, ofile, bs)
        self.amount = amount

    def run(self):
        chunks = []
        remaining = self.amount
        while remaining:
            data = self.ifile.read(min(remaining, self.bs))
            if not data:
                break
            chunks.append(data)
            remaining -= len(data)
        if chunks:
            self.write(decode(b''.join(chunks)).encode('utf-8'))


class CountWorker(Worker):

    def __init__(self, ifile, bs=None):
        super(CountWorker, self).__init__(ifile, None, bs)
        self.counts = Counts()

    def action(self, data):
        text = decode(data)
        counts = self.counts
        counts.lines += 1
        counts.bytes += len(data)
        counts.words += len(text.split())
        counts.chars += len(text)

    def run(self):
        for line in read_lines(self.ifile):
            self.action(line)
        return self.counts


class Engine:

    """Run one tool configuration over a list of source names. Sources
    are opened lazily and processed strictly in order, one at a time.
    """

    def __init__(self, config, ofile, efile=None, bs=None):
        self.config = config
        self.ofile = ofile
        self.efile = efile or sys.stderr
        self.bs = bs
        self.state = RunState()

    def run(self, names=None):
        config = self.config
        if isinstance(config, EchoConfig):
            self.echo()
            return

        names = list(names or ['-'])
        multi = len(names) > 1
        for n, source in enumerate(resolve_sources(names, self.efile)):
            if source.error:
                continue
            try:
                self.state.start_source()
                self.work(n, source, multi)
            finally:
                source.file.close()

        if isinstance(config, CountConfig) and multi:
            self.write_text(format_counts(self.state.total, config, 'total'))

    def work(self, n, source, multi):
        config = self.config
        ifile = source.file
        if isinstance(config, DisplayConfig):
            if any(config):
                DisplayWorker(ifile, self.ofile, config, self.state,
                              self.bs).run()
            else:
                RawWorker(ifile, self.ofile, self.bs).run()
        elif isinstance(config, HeadConfig):
            if multi:
                self.write_header(n, source.name)
            if config.bytes:
                HeadWorkerBytes(ifile, self.ofile, config.bytes).run()
            else:
                HeadWorkerLines(ifile, self.ofile, config.lines).run()
        elif isinstance(config, CountConfig):
            counts = CountWorker(ifile, self.bs).run()
            self.state.total += counts
            self.write_text(format_counts(counts, config, source.name))
        else:
            raise TypeError('unknown configuration %r' % (config,))

    def write_header(self, n, name):
        if n:
            self.ofile.write(b'\n')
        self.write_text('==> %s <==\n' % name)

    def write_text(self, text):
        self.ofile.write(text.encode('utf-8'))
        self.ofile.flush()

    def echo(self):
        config = self.config
        text = ' '.join(config.text)
        if not config.omit_newline:
            text += '\n'
        self.write_text(text)


class App:

    """Command line front end shared by the tools. Subclasses build
    the parser and turn the parsed namespace into a configuration.
    """

    def __init__(self, cmd_name=None, bs=None,
                 output_file=None, error_file=None):
        self.cmd_name = cmd_name
        self.bs = bs
        self.ofile = output_file or os.fdopen(sys.stdout.fileno(), 'wb',
                                              closefd=False)
        self.efile = error_file or sys.stderr

    def parse_args(self, args):
        raise NotImplementedError

    def comprehend_params(self, params):
        raise NotImplementedError

    def run(self, args):
        params = self.parse_args(args)
        config = self.comprehend_params(params)
        files = getattr(params, 'files', None)
        try:
            Engine(config, self.ofile, self.efile, self.bs).run(files)
        finally:
            self.ofile.close()
        return 0
