#!/usr/bin/python3
import sys
import re
import argparse

from textlib import App, HeadConfig, human_size_to_byte


class Head(App):

    def __init__(self, cmd_name=None, bs=None, default_lines=None,
                 output_file=None, error_file=None):
        super(Head, self).__init__(cmd_name or 'head', bs,
                                   output_file, error_file)
        self.default_lines = default_lines or 10

    def parse_args(self, args):
        p = argparse.ArgumentParser(prog=self.cmd_name,
                                    description='Print the first part of '
                                                'each FILE.')
        mode = p.add_mutually_exclusive_group()
        mode.add_argument('-n', '--lines', metavar='LINES',
                          help='print the first LINES lines '
                               '(default: %d)' % self.default_lines)
        mode.add_argument('-c', '--bytes', metavar='BYTES',
                          help='print the first BYTES bytes, a unit '
                               'suffix such as K or MB is accepted')
        p.add_argument('files', nargs='*', metavar='FILE',
                       help="with no FILE, or when FILE is -, read "
                            "standard input")
        return p.parse_args(args)

    def comprehend_params(self, params):
        """AssertionError will be raised for wrong argument"""
        if params.bytes is not None:
            amount = human_size_to_byte(params.bytes)
            assert amount > 0, "invalid number of bytes: %s" % params.bytes
            return HeadConfig(lines=None, bytes=amount)

        if params.lines is not None:
            val = params.lines
            assert re.match(r'^[0-9]+$', val), \
                "invalid number of lines: %s" % val
            amount = int(val)
            assert amount > 0, "invalid number of lines: %s" % val
        else:
            amount = self.default_lines
        return HeadConfig(lines=amount, bytes=None)


if __name__ == '__main__':
    app = Head()
    args = sys.argv[1:]
    try:
        status = app.run(args)
    except (AssertionError, OSError) as e:
        print('head: %s' % e, file=sys.stderr)
        exit(1)
    exit(status)
