#!/usr/bin/python3
import sys
import argparse

from textlib import App, CountConfig


class Wc(App):

    def __init__(self, cmd_name=None, bs=None,
                 output_file=None, error_file=None):
        super(Wc, self).__init__(cmd_name or 'wc', bs,
                                 output_file, error_file)

    def parse_args(self, args):
        p = argparse.ArgumentParser(prog=self.cmd_name,
                                    description='Print line, word and byte '
                                                'counts for each FILE, and '
                                                'a total line if more than '
                                                'one FILE is specified.')
        p.add_argument('-l', '--lines', action='store_true',
                       help='print the newline counts')
        p.add_argument('-w', '--words', action='store_true',
                       help='print the word counts')
        size = p.add_mutually_exclusive_group()
        size.add_argument('-c', '--bytes', action='store_true',
                          help='print the byte counts')
        size.add_argument('-m', '--chars', action='store_true',
                          help='print the character counts')
        p.add_argument('files', nargs='*', metavar='FILE',
                       help="with no FILE, or when FILE is -, read "
                            "standard input")
        return p.parse_args(args)

    def comprehend_params(self, params):
        # lines, words and bytes when nothing is selected
        if not any([params.lines, params.words, params.bytes, params.chars]):
            params.lines = params.words = params.bytes = True
        return CountConfig(lines=params.lines, words=params.words,
                           bytes=params.bytes, chars=params.chars)


if __name__ == '__main__':
    app = Wc()
    args = sys.argv[1:]
    try:
        status = app.run(args)
    except (AssertionError, OSError) as e:
        print('wc: %s' % e, file=sys.stderr)
        exit(1)
    exit(status)
