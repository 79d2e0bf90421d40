#!/usr/bin/python3
import sys
import argparse

from textlib import App, DisplayConfig


class Cat(App):

    def __init__(self, cmd_name=None, bs=None,
                 output_file=None, error_file=None):
        super(Cat, self).__init__(cmd_name or 'cat', bs or 1048576,
                                  output_file, error_file)

    def parse_args(self, args):
        p = argparse.ArgumentParser(prog=self.cmd_name,
                                    description='Concatenate files and '
                                                'print them.')
        p.add_argument('-A', '--show-all', action='store_true',
                       help='equivalent to -vET')
        number = p.add_mutually_exclusive_group()
        number.add_argument('-b', '--number-nonblank', action='store_true',
                            help='number nonempty output lines')
        number.add_argument('-n', '--number', action='store_true',
                            help='number all output lines')
        p.add_argument('-e', dest='show_nonprint_ends', action='store_true',
                       help='equivalent to -vE')
        p.add_argument('-E', '--show-ends', action='store_true',
                       help='display $ at end of each line')
        p.add_argument('-s', '--squeeze-blank', action='store_true',
                       help='suppress repeated empty output lines')
        p.add_argument('-t', dest='show_nonprint_tabs', action='store_true',
                       help='equivalent to -vT')
        p.add_argument('-T', '--show-tabs', action='store_true',
                       help='display TAB characters as ^I')
        p.add_argument('-v', '--show-nonprinting', action='store_true',
                       help='use ^ notation, except for LFD and TAB')
        p.add_argument('files', nargs='*', metavar='FILE',
                       help="with no FILE, or when FILE is -, read "
                            "standard input")
        return p.parse_args(args)

    def comprehend_params(self, params):
        """Expand the shorthand options into the basic ones"""
        if params.show_all:
            params.show_nonprinting = params.show_ends = True
            params.show_tabs = True
        if params.show_nonprint_ends:
            params.show_nonprinting = params.show_ends = True
        if params.show_nonprint_tabs:
            params.show_nonprinting = params.show_tabs = True

        return DisplayConfig(number=params.number,
                             number_nonblank=params.number_nonblank,
                             show_ends=params.show_ends,
                             show_tabs=params.show_tabs,
                             show_nonprinting=params.show_nonprinting,
                             squeeze_blank=params.squeeze_blank)


if __name__ == '__main__':
    app = Cat()
    args = sys.argv[1:]
    try:
        status = app.run(args)
    except (AssertionError, OSError) as e:
        print('cat: %s' % e, file=sys.stderr)
        exit(1)
    exit(status)
