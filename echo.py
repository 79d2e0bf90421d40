#!/usr/bin/python3
import sys
import argparse

from textlib import App, EchoConfig


class Echo(App):

    def __init__(self, cmd_name=None, output_file=None, error_file=None):
        super(Echo, self).__init__(cmd_name or 'echo', None,
                                   output_file, error_file)

    def parse_args(self, args):
        p = argparse.ArgumentParser(prog=self.cmd_name,
                                    description='Display a line of text.')
        p.add_argument('-n', dest='omit_newline', action='store_true',
                       help='do not output the trailing newline')
        p.add_argument('text', nargs='+', metavar='TEXT',
                       help='input text')
        return p.parse_args(args)

    def comprehend_params(self, params):
        return EchoConfig(text=tuple(params.text),
                          omit_newline=params.omit_newline)


if __name__ == '__main__':
    app = Echo()
    args = sys.argv[1:]
    try:
        status = app.run(args)
    except (AssertionError, OSError) as e:
        print('echo: %s' % e, file=sys.stderr)
        exit(1)
    exit(status)
