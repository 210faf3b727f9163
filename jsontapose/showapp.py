# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from .args import add_generic_args, add_document_args, ConfigBackedParser
from .documents import read_document
from .log import DocumentError
from .prettyprint import pretty_print_tree, PrettyPrintConfig
from .tree import build_tree
from .utils import setup_std_streams


_description = """Show a JSON or YAML document as a tree in terminal.
By default the first two levels are expanded.
"""


def main_show(args):

    if len(args.document) == 1 and args.document[0] == "-":
        files = [sys.stdin]
    else:
        for fn in args.document:
            if not os.path.exists(fn):
                print("Missing file {}".format(fn))
                return 1
        files = args.document
        if not files:
            print("Missing filenames.")
            return 1

    for fn in files:
        try:
            value = read_document(fn, args.format)
        except DocumentError as e:
            print("{}: {}".format(getattr(fn, 'name', fn), e.message))
            return 1

        # Print through print() so output replaced by capsys is captured
        class Printer:
            def write(self, text):
                print(text, end="")

        config = PrettyPrintConfig(out=Printer())

        if len(args.document) > 1:
            # 'more' prints filenames with colons, should be good enough for us as well
            print(":"*14)
            print(fn)
            print(":"*14)
        pretty_print_tree(build_tree(value, expand_all=args.expand_all), config=config)

    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the jsonshow command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        add_help=True,
        )
    add_generic_args(parser)
    add_document_args(parser)
    parser.add_argument("document", nargs="*", help="document filename(s) or - to read from stdin")

    expansion = parser.add_mutually_exclusive_group()
    expansion.add_argument(
        '-e', '--expand-all',
        dest='expand_all',
        action='store_const', const=True, default=None,
        help="expand all nodes.")
    expansion.add_argument(
        '-c', '--collapse-all',
        dest='expand_all',
        action='store_const', const=False,
        help="collapse all nodes.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_show(arguments)


if __name__ == "__main__":
    sys.exit(main())
