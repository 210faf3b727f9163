# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import os
import sys

from .args import add_generic_args, add_document_args, ConfigBackedParser
from .documents import detect_format, format_document
from .log import DocumentError, info
from .utils import setup_std_streams


_description = "Pretty-print a JSON or YAML document with 2-space indentation."


def main_format(args):
    fn = args.document
    if not os.path.exists(fn):
        print("Missing file {}".format(fn))
        return 1

    fmt = args.format or detect_format(fn)
    with io.open(fn, encoding='utf8') as f:
        text = f.read()

    try:
        formatted = format_document(text, fmt)
    except DocumentError as e:
        print("{}: {}".format(fn, e.message))
        return 1

    if args.in_place:
        if not formatted.endswith("\n"):
            formatted += "\n"
        with io.open(fn, 'w', encoding='utf8') as f:
            f.write(formatted)
        info("Formatted %s", fn)
    else:
        print(formatted.rstrip("\n"))
    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the jsonformat command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_document_args(parser)
    parser.add_argument("document", help="the document filename.")
    parser.add_argument(
        '-i', '--in-place',
        action='store_true',
        default=False,
        help="write the formatted document back to the file "
             "instead of printing it.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_format(arguments)


if __name__ == "__main__":
    sys.exit(main())
