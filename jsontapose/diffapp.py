# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os
import sys

from .args import (
    add_generic_args, add_document_args, add_display_args,
    add_prettyprint_args, ConfigBackedParser, prettyprint_config_from_args,
    )
from .display import process_diff
from .documents import compare_documents, read_document
from .log import DocumentError, exception
from .prettyprint import pretty_print_document_diff
from .utils import setup_std_streams


_description = "Compare two JSON or YAML documents side by side."


def main_diff(args):
    """Compare two document files and print or store the result."""
    for fn in (args.left, args.right):
        if not os.path.exists(fn):
            print("Missing file {}".format(fn))
            return 1

    try:
        left = read_document(args.left, args.format, side="left")
        right = read_document(args.right, args.format, side="right")
        nodes = compare_documents(left, right)
    except DocumentError as e:
        side = args.left if e.side == "left" else args.right
        print("{}: {}".format(side, e.message) if e.side else e.message)
        return 1

    try:
        processed = process_diff(nodes, args.show_only_diff, args.context_lines)
    except Exception:
        exception('Error while rendering diff of %s and %s', args.left, args.right)
        return 2

    if args.out:
        with io.open(args.out, "w", encoding="utf8") as df:
            json.dump(nodes, df, indent=2, separators=(",", ": "))
        return 0

    # Print through print() so output replaced by capsys is captured
    class Printer:
        def write(self, text):
            print(text, end="")
    config = prettyprint_config_from_args(args, out=Printer())
    pretty_print_document_diff(args.left, args.right, nodes, processed, config)
    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the jsondiff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_document_args(parser)
    add_display_args(parser)
    add_prettyprint_args(parser)

    parser.add_argument(
        "left", help="the left (original) document filename.")
    parser.add_argument(
        "right", help="the right (modified) document filename.")
    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the diff nodes are written to this file as json. "
             "Otherwise the diff is printed to the terminal.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
