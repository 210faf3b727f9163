#!/usr/bin/env python
# -*- coding:utf-8 -*-

import os
import sys

from .server import main_server as run_server
from .webutil import browse as browse_util
from ..args import (
    ConfigBackedParser,
    add_generic_args, add_web_args, add_document_args, add_display_args,
    args_for_server, args_for_browse)


def build_arg_parser():
    """
    Creates an argument parser for the web diff, that also lets the
    user specify a port and displays a help message.
    """
    description = 'Compare two JSON or YAML documents in the browser.'
    parser = ConfigBackedParser(
        description=description,
        add_help=True
        )
    add_generic_args(parser)
    add_web_args(parser, 0)
    add_document_args(parser)
    add_display_args(parser)
    parser.add_argument(
        "left", help="The left (original) document filename.",
        nargs='?', default=None,
    )
    parser.add_argument(
        "right", help="The right (modified) document filename.",
        nargs='?', default=None,
    )
    return parser


def files_for_browse(arguments):
    "Url arguments making the page prefill its editors from files."
    return {'%s_file' % side: os.path.abspath(fn)
            for side, fn in (('left', arguments.left), ('right', arguments.right))
            if fn is not None}


def main_diff(opts):
    for fn in (opts.left, opts.right):
        if fn is not None and not os.path.exists(fn):
            print("Missing file {}".format(fn))
            return 1
    return run_server(
        on_port=lambda port: browse_util(
            port=port,
            rel_url='diff',
            **files_for_browse(opts),
            **args_for_browse(opts)),
        **args_for_server(opts))


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    opts = build_arg_parser().parse_args(args)
    return main_diff(opts)


if __name__ == "__main__":
    sys.exit(main())
