# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import os
import sys

from ._version import __version__
from .config import (
    get_defaults_for_argparse, build_config, entrypoint_configurables,
)
from .display import CONTEXT_LINE_CHOICES, DEFAULT_CONTEXT_LINES
from .documents import FORMATS
from .log import init_logging, set_jsontapose_log_level


LOG_LEVELS = ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL')


class ConfigBackedParser(argparse.ArgumentParser):
    """Argument parser taking its defaults from the jsontapose config.

    The first word of `prog` names the entry point whose configurable
    provides the defaults. Parsers for entry points without a
    configurable keep their hardcoded defaults.
    """

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        if entrypoint in entrypoint_configurables:
            self.set_defaults(**get_defaults_for_argparse(entrypoint))
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # Logging must be set up even when the option is never given
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_jsontapose_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        set_jsontapose_log_level(getattr(logging, values), True)


def modify_config_for_print(config):
    "Render config values the way they would be written in a config file."
    printable = {}
    for key, value in config.items():
        if isinstance(value, dict):
            printable[key] = modify_config_for_print(value) or '{}'
        else:
            printable[key] = json.dumps(value)
    return printable


def write_config_listing(entrypoint, out=None):
    "Write the effective config of an entry point, one key per line."
    out = out or sys.stderr
    out.write("%s:\n" % entrypoint_configurables[entrypoint].__name__)
    config = modify_config_for_print(build_config(entrypoint, True))
    for key in sorted(config):
        out.write("  %s: %s\n" % (key, config[key]))


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        write_config_listing(parser.prog)
        sys.exit(1)


def add_generic_args(parser):
    """Adds the options shared by every jsontapose command.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="print the config keys of this command with their effective values, then exit",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=LOG_LEVELS,
        help="how verbose the log output should be.",
        action=LogLevelAction,
    )


def add_document_args(parser):
    """Adds the option selecting the document format.
    """
    parser.add_argument(
        '-f', '--format',
        default=None,
        choices=FORMATS,
        help="the document format. Guessed from the file extension by default.")


def add_display_args(parser):
    """Adds a set of arguments controlling which diff lines are shown.
    """
    parser.add_argument(
        '-A', '--show-all',
        dest='show_only_diff',
        action="store_false",
        default=True,
        help="show all lines instead of collapsing unchanged ones")
    parser.add_argument(
        '-C', '--context-lines',
        default=DEFAULT_CONTEXT_LINES,
        type=int,
        choices=CONTEXT_LINE_CHOICES,
        help="number of unchanged lines to show around each change.")


def add_prettyprint_args(parser):
    """Adds the options of the terminal diff printer.
    """
    parser.add_argument(
        '--no-color',
        dest='use_color',
        action="store_false",
        default=True,
        help="print plain text without ANSI color codes")
    parser.add_argument(
        '--width',
        type=int,
        default=None,
        help="total output width. Defaults to the terminal width.")


def add_web_args(parser, default_port=8888):
    """Adds the options of commands serving the browser interface.
    """
    if default_port == 0:
        port_help = "port to serve on. Picks a free port by default."
    else:
        port_help = "port to serve on. Default is %d." % default_port
    parser.add_argument(
        '-p', '--port',
        default=default_port,
        type=int,
        help=port_help)
    parser.add_argument(
        '-b', '--browser',
        default=None,
        type=str,
        help="name of the browser to open instead of the system default.")
    parser.add_argument(
        '--persist',
        action="store_true",
        default=False,
        help="keep serving when the page asks the server to close.")
    parser.add_argument(
        '--ip',
        default='127.0.0.1',
        help="interface to listen on. Anything other than 127.0.0.1 exposes "
             "the files of the working directory to the network.")
    parser.add_argument(
        '-w', '--workdirectory',
        default=os.path.abspath(os.path.curdir),
        help="directory that document filenames are resolved against. "
             "Defaults to the current directory.")
    parser.add_argument(
        '--base-url',
        default='/',
        help="url prefix of every page and api route.")


def prettyprint_config_from_args(arguments, **kwargs):
    from .prettyprint import PrettyPrintConfig
    return PrettyPrintConfig(
        use_color=getattr(arguments, 'use_color', True),
        width=getattr(arguments, 'width', None),
        **kwargs
    )


# Argument name -> main_server keyword
_server_keywords = {
    'ip': 'ip',
    'port': 'port',
    'workdirectory': 'cwd',
    'base_url': 'base_url',
    'format': 'format',
    'show_only_diff': 'show_only_diff',
    'context_lines': 'context_lines',
}

# Argument name -> webutil.browse keyword
_browse_keywords = {
    'ip': 'ip',
    'browser': 'browsername',
    'base_url': 'base_url',
}


def _rename(arguments, keywords):
    return {keywords[k]: v for k, v in vars(arguments).items() if k in keywords}


def args_for_server(arguments):
    """Keyword arguments for webapp.server.main_server"""
    kwargs = _rename(arguments, _server_keywords)
    if 'persist' in arguments:
        kwargs['closable'] = not arguments.persist
    return kwargs


def args_for_browse(arguments):
    """Keyword arguments for webapp.webutil.browse"""
    return _rename(arguments, _browse_keywords)
