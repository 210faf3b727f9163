# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import importlib
import sys

from ._version import __version__

# Command name -> module providing its main()
COMMAND_MODULES = {
    "diff": "jsontapose.diffapp",
    "show": "jsontapose.showapp",
    "format": "jsontapose.formatapp",
    "diff-web": "jsontapose.webapp.diffweb",
    "server": "jsontapose.webapp.server",
}
COMMANDS = list(COMMAND_MODULES)

HELP_MESSAGE_VERBOSE = ("Usage: jsontapose [OPTIONS]\n\n"
                       "OPTIONS: -h, --version, --config, COMMANDS{%s}\n\n"
                       "Examples: jsontapose --version\n"
                       "          jsontapose diff -h\n"
                       "          jsontapose diff old.json new.json\n"
                       "          jsontapose diff-web old.yaml new.yaml\n" % ", ".join(COMMANDS))


def print_all_config():
    "List the config of every command on stderr."
    from .args import write_config_listing
    from .config import entrypoint_configurables
    sys.stderr.write('All available config options, and their current values:\n\n')
    for entrypoint in entrypoint_configurables:
        write_config_listing(entrypoint)
        sys.stderr.write('\n')


def main_dispatch(args=None):
    if args is None:
        args = sys.argv[1:]
    if not args:
        sys.exit("Option missing.\n\n%s" % HELP_MESSAGE_VERBOSE)

    cmd, args = args[0], args[1:]
    if cmd in COMMAND_MODULES:
        return importlib.import_module(COMMAND_MODULES[cmd]).main(args)

    if cmd == '--version':
        sys.exit(__version__)
    elif cmd in ('-h', '--help'):
        sys.exit(HELP_MESSAGE_VERBOSE)
    elif cmd == '--config':
        print_all_config()
        sys.exit(1)
    sys.exit("Unrecognized command '%s'\n\n%s." % (cmd, HELP_MESSAGE_VERBOSE))


if __name__ == "__main__":
    # This is triggered by "python -m jsontapose <args>"
    sys.exit(main_dispatch())
