# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys


def truncate_filename(name, limit=20):
    "Shorten a filename for use in error messages."
    if len(name) < limit:
        return name
    return name[:limit-3] + "..."


def _escape_unencodable_output():
    """Make sys.stdout/err escape characters they cannot encode.

    Documents may contain any unicode, which should not crash
    printing on a terminal with a narrower encoding.
    """
    if os.getenv('PYTHONIOENCODING'):
        # setting PYTHONIOENCODING overrides anything we would do here
        return
    for name in ('stdout', 'stderr'):
        stream = getattr(sys, name)
        if stream is not getattr(sys, '__%s__' % name):
            # don't touch captured or redirected output
            continue
        if getattr(stream, 'errors', 'strict') == 'strict' and hasattr(stream, 'reconfigure'):
            stream.reconfigure(errors='backslashreplace')


def setup_std_streams():
    """Setup sys.stdout/err for the command line apps

    - unencodable characters are escaped rather than raising errors
    - enables colorama for ANSI escapes on Windows
    """
    _escape_unencodable_output()
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()
