# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Configurable defaults of the jsontapose commands.

Every command has a configurable class below. Its config traits, and
those of the option groups it inherits from, give the defaults of the
command line options. `jsontapose_config.json` files can override them
per class name, e.g. ``{"Diff": {"use_color": false}}``.
"""

import os

from traitlets import Unicode, Enum, Integer, Bool, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .display import CONTEXT_LINE_CHOICES, DEFAULT_CONTEXT_LINES
from .documents import FORMATS


CONFIG_FILENAME = 'jsontapose_config.json'

# Directory for per-user config files
USER_CONFIG_DIR = os.path.join(os.path.expanduser('~'), '.jsontapose')


class JsontaposeConfigurable(HasTraits):

    def configured_traits(self, cls):
        "Values of the config traits `cls` declares itself."
        return {name: getattr(self, name)
                for name in cls.class_own_traits(config=True)}


_instances = {}

def config_instance(cls):
    if cls not in _instances:
        _instances[cls] = cls()
    return _instances[cls]


def config_path():
    "Config file directories, in descending priority order."
    return [os.getcwd(), USER_CONFIG_DIR]


def load_config_files(path):
    """Read every config file found in `path`.

    Configs are returned lowest priority first, so that later ones
    can be merged over earlier ones.
    """
    found = []
    for directory in reversed(path):
        loader = JSONFileConfigLoader(CONFIG_FILENAME, path=directory)
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            continue
        if config:
            found.append(config)
    return found


def recursive_update(target, new, include_none):
    """Merge `new` into `target`, descending into nested dicts.

    Unless `include_none` is set, None values remove their key and
    nested dicts left empty are dropped.
    """
    for key, value in new.items():
        if isinstance(value, dict):
            sub = target.setdefault(key, {})
            recursive_update(sub, value, include_none)
            if not sub and not include_none:
                del target[key]
        elif value is None and not include_none:
            target.pop(key, None)
        else:
            target[key] = value


def build_config(entrypoint, include_none=False):
    """Effective config of an entry point.

    Trait defaults and file sections are applied per configurable class,
    from the most generic class to the entry point's own.
    """
    try:
        configurable = entrypoint_configurables[entrypoint]
    except KeyError:
        raise ValueError('No config defined for entry point %r. Known entry points: %s.' % (
            entrypoint, ', '.join(sorted(entrypoint_configurables))))

    from_files = {}
    for c in load_config_files(config_path()):
        recursive_update(from_files, c, include_none)

    config = {}
    for cls in reversed(configurable.mro()):
        if not issubclass(cls, JsontaposeConfigurable):
            continue
        recursive_update(config, config_instance(cls).configured_traits(cls), include_none)
        recursive_update(config, from_files.get(cls.__name__, {}), include_none)
    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(JsontaposeConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class _Document(Global):

    format = Enum(
        FORMATS,
        None,
        allow_none=True,
        help="The document format, guessed from the file extension when unset.",
    ).tag(config=True)


class _Display(Global):

    show_only_diff = Bool(
        True,
        help="Collapse unchanged lines away from changes.",
    ).tag(config=True)

    context_lines = Enum(
        CONTEXT_LINE_CHOICES,
        DEFAULT_CONTEXT_LINES,
        help="Number of unchanged lines to keep around each change.",
    ).tag(config=True)


class Web(Global):

    port = Integer(
        0,
        help="Port to serve on, 0 picks a free one.",
    ).tag(config=True)

    ip = Unicode(
        '127.0.0.1',
        help="Interface to listen on. Anything other than 127.0.0.1 exposes "
             "the files of the working directory to the network.",
    ).tag(config=True)

    base_url = Unicode(
        '/', help="Url prefix of every page and api route.",
    ).tag(config=True)

    browser = Unicode(
        None,
        allow_none=True,
        help="Name of the browser to open instead of the system default.",
    ).tag(config=True)

    persist = Bool(
        False, help="Keep serving when the page asks the server to close.",
    ).tag(config=True)

    workdirectory = Unicode(
        default_value=os.path.abspath(os.path.curdir),
        help="Directory that document filenames are resolved against.",
    ).tag(config=True)


class Diff(_Document, _Display):

    use_color = Bool(
        True,
        help="Use ANSI color code escapes for text output.",
    ).tag(config=True)


class JsonDiff(Diff):
    pass


class JsonDiffWeb(Web, _Document, _Display):
    pass


class JsonShow(_Document):

    expand_all = Bool(
        None,
        allow_none=True,
        help="Expand (True) or collapse (False) all nodes, "
             "instead of only the first levels.",
    ).tag(config=True)


class JsonFormat(_Document):
    pass


class Server(Web, _Display):

    port = Integer(
        8888,
        help="Port to serve on.",
    ).tag(config=True)


entrypoint_configurables = {
    'jsondiff': JsonDiff,
    'jsondiff-web': JsonDiffWeb,
    'jsonshow': JsonShow,
    'jsonformat': JsonFormat,
    'server': Server,
}
