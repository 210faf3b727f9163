# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .diff_format import AttrDict
from .display.values import render_string


# Nodes above this nesting level start out expanded
AUTO_EXPAND_LEVELS = 2


class TreeNode(AttrDict):
    pass


def type_tag(value):
    "Determine the json type name of a value."
    if value is None:
        return "null"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    return "string"


def summarize(value):
    """Inline display of a value.

    Containers show their size, `[3]` for a list of three items
    and `{2}` for a mapping with two keys.
    """
    tag = type_tag(value)
    if tag == "string":
        return render_string(value)
    elif tag == "null":
        return "null"
    elif tag == "boolean":
        return "true" if value else "false"
    elif tag == "array":
        return "[%d]" % len(value)
    elif tag == "object":
        return "{%d}" % len(value)
    return str(value)


def is_expandable(value):
    return isinstance(value, (dict, list)) and len(value) > 0


def iter_children(value):
    if isinstance(value, list):
        return [(str(i), v) for i, v in enumerate(value)]
    if isinstance(value, dict):
        return [(str(k), v) for k, v in value.items()]
    return []


def build_tree(value, key=None, level=0, expand_all=None):
    """Build an expand/collapse view of a single document.

    Parameters
    ----------

    value: object
        The parsed document, or a value within it
    key: str or None
        The key of value in its parent, None for the root
    level: int
        The nesting level of value
    expand_all: bool or None
        Force all nodes expanded (True) or collapsed (False).
        When None, only the first levels are expanded.
    """
    expandable = is_expandable(value)
    if expand_all is None:
        expanded = level < AUTO_EXPAND_LEVELS
    else:
        expanded = expand_all
    return TreeNode(
        key=key,
        type=type_tag(value),
        summary=summarize(value),
        level=level,
        expandable=expandable,
        expanded=expandable and expanded,
        children=[build_tree(v, k, level + 1, expand_all)
                  for k, v in iter_children(value)],
    )
