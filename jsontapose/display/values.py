# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json


# Indentation offset per nesting level
IND = "  "

_escapes = (
    ("\\", "\\\\"),  # backslash first
    ("\n", "\\n"),
    ("\r", "\\r"),
    ("\t", "\\t"),
    ("\f", "\\f"),
    ("\v", "\\v"),
)


def render_string(s):
    "Quote a string, escaping backslashes and control whitespace."
    for char, escaped in _escapes:
        s = s.replace(char, escaped)
    return '"%s"' % s


def render_compact(value):
    """Render a container on a single line.

    Uses the indented json form with the inner lines stripped
    and joined by spaces, e.g. `{ "a": 1, "b": [ 2 ] }`.
    """
    text = json.dumps(value, indent=2, ensure_ascii=False, default=str)
    lines = text.split("\n")
    return " ".join([lines[0]] + [line.strip() for line in lines[1:]])


def render_value(value):
    "Format a value for display in a single line."
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return render_string(value)
    if isinstance(value, (int, float)):
        return json.dumps(value)
    if isinstance(value, (dict, list)):
        return render_compact(value)
    return str(value)


def render_key(key):
    return render_string(str(key))


def get_indent(level):
    "Create indentation, two spaces per level."
    return IND * level
