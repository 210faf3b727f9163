# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Projection of a diff node tree onto two aligned sequences of lines.

Line i on the left and line i on the right always stand for the same
position in the compared structure.  Where a key exists on one side
only, the other side gets a placeholder line.
"""

from ..diff_format import (
    DiffKind, LineKind, BracketRole, make_line, placeholder_for,
)
from ..log import DiffNodeFormatError
from .values import render_key, render_value

__all__ = ["project"]


def brackets_for(value):
    if isinstance(value, list):
        return "[", "]"
    return "{", "}"


def property_text(key, rendered, is_last):
    return "%s: %s%s" % (render_key(key), rendered, "" if is_last else ",")


def opening_line(key, bracket, kind, indent):
    return make_line("%s: %s" % (render_key(key), bracket), kind, indent,
                     bracket=BracketRole.OPENING)


def closing_line(bracket, kind, indent, is_last):
    return make_line(bracket + ("" if is_last else ","), kind, indent,
                     bracket=BracketRole.CLOSING, comma=not is_last)


def expand_value(key, value, kind, indent, is_last):
    """Render a value and all of its descendants as lines of one kind.

    Non-empty containers open a bracket on the key line, list their
    items one level deeper and close the bracket on a line of its own.
    """
    if not (isinstance(value, (dict, list)) and value):
        return [make_line(property_text(key, render_value(value), is_last),
                          kind, indent, comma=not is_last)]

    opening, closing = brackets_for(value)
    if isinstance(value, list):
        items = [(str(i), v) for i, v in enumerate(value)]
    else:
        items = list(value.items())

    lines = [opening_line(key, opening, kind, indent)]
    for i, (k, v) in enumerate(items):
        lines.extend(expand_value(k, v, kind, indent + 1, i == len(items) - 1))
    lines.append(closing_line(closing, kind, indent, is_last))
    return lines


def project_one_sided(present, absent, lines):
    "Add lines to one side, with a placeholder for each on the other side."
    present.extend(lines)
    absent.extend(placeholder_for(line) for line in lines)


def project_container(left, right, node, indent, is_last):
    # Bracket pairs of aligned containers stay neutral,
    # only their descendants carry colour
    value = node.get("value_left", node.get("value_right"))
    opening, closing = brackets_for(value)
    for lines in (left, right):
        lines.append(opening_line(node.key, opening, LineKind.UNCHANGED, indent))
    project_children(left, right, node.children, indent)
    for lines in (left, right):
        lines.append(closing_line(closing, LineKind.UNCHANGED, indent, is_last))


def project_node(left, right, node, indent, is_last):
    kind = node.kind
    if kind == DiffKind.ADDED:
        project_one_sided(right, left, expand_value(
            node.key, node.value_right, LineKind.ADDED, indent, is_last))
    elif kind == DiffKind.REMOVED:
        project_one_sided(left, right, expand_value(
            node.key, node.value_left, LineKind.REMOVED, indent, is_last))
    elif node.get("children"):
        project_container(left, right, node, indent, is_last)
    elif kind == DiffKind.UNCHANGED:
        text = property_text(node.key, render_value(node.value_left), is_last)
        for lines in (left, right):
            lines.append(make_line(text, LineKind.UNCHANGED, indent, comma=not is_last))
    elif kind == DiffKind.CHANGED:
        # A changed leaf is shown as a removal next to an addition
        left.append(make_line(
            property_text(node.key, render_value(node.value_left), is_last),
            LineKind.REMOVED, indent, comma=not is_last))
        right.append(make_line(
            property_text(node.key, render_value(node.value_right), is_last),
            LineKind.ADDED, indent, comma=not is_last))
    else:
        raise DiffNodeFormatError("Unknown diff node kind '{}'.".format(kind))


def project_children(left, right, nodes, indent):
    for i, node in enumerate(nodes):
        project_node(left, right, node, indent + 1, i == len(nodes) - 1)


def project(nodes):
    """Expand diff nodes into two parallel sequences of display lines.

    Parameters
    ----------

    nodes: list
        Diff nodes for the keys of the root objects

    Returns
    -------

    A dict with "left" and "right" lists of equal length.
    """
    left = []
    right = []
    for lines in (left, right):
        lines.append(make_line("{", LineKind.HEADER, 0, bracket=BracketRole.OPENING))
    project_children(left, right, nodes, 0)
    for lines in (left, right):
        lines.append(make_line("}", LineKind.HEADER, 0, bracket=BracketRole.CLOSING))
    assert len(left) == len(right), 'projected sides must have equal length'
    return {"left": left, "right": right}
