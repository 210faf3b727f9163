# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..diff_format import validate_nodes
from ..log import debug
from .context import filter_lines
from .numbering import number_lines
from .projection import project
from .values import render_value

__all__ = [
    "CONTEXT_LINE_CHOICES", "DEFAULT_CONTEXT_LINES",
    "process_diff", "project", "filter_lines", "number_lines", "render_value",
    ]


CONTEXT_LINE_CHOICES = (0, 1, 2, 3, 5, 10)

DEFAULT_CONTEXT_LINES = 3


def process_diff(nodes, show_only_diff=True, context_lines=DEFAULT_CONTEXT_LINES):
    """Turn diff nodes into numbered lines for a side-by-side view.

    Projects the nodes onto two aligned line sequences, collapses
    unchanged runs when `show_only_diff` is set and numbers each side.
    Expanding a collapsed run is the same call with `show_only_diff=False`.

    Returns a dict with "left", "right", "left_numbers" and "right_numbers".
    Malformed top level nodes raise DiffNodeFormatError.
    """
    validate_nodes(nodes)
    if context_lines not in CONTEXT_LINE_CHOICES:
        raise ValueError('context_lines must be one of %r, got %r' % (
            CONTEXT_LINE_CHOICES, context_lines))

    full = project(nodes)
    if show_only_diff:
        lines = filter_lines(full["left"], full["right"], context_lines)
    else:
        lines = full
    debug("Projected %d lines, showing %d", len(full["left"]), len(lines["left"]))

    return {
        "left": lines["left"],
        "right": lines["right"],
        "left_numbers": number_lines(lines["left"]),
        "right_numbers": number_lines(lines["right"]),
        }
