# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..diff_format import LineKind


def number_lines(lines):
    """Calculate line numbers for one side.

    Placeholders and expandables get 0.  An expandable advances the
    counter by the number of lines it hides, so that the next shown
    line keeps its number from the unfiltered view.
    """
    numbers = []
    counter = 1
    for line in lines:
        if line.kind == LineKind.PLACEHOLDER:
            numbers.append(0)
        elif line.kind == LineKind.EXPANDABLE:
            numbers.append(0)
            counter += line.get("collapsed_count", 0)
        else:
            numbers.append(counter)
            counter += 1
    return numbers
