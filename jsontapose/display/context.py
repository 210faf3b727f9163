# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..diff_format import DisplayLine, LineKind, make_line

__all__ = ["filter_lines"]


CHANGE_KINDS = (LineKind.ADDED, LineKind.REMOVED)


def expandable_text(count):
    return "... %d same lines ..." % count


def is_change(line):
    return line.kind in CHANGE_KINDS


def interesting_indices(left, right, context):
    """Indices of changed lines on either side, widened by context.

    The first and last index are always included.
    """
    n = len(left)
    keep = set()
    for i in range(n):
        if is_change(left[i]) or is_change(right[i]):
            keep.update(range(max(0, i - context), min(n - 1, i + context) + 1))
    if n:
        keep.add(0)
        keep.add(n - 1)
    return keep


def collapsed_line(start, end):
    count = end - start + 1
    return make_line(expandable_text(count), LineKind.EXPANDABLE, 0,
                     collapsed_count=count,
                     collapsed_range={"start": start, "end": end})


def filter_lines(left, right, context):
    """Keep changed lines and their context, collapse the rest.

    Every run of hidden lines is replaced by a single expandable line on
    each side, carrying the number of lines it hides and their index range
    in the unfiltered sequence.  Kept lines are copied and annotated with
    their `original_index`.  A context of None keeps all lines.
    """
    if len(left) != len(right):
        raise ValueError('Cannot filter sides of different length: %d and %d' % (
            len(left), len(right)))
    if context is None:
        keep = set(range(len(left)))
    elif context < 0:
        raise ValueError('Context must be non-negative, got %r' % (context,))
    else:
        keep = interesting_indices(left, right, context)

    new_left = []
    new_right = []
    start = None
    for i in range(len(left)):
        if i not in keep:
            if start is None:
                start = i
            continue
        if start is not None:
            new_left.append(collapsed_line(start, i - 1))
            new_right.append(collapsed_line(start, i - 1))
            start = None
        new_left.append(DisplayLine(left[i], original_index=i))
        new_right.append(DisplayLine(right[i], original_index=i))

    # Unreachable while the last index is kept, but do not drop lines
    if start is not None:
        new_left.append(collapsed_line(start, len(left) - 1))
        new_right.append(collapsed_line(start, len(left) - 1))

    return {"left": new_left, "right": new_right}
