# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import datetime
import os
import shutil
import sys

import colorama

from .diff_format import LineKind
from .diffing.generic import count_changes, has_changes
from .display.values import get_indent


# Separator between the two columns of a side-by-side view
SEPARATOR = " | "

# Width of the line number gutter
NUMWIDTH = 4

# Fallback terminal width
MAXWIDTH = 160


ColoredConstants = namedtuple('ColoredConstants', (
    'KEEP',
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        KEEP   = '{color}  '.format(color=''),
        REMOVE = '{color}- '.format(color=colorama.Fore.RED),
        ADD    = '{color}+ '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        KEEP   = '  ',
        REMOVE = '- ',
        ADD    = '+ ',
        INFO   = '## ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(
            self,
            out=sys.stdout,
            use_color=True,
            width=None,
            ):
        self.out = out
        self.use_color = use_color
        if width is None:
            width = shutil.get_terminal_size((MAXWIDTH, 24)).columns
        self.width = width

    @property
    def column_width(self):
        "Width available for the text of one side."
        return max(10, (self.width - len(SEPARATOR)) // 2 - NUMWIDTH - 1 - len(self.KEEP))

    @property
    def KEEP(self):
        return col_const[self.use_color].KEEP

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET

DefaultConfig = PrettyPrintConfig()


def file_timestamp(filename):
    "Return modification time for filename as a string."
    if os.path.exists(filename):
        t = os.path.getmtime(filename)
        dt = datetime.datetime.fromtimestamp(t)
        return dt.isoformat(str(" "))
    else:
        return "(no timestamp)"


def fit(text, width):
    "Pad or truncate text to exactly width characters."
    if len(text) > width:
        return text[:width - 3] + "..."
    return text.ljust(width)


def format_number(number):
    return str(number).rjust(NUMWIDTH) if number else " " * NUMWIDTH


def format_cell(line, number, config):
    """Format one side of a row, colored by line kind.

    Returns the cell text, padded to the column width.
    """
    width = config.column_width
    if line.kind == LineKind.PLACEHOLDER:
        return " " * (NUMWIDTH + 1 + len(config.KEEP) + width)
    if line.kind == LineKind.EXPANDABLE:
        text = fit(line.text, width + len(config.KEEP))
        return "%s %s%s%s" % (" " * NUMWIDTH, config.INFO.replace("## ", ""), text, config.RESET)

    text = fit(get_indent(line.indent) + line.text, width)
    if line.kind == LineKind.ADDED:
        marker = config.ADD
    elif line.kind == LineKind.REMOVED:
        marker = config.REMOVE
    else:
        marker = config.KEEP
    return "%s %s%s%s" % (format_number(number), marker, text, config.RESET)


def pretty_print_side_by_side(processed, config=DefaultConfig):
    """Print processed diff lines as two aligned columns.

    Parameters
    ----------

    processed: dict
        Output of display.process_diff, with "left", "right",
        "left_numbers" and "right_numbers"
    config: PrettyPrintConfig
        Config object determining how and where lines are printed
    """
    rows = zip(processed["left"], processed["left_numbers"],
               processed["right"], processed["right_numbers"])
    for left, lnum, right, rnum in rows:
        config.out.write("%s%s%s\n" % (
            format_cell(left, lnum, config),
            SEPARATOR,
            format_cell(right, rnum, config).rstrip()))


def pretty_print_diff_summary(nodes, config=DefaultConfig):
    counts = count_changes(nodes)
    note = "" if has_changes(nodes) else ", documents are identical"
    config.out.write("%s%d added, %d removed, %d changed, %d unchanged%s%s\n" % (
        config.INFO, counts["added"], counts["removed"], counts["changed"],
        counts["unchanged"], note, config.RESET))



document_diff_header = """\
jsondiff {afn} {bfn}
--- {afn}{atime}
+++ {bfn}{btime}
"""


def pretty_print_document_diff(afn, bfn, nodes, processed, config=DefaultConfig):
    """Pretty-print a document diff side by side

    Parameters
    ----------

    afn: str
        Filename of the left document
    bfn: str
        Filename of the right document
    nodes: list
        The diff nodes of the comparison
    processed: dict
        The numbered display lines of the comparison
    config: PrettyPrintConfig
        Config object determining what gets printed and where
    """
    atime = "  " + file_timestamp(afn)
    btime = "  " + file_timestamp(bfn)
    config.out.write(document_diff_header.format(
        afn=afn, bfn=bfn, atime=atime, btime=btime))
    pretty_print_diff_summary(nodes, config)
    pretty_print_side_by_side(processed, config)


def pretty_print_tree(node, prefix="", config=DefaultConfig):
    """Print a tree view, skipping the children of collapsed nodes."""
    if node.expandable:
        marker = "▼ " if node.expanded else "▶ "
    else:
        marker = "  "
    if node.key is None:
        label = "%s %s" % (node.type, node.summary)
    else:
        label = "%s: %s" % (node.key, node.summary)
    config.out.write("%s%s%s%s\n" % (prefix, get_indent(node.level), marker, label))
    if node.expanded:
        for child in node.children:
            pretty_print_tree(child, prefix, config)
