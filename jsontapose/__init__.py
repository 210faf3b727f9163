# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import diff, count_changes
from .display import process_diff
from .documents import compare, parse
from .tree import build_tree


__all__ = [
    "__version__",
    "diff", "count_changes",
    "compare", "parse",
    "process_diff",
    "build_tree",
    ]
