# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .generic import diff, count_changes, has_changes

__all__ = ["diff", "count_changes", "has_changes"]
