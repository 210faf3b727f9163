# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import DiffNodeFormatError


class AttrDict(dict):
    """For internal usage in jsontapose library.

    Minimal dict subclass providing attribute access to its keys,
    so that nodes and lines serialize directly to json.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value


class DiffNode(AttrDict):
    pass


class DisplayLine(AttrDict):
    pass


class DiffKind:
    "Collection of valid values for the kind field in diff nodes."
    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"
    CHANGED = "changed"

    ALL = (UNCHANGED, ADDED, REMOVED, CHANGED)


class LineKind:
    "Collection of valid values for the kind field in display lines."
    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"
    HEADER = "header"
    PLACEHOLDER = "placeholder"
    EXPANDABLE = "expandable"

    ALL = (UNCHANGED, ADDED, REMOVED, HEADER, PLACEHOLDER, EXPANDABLE)


class BracketRole:
    OPENING = "opening"
    CLOSING = "closing"


# Sentinel to allow None as a value
Missing = object()


def make_node(key, kind, path, value_left=Missing, value_right=Missing, children=None):
    "Create a diff node, leaving out values that are not present."
    node = DiffNode(key=key, kind=kind, path=list(path))
    if value_left is not Missing:
        node.value_left = value_left
    if value_right is not Missing:
        node.value_right = value_right
    if children is not None:
        node.children = children
    return node


def make_line(text, kind, indent, bracket=None, comma=False, **extra):
    "Create a display line."
    line = DisplayLine(text=text, kind=kind, indent=indent, bracket=bracket, comma=comma)
    line.update(extra)
    return line


def placeholder_for(line):
    "Create the empty counterpart of a line shown on the other side."
    return make_line("", LineKind.PLACEHOLDER, line.indent, comma=line.comma)


def validate_nodes(nodes, deep=False):
    """Check whether a sequence of diff nodes is well formed.

    Raises a DiffNodeFormatError if not well formed.
    """
    if not isinstance(nodes, list):
        raise DiffNodeFormatError("Diff nodes must be a list.")
    keys = set()
    for node in nodes:
        validate_node(node, deep=deep)
        if node.key in keys:
            raise DiffNodeFormatError("Duplicate diff node key '{}'.".format(node.key))
        keys.add(node.key)


def validate_node(node, deep=False):
    """Check that node is a well formed diff node.

    Raises a DiffNodeFormatError if not well formed.
    """
    if not isinstance(node, DiffNode):
        raise DiffNodeFormatError("Diff node '{}' is not a node type.".format(node))
    for field in ("key", "kind", "path"):
        if field not in node:
            raise DiffNodeFormatError("Diff node is missing '{}'.".format(field))
    if not isinstance(node.key, str):
        raise DiffNodeFormatError(
            "Invalid diff node key '{}' of type '{}'.".format(node.key, type(node.key)))

    kind = node.kind
    has_left = "value_left" in node
    has_right = "value_right" in node
    if kind == DiffKind.ADDED:
        if has_left or not has_right:
            raise DiffNodeFormatError("Added node '{}' must only carry a right value.".format(node.key))
    elif kind == DiffKind.REMOVED:
        if has_right or not has_left:
            raise DiffNodeFormatError("Removed node '{}' must only carry a left value.".format(node.key))
    elif kind == DiffKind.UNCHANGED:
        if not has_left:
            raise DiffNodeFormatError("Unchanged node '{}' must carry a left value.".format(node.key))
    elif kind == DiffKind.CHANGED:
        if not (has_left and has_right):
            raise DiffNodeFormatError("Changed node '{}' must carry both values.".format(node.key))
    else:
        raise DiffNodeFormatError("Unknown diff node kind '{}'.".format(kind))

    if "children" in node:
        if kind in (DiffKind.ADDED, DiffKind.REMOVED):
            raise DiffNodeFormatError(
                "{} node '{}' cannot have children.".format(kind.capitalize(), node.key))
        if not isinstance(node.value_left, (dict, list)):
            raise DiffNodeFormatError(
                "Node '{}' has children but its value is not a container.".format(node.key))
        if kind == DiffKind.CHANGED and not any(
                c.kind != DiffKind.UNCHANGED for c in node.children):
            raise DiffNodeFormatError(
                "Changed node '{}' has no changed children.".format(node.key))
        # Recursion is optional to avoid O(>n) pitfalls on large documents
        if deep:
            validate_nodes(node.children, deep=deep)
