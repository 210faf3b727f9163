# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import Counter
from itertools import chain
import json

from ..diff_format import DiffKind, make_node
from ..log import debug

__all__ = ["diff"]


def is_container(value):
    "Return True for values that diff should recurse into."
    return isinstance(value, (dict, list))


def iter_keys(value):
    "Keys of a container as strings, indices for lists."
    if isinstance(value, list):
        return [str(i) for i in range(len(value))]
    return [str(k) for k in value]


def string_keys(value):
    "Return a mapping with all keys converted to strings."
    if isinstance(value, dict) and not all(isinstance(k, str) for k in value):
        return {str(k): v for k, v in value.items()}
    return value


def has_key(value, key):
    if isinstance(value, list):
        return int(key) < len(value)
    return key in value


def get_item(value, key):
    if isinstance(value, list):
        return value[int(key)]
    return value[key]


def json_number(value):
    """Map integral floats to int, as json has a single number type.

    Bools are left alone, `true` and `1` are different json values.
    """
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, dict):
        return {k: json_number(v) for k, v in value.items()}
    if isinstance(value, list):
        return [json_number(v) for v in value]
    return value


def canonical(value):
    "Serialize a value so that structurally equal values compare equal."
    return json.dumps(json_number(value), sort_keys=True, default=str)


def compare_values(a, b):
    "Compare two values by their canonical serialization."
    return canonical(a) == canonical(b)


def diff(a, b, path=()):
    """Compute the diff of two json-like containers.

    Returns one diff node per key in the union of both key sets:
    keys of `a` in order, followed by keys only present in `b`.
    Lists are compared by index.  None is treated as an empty mapping.
    """
    if a is None:
        a = {}
    if b is None:
        b = {}
    if isinstance(a, list) != isinstance(b, list):
        raise TypeError('Arguments to diff need to be of the same container kind, got %r and %r' % (
            type(a).__name__, type(b).__name__))
    a = string_keys(a)
    b = string_keys(b)

    nodes = []
    for key in dict.fromkeys(chain(iter_keys(a), iter_keys(b))):
        nodes.append(diff_item(a, b, key, list(path) + [key]))

    debug("Diffed %d keys at /%s", len(nodes), "/".join(path))
    return nodes


def diff_item(a, b, key, path):
    "Compare the values at key in containers a and b."
    in_a = has_key(a, key)
    in_b = has_key(b, key)

    if in_b and not in_a:
        return make_node(key, DiffKind.ADDED, path, value_right=get_item(b, key))
    if in_a and not in_b:
        return make_node(key, DiffKind.REMOVED, path, value_left=get_item(a, key))

    avalue = get_item(a, key)
    bvalue = get_item(b, key)

    if is_container(avalue) and is_container(bvalue):
        if isinstance(avalue, list) != isinstance(bvalue, list):
            # Type mismatch, do not attempt to align elements
            return make_node(key, DiffKind.CHANGED, path,
                             value_left=avalue, value_right=bvalue)
        children = diff(avalue, bvalue, path)
        if any(c.kind != DiffKind.UNCHANGED for c in children):
            kind = DiffKind.CHANGED
        else:
            kind = DiffKind.UNCHANGED
        return make_node(key, kind, path, value_left=avalue,
                         value_right=bvalue, children=children)

    if compare_values(avalue, bvalue):
        return make_node(key, DiffKind.UNCHANGED, path, value_left=avalue)
    return make_node(key, DiffKind.CHANGED, path,
                     value_left=avalue, value_right=bvalue)


def iter_leaves(nodes):
    "Walk all nodes without children, depth first."
    for node in nodes:
        if node.get("children"):
            for leaf in iter_leaves(node.children):
                yield leaf
        else:
            yield node


def count_changes(nodes):
    "Count leaf nodes per diff kind."
    counts = Counter({kind: 0 for kind in DiffKind.ALL})
    counts.update(leaf.kind for leaf in iter_leaves(nodes))
    return dict(counts)


def has_changes(nodes):
    return any(n.kind != DiffKind.UNCHANGED for n in nodes)
