# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json

import pytest

from jsontapose.diff_format import (
    DiffKind, LineKind, BracketRole, DiffNode, make_node, make_line,
    placeholder_for, validate_nodes,
)
from jsontapose.log import DiffNodeFormatError


def test_make_node_leaves_out_missing_values():
    node = make_node("a", DiffKind.ADDED, ("a",), value_right=None)
    assert node == {"key": "a", "kind": "added", "path": ["a"], "value_right": None}
    with pytest.raises(AttributeError):
        node.value_left


def test_nodes_serialize_to_json():
    node = make_node("a", DiffKind.CHANGED, ["a"], value_left={"x": 1}, value_right=[1],
                     children=None)
    assert json.loads(json.dumps([node])) == [
        {"key": "a", "kind": "changed", "path": ["a"],
         "value_left": {"x": 1}, "value_right": [1]}]


def test_make_line_defaults():
    line = make_line('"a": 1,', LineKind.UNCHANGED, 2, comma=True)
    assert line.text == '"a": 1,'
    assert line.kind == LineKind.UNCHANGED
    assert line.indent == 2
    assert line.bracket is None
    assert line.comma is True


def test_placeholder_copies_indent_and_comma():
    line = make_line("}", LineKind.REMOVED, 3, bracket=BracketRole.CLOSING, comma=True)
    placeholder = placeholder_for(line)
    assert placeholder.kind == LineKind.PLACEHOLDER
    assert placeholder.text == ""
    assert placeholder.indent == 3
    assert placeholder.comma is True
    assert placeholder.bracket is None


def test_changed_line_kind_is_not_offered():
    assert DiffKind.CHANGED not in LineKind.ALL


def test_validate_accepts_well_formed_nodes():
    child = make_node("x", DiffKind.CHANGED, ["n", "x"], value_left=1, value_right=2)
    parent = make_node("n", DiffKind.CHANGED, ["n"], value_left={"x": 1},
                       value_right={"x": 2}, children=[child])
    validate_nodes([parent], deep=True)


@pytest.mark.parametrize("node", [
    make_node("a", DiffKind.ADDED, ["a"], value_left=1, value_right=1),
    make_node("a", DiffKind.ADDED, ["a"]),
    make_node("a", DiffKind.REMOVED, ["a"], value_right=1),
    make_node("a", DiffKind.UNCHANGED, ["a"]),
    make_node("a", DiffKind.CHANGED, ["a"], value_left=1),
    make_node("a", "moved", ["a"], value_left=1),
    make_node(1, DiffKind.UNCHANGED, ["a"], value_left=1),
    make_node("a", DiffKind.UNCHANGED, ["a"], value_left=1, children=[]),
    make_node("a", DiffKind.ADDED, ["a"], value_right={}, children=[]),
    make_node("a", DiffKind.CHANGED, ["a"], value_left={"b": 1}, value_right={"b": 1},
              children=[make_node("b", DiffKind.UNCHANGED, ["a", "b"], value_left=1)]),
])
def test_validate_rejects_malformed_node(node):
    with pytest.raises(DiffNodeFormatError):
        validate_nodes([node])


def test_validate_rejects_duplicate_keys():
    nodes = [make_node("a", DiffKind.UNCHANGED, ["a"], value_left=1)] * 2
    with pytest.raises(DiffNodeFormatError):
        validate_nodes(nodes)


def test_validate_rejects_plain_dicts():
    with pytest.raises(DiffNodeFormatError):
        validate_nodes([{"key": "a", "kind": "unchanged", "path": ["a"], "value_left": 1}])
    assert isinstance(make_node("a", DiffKind.UNCHANGED, [], value_left=1), DiffNode)


def test_validate_deep_checks_children():
    bad_child = make_node("x", DiffKind.ADDED, ["n", "x"])
    parent = make_node("n", DiffKind.UNCHANGED, ["n"], value_left={}, value_right={},
                       children=[bad_child])
    # Shallow validation only looks at the given level
    validate_nodes([parent], deep=False)
    with pytest.raises(DiffNodeFormatError):
        validate_nodes([parent], deep=True)
