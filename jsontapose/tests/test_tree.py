# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from jsontapose.tree import build_tree, summarize, type_tag


DOC = {"a": [1, 2, 3], "b": {"c": {"d": 1}}, "s": "x"}


@pytest.mark.parametrize("value, tag, summary", [
    (None, "null", "null"),
    (True, "boolean", "true"),
    (False, "boolean", "false"),
    (42, "number", "42"),
    (2.5, "number", "2.5"),
    ("text", "string", '"text"'),
    ([1, 2, 3], "array", "[3]"),
    ({"a": 1, "b": 2}, "object", "{2}"),
    ({}, "object", "{0}"),
])
def test_summaries(value, tag, summary):
    assert type_tag(value) == tag
    assert summarize(value) == summary


def test_build_tree_default_expansion():
    root = build_tree(DOC)
    assert root.key is None
    assert root.type == "object"
    assert root.summary == "{3}"
    assert root.level == 0
    assert root.expandable and root.expanded

    a, b, s = root.children
    assert (a.key, a.summary, a.level) == ("a", "[3]", 1)
    assert a.expanded
    assert [c.key for c in a.children] == ["0", "1", "2"]
    assert [c.type for c in a.children] == ["number"] * 3
    assert not any(c.expandable or c.expanded for c in a.children)

    c = b.children[0]
    assert c.level == 2
    assert c.expandable
    assert not c.expanded
    assert s.summary == '"x"'


def test_build_tree_expand_all():
    c = build_tree(DOC, expand_all=True).children[1].children[0]
    assert c.expanded


def test_build_tree_collapse_all():
    root = build_tree(DOC, expand_all=False)
    assert not root.expanded
    assert not root.children[0].expanded
    # Children are still available to expand on demand
    assert len(root.children) == 3


def test_build_tree_empty_containers_are_not_expandable():
    root = build_tree({"e": [], "o": {}})
    assert [(c.expandable, c.expanded) for c in root.children] == [(False, False)] * 2


def test_summary_escapes_control_characters():
    assert summarize('two\nlines\tand "quotes"') == '"two\\nlines\\tand "quotes""'
    tree = build_tree({"note": "a\nb"})
    assert tree.children[0].summary == '"a\\nb"'
    assert "\n" not in tree.children[0].summary
