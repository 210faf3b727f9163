# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging
import os
import shutil

from pytest import fixture

from jsontapose.diffing import diff


pjoin = os.path.join


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


@fixture(scope='session')
def filespath():
    return os.path.join(testspath(), "files")


@fixture
def tempfiles(tmpdir, filespath):
    """Fixture for copying test files into a temporary directory"""
    dest = tmpdir.join('testfiles')
    shutil.copytree(filespath, str(dest))
    return str(dest)


@fixture
def reset_log():
    # clear root logger handlers before test and reset afterwards
    handlers = list(logging.getLogger().handlers)
    logging.getLogger().handlers[:] = []
    yield
    logging.getLogger().handlers[:] = handlers


@fixture
def isolated_config(tmpdir, monkeypatch):
    """Run with an empty working directory and user config directory."""
    monkeypatch.chdir(str(tmpdir))
    monkeypatch.setattr('jsontapose.config.USER_CONFIG_DIR', str(tmpdir.join('user')))
    return tmpdir


# Pairs of documents exercising every node kind
DOCUMENT_PAIRS = [
    ({}, {}),
    ({"a": 1}, {"a": 1}),
    ({"a": 1}, {"a": 2}),
    ({"a": 1, "b": 2}, {"b": 2}),
    ({"b": 2}, {"a": 1, "b": 2}),
    ({"nested": {"x": 1, "y": 2}}, {"nested": {"x": 1, "y": 3}}),
    ({"arr": [1, 2]}, {"arr": [1, 2, 3]}),
    ({"arr": [1, 2, 3, 4, 5]}, {"arr": [1, 2, 3]}),
    ({"a": [1]}, {"a": {"b": 1}}),
    ({"a": None}, {"a": {}}),
    ({"deep": {"list": [{"k": "v"}, {"k": "w"}]}, "gone": {"x": [1, {"y": None}]}},
     {"deep": {"list": [{"k": "v"}, {"k": "z", "n": 1}]}, "new": [[], {}]}),
]


@fixture(params=DOCUMENT_PAIRS, ids=[str(i) for i in range(len(DOCUMENT_PAIRS))])
def document_pair(request):
    return request.param


@fixture
def diff_pair(document_pair):
    left, right = document_pair
    return diff(left, right)
