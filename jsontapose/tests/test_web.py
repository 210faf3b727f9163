# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
from unittest import mock

from tornado.escape import json_encode, json_decode
from tornado.httputil import url_concat
from tornado.testing import AsyncHTTPTestCase

import jsontapose.webapp.diffweb
from jsontapose.documents import BOTH_REQUIRED_MESSAGE, ROOT_SHAPE_MESSAGE
from jsontapose.webapp import server
from jsontapose.webapp.webutil import browser_url


filespath = os.path.join(os.path.dirname(os.path.abspath(__file__)), "files")

diff_a = 'service-left.json'
diff_b = 'service-right.json'


class JsontaposeWebTest(AsyncHTTPTestCase):
    base = '/jsontapose'

    def get_app(self):
        return server.make_app(
            base_url=self.base + '/',
            cwd=filespath,
            closable=False,
            show_only_diff=True,
            context_lines=3,
        )

    def post_json(self, path, data):
        response = self.fetch(self.base + path, method='POST', body=json_encode(data))
        return response, json_decode(response.body)


class TestPages(JsontaposeWebTest):

    def test_fetch_diff(self):
        response = self.fetch(self.base + '/diff')
        assert response.code == 200
        assert b'jsontapose-config-data' in response.body

    def test_fetch_root(self):
        response = self.fetch(self.base + '/')
        assert response.code == 200

    def test_page_wires_interactions(self):
        body = self.fetch(self.base + '/diff').body.decode('utf-8')
        # collapsed rows expand into the full view
        assert "line.kind === 'expandable'" in body
        assert "$('show-only-diff').checked = false;" in body
        # editors are validated when they lose focus
        assert "addEventListener('blur'" in body
        assert "post('/api/validate'" in body
        # a single coordinator keeps the panels scrolled together
        assert body.count("new ScrollSync()") == 1
        assert "requestAnimationFrame" in body

    def test_fetch_diff_prefilled_from_files(self):
        url = url_concat(self.base + '/diff', dict(left_file=diff_a, right_file=diff_b))
        response = self.fetch(url)
        assert response.code == 200
        assert b'healthz' in response.body

    def test_fetch_diff_missing_file(self):
        url = url_concat(self.base + '/diff', dict(left_file='nope.json'))
        assert self.fetch(url).code == 400

    def test_fetch_diff_file_not_utf8(self):
        url = url_concat(self.base + '/diff', dict(left_file='latin1.json'))
        assert self.fetch(url).code == 400


class TestDiffApi(JsontaposeWebTest):

    def test_api_diff(self):
        response, data = self.post_json('/api/diff', dict(
            left='{"a": 1}', right='{"a": 2}', show_only_diff=False))
        assert response.code == 200
        assert data['nodes'] == [
            {"key": "a", "kind": "changed", "path": ["a"], "value_left": 1, "value_right": 2}]
        assert [l['text'] for l in data['left']] == ['{', '"a": 1', '}']
        assert [l['kind'] for l in data['right']] == ['header', 'added', 'header']
        assert data['left_numbers'] == [1, 2, 3]
        assert data['summary']['changed'] == 1

    def test_api_diff_yaml(self):
        response, data = self.post_json('/api/diff', dict(
            left='a: 1\nb: [x]\n', right='a: 1\nb: [x, y]\n', format='yaml'))
        assert response.code == 200
        assert data['summary'] == {'unchanged': 2, 'added': 1, 'removed': 0, 'changed': 0}

    def test_api_diff_collapses(self):
        left = {"k%02d" % i: i for i in range(20)}
        right = dict(left, k10=-1)
        response, data = self.post_json('/api/diff', dict(
            left=json_encode(left), right=json_encode(right), context_lines=1))
        assert response.code == 200
        kinds = [l['kind'] for l in data['left']]
        assert kinds.count('expandable') == 2
        assert len(data['left']) == len(data['right']) == len(data['left_numbers'])

    def test_api_diff_requires_both(self):
        response, data = self.post_json('/api/diff', dict(left='', right='{}'))
        assert response.code == 400
        assert data == {'error': BOTH_REQUIRED_MESSAGE, 'side': None}

    def test_api_diff_syntax_error(self):
        response, data = self.post_json('/api/diff', dict(left='{}', right='{"a": '))
        assert response.code == 400
        assert data['side'] == 'right'
        assert data['error']

    def test_api_diff_root_shape(self):
        response, data = self.post_json('/api/diff', dict(left='[1]', right='{}'))
        assert response.code == 400
        assert data == {'error': ROOT_SHAPE_MESSAGE, 'side': 'left'}

    def test_api_diff_bad_requests(self):
        response = self.fetch(self.base + '/api/diff', method='POST', body='not json')
        assert response.code == 400
        assert 'error' in json_decode(response.body)

        response, data = self.post_json('/api/diff', dict(left='{}', right='{}', context_lines=4))
        assert response.code == 400

        response, data = self.post_json('/api/diff', dict(left='{}', right='{}', format='xml'))
        assert response.code == 400

        response, data = self.post_json('/api/diff', dict(left=1, right='{}'))
        assert response.code == 400

    def test_api_diff_internal_error(self):
        with mock.patch.object(server, 'compare', side_effect=RuntimeError('boom')):
            response, data = self.post_json('/api/diff', dict(left='{}', right='{}'))
        assert response.code == 500
        assert data == {'error': 'Error while attempting to diff documents'}


class TestFilesApi(JsontaposeWebTest):

    def test_api_files(self):
        response, data = self.post_json('/api/files', dict(left=diff_a, right=diff_b))
        assert response.code == 200
        assert data['summary'] == {'unchanged': 7, 'added': 2, 'removed': 1, 'changed': 2}

    def test_api_files_yaml(self):
        response, data = self.post_json('/api/files', dict(
            left='service-left.yaml', right='service-right.yaml', show_only_diff=False))
        assert response.code == 200
        assert '"released": "2023-05-01",' in [l['text'] for l in data['left']]

    def test_api_files_missing(self):
        response, data = self.post_json('/api/files', dict(left=diff_a, right='missing.json'))
        assert response.code == 400

    def test_api_files_broken(self):
        response, data = self.post_json('/api/files', dict(left=diff_a, right='broken.json'))
        assert response.code == 400
        assert data['side'] == 'right'

        response, data = self.post_json('/api/files', dict(left='array-root.json', right=diff_b))
        assert data == {'error': ROOT_SHAPE_MESSAGE, 'side': 'left'}

    def test_api_files_not_utf8(self):
        response, data = self.post_json('/api/files', dict(left=diff_a, right='latin1.json'))
        assert response.code == 400
        assert data['side'] == 'right'
        assert 'utf-8' in data['error']


class TestDocumentApi(JsontaposeWebTest):

    def test_api_validate(self):
        response, data = self.post_json('/api/validate', dict(text='{"a": 1}'))
        assert response.code == 200
        assert data == {'error': None}

        response, data = self.post_json('/api/validate', dict(text=''))
        assert data == {'error': None}

        response, data = self.post_json('/api/validate', dict(text='a: [', format='yaml'))
        assert response.code == 200
        assert data['error']

    def test_api_format(self):
        response, data = self.post_json('/api/format', dict(text='{"a":[1]}'))
        assert response.code == 200
        assert data == {'text': '{\n  "a": [\n    1\n  ]\n}'}

        response, data = self.post_json('/api/format', dict(text='{"a":'))
        assert response.code == 400
        assert data['error']

    def test_api_tree(self):
        response, data = self.post_json('/api/tree', dict(text='{"a": {"b": {"c": 1}}}'))
        assert response.code == 200
        tree = data['tree']
        assert tree['summary'] == '{1}'
        assert tree['expanded'] is True
        assert tree['children'][0]['children'][0]['expanded'] is False

        response, data = self.post_json('/api/tree', dict(
            text='{"a": {"b": {"c": 1}}}', expand_all=True))
        assert data['tree']['children'][0]['children'][0]['expanded'] is True

    def test_api_close_refused(self):
        response = self.fetch(self.base + '/api/closetool', method='POST', body='{}')
        assert response.code == 400


def test_browser_url():
    assert browser_url(8888) == 'http://127.0.0.1:8888/'
    assert browser_url(80, base_url='/jt/', rel_url='diff', ip='0.0.0.0', left_file='a b') == \
        'http://127.0.0.1:80/jt/diff?left_file=a+b'
    assert browser_url(80, ip='::').startswith('http://[::1]:80')


def test_diff_web(filespath, monkeypatch):
    a = os.path.join(filespath, diff_a)
    b = os.path.join(filespath, diff_b)
    calls = {}

    def fake_server(on_port=None, **params):
        calls['server'] = params
        on_port(4321)
        return 0

    def fake_browse(**params):
        calls['browse'] = params

    monkeypatch.setattr(jsontapose.webapp.diffweb, 'run_server', fake_server)
    monkeypatch.setattr(jsontapose.webapp.diffweb, 'browse_util', fake_browse)
    assert 0 == jsontapose.webapp.diffweb.main(['--browser=disabled', '-C', '5', a, b])

    assert calls['server']['port'] == 0
    assert calls['server']['closable'] is True
    assert calls['server']['context_lines'] == 5
    assert calls['browse'] == dict(
        port=4321, rel_url='diff', left_file=a, right_file=b,
        ip='127.0.0.1', browsername='disabled', base_url='/')


def test_diff_web_missing_file(filespath, capsys):
    assert 1 == jsontapose.webapp.diffweb.main([os.path.join(filespath, 'missing.json')])
