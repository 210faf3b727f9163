#!/usr/bin/env python
# -*- coding:utf-8 -*-

import io
import json
import logging
import os
import sys

from jinja2 import FileSystemLoader, Environment
from tornado import ioloop, web, escape, netutil, httpserver

from ..args import ConfigBackedParser, add_generic_args, add_web_args, add_display_args
from ..diffing import count_changes
from ..display import process_diff, CONTEXT_LINE_CHOICES
from ..documents import (
    FORMATS, compare, compare_documents, detect_format, format_document,
    parse, read_document, validate,
)
from ..log import logger, DocumentError
from ..tree import build_tree
from ..utils import truncate_filename


# Request and lifecycle messages of the server itself
_logger = logging.getLogger(__name__)


here = os.path.abspath(os.path.dirname(__file__))
template_path = os.path.join(here, 'templates')


class JsontaposeHandler(web.RequestHandler):
    def initialize(self, **params):
        self.params = params

    def base_args(self):
        return {
            'closable': self.params.get('closable', False),
            'baseUrl': self.base_url,
            'format': self.params.get('format') or 'json',
            'showOnlyDiff': self.params.get('show_only_diff', True),
            'contextLines': self.params.get('context_lines', 3),
            'contextLineChoices': list(CONTEXT_LINE_CHOICES),
        }

    def render_template(self, name, **ns):
        env = self.settings['jinja2_env']
        template = env.get_template(name)
        return template.render(**ns)

    def write_error(self, status_code, **kwargs):
        # Errors are reported to the page as json, like every api response
        message = self._reason
        error = kwargs.get('exc_info', (None, None, None))[1]
        if isinstance(error, web.HTTPError) and error.log_message:
            message = error.log_message
        self.finish({'error': message})

    def fail(self, error):
        "Respond to a recoverable document error."
        self.set_status(400)
        self.finish({'error': error.message, 'side': error.side})

    def get_json_body(self):
        try:
            body = json.loads(escape.to_unicode(self.request.body))
        except ValueError:
            raise web.HTTPError(400, 'Request body is not valid json.')
        if not isinstance(body, dict):
            raise web.HTTPError(400, 'Request body must be a json object.')
        return body

    def get_text_argument(self, body, argname):
        arg = body.get(argname, '')
        if not isinstance(arg, str):
            raise web.HTTPError(400, 'Expecting a string for %r.' % argname)
        return arg

    def get_format_argument(self, body, argname='format', default=None):
        fmt = body.get(argname) or default or self.params.get('format') or 'json'
        if fmt not in FORMATS:
            raise web.HTTPError(400, 'Unknown format %r.' % fmt)
        return fmt

    def get_display_arguments(self, body):
        show_only_diff = body.get('show_only_diff', self.params.get('show_only_diff', True))
        context_lines = body.get('context_lines', self.params.get('context_lines', 3))
        if context_lines not in CONTEXT_LINE_CHOICES:
            raise web.HTTPError(400, 'context_lines must be one of %r.' % (CONTEXT_LINE_CHOICES,))
        return bool(show_only_diff), context_lines

    def finish_diff(self, nodes, body):
        show_only_diff, context_lines = self.get_display_arguments(body)
        try:
            processed = process_diff(nodes, show_only_diff, context_lines)
        except Exception:
            logger.exception('Error rendering diff:')
            raise web.HTTPError(500, 'Error while attempting to render diff')
        data = {
            'nodes': nodes,
            'summary': count_changes(nodes),
            }
        data.update(processed)
        self.finish(data)

    @property
    def base_url(self):
        return self.settings.get('base_url', '/')

    @property
    def curdir(self):
        return self.params.get('cwd', os.curdir)


class MainDiffHandler(JsontaposeHandler):
    def read_text(self, fn):
        # Filenames are relative to where the server was started from
        path = os.path.join(self.curdir, fn)
        if not os.path.isfile(path):
            raise web.HTTPError(400, 'File doesn\'t exist: %s' % truncate_filename(fn))
        try:
            with io.open(path, encoding='utf-8') as f:
                return f.read()
        except UnicodeDecodeError:
            raise web.HTTPError(400, 'File is not utf-8 encoded: %s' % truncate_filename(fn))

    def get(self):
        args = self.base_args()
        for side in ('left', 'right'):
            fn = self.get_argument(side + '_file', None)
            if fn:
                args[side] = self.read_text(fn)
                args['format'] = detect_format(fn, args['format'])
            else:
                args[side] = self.get_argument(side, '')
        self.write(self.render_template('diff.html',
                    config_data=args,
                   ))


class ApiDiffHandler(JsontaposeHandler):
    def post(self):
        body = self.get_json_body()
        left = self.get_text_argument(body, 'left')
        right = self.get_text_argument(body, 'right')
        fmt = self.get_format_argument(body)
        right_fmt = self.get_format_argument(body, 'right_format', fmt)

        try:
            nodes = compare(left, right, fmt, right_fmt)
        except DocumentError as e:
            return self.fail(e)
        except Exception:
            logger.exception('Error diffing documents:')
            raise web.HTTPError(500, 'Error while attempting to diff documents')
        self.finish_diff(nodes, body)


class ApiFilesHandler(JsontaposeHandler):
    def read_file(self, body, side):
        arg = self.get_text_argument(body, side)
        # Filenames are relative to where the server was started from
        path = os.path.join(self.curdir, arg)
        if not arg or not os.path.isfile(path):
            raise web.HTTPError(400, 'File doesn\'t exist: %s' % truncate_filename(arg))
        if body.get('format'):
            fmt = self.get_format_argument(body)
        else:
            fmt = detect_format(path, self.params.get('format') or 'json')
        return read_document(path, fmt, side=side)

    def post(self):
        body = self.get_json_body()
        try:
            left = self.read_file(body, 'left')
            right = self.read_file(body, 'right')
            nodes = compare_documents(left, right)
        except DocumentError as e:
            return self.fail(e)
        self.finish_diff(nodes, body)


class ApiValidateHandler(JsontaposeHandler):
    def post(self):
        body = self.get_json_body()
        text = self.get_text_argument(body, 'text')
        self.finish({'error': validate(text, self.get_format_argument(body))})


class ApiFormatHandler(JsontaposeHandler):
    def post(self):
        body = self.get_json_body()
        text = self.get_text_argument(body, 'text')
        try:
            formatted = format_document(text, self.get_format_argument(body))
        except DocumentError as e:
            return self.fail(e)
        self.finish({'text': formatted})


class ApiTreeHandler(JsontaposeHandler):
    def post(self):
        body = self.get_json_body()
        text = self.get_text_argument(body, 'text')
        try:
            value = parse(text, self.get_format_argument(body))
        except DocumentError as e:
            return self.fail(e)
        self.finish({'tree': build_tree(value, expand_all=body.get('expand_all'))})


class ApiCloseHandler(JsontaposeHandler):
    def post(self):
        # Only a server started for a single comparison may be shut down
        if self.params.get('closable', False) is not True:
            raise web.HTTPError(
                400, 'This server cannot be closed remotely.')

        code = self.get_argument('exitCode', None)
        if code is None:
            try:
                code = json.loads(self.request.body or b'{}').get('exitCode')
            except (ValueError, AttributeError):
                code = None
        if code is None:
            code = self.request.headers.get('exit_code', 1)
        self.application.exit_code = int(code)

        _logger.info('Closing server on remote request (%d)', self.application.exit_code)
        self.finish()
        ioloop.IOLoop.current().stop()


def make_app(**params):
    base_url = params.pop('base_url', '/')
    handlers = [
        (r'/', MainDiffHandler, params),
        (r'/diff', MainDiffHandler, params),
        (r'/api/diff', ApiDiffHandler, params),
        (r'/api/files', ApiFilesHandler, params),
        (r'/api/validate', ApiValidateHandler, params),
        (r'/api/format', ApiFormatHandler, params),
        (r'/api/tree', ApiTreeHandler, params),
        (r'/api/closetool', ApiCloseHandler, params),
    ]
    if base_url != '/':
        prefix = base_url.rstrip('/')
        handlers = [
            (prefix + path, cls, params)
            for (path, cls, params) in handlers
        ]

    env = Environment(loader=FileSystemLoader([template_path]), autoescape=False)
    settings = {
        'template_path': [template_path],
        'base_url': base_url,
        'jinja2_env': env,
    }

    app = web.Application(handlers, **settings)
    app.exit_code = 0
    return app


def init_app(on_port=None, closable=False, **params):
    _logger.debug('Using params: %s', params)
    params.update({'closable': closable})
    port = params.pop('port', 0)
    ip = params.pop('ip', '127.0.0.1')
    app = make_app(**params)
    if port != 0:
        server = app.listen(port, address=ip)
        _logger.info('Listening on %s, port %d', ip, port)
    else:
        sockets = netutil.bind_sockets(0, ip)
        server = httpserver.HTTPServer(app)
        server.add_sockets(sockets)
        for s in sockets:
            _logger.info('Listening on %s, port %d', *s.getsockname()[:2])
            port = s.getsockname()[1]
    if on_port is not None:
        on_port(port)
    return app, server


def main_server(on_port=None, closable=False, **params):
    app, server = init_app(on_port, closable, **params)
    io_loop = ioloop.IOLoop.current()
    io_loop.start()
    # Clean up after server:
    server.stop()
    return app.exit_code


def _build_arg_parser(prog=None):
    """Options of the standalone server, which starts with empty editors."""
    description = 'Web interface for jsontapose.'
    parser = ConfigBackedParser(description=description, prog=prog)
    add_generic_args(parser)
    add_web_args(parser)
    add_display_args(parser)
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    arguments = _build_arg_parser().parse_args(args)
    return main_server(port=arguments.port,
                       ip=arguments.ip,
                       cwd=arguments.workdirectory,
                       base_url=arguments.base_url,
                       show_only_diff=arguments.show_only_diff,
                       context_lines=arguments.context_lines,
                      )


if __name__ == '__main__':
    sys.exit(main())
