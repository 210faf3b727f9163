#!/usr/bin/env python
# -*- coding:utf-8 -*-

import logging
import threading
import webbrowser
from tornado.httputil import url_concat

_logger = logging.getLogger(__name__)

# Wildcard listen addresses, and the loopback address a browser can open
_loopback = {
    '0.0.0.0': '127.0.0.1',
    '::': '[::1]',
    '0:0:0:0:0:0:0:0': '[::1]',
}


def browser_url(port, base_url='/', rel_url='', ip='127.0.0.1', **url_args):
    "The url a local browser should open to reach the server."
    host = _loopback.get(ip, ip)
    path = "%s/%s" % (base_url.rstrip('/'), rel_url)
    return url_concat("http://%s:%s%s" % (host, port, path), url_args)


def browse(port, browsername=None, base_url='/', rel_url='', ip='127.0.0.1', **url_args):
    """Open the diff page in a browser, without blocking the server.

    Extra keyword arguments become query arguments of the url.
    """
    url = browser_url(port, base_url, rel_url, ip, **url_args)
    _logger.info("URL: %s", url)
    try:
        browser = webbrowser.get(browsername)
    except webbrowser.Error as e:
        _logger.warning('No web browser found: %s.', e)
        return
    threading.Thread(target=browser.open, args=(url,), kwargs={'new': 2}).start()
