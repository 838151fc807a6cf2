#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# This file is part of hellohttp library released under the MIT license.
# See the LICENSE file for more information.

from tornado import ioloop
from tornado import httpserver, netutil
from tornado.web import RequestHandler, Application, url
from tornado.options import define, options, parse_command_line, \
    parse_config_file
import signal
import functools
import logging
import sys

from hellohttp.reply import say_hello
from hellohttp import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_BACKLOG


define("config", help="Path to config file")
define("host", default=DEFAULT_HOST, help="Listening address")
define("port", type=int, default=DEFAULT_PORT, help="Listening port")
define("backlog", type=int, default=DEFAULT_BACKLOG, help="socket backlog")

logger = logging.getLogger("hellohttp")


class AnyMethod(object):
    """Container pretending to hold every HTTP method name."""

    def __contains__(self, method):
        return True


class Handler(RequestHandler):

    # tornado answers 405 to any method missing from this container
    SUPPORTED_METHODS = AnyMethod()

    def compute_etag(self, *args, **kwargs):
        return None

    def check_etag_header(self, *args, **kwargs):
        return False

    def prepare(self):
        # every method (standard or not) is answered here, so tornado
        # never looks up a per-verb method on the handler
        self.return_http_reply(say_hello(self.request))

    def return_http_reply(self, reply):
        self.set_status(reply.status_code)
        self.set_header("Content-Type", reply.content_type)
        self.finish(reply.body)


def make_app():
    return Application([url(r".*", Handler)])


def parse_options(args=None):
    """Parse the command line, and the config file if one is given.

    Options given on the command line win over the config file ones.
    """
    parse_command_line(args, final=False)
    if options.config is not None:
        parse_config_file(options.config, final=False)
    parse_command_line(args)


def bind(host, port, backlog=DEFAULT_BACKLOG):
    """Bind the listening sockets.

    Raises:
        OSError: when the address can't be bound (port already in use,
            permission denied, unknown host...).
    """
    return netutil.bind_sockets(port, address=host, backlog=backlog)


def sig_handler(server, io_loop, sig, frame):
    logger.warning('caught signal: %s', sig)
    io_loop.add_callback(shutdown, server, io_loop)


def shutdown(server, io_loop):
    logger.info('stopping http server')
    server.stop()
    io_loop.stop()


def main(args=None):
    parse_options(args)
    print("Listening for requests at http://{}:{}".format(options.host,
                                                          options.port))
    try:
        sockets = bind(options.host, options.port, options.backlog)
    except OSError as e:
        logger.error("can't listen on %s:%i: %s", options.host, options.port,
                     e)
        sys.exit(1)
    server = httpserver.HTTPServer(make_app())
    server.add_sockets(sockets)
    io_loop = ioloop.IOLoop.current()
    signal.signal(signal.SIGTERM,
                  functools.partial(sig_handler, server, io_loop))
    io_loop.add_callback(logger.info, "hellohttp started")
    try:
        io_loop.start()
    except KeyboardInterrupt:
        server.stop()
    logger.info("hellohttp stopped")
