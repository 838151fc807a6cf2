#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# This file is part of hellohttp released under the MIT license.
# See the LICENSE file for more information.


DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 7878
DEFAULT_BACKLOG = 128

HELLO_STATUS_CODE = 200
HELLO_CONTENT_TYPE = "text/plain"
HELLO_BODY = "Hello World!"
