#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# This file is part of hellohttp library released under the MIT license.
# See the LICENSE file for more information.

from hellohttp import HELLO_STATUS_CODE, HELLO_CONTENT_TYPE, HELLO_BODY


class Reply(object):
    """
    Hold the attributes that will be set on an HTTP response.

    Attributes:
        status_code: the HTTP status code (int)
        content_type: value of the Content-Type header
        body: raw body (bytes)
    """

    def __init__(self, status_code, content_type, body):
        self.status_code = status_code
        self.content_type = content_type
        self.body = body

    def __eq__(self, other):
        if not isinstance(other, Reply):
            return NotImplemented
        return (self.status_code, self.content_type, self.body) == \
            (other.status_code, other.content_type, other.body)

    def __repr__(self):
        return "Reply(%i, %r, %r)" % (self.status_code, self.content_type,
                                      self.body)


def say_hello(request):
    """Build the reply for any request.

    Args:
        request: the incoming request (never examined).

    Returns:
        A Reply object: 200, text/plain, "Hello World!".
    """
    return Reply(HELLO_STATUS_CODE, HELLO_CONTENT_TYPE,
                 HELLO_BODY.encode('utf-8'))
