# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import pytest
import requests
from azure.sbqueue.config import QueueClientConfig

"""
NOTE: ALL (yes, ALL) tests need some kind of non-specific, arbitrary exception should use
one of the following fixtures. This is to ensure the tests operate correctly - exception
handling can hide other errors (also caught by an "except: Exception" block).

The solution is to use a subclass of Exception or BaseException that is not defined anywhere else,
thus guaranteeing that it will be unexpected and unhandled except by broad all-encompassing
handling.
"""


@pytest.fixture
def unexpected_exception():
    class UnexpectedException(Exception):
        pass

    e = UnexpectedException()
    return e


@pytest.fixture
def unexpected_base_exception():
    class UnexpectedBaseException(BaseException):
        pass

    return UnexpectedBaseException()


fake_namespace = "test"
fake_key_name = "key"
fake_key_value = "keyvalue"
fake_queue_name = "test"


@pytest.fixture
def config():
    return QueueClientConfig(
        namespace=fake_namespace,
        key_name=fake_key_name,
        key_value=fake_key_value,
        queue_name=fake_queue_name,
        timeout=0,
    )


@pytest.fixture
def make_response():
    """Factory for a requests.Response with the given status, headers and body"""

    def _make_response(status_code=200, headers=None, body=b"", reason="__fake_reason__"):
        response = requests.Response()
        response.status_code = status_code
        response.reason = reason
        response.headers = requests.structures.CaseInsensitiveDict(headers or {})
        response._content = body
        response._content_consumed = True
        return response

    return _make_response
