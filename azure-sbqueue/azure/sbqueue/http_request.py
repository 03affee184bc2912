# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module builds the authenticated HTTP requests sent to a Service Bus queue."""

import logging
import requests  # type: ignore
from . import constant, http_path, product_info
from .models import BrokerProperties

logger = logging.getLogger(__name__)


def build_request(config, token_generator, sub_path, method, now=None):
    """
    Build a request without a body (used to receive, unlock and delete messages).

    :param config: Configuration of the queue client
    :type config: :class:`azure.sbqueue.QueueClientConfig`
    :param token_generator: Generator for the SAS token placed in the Authorization header
    :type token_generator: :class:`azure.sbqueue.sastoken.SasTokenGenerator`
    :param str sub_path: Path relative to the queue URL, e.g. 'messages/head?timeout=60'
    :param str method: The request method (e.g. "POST")
    :param now: Time used to generate the SAS token (defaults to the current time)
    :type now: :class:`datetime.datetime`

    :returns: :class:`requests.PreparedRequest`
    :raises: requests.exceptions.RequestException if the request can't be prepared
        (e.g. the resulting URL is invalid)
    """
    url = _get_url(config, sub_path)
    headers = {}
    _set_common_headers(headers, config, token_generator, url, now)
    return requests.Request(method=method, url=url, headers=headers).prepare()


def build_request_from_message(config, token_generator, sub_path, method, message, now=None):
    """
    Build a request carrying a message (used to send messages).

    The message body is the request body. Each custom property is sent as its own header,
    and the broker properties of the message are sent as JSON in the BrokerProperties header.
    Content-Type is only sent if the message has one.

    Parameters are the same as :func:`build_request`, with the addition of:

    :param message: The message to send
    :type message: :class:`azure.sbqueue.Message`
    """
    url = _get_url(config, sub_path)

    headers = {}
    for key, value in message.custom_properties.items():
        headers[key] = str(value)

    headers[constant.HEADER_BROKER_PROPERTIES] = BrokerProperties.from_message(message).to_json()

    if message.content_type:
        headers[constant.HEADER_CONTENT_TYPE] = message.content_type

    _set_common_headers(headers, config, token_generator, url, now)
    return requests.Request(method=method, url=url, headers=headers, data=message.body).prepare()


def _get_url(config, sub_path):
    return http_path.get_queue_url(config.namespace, config.queue_name, config.domain) + sub_path


def _set_common_headers(headers, config, token_generator, url, now):
    # The token is computed over the full request URL, query string included
    headers[constant.HEADER_AUTHORIZATION] = str(token_generator.generate_sastoken(url, now))
    headers[constant.HEADER_USER_AGENT] = product_info.get_queue_user_agent(config.product_info)
